import sys

import pytest

from synan import errors
from synan.config import get_recursion_limit
from synan.interpreter import Interpreter, recursion_limit
from synan.types.syntax import (
    NameRef,
    make_application as call,
    make_conditional as cond,
    make_constant_declaration as const,
    make_function_declaration as function,
    make_return as ret,
    make_sequence as seq,
)


def countdown_program(n):
    # function count(n) { return n === 0 ? 0 : count(n - 1); } count(n);
    return seq(
        function("count", ["n"], ret(cond(
            call("===", NameRef("n"), 0),
            0,
            call("count", call("-", NameRef("n"), 1)),
        ))),
        call("count", n),
    )


def test_interpreter_uses_default_primitives(interp, output):
    interp.evaluate_toplevel(call("display", call("*", 6, 7)))
    assert output == ["42"]


def test_interpreter_with_custom_table():
    interp = Interpreter({"inc": lambda x: x + 1})
    assert interp.evaluate_toplevel(call("inc", 1)) == 2
    with pytest.raises(errors.UnboundName):
        interp.evaluate_toplevel(call("+", 1, 1))


def test_programs_share_the_global_environment_only(interp):
    interp.evaluate_toplevel(const("a", 1))
    with pytest.raises(errors.UnboundName):
        interp.evaluate_toplevel(NameRef("a"))


def test_evaluate_single_node(interp):
    assert interp.evaluate(call("+", 1, 2)) == 3


def test_supported_recursion_depth(monkeypatch):
    # The default limit supports recursion about 1500 calls deep
    monkeypatch.delenv("SYNAN_RECURSION_LIMIT", raising=False)
    interp = Interpreter()
    assert interp.max_depth == 10000
    assert interp.evaluate_toplevel(countdown_program(1500)) == 0


def test_recursion_depth_exceeded():
    interp = Interpreter(max_depth=5000)
    with pytest.raises(errors.RecursionDepthExceeded):
        interp.evaluate_toplevel(countdown_program(100_000))


def test_recursion_limit_is_restored():
    before = sys.getrecursionlimit()
    interp = Interpreter(max_depth=before + 1000)
    interp.evaluate_toplevel(countdown_program(10))
    assert sys.getrecursionlimit() == before


def test_recursion_limit_never_lowers():
    before = sys.getrecursionlimit()
    with recursion_limit(10):
        assert sys.getrecursionlimit() == before
    assert sys.getrecursionlimit() == before


def test_recursion_limit_from_environment(monkeypatch):
    monkeypatch.setenv("SYNAN_RECURSION_LIMIT", "12345")
    assert get_recursion_limit() == 12345
    assert Interpreter().max_depth == 12345


def test_recursion_limit_default(monkeypatch):
    monkeypatch.delenv("SYNAN_RECURSION_LIMIT", raising=False)
    assert get_recursion_limit() == 10000


def test_recursion_limit_must_be_positive(monkeypatch):
    monkeypatch.setenv("SYNAN_RECURSION_LIMIT", "0")
    with pytest.raises(ValueError):
        get_recursion_limit()

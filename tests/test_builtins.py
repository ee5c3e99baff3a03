import math

import pytest

from synan import errors
from synan.builtin.env_builtin import (
    build_global_environment,
    default_primitives,
    minus,
    rem,
    strict_equals,
)
from synan.debug_utils.stringify import stringify
from synan.evaluation.evaluator import evaluate_toplevel
from synan.types.environment import lookup_name_value
from synan.types.function_value import PrimitiveFunction
from synan.types.syntax import NameRef, make_application as call
from synan.types.undefined import Undefined


def test_global_environment_is_a_single_frame(global_env):
    assert global_env.enclosing is None
    assert global_env.depth() == 1
    assert set(default_primitives()) <= set(global_env.frame.names())


def test_constants(global_env):
    assert lookup_name_value("undefined", global_env) is Undefined
    assert lookup_name_value("math_PI", global_env) == math.pi


def test_table_is_the_only_configuration():
    env = build_global_environment({"answer": 42, "double": lambda x: 2 * x})
    assert isinstance(lookup_name_value("double", env), PrimitiveFunction)
    assert evaluate_toplevel(call("double", NameRef("answer")), env) == 84
    with pytest.raises(errors.UnboundName):
        evaluate_toplevel(call("+", 1, 2), env)


def test_primitive_function_values_pass_through():
    fn = PrimitiveFunction(abs, "abs")
    env = build_global_environment({"abs": fn})
    assert lookup_name_value("abs", env) is fn


def test_default_tables_are_independent():
    first = default_primitives()
    first["extra"] = 1
    assert "extra" not in default_primitives()


@pytest.mark.parametrize("op, args, expected", [
    ("+", [1, 2], 3),
    ("+", ["ab", "cd"], "abcd"),
    ("-", [5, 3], 2),
    ("-", [5], -5),
    ("*", [4, 3], 12),
    ("/", [7, 2], 3.5),
    ("%", [7, 3], 1),
    ("%", [-7, 3], -1),
    ("<", [1, 2], True),
    ("<=", [2, 2], True),
    (">", [1, 2], False),
    (">=", [3, 2], True),
    ("===", [1, 1], True),
    ("===", [1, 1.0], True),
    ("===", [1, True], False),
    ("===", [0, False], False),
    ("===", ["a", "a"], True),
    ("===", [None, Undefined], False),
    ("!==", [1, 2], True),
    ("!", [True], False),
    ("!", [False], True),
    ("/", [1, 0], math.inf),
    ("/", [-1, 0], -math.inf),
    ("/", [1, -0.0], -math.inf),
    ("/", [2.5, 0.0], math.inf),
])
def test_operators(global_env, op, args, expected):
    result = evaluate_toplevel(call(op, *args), global_env)
    assert result == expected
    assert type(result) is type(expected)


def test_minus_is_overloaded():
    assert minus(10, 4) == 6
    assert minus(4) == -4


def test_remainder_on_floats():
    assert rem(7.5, 2) == 1.5
    assert rem(-7.5, 2) == -1.5


def test_strict_equality_of_functions():
    fn = PrimitiveFunction(abs)
    assert strict_equals(fn, fn)
    assert not strict_equals(fn, PrimitiveFunction(abs))


def test_display_returns_its_argument(global_env, output):
    assert evaluate_toplevel(call("display", 3), global_env) == 3
    assert output == ["3"]


def test_error_primitive(global_env):
    with pytest.raises(errors.ProgramError, match="bad value: 42"):
        evaluate_toplevel(call("error", 42, "bad value:"), global_env)
    with pytest.raises(errors.ProgramError, match='"oops"'):
        evaluate_toplevel(call("error", "oops"), global_env)


@pytest.mark.parametrize("value, text", [
    (True, "true"),
    (False, "false"),
    (None, "null"),
    (Undefined, "undefined"),
    (3, "3"),
    (3.0, "3"),
    (2.5, "2.5"),
    (float("inf"), "Infinity"),
    ("hi", '"hi"'),
])
def test_stringify(value, text):
    assert stringify(value) == text


def test_stringify_functions():
    assert stringify(PrimitiveFunction(abs, "abs")) == "<primitive abs>"


@pytest.mark.parametrize("op, args", [
    ("/", [0, 0]),
    ("%", [1, 0]),
    ("%", [-7, 0]),
    ("%", [2.5, 0.0]),
])
def test_zero_divisor_gives_nan(global_env, op, args):
    assert math.isnan(evaluate_toplevel(call(op, *args), global_env))


def test_division_by_zero_displays_infinity(global_env, output):
    evaluate_toplevel(call("display", call("/", 1, 0)), global_env)
    evaluate_toplevel(call("display", call("%", 1, 0)), global_env)
    assert output == ["Infinity", "NaN"]

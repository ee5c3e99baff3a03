"""Built-in primitives and construction of the global environment.

This is the host integration layer: it decides what the primitive operators
compute. The core only sees the resulting table of names bound to
PrimitiveFunctions or constant values.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Mapping, Optional

from synan import Value
from synan.debug_utils.stringify import stringify
from synan.errors import ProgramError
from synan.types.environment import EMPTY_ENVIRONMENT, Environment, extend_environment
from synan.types.function_value import CompoundFunction, PrimitiveFunction
from synan.types.undefined import Undefined

logger = logging.getLogger(__name__)

PrimitiveTable = Mapping[str, Value]


def _is_number(x: Value) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


# -------------------------------
# Arithmetic
# -------------------------------
def add(x, y):
    return x + y


def minus(x, y=None):
    """Binary minus when both arguments are numbers, otherwise unary negation."""
    if _is_number(x) and _is_number(y):
        return x - y
    return -x


def mul(x, y):
    return x * y


def div(x, y):
    """True division; a zero divisor gives Infinity, -Infinity or NaN."""
    if y == 0:
        if x != x or x == 0:
            return math.nan
        return math.inf if (x > 0) == (math.copysign(1.0, y) > 0) else -math.inf
    return x / y


def rem(x, y):
    """Remainder with the sign of the dividend; a zero divisor gives NaN."""
    if y == 0:
        return math.nan
    if isinstance(x, int) and isinstance(y, int):
        r = abs(x) % abs(y)
        return r if x >= 0 else -r
    return math.fmod(x, y)


# -------------------------------
# Comparison
# -------------------------------
def strict_equals(x, y) -> bool:
    """Equality without conversion: a boolean never equals a number."""
    if isinstance(x, bool) or isinstance(y, bool):
        return x is y
    if _is_number(x) and _is_number(y):
        return x == y
    if type(x) is not type(y):
        return False
    if isinstance(x, (CompoundFunction, PrimitiveFunction)):
        return x is y
    return x == y


def strict_not_equals(x, y) -> bool:
    return not strict_equals(x, y)


def lt(x, y) -> bool:
    return x < y


def lte(x, y) -> bool:
    return x <= y


def gt(x, y) -> bool:
    return x > y


def gte(x, y) -> bool:
    return x >= y


def logical_not(x) -> bool:
    return not x


# -------------------------------
# Display and error hooks
# -------------------------------
def make_display(write: Optional[Callable[[str], object]] = None) -> Callable[[Value], Value]:
    """A display primitive that writes through `write` (print by default)."""
    out = write if write is not None else print

    def display(value: Value) -> Value:
        out(stringify(value))
        return value

    return display


def error(value: Value, message: str | None = None):
    """Abort the running program with a ProgramError."""
    if message is None:
        raise ProgramError(stringify(value))
    raise ProgramError(f"{message} {stringify(value)}")


def default_primitives(display: Optional[Callable[[str], object]] = None) -> dict[str, Value]:
    """A fresh table of the standard primitive functions and constants."""
    return {
        "display": PrimitiveFunction(make_display(display), "display"),
        "error": PrimitiveFunction(error, "error"),
        "+": PrimitiveFunction(add, "+"),
        "-": PrimitiveFunction(minus, "-"),
        "*": PrimitiveFunction(mul, "*"),
        "/": PrimitiveFunction(div, "/"),
        "%": PrimitiveFunction(rem, "%"),
        "===": PrimitiveFunction(strict_equals, "==="),
        "!==": PrimitiveFunction(strict_not_equals, "!=="),
        "<": PrimitiveFunction(lt, "<"),
        "<=": PrimitiveFunction(lte, "<="),
        ">": PrimitiveFunction(gt, ">"),
        ">=": PrimitiveFunction(gte, ">="),
        "!": PrimitiveFunction(logical_not, "!"),
        "undefined": Undefined,
        "math_PI": math.pi,
    }


def as_binding(name: str, value: Value) -> Value:
    """Wrap plain host callables; function values and constants pass through."""
    if isinstance(value, (PrimitiveFunction, CompoundFunction)):
        return value
    if callable(value):
        return PrimitiveFunction(value, name)
    return value


def build_global_environment(primitives: PrimitiveTable) -> Environment:
    """One frame holding every binding of `primitives`, over the empty environment."""
    names = list(primitives)
    values = [as_binding(name, primitives[name]) for name in names]
    logger.debug("building global environment with %d bindings", len(names))
    return extend_environment(names, values, EMPTY_ENVIRONMENT)

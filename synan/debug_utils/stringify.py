"""Language-level rendering of runtime values."""

from __future__ import annotations

import json

from synan import Value
from synan.types.function_value import CompoundFunction, PrimitiveFunction
from synan.types.undefined import UndefinedType


def stringify(value: Value) -> str:
    """Render `value` the way programs see it printed by `display`."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if isinstance(value, UndefinedType):
        return "undefined"
    if isinstance(value, float):
        if value != value:
            return "NaN"
        if value in (float("inf"), float("-inf")):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (CompoundFunction, PrimitiveFunction)):
        return repr(value)
    return str(value)

"""Application engine for synan.

Function application distinguishes two kinds of function value:
- PrimitiveFunction: the host implementation is called with the evaluated
  arguments. No frame is created and arity is left to the host.
- CompoundFunction: the argument count must match the parameter count
  exactly. One new frame binds the parameters to the arguments and the
  function's direct locals to Uninitialized; it is chained onto the
  environment the function was defined in, so free names resolve lexically.

The body's ReturnValue, if any, is unwrapped here. A body that finishes
without returning yields Undefined.
"""

from __future__ import annotations

from synan import Value
from synan.errors import ArityDirection, ArityMismatch, UnknownFunctionValueKind
from synan.types.environment import Uninitialized, extend_environment
from synan.types.function_value import CompoundFunction, PrimitiveFunction
from synan.types.return_value import ReturnValue
from synan.types.undefined import Undefined


def apply_primitive_function(fn: PrimitiveFunction, args: list[Value]) -> Value:
    return fn.implementation(*args)


def apply_compound_function(fn: CompoundFunction, args: list[Value]) -> Value:
    provided = len(args)
    arity = fn.arity
    if provided > arity:
        raise ArityMismatch(ArityDirection.TOO_MANY, arity, provided)
    if provided < arity:
        raise ArityMismatch(ArityDirection.TOO_FEW, arity, provided)

    names = [*fn.parameters, *fn.local_names]
    values = [*args, *(Uninitialized for _ in fn.local_names)]
    result = fn.body(extend_environment(names, values, fn.environment))

    if isinstance(result, ReturnValue):
        return result.content
    return Undefined


def execute_application(fn: object, args: list[Value]) -> Value:
    """Apply either a PrimitiveFunction or a CompoundFunction.

    Anything else in operator position raises UnknownFunctionValueKind.
    """
    if isinstance(fn, PrimitiveFunction):
        return apply_primitive_function(fn, args)
    elif isinstance(fn, CompoundFunction):
        return apply_compound_function(fn, args)
    else:
        raise UnknownFunctionValueKind(fn)

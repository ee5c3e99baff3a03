from synan.types.undefined import Undefined, UndefinedType
from synan.types.return_value import ReturnValue
from synan.types.environment import (
    EMPTY_ENVIRONMENT,
    Environment,
    Frame,
    Initialized,
    Uninitialized,
)
from synan.types.function_value import CompoundFunction, PrimitiveFunction

from __future__ import annotations

from enum import Enum


class SynanError(Exception):
    """ Base class for all synan errors"""
    pass


class UnboundName(SynanError):
    """ Raised when a name is not declared in any enclosing frame"""

    def __init__(self, name: str):
        super().__init__(f"Unbound name: {name}")
        self.name = name


class UseBeforeInitialization(SynanError):
    """ Raised when a declared name is read before its declaration ran"""

    def __init__(self, name: str):
        super().__init__(f"Name used before declaration: {name}")
        self.name = name


class DuplicateDeclaration(SynanError):
    """ Raised when one scope declares the same name twice"""

    def __init__(self, name: str):
        super().__init__(f"Multiple declarations of: {name}")
        self.name = name


class ArityDirection(Enum):
    TOO_MANY = "too many"
    TOO_FEW = "too few"


class ArityMismatch(SynanError):
    """ Raised when a compound function gets the wrong number of arguments"""

    def __init__(self, direction: ArityDirection, expected: int, supplied: int):
        super().__init__(
            f"{direction.value.capitalize()} arguments supplied: "
            f"expected {expected}, got {supplied}"
        )
        self.direction = direction
        self.expected = expected
        self.supplied = supplied


class ReturnOutsideFunction(SynanError):
    """ Raised when a return statement escapes to the top level"""

    def __init__(self):
        super().__init__("return not allowed outside of function definitions")


class UnknownNodeKind(SynanError):
    """ Raised when analysis meets something that is not a syntax node"""

    def __init__(self, node: object):
        super().__init__(f"Unknown statement type in analyze: {node!r}")
        self.node = node


class UnknownFunctionValueKind(SynanError):
    """ Raised when the operator of an application is not a function value"""

    def __init__(self, value: object):
        super().__init__(f"Unknown function type in application: {value!r}")
        self.value = value


class InternalConsistencyError(SynanError):
    """ Raised when a declaration targets a slot that scope entry did not set up"""


class ProgramError(SynanError):
    """ Raised by the `error` primitive on behalf of the running program"""


class RecursionDepthExceeded(SynanError):
    """ Raised when evaluation runs out of host stack"""

    def __init__(self, limit: int):
        super().__init__(f"Maximum evaluation depth exceeded (recursion limit {limit})")
        self.limit = limit

"""Function values: host primitives and user-defined compound functions."""

from __future__ import annotations

from io import StringIO
from typing import Callable, Optional

from synan import Executable, Value
from synan.types.environment import Environment


class PrimitiveFunction:
    """An opaque host operation exposed to programs as a function value."""

    __slots__ = ("implementation", "name")

    def __init__(self, implementation: Callable[..., Value], name: str | None = None):
        self.implementation = implementation
        self.name: str = name or getattr(implementation, "__name__", "primitive")

    def __repr__(self) -> str:
        return f"<primitive {self.name}>"


class CompoundFunction:
    """A first-class function with parameters, local names, body, and closure env.

    `local_names` are the constants declared directly in the body, collected
    once when the definition was analyzed. `environment` is the environment the
    definition was evaluated in; calls extend it, never the caller's.
    """

    __slots__ = ("parameters", "local_names", "body", "environment")

    def __init__(
        self,
        parameters: tuple[str, ...],
        local_names: tuple[str, ...],
        body: Executable,
        environment: Optional[Environment],
    ):
        self.parameters = parameters
        self.local_names = local_names
        self.body = body
        self.environment = environment

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<function(")
            buffer.write(", ".join(self.parameters))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

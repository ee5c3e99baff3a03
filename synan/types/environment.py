"""Runtime environments for synan.

An Environment is an immutable chain of Frames, innermost first. A Frame maps
each name of one scope to a slot which is either `Uninitialized` or an
`Initialized` value. Every name a scope declares is placed in its frame when
the scope is entered, before any of its statements run, so reading a constant
ahead of its declaration is reported instead of falling through to an outer
binding.

Frames are ordinary Python objects shared by reference: a function value that
captures an environment keeps its frames alive for as long as it lives.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import Iterable, Optional, Union

from synan import Value
from synan.errors import (
    ArityDirection,
    ArityMismatch,
    InternalConsistencyError,
    UnboundName,
    UseBeforeInitialization,
)


class UninitializedType:
    """Slot state for a name declared in a scope whose declaration has not run."""
    def __repr__(self): return "<uninitialized>"


Uninitialized = UninitializedType()


@dataclass(frozen=True)
class Initialized:
    value: Value


Slot = Union[UninitializedType, Initialized]


class Frame:
    """Bindings of one scope, in declaration order."""

    __slots__ = ("slots",)

    def __init__(self, slots: dict[str, Slot] | None = None):
        self.slots: dict[str, Slot] = slots if slots is not None else {}

    @classmethod
    def of(cls, names: Iterable[str], values: Iterable[Value | UninitializedType]) -> Frame:
        return cls({
            name: value if value is Uninitialized else Initialized(value)
            for name, value in zip(names, values)
        })

    def names(self) -> list[str]:
        return list(self.slots)

    def __contains__(self, name: str) -> bool:
        return name in self.slots

    def __len__(self) -> int:
        return len(self.slots)

    def _write_slots(self, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for name, slot in self.slots.items():
            if not first:
                buffer.write(", ")
            shown = slot.value if isinstance(slot, Initialized) else slot
            buffer.write(f"{name}: {shown!r}")
            first = False
        buffer.write("}")

    def __repr__(self) -> str:
        with StringIO() as buffer:
            self._write_slots(buffer)
            return buffer.getvalue()


class Environment:
    """One frame chained onto its enclosing environment."""

    __slots__ = ("frame", "enclosing")

    def __init__(self, frame: Frame, enclosing: Optional[Environment] = None):
        self.frame: Frame = frame
        self.enclosing: Optional[Environment] = enclosing

    def depth(self) -> int:
        """Number of frames in the chain."""
        n = 0
        env: Optional[Environment] = self
        while env is not None:
            n += 1
            env = env.enclosing
        return n

    def __repr__(self) -> str:
        """Chain representation for debugging, innermost frame first."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            chain.append(repr(env.frame))
            env = env.enclosing
        return "<Environment chain: " + " -> ".join(chain) + ">"


# The terminal environment: no frames at all.
EMPTY_ENVIRONMENT: Optional[Environment] = None


def enclose_by(frame: Frame, env: Optional[Environment]) -> Environment:
    return Environment(frame, env)


def lookup_name_value(name: str, env: Optional[Environment]) -> Value:
    """Value bound to `name`, searching from the innermost frame outward.

    Raises UseBeforeInitialization if the nearest binding is still
    uninitialized, and UnboundName if no frame declares the name.
    """
    while env is not None:
        slot = env.frame.slots.get(name)
        if slot is not None:
            if slot is Uninitialized:
                raise UseBeforeInitialization(name)
            return slot.value
        env = env.enclosing
    raise UnboundName(name)


def set_name_value(name: str, value: Value, env: Optional[Environment]) -> None:
    """Initialize `name` in the innermost frame of `env`.

    Only the innermost frame is searched: a declaration always targets its own
    scope, whose entry already placed the name there.
    """
    if env is None:
        raise InternalConsistencyError(f"internal error: name not found: {name}")
    slots = env.frame.slots
    slot = slots.get(name)
    if slot is None:
        raise InternalConsistencyError(f"internal error: name not found: {name}")
    if slot is not Uninitialized:
        raise InternalConsistencyError(f"internal error: name already initialized: {name}")
    slots[name] = Initialized(value)


def extend_environment(
    names: list[str],
    values: list[Value | UninitializedType],
    base_env: Optional[Environment],
) -> Environment:
    """Chain a new frame binding `names` to `values` onto `base_env`.

    Raises ArityMismatch when the counts differ.
    """
    if len(names) == len(values):
        return enclose_by(Frame.of(names, values), base_env)
    if len(names) < len(values):
        raise ArityMismatch(ArityDirection.TOO_MANY, len(names), len(values))
    raise ArityMismatch(ArityDirection.TOO_FEW, len(names), len(values))


def extend_with_uninitialized(names: list[str], base_env: Optional[Environment]) -> Environment:
    """Scope entry for a block: every local name starts out uninitialized."""
    return enclose_by(Frame({name: Uninitialized for name in names}), base_env)

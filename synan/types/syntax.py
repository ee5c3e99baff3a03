"""Syntax nodes for the evaluated language.

The external parser hands over a tree built from the frozen dataclasses below.
Every node kind has exactly the fields the analyzer reads, and nodes are never
mutated after construction, so one tree may be analyzed any number of times.

Also provided: small constructors used by hosts and tests to build trees, and
`local_names`, which collects the constants a scope declares directly.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Union

from synan import Value
from synan.errors import DuplicateDeclaration


@dataclass(frozen=True)
class Literal:
    value: Value


@dataclass(frozen=True)
class NameRef:
    name: str

    def __post_init__(self):
        # Intern to ensure fast equality/hash on frame lookups
        object.__setattr__(self, "name", sys.intern(self.name))


@dataclass(frozen=True)
class ConstDecl:
    name: str
    value: Node


@dataclass(frozen=True)
class Conditional:
    predicate: Node
    consequent: Node
    alternative: Node


@dataclass(frozen=True)
class FunctionDef:
    params: tuple[str, ...]
    body: Node


@dataclass(frozen=True)
class Sequence:
    statements: tuple[Node, ...]


@dataclass(frozen=True)
class Block:
    body: Node


@dataclass(frozen=True)
class Return:
    expr: Node


@dataclass(frozen=True)
class Application:
    operator: Node
    operands: tuple[Node, ...]


Node = Union[
    Literal, NameRef, ConstDecl, Conditional, FunctionDef,
    Sequence, Block, Return, Application,
]

NODE_KINDS = (
    Literal, NameRef, ConstDecl, Conditional, FunctionDef,
    Sequence, Block, Return, Application,
)


def is_node(obj: object) -> bool:
    return isinstance(obj, NODE_KINDS)


# -------------------------------
# Constructors
# -------------------------------
def as_node(obj: Node | Value) -> Node:
    """Return `obj` if it already is a node, otherwise wrap it as a Literal."""
    return obj if is_node(obj) else Literal(obj)


def make_name(name: str) -> NameRef:
    return NameRef(name)


def make_constant_declaration(name: str, value: Node | Value) -> ConstDecl:
    return ConstDecl(sys.intern(name), as_node(value))


def make_conditional(predicate, consequent, alternative) -> Conditional:
    return Conditional(as_node(predicate), as_node(consequent), as_node(alternative))


def make_function_definition(params: Iterable[str], body: Node | Value) -> FunctionDef:
    return FunctionDef(tuple(sys.intern(p) for p in params), as_node(body))


def make_sequence(*statements: Node | Value) -> Sequence:
    return Sequence(tuple(as_node(s) for s in statements))


def make_block(body: Node | Value) -> Block:
    return Block(as_node(body))


def make_return(expr: Node | Value) -> Return:
    return Return(as_node(expr))


def make_application(operator: Node | str, *operands: Node | Value) -> Application:
    """Build a call; a string operator names the function to call."""
    if isinstance(operator, str):
        operator = NameRef(operator)
    return Application(operator, tuple(as_node(o) for o in operands))


def make_function_declaration(name: str, params: Iterable[str], body: Node) -> ConstDecl:
    """`function name(params) { body }` declares a constant bound to a function value.

    The body statements are the function's own scope, so they are not wrapped
    in a Block: parameters and direct locals share one frame.
    """
    return make_constant_declaration(name, make_function_definition(params, body))


# -------------------------------
# Local names
# -------------------------------
def insert_all(names: Iterable[str], into: list[str]) -> list[str]:
    """Prepend `names` to `into`, rejecting any name already present."""
    result = list(into)
    for name in reversed(list(names)):
        if name in result:
            raise DuplicateDeclaration(name)
        result.insert(0, name)
    return result


def local_names(stmt: Node) -> list[str]:
    """Names declared directly in `stmt`.

    Only declarations at the top of the scope count: nested blocks and
    function bodies open scopes of their own.
    """
    match stmt:
        case ConstDecl(name=name):
            return [name]
        case Sequence(statements=statements):
            names: list[str] = []
            for s in reversed(statements):
                names = insert_all(local_names(s), names)
            return names
        case _:
            return []

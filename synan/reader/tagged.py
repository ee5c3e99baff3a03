"""Conversion from the parser's tagged-list trees to syntax nodes.

The external parser emits every statement and expression as a list whose
head is a tag string, e.g. ["application", ["name", "+"], [1, 2]].
Numbers, strings, booleans and None stand for themselves.
"""

from __future__ import annotations

from typing import Any

from synan.errors import UnknownNodeKind
from synan.types.syntax import (
    Application,
    Block,
    Conditional,
    ConstDecl,
    FunctionDef,
    Literal,
    NameRef,
    Node,
    Return,
    Sequence,
)


def _is_self_evaluating(obj: Any) -> bool:
    return obj is None or isinstance(obj, (bool, int, float, str))


def _name_of(obj: Any) -> str:
    match obj:
        case ["name", str(name)] | ("name", str(name)):
            return name
        case str(name):
            return name
    raise UnknownNodeKind(obj)


def from_tagged(obj: Any) -> Node:
    """Convert one tagged-list tree; raises UnknownNodeKind on anything unrecognized."""
    if _is_self_evaluating(obj):
        return Literal(obj)
    if not isinstance(obj, (list, tuple)) or not obj:
        raise UnknownNodeKind(obj)

    tag, *fields = obj
    match tag, fields:
        case "name", [name]:
            return NameRef(_name_of(obj))
        case "constant_declaration", [name, value]:
            return ConstDecl(_name_of(name), from_tagged(value))
        case "conditional_expression", [pred, cons, alt]:
            return Conditional(from_tagged(pred), from_tagged(cons), from_tagged(alt))
        case "function_definition", [params, body]:
            return FunctionDef(tuple(_name_of(p) for p in params), from_tagged(body))
        case "sequence", [statements]:
            return Sequence(tuple(from_tagged(s) for s in statements))
        case "block", [body]:
            return Block(from_tagged(body))
        case "return_statement", [expr]:
            return Return(from_tagged(expr))
        case "application", [operator, operands]:
            return Application(from_tagged(operator), tuple(from_tagged(o) for o in operands))
    raise UnknownNodeKind(obj)

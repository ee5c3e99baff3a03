"""Syntactic analysis for synan.

`analyze` turns a syntax node into an executable (a function from
Environment to value) once; the executable can then run any number of times,
for example on every call of a function whose body it is. Dispatch over node
kinds happens only here, never during execution.
"""

from __future__ import annotations

import logging

from synan import Executable
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
from synan.evaluation.analyzers import (
    analyze_application,
    analyze_block,
    analyze_conditional,
    analyze_constant_declaration,
    analyze_function_definition,
    analyze_literal,
    analyze_name,
    analyze_return,
    analyze_sequence,
)

logger = logging.getLogger(__name__)


def analyze(node: Node) -> Executable:
    """Return the executable for `node`.

    Raises UnknownNodeKind for anything that is not a syntax node, and
    DuplicateDeclaration when a scope declares a name twice.
    """
    match node:
        case Literal():
            return analyze_literal(node, analyze)
        case NameRef():
            return analyze_name(node, analyze)
        case ConstDecl():
            return analyze_constant_declaration(node, analyze)
        case Conditional():
            return analyze_conditional(node, analyze)
        case FunctionDef():
            logger.debug("analyzing function definition with parameters %s", node.params)
            return analyze_function_definition(node, analyze)
        case Sequence():
            return analyze_sequence(node, analyze)
        case Block():
            return analyze_block(node, analyze)
        case Return():
            return analyze_return(node, analyze)
        case Application():
            return analyze_application(node, analyze)
        case _:
            raise UnknownNodeKind(node)

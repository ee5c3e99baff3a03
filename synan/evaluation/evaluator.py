"""Evaluation entry points for synan.

`evaluate` analyzes a node and runs it against an environment.
`evaluate_toplevel` runs a whole program in its own frame on top of a global
environment and rejects a return statement that escapes the program.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from synan import Value
from synan.errors import RecursionDepthExceeded, ReturnOutsideFunction
from synan.evaluation.analyzer import analyze
from synan.types.environment import Environment
from synan.types.return_value import ReturnValue
from synan.types.syntax import Node, make_block

logger = logging.getLogger(__name__)


def evaluate(node: Node, env: Optional[Environment]) -> Value:
    return analyze(node)(env)


def evaluate_toplevel(program: Node, global_environment: Optional[Environment]) -> Value:
    """Evaluate `program` as an implicit block over `global_environment`.

    The block gives the program's declarations a frame of their own, so they
    never write into the global frame. Running out of host stack raises
    RecursionDepthExceeded.
    """
    program_block = make_block(program)
    logger.debug("evaluating top-level program")
    try:
        value = evaluate(program_block, global_environment)
    except RecursionError:
        raise RecursionDepthExceeded(sys.getrecursionlimit()) from None
    if isinstance(value, ReturnValue):
        raise ReturnOutsideFunction()
    return value

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from synan import Value
from synan.builtin.env_builtin import PrimitiveTable, build_global_environment, default_primitives
from synan.config import get_recursion_limit
from synan.errors import RecursionDepthExceeded
from synan.evaluation.evaluator import evaluate, evaluate_toplevel
from synan.reader.tagged import from_tagged
from synan.types.environment import Environment
from synan.types.syntax import Node

logger = logging.getLogger(__name__)


@contextmanager
def recursion_limit(limit: int) -> Iterator[None]:
    """Temporarily raise the Python recursion limit to at least `limit`."""
    previous = sys.getrecursionlimit()
    if limit > previous:
        logger.debug("raising recursion limit from %d to %d", previous, limit)
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Interpreter:
    """
    Runs programs against one global environment.

    The global environment is built once from an explicit primitive table
    (the standard primitives unless one is given) and shared by every program
    this interpreter runs. Each program still gets its own top-level frame.

    Evaluation is recursive on the host stack. While a program runs the
    Python recursion limit is raised to `max_depth` (the SYNAN_RECURSION_LIMIT
    setting by default); running past it raises RecursionDepthExceeded.
    """

    def __init__(
        self,
        primitives: PrimitiveTable | None = None,
        *,
        display: Optional[Callable[[str], object]] = None,
        max_depth: int | None = None,
    ):
        if primitives is None:
            primitives = default_primitives(display)
        self.primitives: PrimitiveTable = primitives
        self.global_env: Environment = build_global_environment(primitives)
        self.max_depth: int = max_depth if max_depth is not None else get_recursion_limit()

    def evaluate_toplevel(self, program: Node) -> Value:
        with self._guard_depth():
            return evaluate_toplevel(program, self.global_env)

    def evaluate(self, node: Node, env: Environment | None = None) -> Value:
        """Evaluate a single node, in the global environment unless `env` is given."""
        with self._guard_depth():
            return evaluate(node, self.global_env if env is None else env)

    def eval_tagged(self, tree: Any) -> Value:
        """Evaluate a program given in the parser's tagged-list form."""
        return self.evaluate_toplevel(from_tagged(tree))

    @contextmanager
    def _guard_depth(self) -> Iterator[None]:
        with recursion_limit(self.max_depth):
            try:
                yield
            except RecursionError:
                raise RecursionDepthExceeded(sys.getrecursionlimit()) from None

# Core type aliases for the synan evaluator.
# Runtime values are plain Python objects (int, float, str, bool, None) plus the
# function values and the Undefined unit value defined under synan.types.
#
# Naming guidance:
# - Value:      an evaluated language value.
# - Executable: what analysis produces for one syntax node; call it with an
#               Environment to run the node.

from typing import Any, Callable

Value = Any

# Executable receives an Environment (annotated loosely to avoid an import cycle)
Executable = Callable[[Any], Value]

# Analyzer function type: passed into the per-node analysis functions so they
# can analyze their children
AnalyzeFn = Callable[[Any], Executable]

from synan import AnalyzeFn, Executable
from synan.types.syntax import Literal


def analyze_literal(node: Literal, analyze_fn: AnalyzeFn) -> Executable:
    value = node.value
    return lambda env: value

from synan import AnalyzeFn, Executable
from synan.types.environment import lookup_name_value
from synan.types.syntax import NameRef


def analyze_name(node: NameRef, analyze_fn: AnalyzeFn) -> Executable:
    name = node.name
    return lambda env: lookup_name_value(name, env)

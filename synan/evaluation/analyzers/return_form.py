from synan import AnalyzeFn, Executable, Value
from synan.types.environment import Environment
from synan.types.return_value import ReturnValue
from synan.types.syntax import Return


def analyze_return(node: Return, analyze_fn: AnalyzeFn) -> Executable:
    value_fn = analyze_fn(node.expr)

    def execute(env: Environment) -> Value:
        value = value_fn(env)
        # Markers never nest
        if isinstance(value, ReturnValue):
            return value
        return ReturnValue(value)

    return execute

from synan import AnalyzeFn, Executable, Value
from synan.types.environment import Environment, set_name_value
from synan.types.syntax import ConstDecl
from synan.types.undefined import Undefined


def analyze_constant_declaration(node: ConstDecl, analyze_fn: AnalyzeFn) -> Executable:
    """
    const name = value;
    Initializes the slot scope entry already placed in the innermost frame.
    """
    name = node.name
    value_fn = analyze_fn(node.value)

    def execute(env: Environment) -> Value:
        set_name_value(name, value_fn(env), env)
        return Undefined

    return execute

from synan import AnalyzeFn, Executable, Value
from synan.types.environment import Environment
from synan.types.syntax import Conditional


def is_true(value: Value) -> bool:
    # Only the boolean true selects the consequent; there is no truthiness
    return value is True


def analyze_conditional(node: Conditional, analyze_fn: AnalyzeFn) -> Executable:
    predicate_fn = analyze_fn(node.predicate)
    consequent_fn = analyze_fn(node.consequent)
    alternative_fn = analyze_fn(node.alternative)

    def execute(env: Environment) -> Value:
        if is_true(predicate_fn(env)):
            return consequent_fn(env)
        return alternative_fn(env)

    return execute

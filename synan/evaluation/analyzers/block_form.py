from synan import AnalyzeFn, Executable, Value
from synan.types.environment import Environment, extend_with_uninitialized
from synan.types.syntax import Block, local_names


def analyze_block(node: Block, analyze_fn: AnalyzeFn) -> Executable:
    """
    { body }
    Each run gets a fresh frame holding the body's direct constants.
    """
    locals_ = local_names(node.body)
    body_fn = analyze_fn(node.body)

    def execute(env: Environment) -> Value:
        return body_fn(extend_with_uninitialized(locals_, env))

    return execute

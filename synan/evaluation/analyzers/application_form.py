from synan import AnalyzeFn, Executable, Value
from synan.evaluation.apply import execute_application
from synan.types.environment import Environment
from synan.types.syntax import Application


def analyze_application(node: Application, analyze_fn: AnalyzeFn) -> Executable:
    """
    operator(operands...)
    The operator is evaluated first, then the operands eagerly left to right.
    """
    operator_fn = analyze_fn(node.operator)
    operand_fns = tuple(analyze_fn(o) for o in node.operands)

    def execute(env: Environment) -> Value:
        fn = operator_fn(env)
        args = [operand_fn(env) for operand_fn in operand_fns]
        return execute_application(fn, args)

    return execute

from synan import AnalyzeFn, Executable, Value
from synan.types.environment import Environment
from synan.types.return_value import ReturnValue
from synan.types.syntax import Sequence
from synan.types.undefined import Undefined


def analyze_sequence(node: Sequence, analyze_fn: AnalyzeFn) -> Executable:
    """
    Statements run left to right and the last one's value is the result.
    A ReturnValue stops the sequence and is handed upward as is.
    """
    statement_fns = tuple(analyze_fn(s) for s in node.statements)

    if not statement_fns:
        return lambda env: Undefined
    if len(statement_fns) == 1:
        return statement_fns[0]

    def execute(env: Environment) -> Value:
        result: Value = Undefined
        for fn in statement_fns:
            result = fn(env)
            if isinstance(result, ReturnValue):
                return result
        return result

    return execute

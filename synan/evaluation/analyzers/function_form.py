from synan import AnalyzeFn, Executable
from synan.types.function_value import CompoundFunction
from synan.types.syntax import FunctionDef, insert_all, local_names


def analyze_function_definition(node: FunctionDef, analyze_fn: AnalyzeFn) -> Executable:
    """
    (params) => body
    Parameters and the body's direct constants share the call frame, so a
    clash between them (or among the parameters) is a duplicate declaration.
    """
    parameters = tuple(insert_all(node.params, []))
    locals_ = tuple(local_names(node.body))
    insert_all(parameters, list(locals_))
    body_fn = analyze_fn(node.body)
    return lambda env: CompoundFunction(parameters, locals_, body_fn, env)

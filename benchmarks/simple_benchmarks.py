from timeit import timeit

from synan.builtin.env_builtin import build_global_environment, default_primitives
from synan.evaluation.analyzer import analyze
from synan.evaluation.evaluator import evaluate
from synan.interpreter import recursion_limit
from synan.types.environment import EMPTY_ENVIRONMENT, extend_environment, lookup_name_value
from synan.types.syntax import (
    NameRef,
    make_application as call,
    make_block as block,
    make_conditional as cond,
    make_function_declaration as function,
    make_function_definition as lambda_,
    make_return as ret,
    make_sequence as seq,
)


def time_analyzed(program, rounds: int) -> float:
    """Time execution only: analyze once, then repeatedly run the executable."""
    env = build_global_environment(default_primitives())
    executable = analyze(block(program))
    # Warmup
    executable(env)
    # Timed
    return timeit(lambda: executable(env), number=rounds)


def time_reanalyzed(program, rounds: int) -> float:
    """Time analysis plus execution on every round."""
    env = build_global_environment(default_primitives())
    wrapped = block(program)
    evaluate(wrapped, env)
    return timeit(lambda: evaluate(wrapped, env), number=rounds)


# Pure environment benchmark: lookup through a long frame chain

def bench_lookup_chain(n_frames: int = 1000, n_lookups: int = 10000) -> float:
    env = extend_environment(["answer"], [42], EMPTY_ENVIRONMENT)
    for i in range(n_frames):
        env = extend_environment([f"x{i}"], [i], env)
    # Warmup
    for _ in range(1000):
        lookup_name_value("answer", env)
    # Timed
    return timeit(lambda: lookup_name_value("answer", env), number=n_lookups)


# Language-level workloads

LAMBDA_APPLY = call(lambda_(["x", "y"], ret(call("+", NameRef("x"), NameRef("y")))), 1, 2)

FACTORIAL = seq(
    function("fact", ["n"], ret(cond(
        call("<=", NameRef("n"), 1),
        1,
        call("*", NameRef("n"), call("fact", call("-", NameRef("n"), 1))),
    ))),
    call("fact", 100),
)

ARITH_SUM = seq(
    function("sum_n", ["n", "acc"], ret(cond(
        call("<=", NameRef("n"), 0),
        NameRef("acc"),
        call("sum_n", call("-", NameRef("n"), 1), call("+", NameRef("acc"), NameRef("n"))),
    ))),
    call("sum_n", 500, 0),
)


def _print_pair(name: str, program, rounds: int) -> None:
    treanalyzed = time_reanalyzed(program, rounds)
    tanalyzed = time_analyzed(program, rounds)
    print(f"Benchmark: {name}")
    print(f"  analyze every run: {treanalyzed:.6f}s  |  analyze once: {tanalyzed:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment lookup chain")
    print(f"  time: {bench_lookup_chain():.6f}s")

    with recursion_limit(10000):
        _print_pair("lambda application", LAMBDA_APPLY, rounds=20000)
        _print_pair("recursion (factorial)", FACTORIAL, rounds=500)
        _print_pair("arithmetic sum 1..500", ARITH_SUM, rounds=200)

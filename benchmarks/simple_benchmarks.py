from timeit import timeit

from lumen.interpreter import Interpreter
from lumen.types.environment import Environment
from lumen.reader.lexer import lex
from lumen.reader.parser import parse
from lumen.evaluation.evaluator import evaluate


def time_front_end(code: str, rounds: int) -> tuple[float, float]:
    """Time lexing alone, then lexing plus parsing, over the same source."""
    t_lex = timeit(lambda: list(lex(code)), number=rounds)
    t_parse = timeit(lambda: parse(code), number=rounds)
    return t_lex, t_parse


def time_evaluator(code: str, rounds: int) -> float:
    """Time evaluation only: parse once, then repeatedly evaluate the AST."""
    itp = Interpreter(builtins=False)
    program = parse(code)
    # Warmup
    evaluate(program, itp.env)
    # Timed
    return timeit(lambda: evaluate(program, itp.env), number=rounds)


# Environment lookup through a long scope chain (no parsing involved)

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    root.define("answer", 42)
    env = root
    for _ in range(n_envs):
        env = env.extend()
    # Warmup
    for _ in range(1000):
        env.get("answer")
    # Timed
    return timeit(lambda: env.get("answer"), number=n_lookups)


LAMBDA_APPLY_CODE = "(lambda (x, y) x + y)(1, 2)"

RECURSION_CODE = r"""
(lambda fact(n, acc) if n <= 1 then acc else fact(n - 1, n * acc))(100, 1)
"""

FIB_CODE = r"""
fib = lambda (n) if n < 2 then n else fib(n - 1) + fib(n - 2);
fib(15)
"""

CLOSURE_COUNTER_CODE = r"""
let (n = 0, inc = lambda () n = n + 1) {
  (lambda loop(i) if i > 0 then { inc(); loop(i - 1) } else n)(300)
}
"""


def _print_eval(name: str, code: str, rounds: int) -> None:
    t = time_evaluator(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  evaluator: {t:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment lookup chain")
    print(f"  time: {bench_lookup_chain():.6f}s")

    t_lex, t_parse = time_front_end((FIB_CODE + ";") * 20, rounds=200)
    print("Benchmark: front end (fib source x20)")
    print(f"  lex: {t_lex:.6f}s  |  lex+parse: {t_parse:.6f}s  [rounds=200]")

    _print_eval("lambda application", LAMBDA_APPLY_CODE, rounds=20000)
    _print_eval("recursion (factorial)", RECURSION_CODE, rounds=500)
    _print_eval("fib(15)", FIB_CODE, rounds=20)
    _print_eval("closure counter", CLOSURE_COUNTER_CODE, rounds=200)

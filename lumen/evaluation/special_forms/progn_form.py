from lumen import EvaluatorFn
from lumen import LumenValue
from lumen.types.environment import Environment
from lumen.types.nodes import Prog


def progn_form(node: Prog, env: Environment, evaluate_fn: EvaluatorFn) -> LumenValue:
    result: LumenValue = False
    for expr in node.prog:
        result = evaluate_fn(expr, env)
    return result

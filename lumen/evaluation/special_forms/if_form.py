from lumen import EvaluatorFn
from lumen import LumenValue
from lumen.types.environment import Environment
from lumen.types.nodes import If


def if_form(node: If, env: Environment, evaluate_fn: EvaluatorFn) -> LumenValue:
    cond = evaluate_fn(node.cond, env)
    # Only the boolean false is falsy
    if cond is not False:
        return evaluate_fn(node.then, env)
    if node.else_ is not None:
        return evaluate_fn(node.else_, env)
    return False

from lumen import EvaluatorFn
from lumen import LumenValue
from lumen.evaluation.apply import apply
from lumen.types.environment import Environment
from lumen.types.nodes import Call


def call_form(node: Call, env: Environment, evaluate_fn: EvaluatorFn) -> LumenValue:
    fn = evaluate_fn(node.func, env)
    args = [evaluate_fn(arg, env) for arg in node.args]
    return apply(fn, args, evaluate_fn)

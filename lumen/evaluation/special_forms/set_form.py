from lumen import EvaluatorFn
from lumen import LumenValue
from lumen.errors import LumenTypeError
from lumen.types.environment import Environment
from lumen.types.nodes import Assign, Var


def set_form(node: Assign, env: Environment, evaluate_fn: EvaluatorFn) -> LumenValue:
    if not isinstance(node.left, Var):
        raise LumenTypeError(f"Cannot assign to {node.left!r}")
    value = evaluate_fn(node.right, env)
    return env.set(node.left.name, value)

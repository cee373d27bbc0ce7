from lumen import EvaluatorFn
from lumen import LumenValue
from lumen.types.environment import Environment
from lumen.types.nodes import Let


def let_form(node: Let, env: Environment, evaluate_fn: EvaluatorFn) -> LumenValue:
    """Sequential local bindings.

    Each binding gets its own child scope. Its initializer runs in the scope
    before that child exists, so it sees earlier siblings but not itself.
    The body runs in the innermost scope.
    """
    for binding in node.bindings:
        value = evaluate_fn(binding.init, env) if binding.init is not None else False
        scope = env.extend()
        scope.define(binding.name, value)
        env = scope
    return evaluate_fn(node.body, env)

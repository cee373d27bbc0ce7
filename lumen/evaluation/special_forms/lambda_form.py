from lumen import EvaluatorFn
from lumen import LumenValue
from lumen.types.closure import Closure
from lumen.types.environment import Environment
from lumen.types.nodes import Lambda


def lambda_form(node: Lambda, env: Environment, _: EvaluatorFn) -> LumenValue:
    # A named lambda lives in its own scope holding its name, so the body can
    # call itself. The scope has to exist before the closure captures it.
    if node.name is not None:
        env = env.extend()
    fn = Closure(node.params, node.body, env, node.name)
    if node.name is not None:
        env.define(node.name, fn)
    return fn

from lumen import EvaluatorFn
from lumen import LumenValue
from lumen.evaluation.apply import apply_op
from lumen.types.environment import Environment
from lumen.types.nodes import Binary


def and_form(left: LumenValue, node: Binary, env: Environment, evaluate_fn: EvaluatorFn) -> LumenValue:
    """Short-circuiting logical AND.

    Returns `left` untouched when it is false, otherwise evaluates and
    returns the right operand.
    """
    if left is False:
        return left
    return evaluate_fn(node.right, env)


def or_form(left: LumenValue, node: Binary, env: Environment, evaluate_fn: EvaluatorFn) -> LumenValue:
    """Short-circuiting logical OR.

    Returns `left` when it is anything but false, otherwise evaluates and
    returns the right operand.
    """
    if left is not False:
        return left
    return evaluate_fn(node.right, env)


def binary_form(node: Binary, env: Environment, evaluate_fn: EvaluatorFn) -> LumenValue:
    left = evaluate_fn(node.left, env)
    if node.operator == "&&":
        return and_form(left, node, env, evaluate_fn)
    if node.operator == "||":
        return or_form(left, node, env, evaluate_fn)
    return apply_op(node.operator, left, evaluate_fn(node.right, env))

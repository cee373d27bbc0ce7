"""Application engine for Lumen.

This module centralizes the two ways values are combined at runtime:
- `apply_op`: the operator table for binary operators (arithmetic,
  comparison, equality, and the non-short-circuit forms of && and ||).
- `apply`: invocation of a callable value, either a Closure or a Python
  callable supplied by the host.
"""

from __future__ import annotations

import logging
from typing import Callable

from lumen import LumenValue, EvaluatorFn
from lumen.errors import LumenDivideByZero, LumenOverflowError, LumenTypeError
from lumen.types.closure import Closure

logger = logging.getLogger(__name__)


def is_number(x: LumenValue) -> bool:
    # bool is an int subclass in Python but not a number in Lumen
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def num(x: LumenValue) -> int | float:
    if not is_number(x):
        raise LumenTypeError(f"Expected number but got {x!r}")
    return x


def div(x: LumenValue) -> int | float:
    if num(x) == 0:
        raise LumenDivideByZero("Divide by zero")
    return x


def remainder(a: int | float, b: int | float) -> int | float:
    """Truncated remainder: the result takes the sign of the dividend."""
    r = abs(a) % abs(b)
    return r if a >= 0 else -r


def strict_equals(a: LumenValue, b: LumenValue) -> bool:
    """Equality without coercion between booleans, numbers and strings."""
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    return a is b


def apply_op(op: str, a: LumenValue, b: LumenValue) -> LumenValue:
    """Apply binary operator `op` to two already evaluated operands."""
    try:
        return _apply_op(op, a, b)
    except OverflowError as e:
        raise LumenOverflowError(f"Numeric overflow in {op}: {e}") from e


def _apply_op(op: str, a: LumenValue, b: LumenValue) -> LumenValue:
    match op:
        case "+":
            return num(a) + num(b)
        case "-":
            return num(a) - num(b)
        case "*":
            return num(a) * num(b)
        case "/":
            return num(a) / div(b)
        case "%":
            return remainder(num(a), div(b))
        case "&&":
            return b if a is not False else a
        case "||":
            return a if a is not False else b
        case "<":
            return num(a) < num(b)
        case ">":
            return num(a) > num(b)
        case "<=":
            return num(a) <= num(b)
        case ">=":
            return num(a) >= num(b)
        case "==":
            return strict_equals(a, b)
        case "!=":
            return not strict_equals(a, b)
    raise LumenTypeError(f"Can't apply operator {op}")


def apply(
    fn: LumenValue,
    args: list[LumenValue],
    evaluate_fn: EvaluatorFn,
) -> LumenValue:
    """Invoke `fn` with already evaluated arguments.

    Closures run their body through `evaluate_fn` in a fresh scope; any other
    Python callable is called with the arguments positionally.
    """
    if isinstance(fn, Closure):
        logger.debug("Applying %s to %d argument(s)", fn, len(args))
        return evaluate_fn(fn.body, fn.extend_env(args))
    if callable(fn):
        host_fn: Callable[..., LumenValue] = fn
        return host_fn(*args)
    raise LumenTypeError(f"{fn!r} is not a function")

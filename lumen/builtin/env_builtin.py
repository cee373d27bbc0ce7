"""Default host functions for the Lumen global environment.

These are ordinary Python callables; the evaluator passes them the evaluated
arguments positionally and leaves argument checking to each function.
"""
from __future__ import annotations

import logging
import sys
import time
from typing import TextIO

from lumen import LumenValue
from lumen.debug_utils.pprint import format_value
from lumen.errors import LumenTypeError
from lumen.types.environment import Environment

logger = logging.getLogger(__name__)


def make_print(out: TextIO | None = None, end: str = ""):
    """Build a print function writing to `out` (stdout at call time by default)."""
    def _print(*args: LumenValue) -> LumenValue:
        stream = out if out is not None else sys.stdout
        stream.write(" ".join(format_value(a) for a in args) + end)
        return args[-1] if args else False
    return _print


def time_it(fn: LumenValue, *args: LumenValue) -> LumenValue:
    """Call `fn` with the remaining arguments and log how long it took."""
    if not callable(fn):
        raise LumenTypeError(f"time expects a function, got {fn!r}")
    start = time.perf_counter()
    try:
        return fn(*args)
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("Time: %.3fms", elapsed_ms)


def register(env: Environment, out: TextIO | None = None) -> None:
    """Define the builtin functions in `env`."""
    env.update({
        "print": make_print(out),
        "println": make_print(out, end="\n"),
        "time": time_it,
    })

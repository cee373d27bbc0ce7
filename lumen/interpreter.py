from __future__ import annotations

import logging
import sys
from typing import TextIO

from lumen import LumenValue
from lumen.config import get_recursion_limit
from lumen.reader.parser import parse
from lumen.types.environment import Environment
from lumen.types.nodes import Prog
from lumen.evaluation.evaluator import evaluate
from lumen.builtin.env_builtin import register

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Lumen code for an embedding host.
    Maintains one global Environment across calls, so assignments made at
    the top level of one `eval` are visible to the next.
    """

    def __init__(
        self,
        prelude: str | None = None,
        *,
        builtins: bool = True,
        out: TextIO | None = None,
    ):
        # The evaluator recurses once per nested node and call
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

        self.env: Environment = Environment()
        if builtins:
            register(self.env, out)

        if prelude:
            self.eval(prelude)

    def define(self, name: str, value: LumenValue) -> None:
        """Expose a host value, typically a Python callable, as a global."""
        self.env.define(name, value)

    def parse(self, code: str) -> Prog:
        return parse(code)

    def eval(self, code: str) -> LumenValue:
        """Evaluate a program and return the value of its last expression."""
        program = self.parse(code)
        logger.debug("Evaluating program of %d top-level expression(s)", len(program.prog))
        return evaluate(program, self.env)

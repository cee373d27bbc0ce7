"""Closure representation and argument binding for Lumen."""

from __future__ import annotations

import logging
from io import StringIO

from lumen import LumenValue
from lumen.types.environment import Environment
from lumen.types.nodes import Node

logger = logging.getLogger(__name__)


class Closure:
    """A first-class function: parameter names, body, and defining env."""

    __slots__ = ("params", "body", "env", "name")

    def __init__(
        self,
        params: tuple[str, ...],
        body: Node,
        env: Environment,
        name: str | None = None,
    ):
        self.params: tuple[str, ...] = tuple(params)
        self.body: Node = body
        # Captured by reference; later assignments in env stay visible.
        self.env: Environment = env
        self.name: str | None = name

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<lambda")
            if self.name:
                buffer.write(f" {self.name}")
            buffer.write("(")
            buffer.write(", ".join(self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LumenValue]) -> Environment:
        """
        Bind argument values to the parameters in a fresh child of the
        defining environment. Missing arguments are bound to False and
        surplus arguments are ignored.
        """
        scope = self.env.extend()
        for i, param in enumerate(self.params):
            scope.define(param, args[i] if i < len(args) else False)
        return scope

    def __call__(self, *args: LumenValue) -> LumenValue:
        """Invoke from host code, e.g. a builtin receiving a Lumen function."""
        # Lazy import: the evaluator depends on this module
        from lumen.evaluation.evaluator import evaluate
        logger.debug("Calling %s with %d argument(s)", self, len(args))
        return evaluate(self.body, self.extend_env(list(args)))

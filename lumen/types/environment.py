"""Runtime environment for Lumen.

The Environment stores bindings of names to evaluated values and supports
nested lexical scopes via a `parent` link. The chain always ends at a root
environment with no parent, the global scope.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from lumen import LumenValue
from lumen.errors import LumenUndefinedVariable


class Environment:
    """Hierarchical mapping from names to Lumen values."""

    __slots__ = ("vars", "parent")

    def __init__(self, parent: Optional[Environment] = None):
        self.vars: dict[str, LumenValue] = {}
        self.parent: Environment | None = parent

    def extend(self) -> Environment:
        """Return a new child scope of this environment."""
        return Environment(self)

    def root(self) -> Environment:
        env = self
        while env.parent is not None:
            env = env.parent
        return env

    def lookup(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that owns `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.parent
        return None

    def get(self, name: str) -> LumenValue:
        """Look up the value bound to `name`, nearest scope first.

        Raises LumenUndefinedVariable if no scope in the chain binds it.
        """
        env = self.lookup(name)
        if env is None:
            raise LumenUndefinedVariable(f"Undefined variable {name}")
        return env.vars[name]

    def set(self, name: str, value: LumenValue) -> LumenValue:
        """Assign to an existing binding, or create a global one from the root.

        The write lands in the nearest scope that already owns `name`. When no
        scope owns it, only the root may gain a new binding; any other scope
        raises LumenUndefinedVariable.
        """
        env = self.lookup(name)
        if env is None:
            if self.parent is not None:
                raise LumenUndefinedVariable(f"Undefined variable {name}")
            env = self
        env.vars[name] = value
        return value

    def define(self, name: str, value: LumenValue) -> LumenValue:
        """Bind `name` in this scope, shadowing any outer binding."""
        self.vars[name] = value
        return value

    def update(self, mapping: dict[str, LumenValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.parent
        return f"<Environment chain: {' -> '.join(chain)}>"

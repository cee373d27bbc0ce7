"""Character-level input for the Lumen lexer.

Tracks line and column so that lexical and syntax errors can report where
they happened.
"""

from __future__ import annotations

from typing import NoReturn

from lumen.errors import LumenLexError, LumenSyntaxError


class InputStream:
    """Read-only cursor over source text."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.col = 0

    def peek(self) -> str:
        """Return the next character without consuming it, or "" at end."""
        return self.source[self.pos] if self.pos < len(self.source) else ""

    def next(self) -> str:
        ch = self.peek()
        if not ch:
            return ch
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.col = 0
        else:
            self.col += 1
        return ch

    def eof(self) -> bool:
        return self.pos >= len(self.source)

    def croak(self, message: str, error: type[LumenSyntaxError] = LumenLexError) -> NoReturn:
        raise error(message, self.line, self.col)

    fail = croak

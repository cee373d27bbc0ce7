"""Tokens produced by the Lumen lexer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class TokenKind(Enum):
    NUMBER = "num"
    STRING = "str"
    KEYWORD = "kw"
    IDENTIFIER = "var"
    PUNCTUATION = "punc"
    OPERATOR = "op"


@dataclass(frozen=True)
class Token:
    """A classified lexical unit.

    Equality covers `kind` and `value` only; `line`/`col` record where the
    token started and are kept for diagnostics.
    """

    kind: TokenKind
    value: Union[int, float, str]
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

    def is_a(self, kind: TokenKind, value: str | None = None) -> bool:
        return self.kind is kind and (value is None or self.value == value)

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.value!r})"

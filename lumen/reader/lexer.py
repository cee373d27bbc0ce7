"""
  Lumen Lexer

- Pulls characters from an InputStream, one token at a time
- One token of lookahead: peek() caches until next() consumes it
- Emits Token(kind, value):

    - numbers      -> int, or float when the literal has a dot
    - strings      -> str, backslash escapes exactly the next character
    - keywords     -> the keyword text (let if then else lambda λ true false)
    - identifiers  -> the name
    - punctuation  -> one of  , ; ( ) { } [ ]
    - operators    -> maximal run of  + - * / % = & | < > !

  Whitespace and `#` line comments are skipped.
"""

from __future__ import annotations

import math
from typing import Callable, Iterator, NoReturn, Optional, Union

from lumen.errors import LumenLexError, LumenSyntaxError
from lumen.reader.input_stream import InputStream
from lumen.types.token import Token, TokenKind


KEYWORDS = frozenset({"let", "if", "then", "else", "lambda", "λ", "true", "false"})

WHITESPACE = " \t\n\r"
PUNCTUATION = ",;(){}[]"
OPERATOR_CHARS = "+-*/%=&|<>!"
IDENTIFIER_CHARS = "?!-<>="


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_id_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_"


def is_id(ch: str) -> bool:
    return is_id_start(ch) or is_digit(ch) or ch in IDENTIFIER_CHARS


def is_op_char(ch: str) -> bool:
    return ch in OPERATOR_CHARS


def is_punc(ch: str) -> bool:
    return ch in PUNCTUATION


def is_whitespace(ch: str) -> bool:
    return ch in WHITESPACE


class Lexer:
    """Token stream over an InputStream."""

    def __init__(self, input_stream: InputStream):
        self.input = input_stream
        self.current: Optional[Token] = None

    # ----------------------
    # Public interface
    # ----------------------
    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it, or None at end."""
        if self.current is None:
            self.current = self.read_next()
        return self.current

    def next(self) -> Optional[Token]:
        tok = self.current
        self.current = None
        return tok if tok is not None else self.read_next()

    def eof(self) -> bool:
        return self.peek() is None

    def croak(self, message: str, error: type[LumenSyntaxError] = LumenLexError) -> NoReturn:
        self.input.croak(message, error)

    def __iter__(self) -> Iterator[Token]:
        while (tok := self.next()) is not None:
            yield tok

    # ----------------------
    # Readers
    # ----------------------
    def read_while(self, predicate: Callable[[str], bool]) -> str:
        chars = []
        while not self.input.eof() and predicate(self.input.peek()):
            chars.append(self.input.next())
        return "".join(chars)

    def read_number(self, line: int, col: int) -> Token:
        has_dot = False

        def number_char(ch: str) -> bool:
            nonlocal has_dot
            if ch == ".":
                if has_dot:
                    return False  # a second dot ends the literal
                has_dot = True
                return True
            return is_digit(ch)

        text = self.read_while(number_char)
        try:
            value: Union[int, float] = float(text) if has_dot else int(text)
        except ValueError:
            # int() refuses literals longer than sys.get_int_max_str_digits()
            raise LumenLexError("Number literal too long", line, col)
        if has_dot and math.isinf(value):
            raise LumenLexError("Number literal too large", line, col)
        return Token(TokenKind.NUMBER, value, line, col)

    def read_ident(self, line: int, col: int) -> Token:
        text = self.read_while(is_id)
        kind = TokenKind.KEYWORD if text in KEYWORDS else TokenKind.IDENTIFIER
        return Token(kind, text, line, col)

    def read_escaped(self, end: str) -> str:
        escaped = False
        chars = []
        self.input.next()  # opening delimiter
        while not self.input.eof():
            ch = self.input.next()
            if escaped:
                chars.append(ch)
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == end:
                return "".join(chars)
            else:
                chars.append(ch)
        self.croak("Unterminated string literal")

    def read_string(self, line: int, col: int) -> Token:
        return Token(TokenKind.STRING, self.read_escaped('"'), line, col)

    def skip_comment(self) -> None:
        self.read_while(lambda ch: ch != "\n")
        self.input.next()

    def read_next(self) -> Optional[Token]:
        while True:
            self.read_while(is_whitespace)
            if self.input.eof():
                return None
            if self.input.peek() != "#":
                break
            self.skip_comment()

        ch = self.input.peek()
        line, col = self.input.line, self.input.col
        if ch == '"':
            return self.read_string(line, col)
        if is_digit(ch):
            return self.read_number(line, col)
        if is_id_start(ch):
            return self.read_ident(line, col)
        if is_punc(ch):
            return Token(TokenKind.PUNCTUATION, self.input.next(), line, col)
        if is_op_char(ch):
            return Token(TokenKind.OPERATOR, self.read_while(is_op_char), line, col)
        self.croak(f"Can't handle character: {ch!r}")


def lex(source: Union[str, InputStream]) -> Lexer:
    """Return a Lexer over `source`, a string or an InputStream."""
    if isinstance(source, str):
        source = InputStream(source)
    return Lexer(source)

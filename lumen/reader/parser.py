"""
  Lumen Parser

Recursive descent for atoms, precedence climbing for binary operators.
Produces a Prog node holding every top-level expression.

    program    ::= expression (";" expression)* [";"]
    expression ::= maybe_call(binary(atom, 0))
    atom       ::= "(" expression ")"
                 | "{" [expression (";" expression)* [";"]] "}"
                 | "if" expression ["then"] expression ["else" expression]
                 | ("true" | "false")
                 | ("lambda" | "λ") [name] "(" [name ("," name)* [","]] ")" expression
                 | "let" "(" [binding ("," binding)* [","]] ")" expression
                 | number | string | name
    binding    ::= name ["=" expression]

`then` may only be left out when the consequent is a `{ ... }` block.
"""

from __future__ import annotations

from typing import Callable, NoReturn, Optional, TypeVar, Union

from lumen.errors import LumenParseError
from lumen.reader.input_stream import InputStream
from lumen.reader.lexer import Lexer, lex
from lumen.types.nodes import (
    FALSE,
    Assign,
    Binary,
    Bool,
    Call,
    If,
    Lambda,
    Let,
    LetBinding,
    Node,
    Num,
    Prog,
    Str,
    Var,
)
from lumen.types.token import Token, TokenKind

T = TypeVar("T")

# Higher binds tighter
PRECEDENCE: dict[str, int] = {
    "=": 1,
    "||": 2,
    "&&": 3,
    "<": 7, ">": 7, "<=": 7, ">=": 7, "==": 7, "!=": 7,
    "+": 10, "-": 10,
    "*": 20, "/": 20, "%": 20,
}


class Parser:
    def __init__(self, tokens: Lexer):
        self.tokens = tokens

    def parse(self) -> Prog:
        return self.parse_toplevel()

    # ------------------------
    # Token predicates
    # ------------------------
    def _peek_is(self, kind: TokenKind, value: Optional[str]) -> Optional[Token]:
        tok = self.tokens.peek()
        if tok is not None and tok.is_a(kind, value):
            return tok
        return None

    def is_punc(self, ch: Optional[str] = None) -> Optional[Token]:
        return self._peek_is(TokenKind.PUNCTUATION, ch)

    def is_kw(self, kw: Optional[str] = None) -> Optional[Token]:
        return self._peek_is(TokenKind.KEYWORD, kw)

    def is_op(self, op: Optional[str] = None) -> Optional[Token]:
        return self._peek_is(TokenKind.OPERATOR, op)

    def croak(self, message: str, tok: Optional[Token] = None) -> NoReturn:
        """Raise a LumenParseError at `tok`, or at the lookahead token when
        there is one, falling back to the input position at end of input."""
        if tok is None:
            tok = self.tokens.peek()
        if tok is None:
            self.tokens.croak(message, LumenParseError)
        raise LumenParseError(message, tok.line, tok.col)

    def skip_punc(self, ch: str) -> None:
        if self.is_punc(ch):
            self.tokens.next()
        else:
            self.croak(f'Expecting punctuation: "{ch}"')

    def skip_kw(self, kw: str) -> None:
        if self.is_kw(kw):
            self.tokens.next()
        else:
            self.croak(f'Expecting keyword: "{kw}"')

    def unexpected(self, tok: Optional[Token] = None) -> NoReturn:
        if tok is None:
            tok = self.tokens.peek()
        if tok is None:
            self.croak("Unexpected end of input")
        self.croak(f"Unexpected token: {tok.kind.value} {tok.value!r}", tok)

    # ------------------------
    # Combinators
    # ------------------------
    def delimited(self, start: str, stop: str, separator: str, parser: Callable[[], T]) -> list[T]:
        """Parse `start item (separator item)* stop`, tolerating a trailing separator."""
        items: list[T] = []
        first = True
        self.skip_punc(start)
        while not self.tokens.eof():
            if self.is_punc(stop):
                break
            if first:
                first = False
            else:
                self.skip_punc(separator)
            if self.is_punc(stop):
                break
            items.append(parser())
        self.skip_punc(stop)
        return items

    def maybe_binary(self, left: Node, my_prec: int) -> Node:
        """Fold operators binding tighter than `my_prec` onto `left`.

        Only a strictly greater precedence recurses, so runs of the same
        operator group to the left.
        """
        while (tok := self.is_op()) is not None:
            his_prec = PRECEDENCE.get(tok.value)
            if his_prec is None:
                self.croak(f"Unknown operator: {tok.value}", tok)
            if his_prec <= my_prec:
                break
            self.tokens.next()
            right = self.maybe_binary(self.parse_atom(), his_prec)
            if tok.value == "=":
                if not isinstance(left, Var):
                    self.croak(f"Cannot assign to {left!r}", tok)
                left = Assign(left, right)
            else:
                left = Binary(tok.value, left, right)
        return left

    def maybe_call(self, expr: Node) -> Node:
        while self.is_punc("("):
            expr = self.parse_call(expr)
        return expr

    # ------------------------
    # Grammar
    # ------------------------
    def parse_call(self, func: Node) -> Call:
        return Call(func, tuple(self.delimited("(", ")", ",", self.parse_expression)))

    def parse_varname(self) -> str:
        tok = self.tokens.next()
        if tok is None or tok.kind is not TokenKind.IDENTIFIER:
            self.croak("Expecting variable name", tok)
        return tok.value

    def parse_if(self) -> If:
        self.skip_kw("if")
        cond = self.parse_expression()
        if not self.is_punc("{"):
            self.skip_kw("then")
        then = self.parse_expression()
        else_: Optional[Node] = None
        if self.is_kw("else"):
            self.tokens.next()
            else_ = self.parse_expression()
        return If(cond, then, else_)

    def parse_lambda(self) -> Lambda:
        self.tokens.next()  # lambda / λ
        name: Optional[str] = None
        tok = self.tokens.peek()
        if tok is not None and tok.kind is TokenKind.IDENTIFIER:
            name = self.parse_varname()
        params = tuple(self.delimited("(", ")", ",", self.parse_varname))
        return Lambda(params, self.parse_expression(), name)

    def parse_vardef(self) -> LetBinding:
        name = self.parse_varname()
        init: Optional[Node] = None
        if self.is_op("="):
            self.tokens.next()
            init = self.parse_expression()
        return LetBinding(name, init)

    def parse_let(self) -> Let:
        self.skip_kw("let")
        bindings = tuple(self.delimited("(", ")", ",", self.parse_vardef))
        return Let(bindings, self.parse_expression())

    def parse_bool(self) -> Bool:
        return Bool(self.tokens.next().value == "true")

    def parse_prog(self) -> Node:
        prog = self.delimited("{", "}", ";", self.parse_expression)
        if not prog:
            return FALSE
        if len(prog) == 1:
            return prog[0]
        return Prog(tuple(prog))

    def parse_atom(self) -> Node:
        return self.maybe_call(self._parse_atom())

    def _parse_atom(self) -> Node:
        if self.is_punc("("):
            self.tokens.next()
            expr = self.parse_expression()
            self.skip_punc(")")
            return expr
        if self.is_punc("{"):
            return self.parse_prog()
        if self.is_kw("if"):
            return self.parse_if()
        if self.is_kw("let"):
            return self.parse_let()
        if self.is_kw("true") or self.is_kw("false"):
            return self.parse_bool()
        if self.is_kw("lambda") or self.is_kw("λ"):
            return self.parse_lambda()
        tok = self.tokens.peek()
        if tok is None:
            self.unexpected()
        match tok.kind:
            case TokenKind.IDENTIFIER:
                self.tokens.next()
                return Var(tok.value)
            case TokenKind.NUMBER:
                self.tokens.next()
                return Num(tok.value)
            case TokenKind.STRING:
                self.tokens.next()
                return Str(tok.value)
        self.unexpected(tok)

    def parse_expression(self) -> Node:
        return self.maybe_call(self.maybe_binary(self.parse_atom(), 0))

    def parse_toplevel(self) -> Prog:
        prog: list[Node] = []
        while not self.tokens.eof():
            prog.append(self.parse_expression())
            if not self.tokens.eof():
                self.skip_punc(";")
        return Prog(tuple(prog))


def parse(source: Union[str, InputStream, Lexer]) -> Prog:
    """Parse a whole program from source text, an InputStream, or a Lexer."""
    tokens = source if isinstance(source, Lexer) else lex(source)
    return Parser(tokens).parse()

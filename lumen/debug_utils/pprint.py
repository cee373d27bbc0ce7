"""Rendering of Lumen values and AST nodes back to readable text."""

import math
from decimal import Decimal

from lumen import LumenValue
from lumen.types.nodes import (
    Assign,
    Binary,
    Bool,
    Call,
    If,
    Lambda,
    Let,
    Node,
    Num,
    Prog,
    Str,
    Var,
)
from lumen.reader.parser import PRECEDENCE


def positional(x: float) -> str:
    """Shortest round-tripping digits of a finite float, never in exponent form."""
    return format(Decimal(repr(x)), "f")


def format_number(x: int | float) -> str:
    if isinstance(x, float):
        if not math.isfinite(x):
            return str(x)
        if x.is_integer():
            return str(int(x))
        return positional(x)
    return str(x)


def format_literal(x: int | float) -> str:
    """Number literal source; floats keep a dot so they lex back as floats."""
    if not isinstance(x, float):
        return str(x)
    if not math.isfinite(x):
        raise ValueError(f"{x} has no Lumen literal form")
    text = positional(x)
    return text if "." in text else text + ".0"


def format_value(value: LumenValue) -> str:
    """Display form used by the print builtins."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return value
    return str(value)


def quote_string(s: str) -> str:
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _operand(node: Node, parent_prec: int, right: bool) -> str:
    text = format_node(node)
    if isinstance(node, (Binary, Assign)):
        prec = PRECEDENCE[node.operator]
        # Same-precedence operands group left, so a right one needs parens
        if prec < parent_prec or (right and prec == parent_prec):
            return f"({text})"
    elif isinstance(node, (If, Lambda, Let)):
        return f"({text})"
    return text


def format_node(node: Node) -> str:
    """Render an AST as Lumen source.

    Nested expressions re-parse to the same tree. Sequences are always
    written as blocks, so a top-level Prog comes back wrapped in braces.
    Floats are written without an exponent; inf and nan have no literal
    form and raise ValueError.
    """
    match node:
        case Num(value):
            return format_literal(value)
        case Str(value):
            return quote_string(value)
        case Bool(value):
            return "true" if value else "false"
        case Var(name):
            return name
        case Assign(left, right):
            return f"{format_node(left)} = {_operand(right, 1, False)}"
        case Binary(op, left, right):
            prec = PRECEDENCE[op]
            return f"{_operand(left, prec, False)} {op} {_operand(right, prec, True)}"
        case If(cond, then, else_):
            text = f"if {format_node(cond)} then {format_node(then)}"
            if else_ is not None:
                text += f" else {format_node(else_)}"
            return text
        case Lambda(params, body, name):
            head = f"lambda {name}" if name else "lambda "
            return f"{head}({', '.join(params)}) {format_node(body)}"
        case Call(func, args):
            callee = format_node(func)
            if not isinstance(func, (Var, Call)):
                callee = f"({callee})"
            return f"{callee}({', '.join(format_node(a) for a in args)})"
        case Prog(prog):
            return "{ " + "; ".join(format_node(e) for e in prog) + " }"
        case Let(bindings, body):
            parts = [
                b.name if b.init is None else f"{b.name} = {format_node(b.init)}"
                for b in bindings
            ]
            return f"let ({', '.join(parts)}) {format_node(body)}"
    raise TypeError(f"Not a Lumen AST node: {node!r}")

"""Core tree-walking evaluator for Lumen.

Matches on the closed set of AST node types. Literals and variable reads are
handled inline; compound constructs are delegated to the handlers in
`lumen.evaluation.special_forms`, which recurse back through `evaluate`.
"""

from __future__ import annotations

from lumen import LumenValue
from lumen.errors import LumenTypeError
from lumen.types.environment import Environment
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
from lumen.evaluation.special_forms import (
    binary_form,
    call_form,
    if_form,
    lambda_form,
    let_form,
    progn_form,
    set_form,
)


def evaluate(node: Node, env: Environment) -> LumenValue:
    """Evaluate `node` in `env` and return its value."""
    match node:
        case Num(value) | Str(value) | Bool(value):
            return value
        case Var(name):
            return env.get(name)
        case Assign():
            return set_form(node, env, evaluate)
        case Binary():
            return binary_form(node, env, evaluate)
        case If():
            return if_form(node, env, evaluate)
        case Lambda():
            return lambda_form(node, env, evaluate)
        case Call():
            return call_form(node, env, evaluate)
        case Prog():
            return progn_form(node, env, evaluate)
        case Let():
            return let_form(node, env, evaluate)
    raise LumenTypeError(f"I don't know how to evaluate {node!r}")

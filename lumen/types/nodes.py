"""AST node variants for Lumen.

The node set is closed: the evaluator matches on exactly these classes.
Nodes are frozen and hold tuples rather than lists so a parsed tree can be
shared by every closure created from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Num:
    value: Union[int, float]


@dataclass(frozen=True)
class Str:
    value: str


@dataclass(frozen=True)
class Bool:
    value: bool


@dataclass(frozen=True)
class Var:
    name: str


@dataclass(frozen=True)
class Assign:
    left: Node
    right: Node
    operator: str = "="


@dataclass(frozen=True)
class Binary:
    operator: str
    left: Node
    right: Node


@dataclass(frozen=True)
class If:
    cond: Node
    then: Node
    else_: Optional[Node] = None


@dataclass(frozen=True)
class Lambda:
    params: tuple[str, ...]
    body: Node
    name: Optional[str] = None


@dataclass(frozen=True)
class Call:
    func: Node
    args: tuple[Node, ...]


@dataclass(frozen=True)
class Prog:
    prog: tuple[Node, ...]


@dataclass(frozen=True)
class LetBinding:
    name: str
    init: Optional[Node] = None


@dataclass(frozen=True)
class Let:
    bindings: tuple[LetBinding, ...]
    body: Node


Node = Union[Num, Str, Bool, Var, Assign, Binary, If, Lambda, Call, Prog, Let]

# The literal produced for empty blocks and missing branches
FALSE = Bool(False)

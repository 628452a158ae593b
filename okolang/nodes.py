"""Syntax tree node definitions for oko.

The tree is a closed hierarchy of frozen dataclasses rooted at a single
:class:`StatementSequence`. It is built once by the parser and never mutated
by evaluation. A :class:`FunctionDeclare` body is the same object stored in
every function record created from it; calls never copy it.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass, field
from typing import Optional, Union

DEFINE = ":="
ASSIGN = "="


@dataclass(frozen=True)
class Node:
    """Base class; `line` is the source line the construct started on."""
    line: int = field(default=0, kw_only=True, compare=False)


@dataclass(frozen=True)
class StatementSequence(Node):
    nodes: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Import(Node):
    module_name: str


@dataclass(frozen=True)
class VariableAssign(Node):
    """`op` is ':=', '=' or one of the compound forms '+=', '-=', '*=', '/='."""
    name: str
    op: str
    expr: Node


@dataclass(frozen=True)
class BinaryExpr(Node):
    op: str
    left: Node
    right: Node


@dataclass(frozen=True)
class UnaryExpr(Node):
    op: str
    operand: Node


@dataclass(frozen=True)
class IntLiteral(Node):
    """Unsigned 64-bit literal value, reinterpreted as signed on evaluation."""
    value: int


@dataclass(frozen=True)
class FloatLiteral(Node):
    value: float


@dataclass(frozen=True)
class StringLiteral(Node):
    value: str


@dataclass(frozen=True)
class VariableRef(Node):
    name: str


@dataclass(frozen=True)
class FunctionCall(Node):
    name: str
    args: tuple[Node, ...] = ()


@dataclass(frozen=True)
class ModuleAccess(Node):
    module_name: str
    call: FunctionCall


@dataclass(frozen=True)
class ArrayLiteral(Node):
    elements: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Return(Node):
    expr: Optional[Node] = None


@dataclass(frozen=True)
class FunctionDeclare(Node):
    name: str
    params: tuple[str, ...]
    body: StatementSequence


@dataclass(frozen=True)
class ExpressionStatement(Node):
    expr: Node


@dataclass(frozen=True)
class If(Node):
    """`else_node` is a nested If for `elif`, a bare block for `else`, or None."""
    condition: Node
    then_block: StatementSequence
    else_node: Optional[Union["If", StatementSequence]] = None


@dataclass(frozen=True)
class While(Node):
    condition: Node
    body: StatementSequence


@dataclass(frozen=True)
class For(Node):
    element_name: str
    array_expr: Node
    body: StatementSequence

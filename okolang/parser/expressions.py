"""
Expression parsing utilities for oko.

These functions operate on a `okolang.parser.parser.Parser` instance and
implement precedence climbing: a primary expression is read first, then
binary operators are folded into it for as long as their precedence is at
least the current floor. The right operand is parsed with the operator's own
precedence as the new floor, so chains of equal precedence group to the
right: `1 - 2 - 3` is `1 - (2 - 3)`.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from okolang.nodes import (
    ArrayLiteral,
    BinaryExpr,
    FloatLiteral,
    FunctionCall,
    IntLiteral,
    ModuleAccess,
    Node,
    StringLiteral,
    UnaryExpr,
    VariableRef,
)
from okolang.operations import Op
from okolang.tokens import TokenType

if TYPE_CHECKING:
    from okolang.parser import Parser


UNARY_OPERATORS = (Op.NOT, Op.SUB)
UNARY_PRECEDENCE = 9

PRECEDENCE = {
    Op.OR: 1,
    Op.AND: 2,

    Op.NE: 3,
    Op.EQ: 3,
    Op.GT: 3,
    Op.LT: 3,
    Op.GE: 3,
    Op.LE: 3,

    Op.ADD: 5,
    Op.SUB: 5,
    Op.MUL: 6,
    Op.DIV: 6,
    Op.MOD: 6,

    Op.POW: 7,
}


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> Node:
    """Parse a unary application, literal, variable, call or parenthesized group."""
    stream = parser.stream
    tok = stream.peek()
    if tok is None:
        stream.error("End of token stream while parsing primary expression")

    if tok.type is TokenType.OPERATOR and tok.value in UNARY_OPERATORS:
        stream.next()
        operand = parser.expr(UNARY_PRECEDENCE)
        return UnaryExpr(tok.value, operand, line=tok.line)

    if tok.type is TokenType.LBRACKET:
        return parser.array_literal()

    if tok.type is TokenType.INTEGER:
        stream.next()
        return IntLiteral(tok.value, line=tok.line)

    if tok.type is TokenType.FLOAT:
        stream.next()
        return FloatLiteral(tok.value, line=tok.line)

    if tok.type is TokenType.STRING:
        stream.next()
        return StringLiteral(tok.value, line=tok.line)

    if tok.type is TokenType.IDENTIFIER:
        after = stream.lookahead(1)
        if after is not None and after.type is TokenType.LPAREN:
            return parser.function_call()
        if after is not None and after.type is TokenType.NAMESPACE:
            return parser.module_access()
        stream.next()
        return VariableRef(tok.value, line=tok.line)

    if tok.type is TokenType.LPAREN:
        stream.next()
        node = parser.expr()
        stream.expect(TokenType.RPAREN)
        return node

    stream.error(f"Invalid syntax while parsing primary expression: unexpected {tok.describe()}")


def parse_array_literal(parser: 'Parser') -> ArrayLiteral:
    """Parse `[a, b, c]`; separating commas are optional."""
    stream = parser.stream
    start = stream.expect(TokenType.LBRACKET)
    elements = []
    while True:
        tok = stream.peek()
        if tok is None or tok.type is TokenType.RBRACKET:
            break
        elements.append(parser.expr())
        stream.maybe(TokenType.COMMA)
    stream.expect(TokenType.RBRACKET)
    return ArrayLiteral(tuple(elements), line=start.line)


def parse_call_args(parser: 'Parser') -> tuple[Node, ...]:
    """Parse a parenthesized argument list; a trailing comma is tolerated."""
    stream = parser.stream
    stream.expect(TokenType.LPAREN)
    args = []
    while True:
        tok = stream.peek()
        if tok is None or tok.type is TokenType.RPAREN:
            break
        args.append(parser.expr())
        stream.maybe(TokenType.COMMA)
    stream.expect(TokenType.RPAREN)
    return tuple(args)


def parse_function_call(parser: 'Parser') -> FunctionCall:
    """Parse `name(args)`."""
    name_tok = parser.stream.expect(TokenType.IDENTIFIER)
    args = parse_call_args(parser)
    return FunctionCall(name_tok.value, args, line=name_tok.line)


def parse_module_access(parser: 'Parser') -> ModuleAccess:
    """Parse `module::member(args)`; the `::` itself is optional."""
    stream = parser.stream
    module_tok = stream.expect(TokenType.IDENTIFIER)
    stream.maybe(TokenType.NAMESPACE)
    call = parser.function_call()
    return ModuleAccess(module_tok.value, call, line=module_tok.line)


# ---- Entry point ----

def parse_expr_prec(parser: 'Parser', min_precedence: int) -> Node:
    """Parse an expression whose binary operators all bind at `min_precedence` or tighter."""
    stream = parser.stream
    left = parser.primary()

    while True:
        tok = stream.peek()
        if tok is None or tok.type is not TokenType.OPERATOR:
            break
        precedence = PRECEDENCE.get(tok.value)
        if precedence is None or precedence < min_precedence:
            break
        stream.next()

        right = parser.expr(precedence)
        left = BinaryExpr(tok.value, left, right, line=tok.line)

    return left

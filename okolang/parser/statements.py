"""Statement parsing utilities for oko.

These functions operate on a `okolang.parser.parser.Parser` instance and
handle the various statement forms in the language such as blocks,
conditionals, loops, and function definitions.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import TYPE_CHECKING, Optional

from okolang.nodes import (
    ASSIGN,
    DEFINE,
    ExpressionStatement,
    For,
    FunctionDeclare,
    If,
    Import,
    Node,
    Return,
    StatementSequence,
    VariableAssign,
    While,
)
from okolang.tokens import TokenType

if TYPE_CHECKING:
    from okolang.parser import Parser

logger = logging.getLogger("okolang.parser")

ASSIGNMENT_TOKENS = (TokenType.DEFINE, TokenType.ASSIGN, TokenType.ASSIGN_OP)

EXPRESSION_START_TOKENS = (
    TokenType.LPAREN,
    TokenType.INTEGER,
    TokenType.FLOAT,
    TokenType.STRING,
    TokenType.IDENTIFIER,
    TokenType.OPERATOR,
)


def parse_statement_sequence(parser: 'Parser') -> StatementSequence:
    """
    Parse statements until a closing brace or the end of the stream.

    The closing brace itself is left for the caller.

    Args:
        parser: The parser instance.

    Returns:
        StatementSequence: the parsed statements in source order.
    """
    stream = parser.stream
    first = stream.peek()
    nodes = []
    while True:
        tok = stream.peek()
        if tok is None or tok.type is TokenType.RBRACE:
            break
        nodes.append(parser.statement())
    return StatementSequence(tuple(nodes), line=first.line if first else stream.last_line)


def parse_block(parser: 'Parser') -> StatementSequence:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }
    """
    parser.stream.expect(TokenType.LBRACE)
    block = parser.statement_sequence()
    parser.stream.expect(TokenType.RBRACE)
    return block


def parse_condition(parser: 'Parser') -> Node:
    """
    Parse a parenthesized expression.

    Syntax:
        ( <expression> )
    """
    parser.stream.expect(TokenType.LPAREN)
    expr = parser.expr()
    parser.stream.expect(TokenType.RPAREN)
    return expr


def parse_statement(parser: 'Parser') -> Node:
    """
    Parse a single statement, dispatching on the current token.

    Args:
        parser: The parser instance.

    Returns:
        Node: the statement node.
    """
    stream = parser.stream
    tok = stream.peek()
    if tok is None:
        stream.error("End of token stream while parsing statement")

    logger.debug("Parsing statement at %r", tok)

    if tok.type is TokenType.KEYWORD:
        match tok.value:
            case "if":
                return parser.parse_if()
            case "while":
                return parser.parse_while()
            case "for":
                return parser.parse_for()
            case "fun":
                return parser.parse_func_def()
            case "return":
                return parser.parse_return()
            case "import":
                return parser.parse_import()
        stream.error(f"'{tok.value}' is not preceded by an if statement")

    if tok.type is TokenType.IDENTIFIER:
        after = stream.lookahead(1)
        if after is not None and after.type in ASSIGNMENT_TOKENS:
            return parser.parse_assignment()

    if tok.type in EXPRESSION_START_TOKENS:
        return parser.parse_expression_statement()

    stream.error(f"Invalid syntax: unexpected {tok.describe()} at start of statement")


def parse_if(parser: 'Parser') -> If:
    """
    Parse a conditional 'if' statement with optional elif and else blocks.

    An `elif` becomes a nested If in the else position of its predecessor.

    Syntax:
        if (<condition>) { <block> }
        elif (<condition>) { <block> }
        else { <block> }
    """
    stream = parser.stream
    tok = stream.peek()
    stream.maybe(TokenType.KEYWORD, "if")
    condition = parser.condition()
    then_block = parser.block()

    else_node: Optional[Node] = None
    if stream.maybe(TokenType.KEYWORD, "elif"):
        else_node = parser.parse_if()
    elif stream.maybe(TokenType.KEYWORD, "else"):
        else_node = parser.block()

    return If(condition, then_block, else_node, line=tok.line)


def parse_while(parser: 'Parser') -> While:
    """
    Parse a 'while' loop.

    Syntax:
        while (<condition>) { <block> }
    """
    tok = parser.stream.peek()
    parser.stream.maybe(TokenType.KEYWORD, "while")
    condition = parser.condition()
    body = parser.block()
    return While(condition, body, line=tok.line)


def parse_for(parser: 'Parser') -> For:
    """
    Parse a 'for' loop binding each array element in turn.

    Syntax:
        for (<identifier>) (<expression>) { <block> }
    """
    stream = parser.stream
    tok = stream.peek()
    stream.maybe(TokenType.KEYWORD, "for")
    stream.expect(TokenType.LPAREN)
    elem_tok = stream.pop()
    if elem_tok is None:
        stream.error("End of token stream while parsing for loop")
    if elem_tok.type is not TokenType.IDENTIFIER:
        stream.error(f"Expected identifier for element name, but got {elem_tok.describe()}")
    stream.expect(TokenType.RPAREN)

    array = parser.condition()
    body = parser.block()
    return For(elem_tok.value, array, body, line=tok.line)


def parse_func_def(parser: 'Parser') -> FunctionDeclare:
    """
    Parse a function definition.

    Syntax:
        fun <name>(<params>) { <block> }
    """
    stream = parser.stream
    stream.maybe(TokenType.KEYWORD, "fun")
    name_tok = stream.expect(TokenType.IDENTIFIER)

    stream.expect(TokenType.LPAREN)
    params = []
    while True:
        tok = stream.peek()
        if tok is None:
            stream.error("End of token stream while parsing function parameters")
        if tok.type is TokenType.RPAREN:
            break
        if tok.type is not TokenType.IDENTIFIER:
            stream.error(f"Expected identifier or ')', but got {tok.describe()}")
        stream.next()
        stream.maybe(TokenType.COMMA)
        params.append(tok.value)
    stream.expect(TokenType.RPAREN)

    body = parser.block()
    return FunctionDeclare(name_tok.value, tuple(params), body, line=name_tok.line)


def parse_return(parser: 'Parser') -> Return:
    """
    Parse a 'return' statement; the expression is optional.

    Syntax:
        return [<expression>];
    """
    stream = parser.stream
    tok = stream.peek()
    stream.maybe(TokenType.KEYWORD, "return")
    after = stream.peek()
    if after is None:
        stream.error("End of token stream while parsing return statement")

    expr = None if after.type is TokenType.END else parser.expr()
    stream.expect(TokenType.END)
    return Return(expr, line=tok.line)


def parse_import(parser: 'Parser') -> Import:
    """
    Parse an import statement.

    Syntax:
        import <identifier>;
    """
    stream = parser.stream
    stream.maybe(TokenType.KEYWORD, "import")
    mod_tok = stream.pop()
    if mod_tok is None:
        stream.error("End of token stream while parsing module import")
    if mod_tok.type is not TokenType.IDENTIFIER:
        stream.error(f"Expected import identifier, but got {mod_tok.describe()}")
    stream.expect(TokenType.END)
    return Import(mod_tok.value, line=mod_tok.line)


def parse_assignment(parser: 'Parser') -> VariableAssign:
    """
    Parse a definition, reassignment or compound assignment.

    Syntax:
        <identifier> := <expression>;
        <identifier> = <expression>;
        <identifier> (+= | -= | *= | /=) <expression>;
    """
    stream = parser.stream
    name_tok = stream.expect(TokenType.IDENTIFIER)
    op_tok = stream.pop()
    if op_tok is None:
        stream.error("End of token stream while parsing variable assignment")

    if op_tok.type is TokenType.DEFINE:
        op = DEFINE
    elif op_tok.type is TokenType.ASSIGN:
        op = ASSIGN
    elif op_tok.type is TokenType.ASSIGN_OP:
        op = op_tok.value
    else:
        stream.error(f"Expected assignment operator, but got {op_tok.describe()}")

    expr = parser.expr()
    stream.expect(TokenType.END)
    return VariableAssign(name_tok.value, op, expr, line=name_tok.line)


def parse_expression_statement(parser: 'Parser') -> ExpressionStatement:
    """
    Parse an expression evaluated only for its side effects.

    Syntax:
        <expression>;
    """
    expr = parser.expr()
    parser.stream.expect(TokenType.END)
    return ExpressionStatement(expr, line=expr.line)

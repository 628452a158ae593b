"""
Main parser entry point for oko.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process over a single :class:`TokenStream`. The actual
parsing routines are split across `okolang.parser.expressions` and
`okolang.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from okolang.nodes import (
    ArrayLiteral,
    FunctionCall,
    FunctionDeclare,
    If,
    Import,
    ModuleAccess,
    Node,
    Return,
    StatementSequence,
    VariableAssign,
    While,
    For,
    ExpressionStatement,
)
from okolang.stream import TokenStream
from okolang.tokens import Token

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """oko parser."""

    def __init__(self, tokens: list[Token], file: str = "<stdin>"):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances.
            file (str): The name of the script.
        """
        self.stream = TokenStream(tokens, file)
        self.source_file = file


    # Expression wrappers
    def primary(self) -> Node:
        """
        Parse a unary application, literal, variable, call or parenthesized group.
        """
        return _expr.parse_primary(self)

    def expr(self, min_precedence: int = 0) -> Node:
        """
        Parse a full expression, binding operators at or above `min_precedence`.
        """
        return _expr.parse_expr_prec(self, min_precedence)

    def array_literal(self) -> ArrayLiteral:
        """
        Parse a bracketed, comma-separated array literal.
        """
        return _expr.parse_array_literal(self)

    def function_call(self) -> FunctionCall:
        """
        Parse a call of a named function.
        """
        return _expr.parse_function_call(self)

    def module_access(self) -> ModuleAccess:
        """
        Parse a call of a module member such as `io::println(x)`.
        """
        return _expr.parse_module_access(self)


    # Statement wrappers
    def statement_sequence(self) -> StatementSequence:
        """
        Parse statements until a closing brace or the end of the stream.
        """
        return _stmt.parse_statement_sequence(self)

    def block(self) -> StatementSequence:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def condition(self) -> Node:
        """
        Parse a parenthesized condition.
        """
        return _stmt.parse_condition(self)

    def statement(self) -> Node:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_if(self) -> If:
        """
        Parse an 'if' conditional statement with its elif/else chain.
        """
        return _stmt.parse_if(self)

    def parse_while(self) -> While:
        """
        Parse a 'while' loop.
        """
        return _stmt.parse_while(self)

    def parse_for(self) -> For:
        """
        Parse a 'for' loop over an array.
        """
        return _stmt.parse_for(self)

    def parse_func_def(self) -> FunctionDeclare:
        """
        Parse a function definition statement.
        """
        return _stmt.parse_func_def(self)

    def parse_return(self) -> Return:
        """
        Parse a 'return' statement from within a function.
        """
        return _stmt.parse_return(self)

    def parse_import(self) -> Import:
        """
        Parse an 'import' statement.
        """
        return _stmt.parse_import(self)

    def parse_assignment(self) -> VariableAssign:
        """
        Parse a definition, reassignment or compound assignment.
        """
        return _stmt.parse_assignment(self)

    def parse_expression_statement(self) -> ExpressionStatement:
        """
        Parse an expression evaluated for its side effects.
        """
        return _stmt.parse_expression_statement(self)


    def parse(self) -> StatementSequence:
        """
        Parse the full input into the program's statement sequence.

        Raises:
            ParseException: On any syntax error, including nesting deeper
                than the host recursion limit allows.
        """
        try:
            program = self.statement_sequence()
        except RecursionError:
            self.stream.error("Maximum nesting depth exceeded while parsing")
        if self.stream.has():
            self.stream.error(
                f"Unexpected {self.stream.peek().describe()} outside of any block"
            )
        return program

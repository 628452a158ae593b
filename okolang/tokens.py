"""Token definitions for oko.

Every token produced by the lexer carries a :class:`TokenType`, an optional
payload (operator text, literal value, identifier or keyword name) and the
1-based source line it was read from. Two tokens compare equal when their
type and payload match; the line is diagnostic metadata only.


File: tokens.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class TokenType(str, Enum):
    """
    Enumeration of token classes.
    """

    OPERATOR = "operator"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    IDENTIFIER = "identifier"
    KEYWORD = "keyword"

    END = "end_of_statement"     # ;
    COMMA = "comma"              # ,
    DEFINE = "define"            # :=
    ASSIGN = "assign"            # =
    ASSIGN_OP = "assign_op"      # += -= *= /=
    NAMESPACE = "namespace"      # ::

    LPAREN = "paren_open"
    RPAREN = "paren_close"
    LBRACE = "curly_open"
    RBRACE = "curly_close"
    LBRACKET = "bracket_open"
    RBRACKET = "bracket_close"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


# Source text for payload-less token types, used in diagnostics.
TOKEN_LITERALS = {
    TokenType.END: ";",
    TokenType.COMMA: ",",
    TokenType.DEFINE: ":=",
    TokenType.ASSIGN: "=",
    TokenType.NAMESPACE: "::",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.LBRACE: "{",
    TokenType.RBRACE: "}",
    TokenType.LBRACKET: "[",
    TokenType.RBRACKET: "]",
}


class Token:
    """
    Represents a lexical token with a type, an optional value and a line.
    """
    __slots__ = ("type", "value", "line")

    def __init__(self, type_: TokenType, value=None, line: int = 1):
        """
        Initialize a new token.

        Parameters:
            type_ (TokenType): The token type.
            value (Any): The token payload, or None for punctuation.
            line (int): The 1-based source line.
        """
        object.__setattr__(self, "type", type_)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "line", line)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def matches(self, type_: TokenType, value=None) -> bool:
        """
        Structural comparison against a token class and optional payload.
        """
        if self.type != type_:
            return False
        return value is None or self.value == value

    def describe(self) -> str:
        """
        Return a short human-readable rendering for error messages.
        """
        if self.value is None:
            return f"'{TOKEN_LITERALS.get(self.type, self.type.value)}'"
        return f"{self.type.value} '{self.value}'"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (
            self.type == other.type
            and type(self.value) is type(other.value)
            and self.value == other.value
        )

    def __hash__(self) -> int:
        return hash((self.type, self.value))

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, line={self.line})"

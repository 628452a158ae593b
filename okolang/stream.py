"""Token stream.

A sequential cursor over the token list produced by the lexer. The parser
owns exactly one stream and threads it through every parsing routine.
Exhaustion is signalled by ``None``; only :meth:`TokenStream.expect` and
:meth:`TokenStream.error` turn it into a failure.


File: stream.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import NoReturn, Optional

from okolang.exceptions import ParseException
from okolang.tokens import TOKEN_LITERALS, Token, TokenType


class TokenStream:
    """
    Cursor over an immutable token sequence.
    """
    def __init__(self, tokens: list[Token], file: Optional[str] = None):
        """
        Initialize the stream at the first token.

        Parameters:
            tokens (list): A list of Token instances.
            file (str): The name of the script, used in diagnostics.
        """
        self.tokens = tuple(tokens)
        self.index = 0
        self.source_file = file
        self.last_line = tokens[0].line if tokens else 1

    def has(self) -> bool:
        """
        True while tokens remain.
        """
        return self.index < len(self.tokens)

    def peek(self) -> Optional[Token]:
        """
        Return the current token without consuming it.
        """
        if not self.has():
            return None
        return self.tokens[self.index]

    def lookahead(self, offset: int) -> Optional[Token]:
        """
        Return the token `offset` positions past the cursor, if any.
        """
        position = self.index + offset
        if 0 <= position < len(self.tokens):
            return self.tokens[position]
        return None

    def next(self) -> None:
        """
        Advance past the current token.
        """
        if self.has():
            self.last_line = self.tokens[self.index].line
        self.index += 1

    def pop(self) -> Optional[Token]:
        """
        Consume and return the current token.
        """
        token = self.peek()
        if token is not None:
            self.next()
        return token

    def maybe(self, type_: TokenType, value=None) -> bool:
        """
        Consume the current token only if it matches `type_` (and `value`).
        """
        token = self.peek()
        if token is not None and token.matches(type_, value):
            self.next()
            return True
        return False

    def expect(self, type_: TokenType, value=None) -> Token:
        """
        Consume the current token, failing if it does not match.

        Raises:
            ParseException: If the stream is exhausted or the token differs.
        """
        wanted = value if value is not None else TOKEN_LITERALS.get(type_, type_.value)
        token = self.pop()
        if token is None:
            self.error(f"Expected '{wanted}', but reached the end of the token stream")
        if not token.matches(type_, value):
            self.error(f"Expected '{wanted}', but got {token.describe()}")
        return token

    def error(self, message: str) -> NoReturn:
        """
        Raise a parse error at the most recently consumed line.
        """
        raise ParseException(message, self.last_line, self.source_file)

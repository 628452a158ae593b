"""
Lexer.

This is a character-classification lexer that performs a single pass over the
source code and produces a flat list of tokens.

1. Character Categories
Every character falls into one category: alphabetic, numeric (digits and '.'),
quote, one of the six bracket characters, generic symbol, or whitespace. A
token boundary is emitted whenever the category changes. Bracket characters
are always a token of their own, so `))` yields two tokens.

2. Classification
When a buffer is flushed its category decides the token: alphabetic text is a
keyword or an identifier, numeric text is an unsigned 64-bit integer or else a
float, and symbol runs are matched against the assignment forms, punctuation
and the fixed operator set. Whitespace never produces tokens.

3. Strings
A quote opens a string literal; boundary detection is suspended until the
matching unescaped quote. The escape sequences \\n, \\e, \\t and \\" are
substituted in the literal text.

4. Comments
A `//` ending a symbol run discards everything up to the next newline.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from enum import Enum, auto

from okolang.exceptions import LexException
from okolang.operations import Op
from okolang.tokens import Token, TokenType

logger = logging.getLogger("okolang.lexer")

KEYWORDS = frozenset({
    "fun",
    "while",
    "if",
    "elif",
    "else",
    "import",
    "for",
    "return",
})

OPERATORS = frozenset({
    Op.ADD, Op.SUB, Op.MUL, Op.DIV, Op.MOD, Op.POW, Op.NOT,
    Op.GT, Op.LT, Op.GE, Op.LE,
    Op.AND, Op.OR, Op.EQ,
})

ASSIGN_OPERATORS = frozenset({"+=", "-=", "*=", "/="})

ESCAPE_SEQUENCES = (
    ("\\n", "\n"),
    ("\\e", "\x1b"),
    ("\\t", "\t"),
    ('\\"', '"'),
)

U64_MAX = 2 ** 64 - 1


class CharType(Enum):
    """
    Lexer state: the category of the previously read character.
    """
    INVALID = auto()
    ALPHA = auto()
    NUM = auto()
    QUOTE = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    SYMBOL = auto()
    FORMAT = auto()


BRACKET_TOKENS = {
    CharType.LPAREN: TokenType.LPAREN,
    CharType.RPAREN: TokenType.RPAREN,
    CharType.LBRACE: TokenType.LBRACE,
    CharType.RBRACE: TokenType.RBRACE,
    CharType.LBRACKET: TokenType.LBRACKET,
    CharType.RBRACKET: TokenType.RBRACKET,
}

_BRACKET_CHARS = {
    "(": CharType.LPAREN,
    ")": CharType.RPAREN,
    "{": CharType.LBRACE,
    "}": CharType.RBRACE,
    "[": CharType.LBRACKET,
    "]": CharType.RBRACKET,
}

_SYMBOL_TOKENS = {
    "=": TokenType.ASSIGN,
    ":=": TokenType.DEFINE,
    ",": TokenType.COMMA,
    ";": TokenType.END,
    "::": TokenType.NAMESPACE,
}


def char_type(char: str) -> CharType:
    """
    Classify a single character.
    """
    if char.isalpha() or char == "_":
        return CharType.ALPHA
    if char.isnumeric() or char == ".":
        return CharType.NUM
    if char == '"':
        return CharType.QUOTE
    if char in _BRACKET_CHARS:
        return _BRACKET_CHARS[char]
    if char.isspace():
        return CharType.FORMAT
    return CharType.SYMBOL


def unescape(text: str) -> str:
    """
    Substitute the supported escape sequences in `text`.
    """
    for sequence, replacement in ESCAPE_SEQUENCES:
        text = text.replace(sequence, replacement)
    return text


def _closes_string(buffer: list[str]) -> bool:
    """
    True if the quote just appended to `buffer` is not backslash-escaped.
    """
    backslashes = 0
    for char in reversed(buffer[1:-1]):
        if char != "\\":
            break
        backslashes += 1
    return backslashes % 2 == 0


def _classify(state: CharType, text: str, line: int) -> Token | None:
    """
    Turn a flushed buffer into a token, or None for whitespace.

    Raises:
        LexException: If a numeric or symbol buffer cannot be categorized.
    """
    if state in (CharType.INVALID, CharType.FORMAT) or not text:
        return None

    if state is CharType.ALPHA:
        if text in KEYWORDS:
            return Token(TokenType.KEYWORD, text, line)
        return Token(TokenType.IDENTIFIER, text, line)

    if state is CharType.NUM:
        try:
            value = int(text)
            if value <= U64_MAX:
                return Token(TokenType.INTEGER, value, line)
        except ValueError:
            pass
        try:
            return Token(TokenType.FLOAT, float(text), line)
        except ValueError:
            raise LexException(
                f"Token '{text}' looks like a number, but cannot be parsed", line
            ) from None

    if state in BRACKET_TOKENS:
        return Token(BRACKET_TOKENS[state], None, line)

    # Symbol run
    if text in _SYMBOL_TOKENS:
        return Token(_SYMBOL_TOKENS[text], None, line)
    if text in ASSIGN_OPERATORS:
        return Token(TokenType.ASSIGN_OP, text, line)
    if text in OPERATORS:
        return Token(TokenType.OPERATOR, Op(text), line)
    raise LexException(f"Symbol '{text}' cannot be categorized", line)


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances.

    Raises:
        LexException: If a buffer cannot be categorized or a string is left open.
    """
    tokens: list[Token] = []
    buffer: list[str] = []
    last = CharType.INVALID
    line = 1
    start_line = 1
    in_comment = False
    in_string = False

    def flush():
        token = _classify(last, "".join(buffer), start_line)
        if token is not None:
            tokens.append(token)
        buffer.clear()

    for char in code:
        if in_comment:
            if char == "\n":
                in_comment = False
                line += 1
                last = CharType.FORMAT
            continue

        state = char_type(char)

        if in_string:
            buffer.append(char)
            if char == "\n":
                line += 1
            if state is CharType.QUOTE and _closes_string(buffer):
                text = unescape("".join(buffer[1:-1]))
                tokens.append(Token(TokenType.STRING, text, start_line))
                buffer.clear()
                in_string = False
                last = CharType.INVALID
            continue

        if state is not last or last in BRACKET_TOKENS:
            flush()
            start_line = line

        buffer.append(char)
        last = state
        if char == "\n":
            line += 1

        if state is CharType.QUOTE:
            in_string = True
        elif state is CharType.SYMBOL and buffer[-2:] == ["/", "/"]:
            del buffer[-2:]
            flush()
            in_comment = True
            last = CharType.INVALID

    if in_string:
        raise LexException("Unterminated string literal", start_line)
    flush()

    logger.debug("Tokenized %d tokens over %d lines", len(tokens), line)
    return tokens

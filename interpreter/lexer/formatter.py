"""
Canonical text rendering of tokens.

One line per token, in the golden-output format used by reference tooling:

    LEFT_PAREN ( null
    STRING hello " null
    NUMBER 3.50 3.5
    AND and
    [line 2] Error: Unexpected character: @
    EOF  null
"""

import math
from decimal import Decimal
from typing import Iterable, List

from .tokens import Token, TokenType, FIXED_LEXEMES
from .errors import LexerError, diagnostic_from_token
from .lexer import parse_number


def format_number(value: float) -> str:
    """
    Render a float as its shortest round-trip decimal, never in exponent form.

    Integral values drop the fractional part: 123.0 -> "123", 3.14 -> "3.14",
    1e20 -> "100000000000000000000".
    """
    if not math.isfinite(value):
        return "inf" if value > 0 else ("-inf" if value < 0 else "NaN")

    text = repr(value)
    if 'e' in text or 'E' in text:
        text = format(Decimal(text), 'f')
    if text.endswith('.0'):
        text = text[:-2]
    return text


def format_token(token: Token) -> str:
    """Render a single token in the canonical format."""
    token_type = token.type

    if token.is_error:
        return str(diagnostic_from_token(token))

    if token_type in FIXED_LEXEMES:
        return f"{token_type.name} {FIXED_LEXEMES[token_type]} null"

    if token_type == TokenType.STRING:
        return f'STRING {token.lexeme} " null'

    if token_type == TokenType.NUMBER:
        try:
            value = parse_number(token.lexeme, token.line)
        except LexerError as e:
            return str(e)
        return f"NUMBER {token.lexeme} {format_number(value)}"

    if token_type == TokenType.IDENTIFIER:
        return f"IDENTIFIER {token.lexeme} null"

    if token.is_keyword:
        return f"{token_type.name} {token_type.name.lower()}"

    if token_type == TokenType.EOF:
        return "EOF  null"

    raise ValueError(f"Cannot format token type {token_type.name}")


def format_tokens(tokens: Iterable[Token]) -> List[str]:
    """Render a token sequence, one string per token."""
    return [format_token(token) for token in tokens]

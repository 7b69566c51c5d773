"""
Lox Lexer Package

Implements a single-pass lexical analyzer (scanner) for the Lox scripting
language. The scanner is a total function: every input, however malformed,
yields a token list ending in EOF, with lexical errors embedded as tokens.

Key Features:
- One forward pass with one character of lookahead
- Line tracking for diagnostics
- Error tokens instead of exceptions
- Canonical golden-output rendering
"""

from .tokens import Token, TokenType, KEYWORDS
from .lexer import Lexer, ScanMode, tokenize_string, tokenize_file, parse_number
from .errors import Diagnostic, LexerError
from .formatter import format_token, format_tokens, format_number

__all__ = [
    "Lexer",
    "ScanMode",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "LexerError",
    "tokenize_string",
    "tokenize_file",
    "parse_number",
    "format_token",
    "format_tokens",
    "format_number",
]

"""
Error handling for the Lox lexer.

Lexical problems never abort a scan: they travel through the token stream as
INVALID and UNTERMINATED_STRING tokens. This module turns those tokens into
diagnostics for callers that want to report or count them, and provides the
exception used for the malformed-number condition.
"""

from typing import Optional
from dataclasses import dataclass

from .tokens import Token, TokenType


@dataclass
class Diagnostic:
    """A lexer diagnostic tied to a source line."""
    message: str
    line: int
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    filename: Optional[str] = None

    def __str__(self) -> str:
        return f"[line {self.line}] {self.severity.capitalize()}: {self.message}"

    def describe(self) -> str:
        """Multi-line rendering with location and help text."""
        where = f"{self.filename}:{self.line}" if self.filename else f"line {self.line}"
        result = f"{self.severity.upper()}"
        if self.code:
            result += f"[{self.code}]"
        result += f": {self.message}\n  --> {where}\n"
        if self.help_text:
            result += f"  help: {self.help_text}\n"
        return result


class LexerError(Exception):
    """
    Exception carrying a lexer diagnostic.

    The scanner itself never raises it; it signals conditions detected after
    scanning, such as a number spelling that cannot be parsed.
    """

    def __init__(
        self,
        message: str,
        line: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            severity="error",
            code=code,
            help_text=help_text,
        )

    @property
    def line(self) -> int:
        return self.diagnostic.line

    def __str__(self) -> str:
        return str(self.diagnostic)


ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
    "L003": "Invalid number literal",
}


def create_unexpected_character_diagnostic(char: str, line: int) -> Diagnostic:
    """Create the diagnostic for a character no rule accepts."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return Diagnostic(
        message=f"Unexpected character: {char}",
        line=line,
        severity="error",
        code="L001",
        help_text=help_text,
    )


def create_unterminated_string_diagnostic(line: int) -> Diagnostic:
    """Create the diagnostic for input that ended inside a string literal."""
    return Diagnostic(
        message="Unterminated String",
        line=line,
        severity="error",
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
    )


def create_invalid_number_error(lexeme: str, line: int) -> LexerError:
    """Create an error for a number spelling that does not parse."""
    return LexerError(
        message=f"Invalid number literal: {lexeme}",
        line=line,
        code="L003",
        help_text="Number literals are decimal digits with an optional fraction.",
    )


def diagnostic_from_token(token: Token, filename: Optional[str] = None) -> Diagnostic:
    """
    Build the diagnostic for an error token.

    Raises:
        ValueError: If the token does not report an error
    """
    if token.type == TokenType.INVALID:
        diagnostic = create_unexpected_character_diagnostic(token.lexeme, token.line)
    elif token.type == TokenType.UNTERMINATED_STRING:
        diagnostic = create_unterminated_string_diagnostic(token.line)
    else:
        raise ValueError(f"{token.type.name} token is not an error token")

    diagnostic.filename = filename
    return diagnostic

"""
Lox Lexer - turns source text into a flat list of tokens

One forward pass over the source with a single character of lookahead
(two for the fractional part of numbers). Lexical errors never stop the
scan; they come out as INVALID / UNTERMINATED_STRING tokens so the caller
always gets a complete, EOF-terminated sequence back.
"""

from enum import Enum, auto
from typing import List, Optional

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, TWO_CHAR_OPERATORS,
    UNTERMINATED_STRING_SENTINEL, WHITESPACE
)
from .errors import Diagnostic, create_invalid_number_error, diagnostic_from_token
from ..log import get_logger

logger = get_logger(__name__)


class ScanMode(Enum):
    """Top-level scanner state. The quote character switches between them."""
    NORMAL = auto()
    IN_STRING = auto()


class Lexer:
    """
    Lox lexical analyzer.

    Converts source text into a list of tokens, each tagged with the 1-based
    line it was recognized on.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Full source text
            filename: Name of source file for diagnostics
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.mode = ScanMode.NORMAL
        self.tokens: List[Token] = []

        # Only holds characters while mode is IN_STRING
        self._string_buffer: Optional[List[str]] = None

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens, always ending with exactly one EOF token
        """
        self.pos = 0
        self.line = 1
        self.mode = ScanMode.NORMAL
        self._string_buffer = None
        self.tokens = []

        logger.debug("Scanning %s (%d characters)", self.filename, len(self.source))

        while not self._at_end():
            self._scan_char(self._advance())

        if self.mode is ScanMode.IN_STRING:
            self._add_token(TokenType.UNTERMINATED_STRING, UNTERMINATED_STRING_SENTINEL)
            self._leave_string()

        self._add_token(TokenType.EOF, "")

        logger.debug(
            "Scanned %s: %d tokens, %d errors",
            self.filename, len(self.tokens), len(self.errors),
        )
        return self.tokens

    def _scan_char(self, char: str):
        """Dispatch on one consumed character. First matching rule wins."""
        if char == '\n':
            self.line += 1

        elif char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char], char)

        elif char in TWO_CHAR_OPERATORS:
            single, double = TWO_CHAR_OPERATORS[char]
            if self._match('='):
                self._add_token(double, char + '=')
            else:
                self._add_token(single, char)

        elif char == '"':
            if self.mode is ScanMode.IN_STRING:
                contents = ''.join(self._string_buffer)
                self._add_token(TokenType.STRING, contents, contents)
                self._leave_string()
            else:
                self.mode = ScanMode.IN_STRING
                self._string_buffer = []

        elif char == '/':
            if self._match('/'):
                self._skip_line_comment()
            else:
                self._add_token(TokenType.SLASH, char)

        elif _is_digit(char):
            self._scan_number()

        elif self.mode is ScanMode.IN_STRING:
            self._string_buffer.append(char)

        elif char in WHITESPACE:
            pass

        elif _is_alpha(char):
            self._scan_identifier()

        else:
            logger.debug("Unexpected character %r on line %d", char, self.line)
            self._add_token(TokenType.INVALID, char)

    def _leave_string(self):
        self.mode = ScanMode.NORMAL
        self._string_buffer = None

    def _scan_number(self):
        """Scan digits with an optional '.digits' fraction."""
        start_pos = self.pos - 1

        while _is_digit(self._peek()):
            self._advance()

        # A dot without a digit after it is left for a DOT token
        if self._peek() == '.' and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        lexeme = self.source[start_pos:self.pos]
        # Digits with an optional .digits fraction always parse
        self._add_token(TokenType.NUMBER, lexeme, parse_number(lexeme, self.line))

    def _scan_identifier(self):
        """Scan a maximal identifier run, then check it against the reserved words."""
        start_pos = self.pos - 1

        while _is_identifier_continue(self._peek()):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
        value = lexeme if token_type == TokenType.IDENTIFIER else None

        self._add_token(token_type, lexeme, value)

    def _skip_line_comment(self):
        """Skip up to, but not including, the next newline."""
        while not self._at_end() and self._peek() != '\n':
            self._advance()

    def _add_token(self, token_type: TokenType, lexeme: str, value=None):
        self.tokens.append(Token(token_type, lexeme, value, self.line))

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self.pos]
        self.pos += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it is the expected one."""
        if self._peek() == expected:
            self.pos += 1
            return True
        return False

    def _peek(self) -> str:
        """Current character, or '' at end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return ''

    def _peek_next(self) -> str:
        """Character after the current one, or '' past end of input."""
        if self.pos + 1 < len(self.source):
            return self.source[self.pos + 1]
        return ''

    @property
    def errors(self) -> List[Token]:
        """Error tokens from the last scan, in source order."""
        return [token for token in self.tokens if token.is_error]

    def has_errors(self) -> bool:
        """Check if the last scan produced any error tokens."""
        return any(token.is_error for token in self.tokens)

    def get_diagnostics(self) -> List[Diagnostic]:
        """Diagnostics for every error token from the last scan."""
        return [diagnostic_from_token(token, self.filename) for token in self.errors]


def _is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def _is_alpha(char: str) -> bool:
    return 'a' <= char <= 'z' or 'A' <= char <= 'Z'


def _is_identifier_continue(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char) or char == '_'


def parse_number(lexeme: str, line: int) -> float:
    """
    Parse a number spelling as a float.

    Raises:
        LexerError: If the spelling is not a valid number literal
    """
    try:
        return float(lexeme)
    except ValueError:
        raise create_invalid_number_error(lexeme, line)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Lexical errors are returned as error tokens, never raised.

    Args:
        source: Source code string
        filename: Filename for diagnostics

    Returns:
        List of tokens
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8', newline='') as f:
        source = f.read()

    return tokenize_string(source, filepath)

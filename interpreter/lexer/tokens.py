"""
Token definitions for the Lox lexer.

This module defines all token types produced by the scanner:
- Single-character punctuation
- One- and two-character comparison/assignment operators
- Literals (strings and decimal numbers)
- Identifiers and the sixteen reserved words
- Error and end-of-input markers

Member names double as the canonical rendering names used in golden output,
which is why a few of them (LESSTHAN, NOT, GREATER_EQUALS) look unusual.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict, Tuple


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category for clarity.
    """

    # ========================================================================
    # Punctuation
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    STAR = auto()                   # *
    SLASH = auto()                  # /

    # ========================================================================
    # Operators (one- and two-character forms)
    # ========================================================================
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUALS = auto()         # >=
    LESSTHAN = auto()               # <
    LESSTHAN_EQUALS = auto()        # <=
    NOT = auto()                    # !
    NOT_EQUALS = auto()             # !=

    # ========================================================================
    # Literals and identifiers
    # ========================================================================
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14
    IDENTIFIER = auto()             # variable_name

    # ========================================================================
    # Reserved words
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FOR = auto()
    FUN = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Error and special tokens
    # ========================================================================
    INVALID = auto()                # Unexpected character
    UNTERMINATED_STRING = auto()    # Input ended inside a string literal
    EOF = auto()                    # End of input


# Carried as the lexeme of UNTERMINATED_STRING tokens
UNTERMINATED_STRING_SENTINEL = '"'


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Contains the token type, the payload text, the semantic value and the
    1-based line the token was recognized on.
    """
    type: TokenType
    lexeme: str                     # Payload text (quotes stripped for strings)
    value: Any                      # Parsed value (float for NUMBER) or None
    line: int

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, line={self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in {
            TokenType.STRING, TokenType.NUMBER,
            TokenType.TRUE, TokenType.FALSE, TokenType.NIL,
        }

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in RESERVED_TYPES

    @property
    def is_error(self) -> bool:
        """Check if this token reports a lexical error."""
        return self.type in (TokenType.INVALID, TokenType.UNTERMINATED_STRING)


# Lookup tables, built once at import time and never mutated

KEYWORDS: Dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

RESERVED_TYPES = frozenset(KEYWORDS.values())

SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operator character -> (one-character form, form when followed by '=')
TWO_CHAR_OPERATORS: Dict[str, Tuple[TokenType, TokenType]] = {
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUALS),
    "<": (TokenType.LESSTHAN, TokenType.LESSTHAN_EQUALS),
    "!": (TokenType.NOT, TokenType.NOT_EQUALS),
}

# Source spelling of every fixed-lexeme token, used when rendering
FIXED_LEXEMES: Dict[TokenType, str] = {
    **{token_type: char for char, token_type in SINGLE_CHAR_TOKENS.items()},
    TokenType.SLASH: "/",
    TokenType.EQUAL: "=",
    TokenType.EQUAL_EQUAL: "==",
    TokenType.GREATER: ">",
    TokenType.GREATER_EQUALS: ">=",
    TokenType.LESSTHAN: "<",
    TokenType.LESSTHAN_EQUALS: "<=",
    TokenType.NOT: "!",
    TokenType.NOT_EQUALS: "!=",
}

# Unicode White_Space code points. Narrower than str.isspace(), which also
# accepts the \x1c-\x1f separators.
WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

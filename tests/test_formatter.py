"""
Golden-output tests for the canonical token rendering.
"""

import sys
import os

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from interpreter.lexer import Lexer, Token, TokenType, format_token, format_tokens, format_number


def render(source):
    return format_tokens(Lexer(source).tokenize())


class TestFormatNumber:
    """Float rendering never uses exponent notation"""

    @pytest.mark.parametrize("value, expected", [
        (123.0, "123"),
        (0.0, "0"),
        (3.14, "3.14"),
        (3.5, "3.5"),
        (0.5, "0.5"),
        (1e16, "10000000000000000"),
        (1e20, "100000000000000000000"),
        (1e-7, "0.0000001"),
        (float("inf"), "inf"),
    ])
    def test_format_number(self, value, expected):
        assert format_number(value) == expected


class TestFormatToken:

    @pytest.mark.parametrize("source, expected", [
        ("(", "LEFT_PAREN ( null"),
        (")", "RIGHT_PAREN ) null"),
        ("{", "LEFT_BRACE { null"),
        ("}", "RIGHT_BRACE } null"),
        (",", "COMMA , null"),
        (".", "DOT . null"),
        ("-", "MINUS - null"),
        ("+", "PLUS + null"),
        (";", "SEMICOLON ; null"),
        ("*", "STAR * null"),
        ("/", "SLASH / null"),
        ("=", "EQUAL = null"),
        ("==", "EQUAL_EQUAL == null"),
        (">", "GREATER > null"),
        (">=", "GREATER_EQUALS >= null"),
        ("<", "LESSTHAN < null"),
        ("<=", "LESSTHAN_EQUALS <= null"),
        ("!", "NOT ! null"),
        ("!=", "NOT_EQUALS != null"),
    ])
    def test_fixed_lexeme_tokens(self, source, expected):
        assert render(source) == [expected, "EOF  null"]

    @pytest.mark.parametrize("source, expected", [
        ("123", "NUMBER 123 123"),
        ("3.0", "NUMBER 3.0 3"),
        ("3.50", "NUMBER 3.50 3.5"),
        ("0.25", "NUMBER 0.25 0.25"),
        ("007", "NUMBER 007 7"),
    ])
    def test_numbers(self, source, expected):
        assert render(source)[0] == expected

    def test_malformed_number_spelling(self):
        token = Token(TokenType.NUMBER, "1x", None, 2)
        assert format_token(token) == "[line 2] Error: Invalid number literal: 1x"

    def test_string(self):
        assert render('"hello world"')[0] == 'STRING hello world " null'

    def test_identifier(self):
        assert render("foo_bar")[0] == "IDENTIFIER foo_bar null"

    @pytest.mark.parametrize("word", [
        "and", "class", "else", "false", "for", "fun", "if", "nil",
        "or", "print", "return", "super", "this", "true", "var", "while",
    ])
    def test_reserved_words(self, word):
        assert render(word)[0] == f"{word.upper()} {word}"

    def test_unexpected_character(self):
        assert render("\n@") == [
            "[line 2] Error: Unexpected character: @",
            "EOF  null",
        ]

    def test_unterminated_string(self):
        assert render('"abc') == [
            "[line 1] Error: Unterminated String",
            "EOF  null",
        ]

    def test_eof_has_two_spaces(self):
        assert render("") == ["EOF  null"]


class TestGoldenPrograms:

    def test_grouping(self):
        assert render("({})") == [
            "LEFT_PAREN ( null",
            "LEFT_BRACE { null",
            "RIGHT_BRACE } null",
            "RIGHT_PAREN ) null",
            "EOF  null",
        ]

    def test_small_program(self):
        source = (
            "// greet someone\n"
            "var name = \"lox\";\n"
            "if (name != nil) print 12.5 >= 3;\n"
            "$\n"
        )
        assert render(source) == [
            "VAR var",
            "IDENTIFIER name null",
            "EQUAL = null",
            "STRING lox \" null",
            "SEMICOLON ; null",
            "IF if",
            "LEFT_PAREN ( null",
            "IDENTIFIER name null",
            "NOT_EQUALS != null",
            "NIL nil",
            "RIGHT_PAREN ) null",
            "PRINT print",
            "NUMBER 12.5 12.5",
            "GREATER_EQUALS >= null",
            "NUMBER 3 3",
            "SEMICOLON ; null",
            "[line 4] Error: Unexpected character: $",
            "EOF  null",
        ]

    def test_trailing_dot(self):
        assert render("123.") == [
            "NUMBER 123 123",
            "DOT . null",
            "EOF  null",
        ]

"""
Command-line driver tests.
"""

import sys
import os

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from interpreter.cli import main, EX_DATAERR, EX_USAGE
from interpreter.log import get_logger


@pytest.fixture
def source_file(tmp_path):
    def write(text):
        path = tmp_path / "program.lox"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return write


class TestTokenizeCommand:

    def test_prints_one_token_per_line(self, source_file, capsys):
        path = source_file("var x = 1;\n")

        assert main(["tokenize", path]) == 0

        out = capsys.readouterr().out
        assert out.splitlines() == [
            "VAR var",
            "IDENTIFIER x null",
            "EQUAL = null",
            "NUMBER 1 1",
            "SEMICOLON ; null",
            "EOF  null",
        ]

    def test_lexical_errors_set_exit_code(self, source_file, capsys):
        path = source_file("(@)")

        assert main(["tokenize", path]) == EX_DATAERR

        out = capsys.readouterr().out
        assert out.splitlines() == [
            "LEFT_PAREN ( null",
            "[line 1] Error: Unexpected character: @",
            "RIGHT_PAREN ) null",
            "EOF  null",
        ]

    def test_empty_file(self, source_file, capsys):
        assert main(["tokenize", source_file("")]) == 0
        assert capsys.readouterr().out == "EOF  null\n"

    def test_carriage_returns_are_read_verbatim(self, tmp_path, capsys):
        path = tmp_path / "crlf.lox"
        path.write_bytes(b"\"a\r\nb\"\r+")

        assert main(["tokenize", str(path)]) == 0

        assert capsys.readouterr().out == "STRING a\rb \" null\nPLUS + null\nEOF  null\n"

    def test_unreadable_file_scans_empty_source(self, tmp_path, capsys):
        missing = str(tmp_path / "missing.lox")

        assert main(["tokenize", missing]) == 0

        captured = capsys.readouterr()
        assert captured.out == "EOF  null\n"
        assert f"Failed to read file: {missing}" in captured.err

    def test_verbose_flag(self, source_file, capsys):
        assert main(["-v", "tokenize", source_file("+")]) == 0
        assert "PLUS + null" in capsys.readouterr().out


class TestCommandDispatch:

    def test_unknown_command(self, source_file, capsys):
        assert main(["evaluate", source_file("1")]) == EX_USAGE
        assert "Unknown command: evaluate" in capsys.readouterr().err

    def test_missing_arguments(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["tokenize"])
        assert exc_info.value.code == 2


class TestLogger:

    def test_get_logger(self):
        assert get_logger("mymodule").name == "interpreter.mymodule"

    def test_logger_with_package_prefix(self):
        assert get_logger("interpreter.lexer").name == "interpreter.lexer"

    def test_logger_exact_package_name(self):
        assert get_logger("interpreter").name == "interpreter"

    def test_logger_name_starting_with_package_not_submodule(self):
        assert get_logger("interpreter_other").name == "interpreter.interpreter_other"


class TestRunTestsScript:

    def test_suite_runs_through_pytest(self, monkeypatch):
        import run_tests

        calls = []
        monkeypatch.setattr(pytest, "main", lambda args: calls.append(args) or 0)

        assert run_tests.run_unit_tests() is True
        assert calls == [["-v", os.path.join(run_tests.project_root, "tests")]]

    def test_failing_suite_is_reported(self, monkeypatch):
        import run_tests

        monkeypatch.setattr(pytest, "main", lambda args: 1)

        assert run_tests.run_unit_tests() is False

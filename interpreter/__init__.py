"""
Lox Interpreter Package

Front end of an interpreter for the Lox scripting language.

Architecture:
    interpreter/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # Command-line driver

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer

__all__ = [
    "Lexer",

    # Version info
    "__version__",
    "__license__",
]

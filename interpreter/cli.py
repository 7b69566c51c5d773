"""
Command-line driver for the Lox interpreter front end.

Usage:
    lox tokenize <file.lox>
"""

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from .lexer import Lexer, format_token
from .log import get_logger

logger = get_logger(__name__)

# sysexits(3) codes
EX_USAGE = 64
EX_DATAERR = 65


def read_source(filename: str) -> str:
    """Read a source file, falling back to empty source if it cannot be read."""
    try:
        with open(filename, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Reading %s failed: %s", filename, e)
        print(f"Failed to read file: {filename}", file=sys.stderr)
        return ""


def run_tokenizer(source: str, filename: str = "<stdin>") -> int:
    """Scan the source and print one rendered token per line."""
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    for token in tokens:
        print(format_token(token))

    if lexer.has_errors():
        for diagnostic in lexer.get_diagnostics():
            logger.info("%s", diagnostic.describe().rstrip())
        return EX_DATAERR
    return 0


COMMANDS: Dict[str, Callable[[str, str], int]] = {
    "tokenize": run_tokenizer,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lox",
        description="Lox interpreter front end",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    lox tokenize program.lox        # Print the token stream
    lox -v tokenize program.lox     # Same, with debug logging on stderr
        """
    )
    parser.add_argument('command', help='Command to run (tokenize)')
    parser.add_argument('filename', help='Source file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the lox command"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    handler = COMMANDS.get(args.command)
    if handler is None:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return EX_USAGE

    source = read_source(args.filename)
    return handler(source, args.filename)


if __name__ == "__main__":
    sys.exit(main())

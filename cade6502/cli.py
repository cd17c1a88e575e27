"""Command line entry point: tokenize assembly source files."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .lexer import LexerError, lex
from .sourcefile import SourceReadError, read_source

DEFAULT_SOURCES = ("../6502/simple.cade", "../6502/less_simple.cade")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cade6502", description="Tokenize 6502 assembly source files."
    )
    parser.add_argument(
        "paths",
        nargs="*",
        default=list(DEFAULT_SOURCES),
        help="source files to tokenize",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Read every file first, then print the tokens of each; return an exit code."""
    args = _parser().parse_args(argv)

    sources = []
    for path in args.paths:
        try:
            sources.append((path, read_source(path)))
        except SourceReadError as exc:
            print(exc, file=sys.stderr)
            return 1

    for path, text in sources:
        try:
            tokens = lex(text)
        except LexerError as exc:
            print(f"{path}: {exc}", file=sys.stderr)
            return 1
        for token in tokens:
            print(f"{token.type.name} {token.literal!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
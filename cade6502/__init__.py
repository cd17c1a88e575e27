"""Lexer for 6502 assembly source files, with a file reader and a command."""

__version__ = "0.1.0"
__all__ = ["__version__"]
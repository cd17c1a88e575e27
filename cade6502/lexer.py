"""Tokenizer for 6502 assembly source text."""

from __future__ import annotations

import enum
import string
from collections.abc import Iterator
from dataclasses import dataclass

_WHITESPACE = frozenset(" \t\n\v\f\r")
_LETTERS = frozenset(string.ascii_letters + "_")
_DIGITS = frozenset(string.digits)
_EOF_LITERAL = " "


class TokenType(enum.Enum):
    """Kinds of token the lexer can produce."""

    # Identifiers and literals
    IDENT = enum.auto()
    INT = enum.auto()
    HEX = enum.auto()

    # Operators
    PLUS = enum.auto()
    MINUS = enum.auto()
    ASTERISK = enum.auto()
    SLASH = enum.auto()

    # Delimiters
    COMMA = enum.auto()
    SEMICOLON = enum.auto()
    COLON = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    HASH = enum.auto()
    DOLLAR = enum.auto()
    ASSIGN = enum.auto()
    DOT = enum.auto()
    PERCENT = enum.auto()
    LOGICAL_OR = enum.auto()

    # 6502 specific
    LABEL = enum.auto()
    COMMENT = enum.auto()
    ILLEGAL = enum.auto()
    EOF = enum.auto()


_SINGLE_CHAR_TOKENS = {
    "#": TokenType.HASH,
    "$": TokenType.DOLLAR,
    ":": TokenType.COLON,
    "%": TokenType.PERCENT,
    "|": TokenType.LOGICAL_OR,
    ".": TokenType.DOT,
}


@dataclass(frozen=True)
class Token:
    """A token with its kind and the text it was read from."""

    type: TokenType
    literal: str


class LexerError(Exception):
    """Base class for errors raised while tokenizing."""


class IllegalTokenError(LexerError):
    """Raised when the input holds a character that starts no token."""

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"Illegal token {char!r} at position {position}")
        self.char = char
        self.position = position


class Lexer:
    """Reads tokens one at a time from a source string.

    As with a NUL-terminated string, input ends at the first NUL character.
    """

    def __init__(self, source: str) -> None:
        self._source = source.split("\0", 1)[0]
        self._pos = 0

    @property
    def _ch(self) -> str:
        return self._source[self._pos] if self._pos < len(self._source) else ""

    def _read_while(self, allowed: frozenset[str]) -> str:
        start = self._pos
        while self._ch and self._ch in allowed:
            self._pos += 1
        return self._source[start:self._pos]

    def _skip_comment(self) -> None:
        end = self._source.find("\n", self._pos)
        self._pos = len(self._source) if end == -1 else end

    def next_token(self) -> Token:
        """Return the next token; at the end of input, an EOF token every time."""
        while True:
            self._read_while(_WHITESPACE)
            if self._ch == ";":
                self._skip_comment()
                continue
            break

        ch = self._ch
        if not ch:
            return Token(TokenType.EOF, _EOF_LITERAL)
        if ch in _SINGLE_CHAR_TOKENS:
            self._pos += 1
            return Token(_SINGLE_CHAR_TOKENS[ch], ch)
        if ch in _LETTERS:
            return Token(TokenType.IDENT, self._read_while(_LETTERS | _DIGITS))
        if ch in _DIGITS:
            return Token(TokenType.INT, self._read_while(_DIGITS))
        raise IllegalTokenError(ch, self._pos)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return


def lex(source: str) -> list[Token]:
    """Tokenize the whole source, ending with an EOF token."""
    return list(Lexer(source))
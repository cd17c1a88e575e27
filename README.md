# cade6502

A lexer for 6502 assembly source. It turns text such as

```
LDX #0             ; X = 0
STA $0202          ; store A
```

into a stream of tokens. It produces these token types:

- `IDENT`: a letter or `_`, followed by any letters, digits or `_` (`LDA`, `loop_1`)
- `INT`: a run of decimal digits (`0202`)
- `HASH`, `DOLLAR`, `COLON`, `PERCENT`, `LOGICAL_OR`, `DOT`: the single
  characters `#`, `$`, `:`, `%`, `|`, `.`
- `EOF`: the end of input, whose literal is a single space

Whitespace is skipped. A comment starts with `;` and runs to the end of the
line, and it is dropped. Input also ends at the first NUL character.

## Installation

```
pip install .
```

## Library use

```python
from cade6502.lexer import lex

tokens = lex("LDA #$10")
for token in tokens:
    print(token.type.name, repr(token.literal))
# IDENT 'LDA'
# HASH '#'
# DOLLAR '$'
# INT '10'
# EOF ' '
```

`lex(source)` returns the full list of `Token` objects, ending with one `EOF`
token. A `Token` is a frozen dataclass with `type` (a `TokenType`) and
`literal` (the text it was read from).

`Lexer(source)` reads tokens one at a time. `Lexer.next_token()` returns the
next token, and once the input is used up it returns an `EOF` token on every
call. Iterating over a `Lexer` yields tokens up to and including the first
`EOF` token.

A character that starts no token raises `IllegalTokenError`, a subclass of
`LexerError`. Its `char` attribute holds the character and `position` its
index in the input.

To lex a file on disk:

```python
from cade6502.sourcefile import read_source
from cade6502.lexer import lex

tokens = lex(read_source("program.cade"))
```

`read_source(path)` returns the file's content, with each byte mapped to one
character (Latin-1), so any file can be read. It raises `SourceReadError`, a
subclass of `OSError`, when the file cannot be opened or read.

## Command line

```
cade6502 first.cade second.cade
```

The command reads every file named first, then lexes each one and prints one
line per token: the token type's name and the literal, for example
`IDENT 'LDA'`. With no file names it reads `../6502/simple.cade` and
`../6502/less_simple.cade`, relative to the current directory.

If a file cannot be read, or its text holds an illegal character, the command
prints the error to standard error and exits with status 1. Otherwise it exits
with status 0.

## What it does not do

This package stops at tokens. It does not parse instructions or addressing
modes, resolve labels, or assemble anything into machine code. Numbers are not
interpreted either: `$0A` comes out as a `DOLLAR` token, an `INT` token `0`
and an `IDENT` token `A`. Some members of `TokenType`, such as `PLUS`,
`COMMA`, `LPAREN` and `LABEL`, are defined but never produced; characters
such as `+`, `,` and `(` raise `IllegalTokenError`.

## Running the tests

```
pip install .[test]
pytest
```
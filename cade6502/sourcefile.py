"""Reading assembly source files from disk."""

from __future__ import annotations

import os


class SourceReadError(OSError):
    """Raised when a source file cannot be read."""


def read_source(path: str | os.PathLike[str]) -> str:
    """Return the whole content of the file at ``path``.

    Bytes are mapped one to one onto characters, so any file can be read.
    """
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise SourceReadError(
            f"Error reading file: {os.fspath(path)}. {exc.strerror or exc}"
        ) from exc
    return data.decode("latin-1")
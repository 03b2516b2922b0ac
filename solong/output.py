"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _char(c: str | int) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError("expected a character or an integer code")


def put_char(c: str | int, stream: Optional[TextIO] = None) -> None:
    """Write one character; an integer is taken as its low-byte code."""
    _stream(stream).write(_char(c))


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write s as it is."""
    if not isinstance(s, str):
        raise TypeError("put_str expects a string")
    _stream(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s followed by a newline; None writes nothing."""
    if s is None:
        return
    put_str(s, stream)
    _stream(stream).write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of n, with a leading minus when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("put_nbr expects an integer")
    _stream(stream).write(str(n))
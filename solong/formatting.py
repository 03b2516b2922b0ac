"""A small printf: %c, %s, %p, %d, %i, %u, %x, %X and %% conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, Optional, TextIO

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_INT_BITS = 32
_POINTER_BITS = 64


def _signed32(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _unsigned32(value: int) -> int:
    return value & ((1 << _INT_BITS) - 1)


def _require_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an integer, got {type(value).__name__}")
    return value


def hex_digits(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of a non-negative integer, without prefix."""
    n = _require_int(n, "x")
    if n < 0:
        raise ValueError("hex_digits expects a non-negative integer")
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    out = []
    while True:
        out.append(digits[n % 16])
        n //= 16
        if n == 0:
            break
    return "".join(reversed(out))


def pointer_repr(address: Optional[int]) -> str:
    """Text of a pointer: "(nil)" for a null address, else 0x and hex digits."""
    if address is None:
        return "(nil)"
    address = _require_int(address, "p") & ((1 << _POINTER_BITS) - 1)
    if address == 0:
        return "(nil)"
    return "0x" + hex_digits(address)


def _char(value: Any) -> str:
    if isinstance(value, bool):
        raise TypeError("%c expects a character or an integer code")
    if isinstance(value, int):
        return chr(value & 0xFF)
    if isinstance(value, str) and len(value) == 1:
        return value
    raise TypeError("%c expects a character or an integer code")


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "cspdiuxX" or conversion == "":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return _char(value)
    if conversion == "s":
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s expects a string, got {type(value).__name__}")
        return value
    if conversion == "p":
        return pointer_repr(value)
    if conversion in "di":
        return str(_signed32(_require_int(value, conversion)))
    if conversion == "u":
        return str(_unsigned32(_require_int(value, conversion)))
    return hex_digits(_unsigned32(_require_int(value, conversion)), conversion == "X")


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions of fmt with args and return the text.

    An unknown conversion, or a lone % at the end, yields nothing and
    consumes no argument. Surplus arguments are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    values = iter(args)
    parts = []
    pos = 0
    length = len(fmt)
    while pos < length:
        ch = fmt[pos]
        if ch == "%":
            conversion = fmt[pos + 1] if pos + 1 < length else ""
            parts.append(_convert(conversion, values))
            pos += 2
        else:
            parts.append(ch)
            pos += 1
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expansion of fmt to stream (stdout by default); return its length."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)
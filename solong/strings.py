"""String helpers: searching, comparing, slicing, joining and splitting text."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _char(c: str | int) -> str:
    """Normalise a one-character string or an integer code to a character."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError("expected a character or an integer code")


def _require_str(*values: object) -> None:
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {type(value).__name__}")


def _require_non_negative(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative")


def strlen(s: str) -> int:
    """Number of characters in s."""
    _require_str(s)
    return len(s)


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first c in s.

    Searching for the terminator character returns the length of s;
    a character that is absent gives None.
    """
    _require_str(s)
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last c in s, with the same terminator rule as strchr."""
    _require_str(s)
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns the code difference of the first differing characters, a missing
    character counting as code 0, or 0 when the prefixes are equal.
    """
    _require_str(s1, s2)
    _require_non_negative(n, "n")
    for pos in range(min(n, max(len(s1), len(s2)))):
        left = ord(s1[pos]) if pos < len(s1) else 0
        right = ord(s2[pos]) if pos < len(s2) else 0
        if left != right:
            return left - right
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of little in big, the match lying wholly in the first length characters."""
    _require_str(big, little)
    _require_non_negative(length, "length")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of s."""
    _require_str(s)
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from start; empty when start is past the end."""
    _require_str(s)
    _require_non_negative(start, "start")
    _require_non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of s1 and s2."""
    _require_str(s1, s2)
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters of charset from both ends of s."""
    _require_str(s, charset)
    if not charset:
        return strdup(s)
    return s.strip(charset)


def split(s: str, sep: str | int) -> list[str]:
    """Words of s separated by runs of sep; empty words are dropped."""
    _require_str(s)
    ch = _char(sep)
    if ch == _NUL:
        return [s] if s else []
    return [word for word in s.split(ch) if word]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the text that fits and the full length of src, which tells the
    caller whether the copy was truncated.
    """
    _require_str(src)
    _require_non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length the full result would have had.
    When size does not exceed the length of dst, dst is left unchanged and the
    returned length is size plus the length of src.
    """
    _require_str(dst, src)
    _require_non_negative(size, "size")
    dst_len = len(dst)
    src_len = len(src)
    if size <= dst_len:
        return dst, size + src_len
    room = size - dst_len - 1
    return dst + src[:room], dst_len + src_len


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """New string made of func(index, char) for every character of s."""
    _require_str(s)
    if func is None:
        raise TypeError("func must be callable")
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Apply func(index, char) to every character of chars in place.

    func returns the replacement character, or None to leave it as it is.
    The same sequence is returned.
    """
    if func is None:
        raise TypeError("func must be callable")
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement
    return chars
"""String helpers that follow the classic C library conventions.

Positions are returned as indices, or ``None`` where nothing is found;
functions that write into a caller's buffer return the new text instead.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Optional

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; text with no digits gives 0.
    The result wraps like a 32-bit signed integer.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    number = 0
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        number = _wrap_int(number * 10 + (ord(ch) - ord("0")))
    return _wrap_int(number * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if not sep:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character found in ``charset``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text) or length == 0:
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly within the first ``length`` characters.

    An empty needle is found at position 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    position = haystack.find(needle, 0, length)
    return None if position < 0 else position


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first
    pair that differs, or 0."""
    if n < 1:
        return 0
    for a, b in zip_longest(first[:n], second[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``.
    """
    if size < 1:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had, counting ``dst`` as at most ``size`` characters.
    """
    dst_len = len(dst)
    result = dst
    if size > 0 and size - 1 > dst_len:
        result = dst + src[:size - 1 - dst_len]
    if dst_len >= size:
        dst_len = size
    return result, dst_len + len(src)


def strchr(text: str, ch: str) -> Optional[int]:
    """Index of the first ``ch`` in ``text``; a NUL is found at the end."""
    if ch == "\0":
        return len(text)
    position = text.find(ch)
    return None if position < 0 else position


def strrchr(text: str, ch: str) -> Optional[int]:
    """Index of the last ``ch`` in ``text``; a NUL is found at the end."""
    if ch == "\0":
        return len(text)
    position = text.rfind(ch)
    return None if position < 0 else position


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; if one is missing, return the other."""
    if first is None or second is None:
        return second if first is None else first
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    buffer: MutableSequence[str],
    func: Callable[[int, str], Optional[str]],
) -> None:
    """Call ``func(index, char)`` on each character of ``buffer`` in place.

    A non-``None`` result replaces the character at that index.
    """
    for index, ch in enumerate(buffer):
        replacement = func(index, ch)
        if replacement is not None:
            buffer[index] = replacement
"""ASCII character classification and case conversion.

Every function accepts either a code point (``int``) or a one-character
string. Classification ignores anything outside plain ASCII.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def _islower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _isupper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def isalpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _islower(code) or _isupper(code)


def isdigit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for a code point in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; anything else comes back unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _islower(code):
        code = code - ord("a") + ord("A")
    return chr(code) if isinstance(c, str) else code


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; anything else comes back unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _isupper(code):
        code = code - ord("A") + ord("a")
    return chr(code) if isinstance(c, str) else code
"""Word splitting and substring search for XPM text."""

from __future__ import annotations

import re
from typing import Optional

_SEPARATORS = re.compile(r"[ \t]+")


def str_to_wordtab(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _SEPARATORS.split(text) if word]


def str_str(text: str, find: str, length: int) -> Optional[int]:
    """Position of the first ``find`` in ``text``.

    Returns ``None`` when ``find`` is longer than ``length`` or is absent.
    """
    if len(find) > length:
        return None
    position = text.find(find)
    return None if position < 0 else position


def str_str_quoted(text: str, find: str, length: int) -> Optional[int]:
    """Like :func:`str_str`, but skips matches inside double quotes.

    A double quote toggles the quoted state at its own position, before
    the position is tested for a match.
    """
    if len(find) > length:
        return None
    last = len(text) - len(find)
    quoted = False
    for position, ch in enumerate(text):
        if position > last:
            break
        if ch == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, position):
            return position
    return None
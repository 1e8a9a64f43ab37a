"""Reading height maps: lines of points, each ``z`` or ``z,0xRRGGBB``.

Each point is packed into one 64-bit value: the height in the upper 32
bits and the colour in the lower 32 bits.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from wirefdf.textual import atoi, split

DEFAULT_COLOR = 0x00FFFFFF
COLOR_MASK = 0xFFFFFFFF
_WORD_MASK = (1 << 64) - 1

_MESSAGES = {
    1: "Usage: ./fdf <map_file>",
    2: "Error reading map file",
    3: "Map is invalid",
    4: "Memory allocation failed",
}


def error_message(code: int) -> str:
    """The message for an error code; unknown codes give an empty string."""
    return _MESSAGES.get(code, "")


class MapError(Exception):
    """A map could not be read or is invalid."""

    def __init__(self, code: int, detail: str = "") -> None:
        self.code = code
        message = error_message(code)
        if detail:
            message = f"{message}: {detail}" if message else detail
        super().__init__(message)


def parse_hex(text: str) -> int:
    """Parse hexadecimal digits, skipping any other character.

    The result wraps like a 32-bit unsigned integer.
    """
    result = 0
    for ch in text:
        if "0" <= ch <= "9":
            digit = ord(ch) - ord("0")
        elif "A" <= ch <= "F":
            digit = ord(ch) - ord("A") + 10
        elif "a" <= ch <= "f":
            digit = ord(ch) - ord("a") + 10
        else:
            continue
        result = (result * 16 + digit) & COLOR_MASK
    return result


def parse_point(token: str) -> int:
    """Pack one ``z[,0xCOLOR]`` token into a 64-bit value."""
    parts = split(token, ",")
    if not parts:
        raise MapError(3, f"empty point {token!r}")
    z = atoi(parts[0])
    color = parse_hex(parts[1][2:]) if len(parts) > 1 else DEFAULT_COLOR
    return (((z & _WORD_MASK) << 32) | color) & _WORD_MASK


def parse_line(line: str) -> list[int]:
    """Parse the space-separated points of one map line."""
    return [parse_point(token) for token in split(line, " ")]


def parse_map(text: str) -> list[list[int]]:
    """Parse a whole map, one row per non-empty line."""
    rows = [parse_line(line) for line in split(text, "\n")]
    if not rows:
        raise MapError(3, "no rows")
    return rows


def read_map_file(path: Union[str, Path]) -> str:
    """Return the contents of a map file."""
    try:
        return Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise MapError(2, str(exc)) from exc
"""Reading XPM images into :class:`~wirefdf.image.Image` objects."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path
from typing import Optional, Union

from wirefdf.colors import lookup_color
from wirefdf.image import Image
from wirefdf.textual import atoi
from wirefdf.wordtab import str_str, str_str_quoted, str_to_wordtab

TRANSPARENT_PIXEL = 0xFF000000
_NAME_BUFFER = 64
_HEX_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(Exception):
    """XPM data could not be read or is malformed."""


def text_rgb(name: str, end: Optional[str] = None) -> int:
    """Colour value of an XPM colour specification.

    ``#RRGGBB`` is read as hexadecimal; otherwise ``name`` (joined with
    ``end`` by a space, when given) is looked up in the colour table.
    Unknown names give 0, ``none`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX_NUMBER.match(name, 1)
        if match is None:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER - 1]
    color = lookup_color(name)
    return 0 if color is None else color


def _blank(text: str, start: int, count: int) -> str:
    count = max(0, min(count, len(text) - start))
    return text[:start] + " " * count + text[start + count:]


def strip_comments(text: str) -> str:
    """Replace C comments outside double quotes with spaces.

    The length of the text is kept; a line comment's newline is blanked too.
    """
    while (begin := str_str_quoted(text, "/*", len(text))) is not None:
        end = str_str(text[begin + 2:], "*/", len(text) - begin - 2)
        text = _blank(text, begin, (-1 if end is None else end) + 4)
    while (begin := str_str_quoted(text, "//", len(text))) is not None:
        end = str_str(text[begin + 2:], "\n", len(text) - begin - 2)
        text = _blank(text, begin, (-1 if end is None else end) + 3)
    return text


def quoted_lines(text: str) -> list[str]:
    """The contents of every double-quoted string, in order."""
    return _QUOTED.findall(text)


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an image from XPM data lines (header, colours, pixel rows)."""
    rows = iter(lines)

    def next_line() -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError("unexpected end of XPM data") from None

    header = str_to_wordtab(next_line())
    if len(header) < 4:
        raise XpmError("incomplete XPM header")
    width, height, ncolors, cpp = (atoi(word) for word in header[:4])
    if not (width > 0 and height > 0 and ncolors > 0 and cpp > 0):
        raise XpmError("invalid XPM header values")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line()
        words = str_to_wordtab(line[cpp:])
        if "c" not in words:
            raise XpmError(f"colour line without 'c' key: {line!r}")
        index = words.index("c") + 1
        if index >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        end = words[index + 1] if index + 1 < len(words) else None
        color = text_rgb(words[index], end)
        key = line[:cpp]
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    image = Image(width, height)
    for y in range(height):
        line = next_line()
        for x in range(width):
            color = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT_PIXEL
            image.set_pixel(x, y, color)
    return image


def xpm_file_to_image(path: Union[str, Path]) -> Image:
    """Read an XPM file into an image."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise XpmError(str(exc)) from exc
    return xpm_to_image(quoted_lines(strip_comments(text)))
# wirefdf

`wirefdf` holds the building blocks of a height-map wireframe viewer:

- reading height-map grid files into packed height and colour values,
- an in-memory image of 32-bit pixels,
- loading XPM pictures into such an image, with the X11 colour-name table,
- small string, character, byte-buffer and linked-list helpers that follow
  the classic C library conventions.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Installing

```
pip install .
```

## Map files

Each line of a map file is one row of the grid. Points on a line are
separated by spaces. Each point is an integer height, optionally followed by
a comma and a hexadecimal colour:

```
0 0 0 0
0 10 10,0xFF0000 0
0 0 0 0
```

`wirefdf.mapfile` reads them:

- `read_map_file(path)` returns the file's text (decoded as Latin-1). If the
  file cannot be read it raises `MapError` with code 2.
- `parse_map(text)` returns one list per non-empty line. It raises `MapError`
  with code 3 when there are no rows.
- `parse_line(line)` parses the points of one line; `parse_point(token)`
  parses one point.
- `parse_hex(text)` reads hexadecimal digits, skipping any other character,
  wrapping at 32 bits.
- `error_message(code)` gives the message for codes 1 to 4
  (`Usage: ./fdf <map_file>`, `Error reading map file`, `Map is invalid`,
  `Memory allocation failed`); other codes give an empty string.
  `MapError` keeps its code in `.code`.

Each point is packed into one 64-bit value: the height in the upper 32 bits
and the colour in the lower 32 bits. A point without a colour gets
`0x00FFFFFF`.

```python
from wirefdf.mapfile import parse_map

grid = parse_map("0 0\n0 5,0xFF0000\n")
assert grid[0][0] == 0x00FFFFFF
assert grid[1][1] == (5 << 32) | 0xFF0000
```

## Images

`wirefdf.image.Image(width, height, endian=0)` is a buffer of 32-bit pixels,
little-endian by default (`endian=1` for big-endian). Rows are `size_line`
bytes apart in `data`.

- `set_pixel(x, y, color)` and `get_pixel(x, y)`; coordinates outside the
  image raise `IndexError`.
- `clear()` sets every pixel to zero.
- `to_rgb_bytes()` returns the pixels as packed R, G, B bytes, row by row.

`rgb_shifts(red_mask, green_mask, blue_mask)` gives the bit offset and width
of each colour mask, and `good_color(color, depth, shifts)` converts a
`0xRRGGBB` colour for a display depth (depths of 24 and more take it
unchanged).

## XPM pictures

`wirefdf.xpm` builds an `Image` from XPM data:

- `xpm_file_to_image(path)` reads a file, blanking C comments outside quoted
  strings (`strip_comments`) and taking every quoted string in order
  (`quoted_lines`).
- `xpm_to_image(lines)` takes the data lines directly: the header, then the
  colour lines, then the pixel rows.
- `text_rgb(name, end=None)` turns a colour specification into a value:
  `#RRGGBB` is read as hexadecimal, other names are looked up; unknown names
  give 0 and `none` gives -1.

A `none` colour is stored as the pixel `0xFF000000`. Malformed data raises
`XpmError`.

```python
from wirefdf.xpm import xpm_to_image

image = xpm_to_image(["2 1 2 1", ". c #FF0000", "x c none", ".x"])
assert image.get_pixel(0, 0) == 0xFF0000
assert image.get_pixel(1, 0) == 0xFF000000
```

`wirefdf.colors.lookup_color(name)` returns the `0xRRGGBB` value of an X11
colour name, ignoring ASCII case, or `None` for an unknown name. The whole
table is `COLOR_TABLE`.

`wirefdf.wordtab` has the text helpers the XPM reader uses:
`str_to_wordtab` (split on spaces and tabs), `str_str` and `str_str_quoted`
(substring search, the second skipping matches inside double quotes).

## Small helpers

- `wirefdf.textual`: `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr`, `strncmp`, `strlcpy`, `strlcat`, `strchr`, `strrchr`,
  `strjoin`, `strmapi`, `striteri`. Searches return an index or `None`;
  `strlcpy` and `strlcat` return the resulting text with the length the full
  result would have had.
- `wirefdf.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower`, on code points or one-character strings.
- `wirefdf.memory`: `memset`, `bzero`, `calloc`, `memcpy`, `memmove`,
  `memchr`, `memcmp`, on `bytearray` buffers.
- `wirefdf.chain`: `LinkedList` of `Node`s, with `add_front`, `add_back`,
  `last`, `clear`, `iterate` and `map`; it also supports `len()`,
  iteration and truth testing.

## What it does not do

The package has no command to run and opens no window. It does not project a
grid into 3D or draw lines between points: it reads maps into packed values,
and it holds and fills pixel images, but turning a map into a wireframe
picture is left to the code that uses it.

## Tests

```
pip install .[test]
pytest
```
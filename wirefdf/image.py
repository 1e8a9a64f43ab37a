"""In-memory 32-bit pixel images and colour conversion for shallow displays."""

from __future__ import annotations

from dataclasses import dataclass, field

BITS_PER_PIXEL = 32
_BYTES_PER_PIXEL = BITS_PER_PIXEL // 8
_PIXEL_MASK = 0xFFFFFFFF


@dataclass(eq=False)
class Image:
    """A ``width`` x ``height`` image of 32-bit pixels.

    ``endian`` is 0 for little-endian pixel bytes and 1 for big-endian.
    Rows are ``size_line`` bytes apart in ``data``.
    """

    width: int
    height: int
    endian: int = 0
    bits_per_pixel: int = field(default=BITS_PER_PIXEL, init=False)
    size_line: int = field(init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("image dimensions must be positive")
        if self.endian not in (0, 1):
            raise ValueError("endian must be 0 or 1")
        self.size_line = self.width * _BYTES_PER_PIXEL
        self.data = bytearray(self.size_line * self.height)

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return y * self.size_line + x * _BYTES_PER_PIXEL

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` (taken modulo 2**32) at ``(x, y)``."""
        offset = self._offset(x, y)
        self.data[offset:offset + _BYTES_PER_PIXEL] = (
            (color & _PIXEL_MASK).to_bytes(_BYTES_PER_PIXEL, self._byteorder)
        )

    def get_pixel(self, x: int, y: int) -> int:
        """The unsigned 32-bit pixel value at ``(x, y)``."""
        offset = self._offset(x, y)
        return int.from_bytes(
            self.data[offset:offset + _BYTES_PER_PIXEL], self._byteorder
        )

    def clear(self) -> None:
        """Set every pixel to zero."""
        self.data[:] = bytes(len(self.data))

    def to_rgb_bytes(self) -> bytes:
        """Pixels as packed R, G, B bytes, row by row."""
        red, green, blue = (1, 2, 3) if self.endian else (2, 1, 0)
        out = bytearray(self.width * self.height * 3)
        out[0::3] = self.data[red::_BYTES_PER_PIXEL]
        out[1::3] = self.data[green::_BYTES_PER_PIXEL]
        out[2::3] = self.data[blue::_BYTES_PER_PIXEL]
        return bytes(out)


def _mask_shift(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError("colour masks must be positive")
    shift = (mask & -mask).bit_length() - 1
    rest = mask >> shift
    bits = (~rest & (rest + 1)).bit_length() - 1
    return shift, bits


def rgb_shifts(
    red_mask: int, green_mask: int, blue_mask: int
) -> tuple[int, int, int, int, int, int]:
    """Offset and width in bits of each colour mask.

    Returns ``(red_shift, red_bits, green_shift, green_bits, blue_shift,
    blue_bits)``.
    """
    red = _mask_shift(red_mask)
    green = _mask_shift(green_mask)
    blue = _mask_shift(blue_mask)
    return (*red, *green, *blue)


TRUE_COLOR_SHIFTS = rgb_shifts(0xFF0000, 0x00FF00, 0x0000FF)


def good_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a display depth.

    Depths of 24 bits and more take the colour unchanged.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )
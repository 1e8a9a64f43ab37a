import pytest

from wirefdf.image import (
    TRUE_COLOR_SHIFTS,
    Image,
    good_color,
    rgb_shifts,
)

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _color_map_2(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def _fill(image, kind):
    for y in range(image.height):
        for x in range(image.width):
            color = _color_map_2(x, y, image.width, image.height, kind)
            image.set_pixel(x, y, good_color(color, 24, TRUE_COLOR_SHIFTS))


def test_new_image_properties():
    im1 = Image(IM1_SX, IM1_SY)
    assert im1.bits_per_pixel == 32
    assert im1.size_line == IM1_SX * 4
    assert im1.endian == 0
    assert len(im1.data) == im1.size_line * IM1_SY
    assert not any(im1.data)


@pytest.mark.parametrize(
    "width, height, kind", [(IM1_SX, IM1_SY, 1), (IM3_SX, IM3_SY, 1), (IM3_SX, IM3_SY, 2)]
)
def test_color_map_fill_reads_back(width, height, kind):
    image = Image(width, height)
    _fill(image, kind)
    for x, y in [(0, 0), (width - 1, 0), (0, height - 1), (width // 2, height // 3)]:
        assert image.get_pixel(x, y) == _color_map_2(x, y, width, height, kind)


def test_little_endian_byte_layout():
    image = Image(2, 1)
    image.set_pixel(1, 0, 0x11223344)
    assert image.data[4:8] == bytes([0x44, 0x33, 0x22, 0x11])


def test_big_endian_byte_layout():
    image = Image(2, 1, endian=1)
    image.set_pixel(0, 0, 0x11223344)
    assert image.data[0:4] == bytes([0x11, 0x22, 0x33, 0x44])
    assert image.get_pixel(0, 0) == 0x11223344


def test_negative_color_is_wrapped():
    image = Image(1, 1)
    image.set_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


@pytest.mark.parametrize("endian", [0, 1])
def test_to_rgb_bytes(endian):
    image = Image(2, 1, endian=endian)
    image.set_pixel(0, 0, 0xFF8000)
    image.set_pixel(1, 0, 0x0000FF)
    assert image.to_rgb_bytes() == bytes([0xFF, 0x80, 0x00, 0x00, 0x00, 0xFF])


def test_clear_zeroes_pixels():
    image = Image(3, 3)
    image.set_pixel(1, 1, 0xABCDEF)
    image.clear()
    assert image.get_pixel(1, 1) == 0
    assert not any(image.data)


def test_out_of_range_pixel():
    image = Image(IM1_SX, IM1_SY)
    with pytest.raises(IndexError):
        image.set_pixel(IM1_SX, 0, 0)
    with pytest.raises(IndexError):
        image.get_pixel(0, -1)


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (-1, 3)])
def test_bad_dimensions(size):
    with pytest.raises(ValueError):
        Image(*size)


def test_rgb_shifts_true_color():
    assert rgb_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_rgb_shifts_sixteen_bit():
    assert rgb_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


def test_rgb_shifts_rejects_empty_mask():
    with pytest.raises(ValueError):
        rgb_shifts(0, 0xFF00, 0xFF)


def test_good_color_deep_display_unchanged():
    assert good_color(0x123456, 24, TRUE_COLOR_SHIFTS) == 0x123456


def test_good_color_sixteen_bit():
    shifts = rgb_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(0xFFFFFF, 16, shifts) == 0xFFFF
    assert good_color(0xFF0000, 16, shifts) == 0xF800
    assert good_color(0x000000, 16, shifts) == 0
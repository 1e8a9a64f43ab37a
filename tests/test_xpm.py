import pytest

from wirefdf.colors import lookup_color
from wirefdf.xpm import (
    TRANSPARENT_PIXEL,
    XpmError,
    quoted_lines,
    strip_comments,
    text_rgb,
    xpm_file_to_image,
    xpm_to_image,
)

SIMPLE = ["2 2 2 1", ". c #FF0000", "# c None", ".#", "#."]


def test_text_rgb_hex():
    assert text_rgb("#FF0000", None) == 0xFF0000
    assert text_rgb("#00ff00", "ignored") == 0x00FF00


def test_text_rgb_names():
    assert text_rgb("red", None) == lookup_color("red")
    assert text_rgb("RED", None) == lookup_color("red")
    assert text_rgb("ghost", "white") == lookup_color("ghost white")


def test_text_rgb_none_and_unknown():
    assert text_rgb("None", None) == -1
    assert text_rgb("nosuchcolour", None) == 0
    assert text_rgb("red", "extra") == 0


def test_strip_block_comment():
    text = "a/*x*/b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.replace(" ", "") == "ab"


def test_strip_keeps_quoted_markers():
    text = '"/*" "//"'
    assert strip_comments(text) == text


def test_strip_line_comment_blanks_newline():
    text = "x// note\ny"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "\n" not in result
    assert result.replace(" ", "") == "xy"


def test_quoted_lines():
    assert quoted_lines('x "a" y "b c", "" z') == ["a", "b c", ""]


def test_simple_image():
    image = xpm_to_image(SIMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == TRANSPARENT_PIXEL
    assert image.get_pixel(0, 1) == TRANSPARENT_PIXEL
    assert image.get_pixel(1, 1) == 0xFF0000


def test_multi_char_keys():
    image = xpm_to_image(["2 1 2 3", "abc c blue", "xyz c #00FF00", "xyzabc"])
    assert image.get_pixel(0, 0) == 0x00FF00
    assert image.get_pixel(1, 0) == lookup_color("blue")


def test_two_word_colour_name():
    image = xpm_to_image(["1 1 1 1", "g c ghost white", "g"])
    assert image.get_pixel(0, 0) == lookup_color("ghost white")


def test_duplicate_keys_short_codes_last_wins():
    image = xpm_to_image(["1 1 2 1", "x c red", "x c blue", "x"])
    assert image.get_pixel(0, 0) == lookup_color("blue")


def test_duplicate_keys_long_codes_first_wins():
    image = xpm_to_image(["1 1 2 3", "xyz c red", "xyz c blue", "xyz"])
    assert image.get_pixel(0, 0) == lookup_color("red")


def test_unknown_key_is_black():
    image = xpm_to_image(["1 1 1 1", "a c red", "b"])
    assert image.get_pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        [],
    ],
)
def test_malformed_data(lines):
    with pytest.raises(XpmError):
        xpm_to_image(lines)


def test_file_round_trip(tmp_path):
    path = tmp_path / "open.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *open_xpm[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1",\n'
        '". c #00FF00", // green\n'
        '"o c None",\n'
        '".o"\n'
        "};\n"
    )
    image = xpm_file_to_image(path)
    assert (image.width, image.height) == (2, 1)
    assert image.get_pixel(0, 0) == 0x00FF00
    assert image.get_pixel(1, 0) == TRANSPARENT_PIXEL


def test_missing_file(tmp_path):
    with pytest.raises(XpmError):
        xpm_file_to_image(tmp_path / "absent.xpm")
import pytest

from wirefdf import textual


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t\n-42", -42),
        ("+17abc", 17),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("0012", 12),
    ],
)
def test_atoi(text, expected):
    assert textual.atoi(text) == expected


def test_atoi_wraps_like_int32():
    assert textual.atoi("2147483648") == -2147483648
    assert textual.atoi("2147483647") == 2147483647


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_itoa_round_trip(n):
    assert textual.atoi(textual.itoa(n)) == n


def test_itoa_values():
    assert textual.itoa(0) == "0"
    assert textual.itoa(-15) == "-15"


def test_split_drops_empty_pieces():
    assert textual.split("  a b  c ", " ") == ["a", "b", "c"]
    assert textual.split("", " ") == []
    assert textual.split("   ", " ") == []


def test_split_pieces_contain_no_separator():
    pieces = textual.split("1,2,,3,ff", ",")
    assert pieces == ["1", "2", "3", "ff"]
    assert all("," not in piece for piece in pieces)


def test_split_empty_separator():
    assert textual.split("word", "") == ["word"]


def test_strtrim():
    assert textual.strtrim("xxhelloyx", "xy") == "hello"
    assert textual.strtrim("xyxy", "xy") == ""
    assert textual.strtrim("  keep  ", "") == "  keep  "


def test_substr():
    assert textual.substr("hello world", 6, 5) == "world"
    assert textual.substr("hello", 2, 100) == "llo"
    assert textual.substr("hello", 5, 3) == ""
    assert textual.substr("hello", 1, 0) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        textual.substr("hello", -1, 2)


def test_strnstr():
    assert textual.strnstr("lorem ipsum", "ipsum", 11) == 6
    assert textual.strnstr("lorem ipsum", "ipsum", 10) is None
    assert textual.strnstr("lorem", "", 0) == 0
    assert textual.strnstr("lorem", "x", 5) is None
    assert textual.strnstr("lorem", "lo", 0) is None


def test_strncmp():
    assert textual.strncmp("abc", "abc", 3) == 0
    assert textual.strncmp("abc", "abd", 2) == 0
    assert textual.strncmp("abc", "abd", 3) < 0
    assert textual.strncmp("abd", "abc", 3) > 0
    assert textual.strncmp("ab", "abc", 5) == -ord("c")
    assert textual.strncmp("x", "y", 0) == 0


def test_strlcpy():
    assert textual.strlcpy("hello", 3) == ("he", 5)
    assert textual.strlcpy("hello", 10) == ("hello", 5)
    assert textual.strlcpy("hello", 0) == ("", 5)


def test_strlcat():
    assert textual.strlcat("ab", "cd", 10) == ("abcd", 4)
    assert textual.strlcat("ab", "cdef", 4) == ("abc", 6)
    assert textual.strlcat("abcd", "ef", 2) == ("abcd", 4)
    assert textual.strlcat("ab", "cd", 0) == ("ab", 2)


def test_strchr_and_strrchr():
    text = "banana"
    assert textual.strchr(text, "a") == 1
    assert textual.strrchr(text, "a") == 5
    assert textual.strchr(text, "z") is None
    assert textual.strrchr(text, "z") is None
    assert textual.strchr(text, "\0") == len(text)
    assert textual.strrchr(text, "\0") == len(text)


def test_strjoin():
    assert textual.strjoin("foo", "bar") == "foobar"
    assert textual.strjoin(None, "bar") == "bar"
    assert textual.strjoin("foo", None) == "foo"
    assert textual.strjoin(None, None) is None


def test_strmapi():
    result = textual.strmapi("abc", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbC"
    assert textual.strmapi("", lambda i, c: c) == ""


def test_striteri_modifies_in_place():
    buffer = list("abcd")
    seen = []

    def visit(index, ch):
        seen.append(index)
        return ch.upper() if index >= 2 else None

    assert textual.striteri(buffer, visit) is None
    assert buffer == ["a", "b", "C", "D"]
    assert seen == [0, 1, 2, 3]
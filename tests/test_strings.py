import pytest

from hyprutils.strings import is_number, replace_in_string, trim


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("               a             ", "a"),
        ("   a   a           ", "a   a"),
        ("a", "a"),
        ("                           ", ""),
        ("", ""),
        ("\t\n a \r\n", "a"),
    ],
)
def test_trim(text, expected):
    assert trim(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("99214123434", True),
        ("-35252345234", True),
        ("---3423--432", False),
        ("s---3423--432", False),
        ("---3423--432s", False),
        ("1s", False),
        ("", False),
        ("-", False),
        ("--0", False),
        ("abc", False),
    ],
)
def test_is_number_integers(text, expected):
    assert is_number(text) is expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0.0", True),
        ("0.2", True),
        ("0.", False),
        (".0", False),
        ("", False),
        ("vvss", False),
        ("0.9999s", False),
        ("s0.9999", False),
        ("-1.0", True),
        ("-1..0", False),
        ("-10.0000000001", True),
    ],
)
def test_is_number_floats(text, expected):
    assert is_number(text, True) is expected


def test_is_number_rejects_decimal_without_allow_float():
    assert is_number("0.2") is False


def test_replace_in_string():
    assert replace_in_string("hello world!", "hello", "hi") == "hi world!"


def test_replace_in_string_does_not_rescan_inserted_text():
    assert replace_in_string("aaa", "a", "aa") == "aaaaaa"


def test_replace_in_string_empty_text_unchanged():
    assert replace_in_string("", "x", "y") == ""


def test_replace_in_string_rejects_empty_pattern():
    with pytest.raises(ValueError):
        replace_in_string("abc", "", "x")
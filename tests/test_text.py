import pytest

from barutil.text import column_width, ltrim, rtrim, sanitize_string, trim


@pytest.mark.parametrize("value", ["abc", " abc", "\t\n abc \f\v\r", "a b"])
def test_trim_is_both_trims(value):
    assert trim(value) == rtrim(ltrim(value))
    assert trim(value) == value.strip(" \n\r\t\f\v")


def test_ltrim_keeps_trailing():
    assert ltrim("  x  ") == "x  "


def test_rtrim_keeps_leading():
    assert rtrim("  x  ") == "  x"


def test_trim_all_whitespace_is_empty():
    assert trim(" \t\n") == ""
    assert ltrim("") == ""


def test_sanitize_escapes_each_character():
    assert sanitize_string("&") == "&amp;"
    assert sanitize_string("<") == "&lt;"
    assert sanitize_string(">") == "&gt;"
    assert sanitize_string('"') == "&quot;"
    assert sanitize_string("'") == "&apos;"


def test_sanitize_does_not_double_escape():
    assert sanitize_string("<&>") == "&lt;&amp;&gt;"


def test_sanitize_leaves_plain_text():
    assert sanitize_string("plain text") == "plain text"


def test_column_width_ascii_equals_length():
    assert column_width("hello") == len("hello")


def test_column_width_wide_characters_count_double():
    text = "\u4e2d\u6587"
    assert column_width(text) == 2 * len(text)
    assert column_width("a" + text) == 1 + 2 * len(text)
# tests/test_timestamps.py
import pytest

from ar_core.annotations.utils.timestamps import (
    format_duration_colon,
    format_duration_letters,
    parse_duration_colon,
    parse_duration_letters,
)
from ar_core.errors import FormatError


@pytest.mark.parametrize("text, expected", [
    ("1:02:03", 3723),
    ("90", 90),
    ("0:05", 5),
    ("0:05.5", 5.5),
    ("1:00.5", 60.5),
    ("1:00:00:00", 216000),
    (" 0:10 ", 10),
])
def test_parse_duration_colon(text, expected):
    assert parse_duration_colon(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "1:xx", "1::2", "abc", "nan", "inf", "1:2:"])
def test_parse_duration_colon_rejects_non_numeric(text):
    with pytest.raises(FormatError):
        parse_duration_colon(text)


def test_parse_duration_colon_rejects_missing():
    with pytest.raises(FormatError):
        parse_duration_colon(None)


@pytest.mark.parametrize("text, expected", [
    ("1h2m3s", 3723),
    ("45s", 45),
    ("", 0),
    ("1m", 60),
    ("2h", 7200),
    ("1h30s", 3630),
    ("10m5s", 605),
])
def test_parse_duration_letters(text, expected):
    assert parse_duration_letters(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("90", 0),
    ("abc", 0),
    ("s", 0),
    ("1h30", 3600),
    ("2m30", 120),
    ("3s2m", 123),
    (None, 0),
])
def test_parse_duration_letters_counts_complete_components_only(text, expected):
    assert parse_duration_letters(text) == expected


@pytest.mark.parametrize("seconds, expected", [
    (3723, "1:02:03"),
    (5, "0:05"),
    (5.5, "0:05.5"),
    (65.25, "1:05.25"),
    (0, "0:00"),
])
def test_format_duration_colon(seconds, expected):
    assert format_duration_colon(seconds) == expected


def test_format_duration_colon_reads_back():
    assert parse_duration_colon(format_duration_colon(3723.125)) == pytest.approx(3723.125)


@pytest.mark.parametrize("seconds, expected", [
    (3723, "1h2m3s"),
    (0, "0s"),
    (3600, "1h"),
    (60, "1m"),
    (61, "1m1s"),
])
def test_format_duration_letters(seconds, expected):
    assert format_duration_letters(seconds) == expected


def test_format_rejects_negative():
    with pytest.raises(ValueError):
        format_duration_colon(-1)
    with pytest.raises(ValueError):
        format_duration_letters(-1)

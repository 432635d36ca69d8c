"""Tests for byte-size parsing."""

import pytest

from file_splitter.config import parse_byte_size
from file_splitter.errors import InvalidArgument, InvalidByteSize


def test_parse_kilobytes() -> None:
    assert parse_byte_size("100K") == 100000


def test_parse_megabytes() -> None:
    assert parse_byte_size("1M") == 1000000


def test_parse_gigabytes() -> None:
    assert parse_byte_size("1G") == 1000000000


def test_unit_is_case_insensitive() -> None:
    assert parse_byte_size("3k") == parse_byte_size("3K") == 3000
    assert parse_byte_size("2m") == 2000000
    assert parse_byte_size("5g") == 5000000000


def test_zero_magnitude_parses() -> None:
    assert parse_byte_size("0K") == 0


@pytest.mark.parametrize(
    "raw",
    ["", "K", "100", "100B", "100KB", "1.5M", "-1K", "+1K", " 1K", "1 K", "1_000K", "abcK", "١K"],
)
def test_rejects_malformed_sizes(raw: str) -> None:
    with pytest.raises(InvalidByteSize):
        parse_byte_size(raw)


def test_invalid_byte_size_is_an_invalid_argument() -> None:
    with pytest.raises(InvalidArgument):
        parse_byte_size("10X")
    with pytest.raises(ValueError):
        parse_byte_size("10X")

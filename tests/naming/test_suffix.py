"""Tests for output file suffixes."""

import pytest

from file_splitter.errors import SuffixExhausted
from file_splitter.naming import output_filename, suffix, suffix_capacity


class TestAlphabeticSuffix:
    """Test cases for two-letter alphabetic suffixes."""

    def test_first_file_is_aa(self) -> None:
        assert suffix(1, 2, False) == "aa"

    def test_end_of_first_block(self) -> None:
        """26 is the last file of the first block, not the first of the second."""
        assert suffix(26, 2, False) == "az"

    def test_second_block_starts_at_27(self) -> None:
        assert suffix(27, 2, False) == "ba"

    def test_block_boundaries(self) -> None:
        assert suffix(52, 2, False) == "bz"
        assert suffix(53, 2, False) == "ca"
        assert suffix(676, 2, False) == "zz"

    def test_wider_suffix_is_padded_with_a(self) -> None:
        assert suffix(1, 4, False) == "aaaa"
        assert suffix(28, 5, False) == "aaabb"

    def test_sequence_is_strictly_increasing(self) -> None:
        names = [suffix(n, 2, False) for n in range(1, 677)]
        assert names == sorted(names)
        assert len(set(names)) == 676

    def test_beyond_two_letters_raises(self) -> None:
        with pytest.raises(SuffixExhausted):
            suffix(677, 2, False)
        with pytest.raises(SuffixExhausted):
            suffix(677, 6, False)


class TestNumericSuffix:
    """Test cases for zero-padded numeric suffixes."""

    def test_first_file_is_zero(self) -> None:
        assert suffix(1, 2, True) == "00"

    def test_zero_padding(self) -> None:
        assert suffix(11, 2, True) == "10"
        assert suffix(8, 5, True) == "00007"

    def test_largest_fitting_number(self) -> None:
        assert suffix(100, 2, True) == "99"

    def test_overflow_raises(self) -> None:
        with pytest.raises(SuffixExhausted):
            suffix(101, 2, True)


def test_invalid_arguments() -> None:
    with pytest.raises(ValueError):
        suffix(0, 2, False)
    with pytest.raises(ValueError):
        suffix(1, 1, True)


def test_suffix_capacity() -> None:
    assert suffix_capacity(2, False) == 676
    assert suffix_capacity(13, False) == 676
    assert suffix_capacity(2, True) == 100
    assert suffix_capacity(3, True) == 1000


def test_output_filename() -> None:
    assert output_filename("x", 1, 2, False) == "xaa"
    assert output_filename("part-", 27, 3, False) == "part-aba"
    assert output_filename("x", 1, 2, True) == "x00"

"""Output file naming: fixed-width alphabetic or numeric suffixes."""

from string import ascii_lowercase

from file_splitter.errors import SuffixExhausted

ALPHABET_SIZE = len(ascii_lowercase)

# Alphabetic suffixes carry a two-letter code; wider suffixes are padded with this.
ALPHA_CODE_LENGTH = 2
ALPHA_PAD_CHAR = "a"


def suffix_capacity(suffix_length: int, numeric: bool) -> int:
    """Number of distinct suffixes available for the given width and style."""
    if numeric:
        return 10**suffix_length
    return ALPHABET_SIZE**ALPHA_CODE_LENGTH


def suffix(file_number: int, suffix_length: int, numeric: bool) -> str:
    """
    Return the suffix for the `file_number`-th output file (1-based).

    Numeric suffixes are `file_number - 1` zero-padded to `suffix_length`.
    Alphabetic suffixes enumerate "aa", "ab", ..., "az", "ba", ... and are
    left-padded with "a" when `suffix_length` is wider than two.

    Raises:
        ValueError: file_number < 1 or suffix_length < 2.
        SuffixExhausted: file_number does not fit the suffix width.
    """
    if file_number < 1:
        raise ValueError(f"file_number must be >= 1, got {file_number}")
    if suffix_length < ALPHA_CODE_LENGTH:
        raise ValueError(f"suffix_length must be >= {ALPHA_CODE_LENGTH}, got {suffix_length}")

    if file_number > suffix_capacity(suffix_length, numeric):
        raise SuffixExhausted(
            f"no {'numeric' if numeric else 'alphabetic'} suffix of length "
            f"{suffix_length} for file number {file_number}"
        )

    if numeric:
        return str(file_number - 1).zfill(suffix_length)

    # A number on a block boundary (26, 52, ...) is the last of the previous block.
    if file_number % ALPHABET_SIZE == 0:
        first_idx = file_number // ALPHABET_SIZE - 1
    else:
        first_idx = file_number // ALPHABET_SIZE
    second_idx = file_number - first_idx * ALPHABET_SIZE - 1

    code = ascii_lowercase[first_idx] + ascii_lowercase[second_idx]
    return code.rjust(suffix_length, ALPHA_PAD_CHAR)


def output_filename(prefix: str, file_number: int, suffix_length: int, numeric: bool) -> str:
    """Full output name: prefix followed by the suffix."""
    return prefix + suffix(file_number, suffix_length, numeric)

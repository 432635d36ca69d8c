"""Parsing of human-friendly byte sizes ("100K", "1M", "1G")."""

from file_splitter.errors import InvalidByteSize

# Decimal multipliers, not powers of two.
UNIT_MULTIPLIERS = {
    "k": 1000,
    "m": 1000 * 1000,
    "g": 1000 * 1000 * 1000,
}


def parse_byte_size(raw: str) -> int:
    """
    Convert a size string into an absolute byte count.

    The last character is the unit (k, m or g, any case); everything before it
    is the decimal magnitude and must be plain ASCII digits.

    Raises:
        InvalidByteSize: unknown or missing unit, or a malformed magnitude.
    """
    if not raw:
        raise InvalidByteSize("byte size must not be empty")

    magnitude, unit = raw[:-1], raw[-1].lower()
    multiplier = UNIT_MULTIPLIERS.get(unit)
    if multiplier is None:
        raise InvalidByteSize(f"invalid byte size {raw!r}: unit must be one of K, M, G")

    if not (magnitude.isascii() and magnitude.isdigit()):
        raise InvalidByteSize(f"invalid byte size {raw!r}: {magnitude!r} is not a whole number")

    return int(magnitude) * multiplier

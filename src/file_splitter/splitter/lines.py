"""Line iteration over binary sources."""

from collections.abc import Iterable, Iterator


def strip_line_terminator(raw_line: bytes) -> bytes:
    """Drop one trailing "\\n" or "\\r\\n"; a lone "\\r" is kept."""
    if raw_line.endswith(b"\n"):
        raw_line = raw_line[:-1]
        if raw_line.endswith(b"\r"):
            raw_line = raw_line[:-1]
    return raw_line


def iter_lines(lines: Iterable[bytes]) -> Iterator[bytes]:
    """
    Yield lines without their terminators.

    A final line without a terminator is yielded as-is; a trailing terminator
    does not produce an extra empty line.
    """
    for raw_line in lines:
        yield strip_line_terminator(raw_line)

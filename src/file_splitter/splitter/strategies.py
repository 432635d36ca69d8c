"""The four splitting strategies."""

import logging
import os
import re
from typing import BinaryIO

from file_splitter.splitter.lines import iter_lines
from file_splitter.splitter.types import LINE_SEPARATOR
from file_splitter.splitter.writer import ChunkWriter

logger = logging.getLogger(__name__)


def stream_length(source: BinaryIO) -> int:
    """Bytes remaining from the current position to the end of `source`."""
    start = source.tell()
    end = source.seek(0, os.SEEK_END)
    source.seek(start)
    return end - start


def fill_buffer(source: BinaryIO, view: memoryview) -> int:
    """
    Fill `view` from `source`, blocking until it is full or input ends.

    Returns the number of bytes filled; less than len(view) only at end of input.
    """
    filled = 0
    while filled < len(view):
        n = source.readinto(view[filled:])
        if not n:
            break
        filled += n
    return filled


def split_by_line_count(source: BinaryIO, line_count: int, writer: ChunkWriter) -> None:
    """
    Write groups of lines, flushing after the line at 0-based position i
    whenever i > 0 and i % line_count == 0.

    The first file therefore holds line_count + 1 lines, later ones line_count.
    Lines are re-joined with "\\n" and the trailing newline is dropped.
    """
    buffer: list[bytes] = []

    for i, line in enumerate(iter_lines(source)):
        writer.stats.lines_read += 1
        buffer.append(line)

        if i > 0 and i % line_count == 0:
            writer.emit(LINE_SEPARATOR.join(buffer))
            buffer = []

    if buffer:
        writer.emit(LINE_SEPARATOR.join(buffer))


def split_by_chunk_count(source: BinaryIO, chunk_count: int, writer: ChunkWriter) -> None:
    """
    Divide the remaining input into `chunk_count` files by size.

    The first chunk_count - 1 files get total // chunk_count bytes each and the
    last file absorbs the remainder, so sizes always sum to the total. Empty
    chunks (total < chunk_count) are not written.
    """
    total = stream_length(source)
    chunk_size = total // chunk_count
    last_chunk_size = total - chunk_size * (chunk_count - 1)
    logger.debug(
        "Chunk split: total=%d, chunk_size=%d, last_chunk_size=%d",
        total,
        chunk_size,
        last_chunk_size,
    )

    # One buffer, big enough for the largest (last) chunk.
    buffer = bytearray(last_chunk_size)
    with memoryview(buffer) as view:
        for chunk_number in range(1, chunk_count + 1):
            size = last_chunk_size if chunk_number == chunk_count else chunk_size
            filled = fill_buffer(source, view[:size])
            if filled:
                writer.emit(view[:filled])


def split_by_byte_count(source: BinaryIO, byte_count: int, writer: ChunkWriter) -> None:
    """Write consecutive blocks of `byte_count` bytes; the last may be shorter."""
    buffer_size = byte_count
    if source.seekable():
        # Never allocate more than the input can fill.
        buffer_size = max(1, min(byte_count, stream_length(source)))

    buffer = bytearray(buffer_size)
    with memoryview(buffer) as view:
        while True:
            filled = fill_buffer(source, view)
            if not filled:
                break
            writer.emit(view[:filled])
            if filled < byte_count:
                break


def split_by_pattern(source: BinaryIO, pattern: re.Pattern[str], writer: ChunkWriter) -> None:
    """
    Start a new file at every line where `pattern` matches.

    The matching line opens the next file. A match on the very first line does
    not produce an empty file.
    """
    buffer: list[bytes] = []
    matches = 0

    for line in iter_lines(source):
        writer.stats.lines_read += 1
        if pattern.search(line.decode("utf-8", errors="replace")):
            matches += 1
            if buffer:
                writer.emit(LINE_SEPARATOR.join(buffer))
                buffer = []

        buffer.append(line)

    if buffer:
        writer.emit(LINE_SEPARATOR.join(buffer))

    if matches == 0:
        logger.info("Pattern %r matched no lines", pattern.pattern)

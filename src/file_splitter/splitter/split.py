"""Split entry points: dispatch a config to its strategy."""

import logging
import time
from pathlib import Path
from typing import BinaryIO

from file_splitter.config import (
    ByByteCount,
    ByChunkCount,
    ByLineCount,
    ByPattern,
    SplitConfig,
    validate_config,
)
from file_splitter.errors import InvalidArgument, SourceUnreadable
from file_splitter.splitter.strategies import (
    split_by_byte_count,
    split_by_chunk_count,
    split_by_line_count,
    split_by_pattern,
)
from file_splitter.splitter.types import SplitStats
from file_splitter.splitter.writer import ChunkWriter

logger = logging.getLogger(__name__)


def describe_method(config: SplitConfig) -> str:
    """Short readable form of the splitting method, for logs."""
    method = config.method
    if isinstance(method, ByChunkCount):
        return f"chunks={method.count}"
    if isinstance(method, ByByteCount):
        return f"bytes={method.count}"
    if isinstance(method, ByPattern):
        return f"pattern={method.pattern.pattern!r}"
    return f"lines={method.count}"


def split(config: SplitConfig, source: BinaryIO) -> SplitStats:
    """
    Split `source` into output files according to `config`.

    `source` is a readable binary stream positioned where splitting starts.
    Output files are written relative to the current working directory.

    Raises:
        InvalidArgument: the config is out of range (checked before reading).
        SourceUnreadable: reading from `source` failed.
        OutputWriteFailed: an output file could not be written. Files written
            before the failure are left in place.
    """
    validate_config(config)

    writer = ChunkWriter(config.prefix, config.suffix_length, config.numeric_suffix)
    method = config.method

    try:
        if isinstance(method, ByChunkCount):
            split_by_chunk_count(source, method.count, writer)
        elif isinstance(method, ByByteCount):
            split_by_byte_count(source, method.count, writer)
        elif isinstance(method, ByPattern):
            split_by_pattern(source, method.pattern, writer)
        elif isinstance(method, ByLineCount):
            split_by_line_count(source, method.count, writer)
        else:
            raise InvalidArgument(f"unknown splitting method: {method!r}")
    except OSError as exc:
        # Output failures are already wrapped by the writer; what is left is the source.
        raise SourceUnreadable(f"cannot read {config.source_path}: {exc}") from exc

    return writer.stats


def split_file(config: SplitConfig) -> SplitStats:
    """Open `config.source_path` and split it, logging progress and timing."""
    start = time.perf_counter()
    validate_config(config)

    source_path = Path(config.source_path)
    logger.info(
        "Starting: file=%s, %s, prefix=%r, suffix_length=%d, numeric=%s",
        source_path.name,
        describe_method(config),
        config.prefix,
        config.suffix_length,
        config.numeric_suffix,
    )

    try:
        source = open(source_path, "rb")  # noqa: SIM115
    except OSError as exc:
        raise SourceUnreadable(f"cannot open {source_path}: {exc.strerror or exc}") from exc

    with source:
        stats = split(config, source)

    elapsed = time.perf_counter() - start
    logger.info(
        "Done: %d files, %d bytes written in %.2fs",
        stats.files_written,
        stats.bytes_written,
        elapsed,
    )
    return stats

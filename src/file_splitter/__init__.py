"""File Splitter - split one file into many by lines, chunks, bytes or pattern."""

from file_splitter.config import (
    ByByteCount,
    ByChunkCount,
    ByLineCount,
    ByPattern,
    SplitConfig,
    build_config,
    parse_byte_size,
)
from file_splitter.errors import (
    InvalidArgument,
    InvalidByteSize,
    OutputWriteFailed,
    SourceUnreadable,
    SplitError,
    SuffixExhausted,
)
from file_splitter.naming import suffix
from file_splitter.splitter import SplitStats, split, split_file

__all__ = [
    "ByByteCount",
    "ByChunkCount",
    "ByLineCount",
    "ByPattern",
    "InvalidArgument",
    "InvalidByteSize",
    "OutputWriteFailed",
    "SourceUnreadable",
    "SplitConfig",
    "SplitError",
    "SplitStats",
    "SuffixExhausted",
    "build_config",
    "parse_byte_size",
    "split",
    "split_file",
    "suffix",
]

"""Split configuration, option validation and byte-size parsing."""

from file_splitter.config.size import parse_byte_size
from file_splitter.config.types import (
    ByByteCount,
    ByChunkCount,
    ByLineCount,
    ByPattern,
    SplitConfig,
    SplitMethod,
)
from file_splitter.config.validate import build_config, validate_config

__all__ = [
    "ByByteCount",
    "ByChunkCount",
    "ByLineCount",
    "ByPattern",
    "SplitConfig",
    "SplitMethod",
    "build_config",
    "parse_byte_size",
    "validate_config",
]

"""Building and validating split configurations before any file I/O."""

import re

from file_splitter.config.size import parse_byte_size
from file_splitter.config.types import (
    DEFAULT_LINE_COUNT,
    DEFAULT_PREFIX,
    DEFAULT_SUFFIX_LENGTH,
    MAX_CHUNK_COUNT,
    MAX_SUFFIX_LENGTH,
    MIN_SUFFIX_LENGTH,
    ByByteCount,
    ByChunkCount,
    ByLineCount,
    ByPattern,
    SplitConfig,
    SplitMethod,
)
from file_splitter.errors import InvalidArgument
from file_splitter.naming import suffix_capacity


def build_config(
    file_path: str,
    prefix: str = DEFAULT_PREFIX,
    *,
    line_count: int | None = None,
    chunk_count: int | None = None,
    byte_count: int | str | None = None,
    pattern: str | None = None,
    suffix_length: int = DEFAULT_SUFFIX_LENGTH,
    numeric_suffix: bool = False,
) -> SplitConfig:
    """
    Build a validated SplitConfig from raw option values.

    At most one splitting method may be given; with none, splitting falls back
    to DEFAULT_LINE_COUNT lines per file. `byte_count` may be an int or a size
    string like "100K".

    Raises:
        InvalidArgument: conflicting methods, out-of-range values or a
            malformed pattern or byte size.
    """
    given = [
        name
        for name, value in (
            ("line_count", line_count),
            ("chunk_count", chunk_count),
            ("byte_count", byte_count),
            ("pattern", pattern),
        )
        if value is not None
    ]
    if len(given) > 1:
        raise InvalidArgument(f"only one splitting method allowed, got {', '.join(given)}")

    method: SplitMethod
    if chunk_count is not None:
        method = ByChunkCount(chunk_count)
    elif byte_count is not None:
        if isinstance(byte_count, str):
            byte_count = parse_byte_size(byte_count)
        method = ByByteCount(byte_count)
    elif pattern is not None:
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            raise InvalidArgument(f"invalid pattern {pattern!r}: {exc}") from exc
        method = ByPattern(compiled)
    else:
        method = ByLineCount(DEFAULT_LINE_COUNT if line_count is None else line_count)

    config = SplitConfig(
        source_path=file_path,
        method=method,
        prefix=prefix,
        suffix_length=suffix_length,
        numeric_suffix=numeric_suffix,
    )
    validate_config(config)
    return config


def validate_config(config: SplitConfig) -> None:
    """Check ranges on an already-built config. Raises InvalidArgument."""
    if not config.source_path:
        raise InvalidArgument("file path must not be empty")

    if not MIN_SUFFIX_LENGTH <= config.suffix_length <= MAX_SUFFIX_LENGTH:
        raise InvalidArgument(
            f"suffix length must be between {MIN_SUFFIX_LENGTH} and {MAX_SUFFIX_LENGTH}, "
            f"got {config.suffix_length}"
        )

    method = config.method
    if isinstance(method, ByLineCount):
        if method.count < 1:
            raise InvalidArgument(f"line count must be >= 1, got {method.count}")
    elif isinstance(method, ByChunkCount):
        if not 1 <= method.count <= MAX_CHUNK_COUNT:
            raise InvalidArgument(
                f"chunk count must be between 1 and {MAX_CHUNK_COUNT}, got {method.count}"
            )
        capacity = suffix_capacity(config.suffix_length, config.numeric_suffix)
        if method.count > capacity:
            raise InvalidArgument(
                f"chunk count {method.count} needs more than the {capacity} suffixes "
                f"of length {config.suffix_length}"
            )
    elif isinstance(method, ByByteCount):
        if method.count < 1:
            raise InvalidArgument(f"byte count must be >= 1, got {method.count}")
    elif isinstance(method, ByPattern):
        if not isinstance(method.pattern, re.Pattern):
            raise InvalidArgument("pattern must be a compiled regular expression")
    else:
        raise InvalidArgument(f"unknown splitting method: {method!r}")

"""Split configuration: defaults, method variants and the config record."""

import re
from dataclasses import dataclass, field
from typing import TypeAlias

DEFAULT_PREFIX = "x"
DEFAULT_LINE_COUNT = 1000

# Suffix width bounds accepted on the command line.
DEFAULT_SUFFIX_LENGTH = 2
MIN_SUFFIX_LENGTH = 2
MAX_SUFFIX_LENGTH = 13

# 26 * 26 two-letter suffixes.
MAX_CHUNK_COUNT = 676


@dataclass(frozen=True, slots=True)
class ByLineCount:
    """Start a new file every `count` lines."""

    count: int = DEFAULT_LINE_COUNT


@dataclass(frozen=True, slots=True)
class ByChunkCount:
    """Divide the file into `count` chunks of (almost) equal byte size."""

    count: int


@dataclass(frozen=True, slots=True)
class ByByteCount:
    """Write at most `count` bytes per file."""

    count: int


@dataclass(frozen=True, slots=True)
class ByPattern:
    """Start a new file at every line matching `pattern`."""

    pattern: re.Pattern[str]


SplitMethod: TypeAlias = ByLineCount | ByChunkCount | ByByteCount | ByPattern


@dataclass(frozen=True, slots=True)
class SplitConfig:
    """Everything one split run needs. Built once, read-only afterwards."""

    source_path: str
    method: SplitMethod = field(default_factory=ByLineCount)
    prefix: str = DEFAULT_PREFIX
    suffix_length: int = DEFAULT_SUFFIX_LENGTH
    numeric_suffix: bool = False

"""Shared structures for split runs."""

from dataclasses import dataclass, field
from pathlib import Path

# Output lines are re-joined with this separator; no trailing newline is added.
LINE_SEPARATOR = b"\n"


@dataclass
class SplitStats:
    """Statistics from one split run."""

    files_written: int = 0
    bytes_written: int = 0
    lines_read: int = 0
    outputs: list[Path] = field(default_factory=list)

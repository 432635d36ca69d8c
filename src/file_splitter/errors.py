"""Exceptions raised by file_splitter."""

from pathlib import Path


class SplitError(Exception):
    """Base class for all splitting errors."""

    pass


class InvalidArgument(SplitError, ValueError):
    """Conflicting or out-of-range options. Raised before any file I/O."""

    pass


class InvalidByteSize(InvalidArgument):
    """A byte-size string such as "100K" could not be parsed."""

    pass


class SuffixExhausted(SplitError):
    """The suffix scheme has no name left for the requested output index."""

    pass


class SourceUnreadable(SplitError):
    """The input file is missing or cannot be read."""

    pass


class OutputWriteFailed(SplitError):
    """An output file could not be created or written."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        super().__init__(f"cannot write {self.path}: {reason}")

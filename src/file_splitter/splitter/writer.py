"""Writing numbered output files."""

import logging
from pathlib import Path

from file_splitter.errors import OutputWriteFailed
from file_splitter.naming import output_filename
from file_splitter.splitter.types import SplitStats

logger = logging.getLogger(__name__)


class ChunkWriter:
    """
    Writes each chunk to the next output file: prefix + suffix(index).

    The index starts at 1 and advances once per file actually written. Files
    are created fresh, truncating any existing file of the same name.
    """

    def __init__(self, prefix: str, suffix_length: int, numeric_suffix: bool):
        self._prefix = prefix
        self._suffix_length = suffix_length
        self._numeric_suffix = numeric_suffix
        self._next_index = 1
        self.stats = SplitStats()

    def next_path(self) -> Path:
        """Path the next emitted chunk will be written to."""
        return Path(
            output_filename(
                self._prefix, self._next_index, self._suffix_length, self._numeric_suffix
            )
        )

    def emit(self, content: bytes | memoryview) -> Path:
        """Write `content` as one complete output file and return its path."""
        path = self.next_path()
        try:
            with open(path, "wb") as handle:
                handle.write(content)
        except OSError as exc:
            raise OutputWriteFailed(path, exc.strerror or str(exc)) from exc

        self._next_index += 1
        self.stats.files_written += 1
        self.stats.bytes_written += len(content)
        self.stats.outputs.append(path)
        logger.debug("Wrote %s (%d bytes)", path, len(content))
        return path

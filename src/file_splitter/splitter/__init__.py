"""Splitting engine."""

from file_splitter.splitter.split import split, split_file
from file_splitter.splitter.types import SplitStats

__all__ = ["SplitStats", "split", "split_file"]

"""Output file naming."""

from file_splitter.naming.suffix import output_filename, suffix, suffix_capacity

__all__ = ["output_filename", "suffix", "suffix_capacity"]

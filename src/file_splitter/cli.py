"""Command-line interface for file splitter."""

import argparse
import logging
import sys

from file_splitter.config import build_config
from file_splitter.config.types import (
    DEFAULT_LINE_COUNT,
    DEFAULT_PREFIX,
    DEFAULT_SUFFIX_LENGTH,
    MAX_CHUNK_COUNT,
    MAX_SUFFIX_LENGTH,
    MIN_SUFFIX_LENGTH,
)
from file_splitter.errors import InvalidArgument, SplitError
from file_splitter.splitter import split_file


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="file-splitter",
        description=(
            "Split FILE into PREFIXaa, PREFIXab, ... by line count, chunk count, "
            "byte count or pattern."
        ),
    )

    parser.add_argument("file_path", help="Path to the file to split")
    parser.add_argument(
        "prefix",
        nargs="?",
        default=DEFAULT_PREFIX,
        help=f"Output file name prefix (default: {DEFAULT_PREFIX})",
    )

    method = parser.add_mutually_exclusive_group()
    method.add_argument(
        "-l",
        "--line-count",
        type=int,
        help=f"Lines per output file (default: {DEFAULT_LINE_COUNT})",
    )
    method.add_argument(
        "-n",
        "--chunk-count",
        type=int,
        help=f"Number of output files, split by size (1-{MAX_CHUNK_COUNT})",
    )
    method.add_argument(
        "-b",
        "--byte-count",
        help="Bytes per output file, with a K, M or G unit (e.g. 100K, 1M, 1G)",
    )
    method.add_argument(
        "-p",
        "--pattern",
        help="Regular expression; each matching line starts a new output file",
    )

    parser.add_argument(
        "-a",
        "--suffix-length",
        type=int,
        default=DEFAULT_SUFFIX_LENGTH,
        help=(
            f"Suffix length ({MIN_SUFFIX_LENGTH}-{MAX_SUFFIX_LENGTH}, "
            f"default: {DEFAULT_SUFFIX_LENGTH})"
        ),
    )
    parser.add_argument(
        "-d",
        "--numeric-suffix",
        action="store_true",
        help="Use numeric suffixes instead of alphabetic",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    try:
        config = build_config(
            args.file_path,
            args.prefix,
            line_count=args.line_count,
            chunk_count=args.chunk_count,
            byte_count=args.byte_count,
            pattern=args.pattern,
            suffix_length=args.suffix_length,
            numeric_suffix=args.numeric_suffix,
        )
    except InvalidArgument as exc:
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 2

    try:
        split_file(config)
    except SplitError as exc:
        print(f"Application error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

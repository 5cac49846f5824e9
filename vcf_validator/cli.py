"""Command-line entrypoint for the VCF validator."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from . import __version__, validation
from .logging_utils import configure_logging, log_message
from .models import ErrorKind

# Re-export for easier test monkeypatching.
validate_vcf = validation.validate_vcf

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

SUCCESS_MESSAGE = "VCF file is valid."
FAILURE_MESSAGE = "Invalid VCF file format."


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the validator CLI."""

    parser = _ArgumentParser(
        prog="vcf-validator",
        description=(
            "Check that a VCF file (plain or BGZF/gzip compressed) follows the "
            "meta-information, header and record grammar."
        ),
    )
    parser.add_argument("vcf_file", help="VCF file to validate. Files not ending in .vcf are decompressed.")
    parser.add_argument(
        "--check-header-columns",
        dest="check_header_columns",
        action="store_true",
        help="Also require the #CHROM ... INFO column names on the column header line.",
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        help="Append a timestamped log of the run to this file.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose console logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI args and normalise the file path."""
    args = build_parser().parse_args(argv)
    args.vcf_file = str(Path(args.vcf_file))
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the file named on the command line and return the exit status."""

    args = parse_arguments(argv)
    if args.verbose:
        level = logging.DEBUG
    elif args.log_file:
        level = logging.INFO
    else:
        level = logging.WARNING
    configure_logging(
        log_level=level,
        log_file=args.log_file,
        enable_file_logging=bool(args.log_file),
        enable_console=args.verbose,
    )

    outcome = validate_vcf(args.vcf_file, check_column_header=args.check_header_columns)
    if outcome:
        print(SUCCESS_MESSAGE)
        return EXIT_SUCCESS

    print(f"ERROR: {outcome.diagnostic}", file=sys.stderr)
    if outcome.diagnostic.kind is not ErrorKind.IO:
        print(FAILURE_MESSAGE, file=sys.stderr)
    log_message(f"Exiting with status {EXIT_FAILURE}", level=logging.DEBUG)
    return EXIT_FAILURE


def run() -> NoReturn:
    """Console-script entry point."""
    sys.exit(main())


__all__ = ["build_parser", "parse_arguments", "main", "run", "SUCCESS_MESSAGE", "FAILURE_MESSAGE"]

"""File-level validation: line classification and the fail-fast driver.

Lines are consumed strictly in order. ``##`` lines go to the header rules, the
first single ``#`` line marks the column header, and every other line after it
is a data record. The first rejected line ends validation of the file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

from .header import validate_header_line
from .io_utils import open_vcf_text
from .logging_utils import InputError, log_message
from .models import (
    COLUMN_HEADER_PREFIX,
    MANDATORY_COLUMNS,
    META_PREFIX,
    ErrorKind,
    LineKind,
    ValidationOutcome,
    SUCCESS,
)
from .records import validate_data_line

REQUIRED_HEADER_COLUMNS = (COLUMN_HEADER_PREFIX + MANDATORY_COLUMNS[0],) + MANDATORY_COLUMNS[1:]


@dataclass
class ValidatorState:
    """Mutable phase of one file validation."""

    header_line_seen: bool = False
    line_number: int = 0


def classify_line(line: str, state: ValidatorState) -> LineKind:
    """Return the kind of *line* given the current phase.

    A second single-``#`` line after the column header is classified as data,
    so it is checked (and normally rejected) by the record grammar.
    """

    if line.startswith(META_PREFIX):
        return LineKind.META
    if line.startswith(COLUMN_HEADER_PREFIX) and not state.header_line_seen:
        return LineKind.COLUMN_HEADER
    return LineKind.DATA


def check_column_header(line: str) -> ValidationOutcome:
    """Require the column header to start with the eight mandatory column names."""

    columns = line.split()
    if len(columns) < len(REQUIRED_HEADER_COLUMNS):
        return ValidationOutcome.failure(
            ErrorKind.STRUCTURAL,
            "column header",
            "Insufficient columns in title line",
            value=line,
        )
    for expected, found in zip(REQUIRED_HEADER_COLUMNS, columns):
        if expected != found:
            return ValidationOutcome.failure(
                ErrorKind.STRUCTURAL,
                "column header",
                f"Unexpected column {found!r} in title line, expected {expected!r}",
                field=expected,
                value=found,
            )
    return SUCCESS


def _validate_line(line: str, state: ValidatorState, check_header_columns: bool) -> ValidationOutcome:
    kind = classify_line(line, state)
    if kind is LineKind.META:
        return validate_header_line(line)
    if kind is LineKind.COLUMN_HEADER:
        state.header_line_seen = True
        if check_header_columns:
            return check_column_header(line)
        return SUCCESS
    if not state.header_line_seen:
        return ValidationOutcome.failure(
            ErrorKind.STRUCTURAL,
            "line order",
            "Unexpected line before header",
            value=line,
        )
    return validate_data_line(line)


def validate_lines(
    lines: Iterable[str], *, check_column_header: bool = False
) -> ValidationOutcome:
    """Validate decoded VCF *lines* and return the verdict for the whole stream.

    Parameters
    ----------
    lines:
        Lines without their terminators, in file order.
    check_column_header:
        Also require the ``#CHROM ... INFO`` column names on the header line.

    Returns
    -------
    ValidationOutcome
        Success, or the diagnostic of the first rejected line. A stream that
        never contains a column header line is rejected at the end of input.
    """

    state = ValidatorState()
    for line in lines:
        state.line_number += 1
        outcome = _validate_line(line, state, check_column_header)
        if not outcome:
            return outcome.with_location(state.line_number, line)

    if not state.header_line_seen:
        return ValidationOutcome.failure(
            ErrorKind.STRUCTURAL,
            "column header",
            "Missing column header line",
        )
    log_message(f"Validated {state.line_number} line(s)", level=logging.DEBUG)
    return SUCCESS


def validate_vcf(
    file_path: Union[str, Path], *, check_column_header: bool = False
) -> ValidationOutcome:
    """Validate the VCF file at *file_path*, decompressing it when needed.

    Input that cannot be opened or read produces an ``IO`` diagnostic rather
    than a format failure.
    """

    log_message(f"Validating file: {file_path}", level=logging.DEBUG)
    try:
        with open_vcf_text(file_path) as lines:
            outcome = validate_lines(lines, check_column_header=check_column_header)
    except InputError as exc:
        outcome = ValidationOutcome.failure(ErrorKind.IO, "input", str(exc), value=str(file_path))
    except OSError as exc:
        outcome = ValidationOutcome.failure(
            ErrorKind.IO,
            "input",
            f"Cannot read VCF file {file_path}: {exc}",
            value=str(file_path),
        )

    if outcome:
        log_message(f"Validation passed for {file_path}")
    else:
        log_message(f"Validation failed for {file_path}: {outcome.diagnostic}", level=logging.ERROR)
    return outcome


__all__ = [
    "REQUIRED_HEADER_COLUMNS",
    "ValidatorState",
    "classify_line",
    "check_column_header",
    "validate_lines",
    "validate_vcf",
]

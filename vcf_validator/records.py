"""Validation of tab-separated data lines."""

from __future__ import annotations

import math
import re
from typing import Callable, Tuple

from . import grammar
from .models import (
    FORMAT_COLUMN_INDEX,
    MANDATORY_COLUMNS,
    DataRecord,
    ErrorKind,
    ValidationOutcome,
    SUCCESS,
)
from .samples import check_format_and_samples

MISSING_VALUE = "."
MAX_POSITION = 2**31 - 1

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")
_FLOAT_TEXT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _reject(column: str, message: str, value: str, kind: ErrorKind = ErrorKind.GRAMMAR) -> ValidationOutcome:
    return ValidationOutcome.failure(kind, column, f"{message}: {value!r}", field=column, value=value)


def parse_integer(text: str) -> int:
    """Parse *text* as a whole decimal integer; raise ``ValueError`` otherwise."""
    if not _INTEGER_TEXT.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


def parse_float(text: str) -> float:
    """Parse *text* as a finite decimal float; raise ``ValueError`` otherwise."""
    if not _FLOAT_TEXT.fullmatch(text):
        raise ValueError(f"not a float: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"float out of range: {text!r}")
    return value


def check_chrom(value: str) -> ValidationOutcome:
    if not value:
        return _reject("CHROM", "Invalid CHROM field", value)
    if not grammar.is_human_chromosome(value):
        return _reject("CHROM", "Non-human chromosome found", value)
    return SUCCESS


def check_pos(value: str) -> ValidationOutcome:
    try:
        position = parse_integer(value)
    except ValueError:
        return _reject("POS", "Invalid POS field (not an integer)", value, ErrorKind.NUMERIC)
    if position > MAX_POSITION:
        return _reject("POS", "Invalid POS field (out of range)", value, ErrorKind.NUMERIC)
    if position <= 0:
        return _reject("POS", "Invalid POS field", value)
    return SUCCESS


def check_id(value: str) -> ValidationOutcome:
    if value != MISSING_VALUE and not value:
        return _reject("ID", "Invalid ID field", value)
    return SUCCESS


def check_ref(value: str) -> ValidationOutcome:
    if not grammar.is_valid_base(value):
        return _reject("REF", "Invalid REF field", value)
    return SUCCESS


def check_alt(value: str) -> ValidationOutcome:
    if not grammar.is_valid_alt(value):
        return _reject("ALT", "Invalid ALT field", value)
    return SUCCESS


def check_qual(value: str) -> ValidationOutcome:
    if value == MISSING_VALUE:
        return SUCCESS
    try:
        quality = parse_float(value)
    except ValueError:
        return _reject("QUAL", "Invalid QUAL field (not a float)", value, ErrorKind.NUMERIC)
    if quality < 0:
        return _reject("QUAL", "Invalid QUAL field", value)
    return SUCCESS


def check_filter(value: str) -> ValidationOutcome:
    if value != MISSING_VALUE and not value:
        return _reject("FILTER", "Invalid FILTER field", value)
    return SUCCESS


def check_info(value: str) -> ValidationOutcome:
    # Only presence is checked; key=value pairs are not parsed.
    if not value:
        return _reject("INFO", "Invalid INFO field", value)
    return SUCCESS


COLUMN_CHECKS: Tuple[Callable[[str], ValidationOutcome], ...] = (
    check_chrom,
    check_pos,
    check_id,
    check_ref,
    check_alt,
    check_qual,
    check_filter,
    check_info,
)
"""One check per mandatory column, in column order."""


def validate_record(record: DataRecord) -> ValidationOutcome:
    """Validate the mandatory columns of *record*, then FORMAT and samples if present."""

    if len(record) < len(MANDATORY_COLUMNS):
        return ValidationOutcome.failure(
            ErrorKind.STRUCTURAL,
            "field count",
            f"Invalid data line (not enough fields): expected at least "
            f"{len(MANDATORY_COLUMNS)} tab-separated fields, found {len(record)}",
        )

    for check, value in zip(COLUMN_CHECKS, record.mandatory):
        outcome = check(value)
        if not outcome:
            return outcome

    if record.format is not None:
        return check_format_and_samples(record.fields, FORMAT_COLUMN_INDEX)
    return SUCCESS


def validate_data_line(line: str) -> ValidationOutcome:
    """Split *line* on tabs and validate it as a data record."""
    return validate_record(DataRecord.from_line(line))


__all__ = [
    "COLUMN_CHECKS",
    "MAX_POSITION",
    "MISSING_VALUE",
    "parse_integer",
    "parse_float",
    "check_chrom",
    "check_pos",
    "check_id",
    "check_ref",
    "check_alt",
    "check_qual",
    "check_filter",
    "check_info",
    "validate_record",
    "validate_data_line",
]

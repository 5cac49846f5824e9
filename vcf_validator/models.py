"""Value types shared by the VCF validation stages."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .logging_utils import FormatViolationError

META_PREFIX = "##"
COLUMN_HEADER_PREFIX = "#"

MANDATORY_COLUMNS: Tuple[str, ...] = (
    "CHROM",
    "POS",
    "ID",
    "REF",
    "ALT",
    "QUAL",
    "FILTER",
    "INFO",
)
FORMAT_COLUMN_INDEX = len(MANDATORY_COLUMNS)


class LineKind(enum.Enum):
    """Classification tag attached to every input line."""

    META = "meta-information"
    COLUMN_HEADER = "column header"
    DATA = "data"


class ErrorKind(enum.Enum):
    """Category of the first problem found in a file."""

    STRUCTURAL = "structural"
    GRAMMAR = "grammar"
    ARITY = "arity"
    NUMERIC = "numeric conversion"
    IO = "io"


@dataclass(frozen=True)
class MetaInformationLine:
    """A ``##key=value`` header line with the marker stripped from *key*."""

    key: str
    value: str
    raw: str

    @classmethod
    def parse(cls, line: str) -> "MetaInformationLine":
        if not line.startswith(META_PREFIX):
            raise ValueError(f"Not a meta-information line: {line!r}")
        body = line[len(META_PREFIX):]
        key, _, value = body.partition("=")
        return cls(key=key, value=value, raw=line)


@dataclass(frozen=True)
class DataRecord:
    """The tab-separated columns of one data line, untrimmed."""

    fields: Tuple[str, ...]

    @classmethod
    def from_line(cls, line: str) -> "DataRecord":
        return cls(tuple(line.split("\t")))

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def mandatory(self) -> Tuple[str, ...]:
        """The CHROM through INFO columns, in order."""
        return self.fields[:FORMAT_COLUMN_INDEX]

    @property
    def format(self) -> Optional[str]:
        """The FORMAT column, or ``None`` for an eight-column record."""
        if len(self.fields) > FORMAT_COLUMN_INDEX:
            return self.fields[FORMAT_COLUMN_INDEX]
        return None


@dataclass(frozen=True)
class Diagnostic:
    """Description of the first rule a file violated.

    ``rule`` names the grammar or structural check that failed (for example
    ``"FILTER"`` for a header line or ``"POS"`` for a data column), so callers
    can tell which check rejected the input and not just that it was invalid.
    """

    kind: ErrorKind
    rule: str
    message: str
    line_number: Optional[int] = None
    line: Optional[str] = None
    field: Optional[str] = None
    value: Optional[str] = None

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


@dataclass(frozen=True)
class ValidationOutcome:
    """Binary verdict with the diagnostic of the first failure, if any."""

    valid: bool
    diagnostic: Optional[Diagnostic] = None

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def success(cls) -> "ValidationOutcome":
        return cls(True)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        rule: str,
        message: str,
        *,
        field: Optional[str] = None,
        value: Optional[str] = None,
    ) -> "ValidationOutcome":
        return cls(False, Diagnostic(kind, rule, message, field=field, value=value))

    def with_location(self, line_number: int, line: str) -> "ValidationOutcome":
        """Return a copy whose diagnostic records where the failure happened."""
        if self.diagnostic is None:
            return self
        return replace(
            self,
            diagnostic=replace(self.diagnostic, line_number=line_number, line=line),
        )

    def raise_for_status(self) -> None:
        """Raise :class:`FormatViolationError` if the outcome is a failure."""
        if not self.valid:
            raise FormatViolationError(self.diagnostic)


SUCCESS = ValidationOutcome.success()

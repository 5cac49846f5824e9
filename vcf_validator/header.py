"""Validation of ``##`` meta-information lines.

Each recognised key has one :class:`HeaderRule`. The rule is chosen by the
line's prefix (``##INFO=``, ``##contig=`` ...) and its pattern has to match the
whole line, marker included. Lines whose key has no rule are accepted as
well-formed extensions, and ``##SAMPLE``/``##PEDIGREE`` lines are accepted once
their prefix is recognised.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .models import META_PREFIX, ErrorKind, MetaInformationLine, ValidationOutcome, SUCCESS

_ID = r"ID=[^,]+"
_DESCRIPTION = r'Description="[^"]+"'
_NUMBER = r"Number=(?:[.0-9AGRU]|-?[0-9]+)"
_TYPE = r"Type=(?:Integer|Float|Flag|Character|String)"


@dataclass(frozen=True)
class HeaderRule:
    """Grammar applied to the meta-information lines starting with one of *prefixes*."""

    name: str
    prefixes: Tuple[str, ...]
    pattern: Optional[re.Pattern]
    message: str

    def applies_to(self, line: str) -> bool:
        return line.startswith(self.prefixes)

    def check(self, line: str) -> ValidationOutcome:
        if self.pattern is None or self.pattern.fullmatch(line):
            return SUCCESS
        return ValidationOutcome.failure(
            ErrorKind.GRAMMAR,
            self.name,
            f"{self.message}: {line}",
            field=MetaInformationLine.parse(line).key,
            value=line,
        )


HEADER_RULES: Tuple[HeaderRule, ...] = (
    HeaderRule(
        "INFO/FORMAT",
        ("##INFO=", "##FORMAT="),
        re.compile(
            rf"##(?:INFO|FORMAT)=<{_ID},{_NUMBER},{_TYPE},{_DESCRIPTION}"
            r'(?:,[^,]+="[^"]+")*>'
        ),
        "Invalid INFO or FORMAT line",
    ),
    HeaderRule(
        "FILTER",
        ("##FILTER=",),
        re.compile(rf"##FILTER=<{_ID},{_DESCRIPTION}>"),
        "Invalid FILTER line",
    ),
    HeaderRule(
        "fileformat",
        ("##fileformat=",),
        re.compile(r"##fileformat=VCFv[0-9]+\.[0-9]+"),
        "Invalid file format version",
    ),
    HeaderRule(
        "contig",
        ("##contig=",),
        re.compile(rf"##contig=<{_ID}(?:,length=[0-9]+)?(?:,.*)?>"),
        "Invalid contig line",
    ),
    HeaderRule(
        "ALT",
        ("##ALT=",),
        re.compile(rf"##ALT=<{_ID},{_DESCRIPTION}>"),
        "Invalid ALT line",
    ),
    # Prefix only; attributes are not parsed.
    HeaderRule(
        "SAMPLE/PEDIGREE",
        ("##SAMPLE=", "##PEDIGREE="),
        None,
        "Invalid SAMPLE or PEDIGREE line",
    ),
)

UNRECOGNIZED_RULE = HeaderRule("unrecognized", (META_PREFIX,), None, "Unknown header format")


def find_header_rule(line: str) -> Optional[HeaderRule]:
    """Return the rule that governs *line*, or ``None`` if it is not a ``##`` line."""

    for rule in HEADER_RULES:
        if rule.applies_to(line):
            return rule
    if line.startswith(META_PREFIX):
        return UNRECOGNIZED_RULE
    return None


def validate_header_line(line: str) -> ValidationOutcome:
    """Validate one meta-information line, including its ``##`` marker."""

    rule = find_header_rule(line)
    if rule is None:
        return ValidationOutcome.failure(
            ErrorKind.STRUCTURAL,
            "meta-information",
            f"Unknown header format: {line}",
            value=line,
        )
    return rule.check(line)


__all__ = [
    "HeaderRule",
    "HEADER_RULES",
    "UNRECOGNIZED_RULE",
    "find_header_rule",
    "validate_header_line",
]

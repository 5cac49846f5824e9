"""Token-level grammar predicates for VCF columns and sample values.

Every predicate takes one text token and returns ``True`` only when the whole
token matches its syntactic class. Nothing here raises, logs or keeps state.
"""

from __future__ import annotations

import re
from typing import FrozenSet

_BASE_PATTERN = re.compile(r"[ACGTN]+", re.IGNORECASE)
_ALT_PATTERN = re.compile(r"(?:[ACGTN*]+|<[^>]+>)(?:,(?:[ACGTN*]+|<[^>]+>))*")
_GENOTYPE_PATTERN = re.compile(r"(?:[0-9]+|\.)(?:[/|](?:[0-9]+|\.))?")
_INTEGER_PATTERN = re.compile(r"[0-9]+")
_INTEGER_LIST_PATTERN = re.compile(r"[0-9]+(?:,[0-9]+)*")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]*\.)?[0-9]+")

_CHROMOSOME_NAMES = tuple(str(number) for number in range(1, 23)) + ("X", "Y", "MT")

HUMAN_CHROMOSOMES: FrozenSet[str] = frozenset(
    _CHROMOSOME_NAMES
    + tuple(f"chr{name}" for name in _CHROMOSOME_NAMES)
    + ("chrM",)
)
"""Accepted CHROM values: 1-22, X, Y and MT, bare or ``chr``-prefixed, plus ``chrM``."""


def is_valid_base(value: str) -> bool:
    """Return True for a non-empty run of A, C, G, T or N in either case."""
    return _BASE_PATTERN.fullmatch(value) is not None


def is_valid_alt(value: str) -> bool:
    """Return True for a comma-separated list of base runs or ``<symbolic>`` alleles.

    Base runs are upper case and may contain ``*``. A missing ALT (``.``) is
    not accepted.
    """
    return _ALT_PATTERN.fullmatch(value) is not None


def is_valid_genotype(value: str) -> bool:
    """Return True for a haploid or diploid call such as ``0``, ``./.`` or ``1|0``."""
    return _GENOTYPE_PATTERN.fullmatch(value) is not None


def is_non_negative_integer(value: str) -> bool:
    return _INTEGER_PATTERN.fullmatch(value) is not None


def is_list_of_non_negative_integers(value: str) -> bool:
    return _INTEGER_LIST_PATTERN.fullmatch(value) is not None


def is_float(value: str) -> bool:
    """Return True for an optionally signed decimal with at least one digit after any point."""
    return _FLOAT_PATTERN.fullmatch(value) is not None


def is_boolean(value: str) -> bool:
    return value in ("0", "1")


def is_non_empty(value: str) -> bool:
    return value != ""


def is_human_chromosome(value: str) -> bool:
    """Exact, case-sensitive membership test against :data:`HUMAN_CHROMOSOMES`."""
    return value in HUMAN_CHROMOSOMES


__all__ = [
    "HUMAN_CHROMOSOMES",
    "is_valid_base",
    "is_valid_alt",
    "is_valid_genotype",
    "is_non_negative_integer",
    "is_list_of_non_negative_integers",
    "is_float",
    "is_boolean",
    "is_non_empty",
    "is_human_chromosome",
]

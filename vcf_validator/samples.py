"""Cross-validation of the FORMAT column against the per-sample columns."""

from __future__ import annotations

from typing import Callable, Dict, Sequence, Tuple

from . import grammar
from .models import FORMAT_COLUMN_INDEX, ErrorKind, ValidationOutcome, SUCCESS

FORMAT_SEPARATOR = ":"

Predicate = Callable[[str], bool]

DESCRIPTOR_RULES: Dict[str, Tuple[Predicate, str]] = {
    "GT": (grammar.is_valid_genotype, "genotype"),
    "DP": (grammar.is_non_negative_integer, "read depth"),
    "GQ": (grammar.is_non_negative_integer, "genotype quality"),
    "MQ": (grammar.is_non_negative_integer, "mapping quality"),
    "MQ0": (grammar.is_non_negative_integer, "MQ0"),
    "HRun": (grammar.is_non_negative_integer, "homopolymer run length"),
    "AC": (grammar.is_non_negative_integer, "allele count"),
    "AN": (grammar.is_non_negative_integer, "total number of alleles"),
    "AD": (grammar.is_list_of_non_negative_integers, "allele depth"),
    "PL": (grammar.is_list_of_non_negative_integers, "phred-scaled genotype likelihoods"),
    "SB": (grammar.is_list_of_non_negative_integers, "strand bias"),
    "RPA": (grammar.is_list_of_non_negative_integers, "repeat unit number"),
    "AF": (grammar.is_float, "allele frequency"),
    "BaseQRankSum": (grammar.is_float, "base quality rank sum test"),
    "ReadPosRankSum": (grammar.is_float, "read position rank sum test"),
    "FS": (grammar.is_float, "Fisher strand bias"),
    "SOR": (grammar.is_float, "strand odds ratio"),
    "MQRankSum": (grammar.is_float, "mapping quality rank sum test"),
    "QD": (grammar.is_float, "quality by depth"),
    "RU": (grammar.is_non_empty, "repeat unit"),
    "STR": (grammar.is_boolean, "short tandem repeat"),
}
"""Grammar per FORMAT descriptor. Descriptors missing from the table are not checked."""


def check_sample_value(descriptor: str, value: str) -> ValidationOutcome:
    """Validate one sample sub-value against the rule registered for *descriptor*."""

    rule = DESCRIPTOR_RULES.get(descriptor)
    if rule is None:
        return SUCCESS
    predicate, label = rule
    if predicate(value):
        return SUCCESS
    return ValidationOutcome.failure(
        ErrorKind.GRAMMAR,
        descriptor,
        f"Invalid {label} data for {descriptor}: {value!r}",
        field=descriptor,
        value=value,
    )


def check_format_and_samples(
    fields: Sequence[str], format_index: int = FORMAT_COLUMN_INDEX
) -> ValidationOutcome:
    """Validate every sample column positionally against the FORMAT descriptors.

    Each sample must supply exactly one ``:``-separated value per descriptor;
    the first arity mismatch or rejected value fails the whole record.
    """

    if format_index >= len(fields):
        return ValidationOutcome.failure(
            ErrorKind.STRUCTURAL,
            "FORMAT",
            "FORMAT field missing or invalid",
            field="FORMAT",
        )

    descriptors = fields[format_index].split(FORMAT_SEPARATOR)

    for column, sample in enumerate(fields[format_index + 1:], start=1):
        values = sample.split(FORMAT_SEPARATOR)
        if len(values) != len(descriptors):
            return ValidationOutcome.failure(
                ErrorKind.ARITY,
                "FORMAT",
                f"Sample data does not match FORMAT descriptors: sample {column} has "
                f"{len(values)} value(s) for {len(descriptors)} descriptor(s) "
                f"({fields[format_index]!r} vs {sample!r})",
                field=f"sample {column}",
                value=sample,
            )
        for descriptor, value in zip(descriptors, values):
            outcome = check_sample_value(descriptor, value)
            if not outcome:
                return outcome

    return SUCCESS


__all__ = [
    "DESCRIPTOR_RULES",
    "FORMAT_SEPARATOR",
    "check_sample_value",
    "check_format_and_samples",
]

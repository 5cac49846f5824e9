"""Validation of Variant Call Format (VCF) files.

The package checks a VCF file line by line: ``##`` meta-information lines
against the grammar of their key, the single ``#`` column header line, and
every data record against the column and per-sample FORMAT grammars.
Validation stops at the first rejected line and reports it as a
:class:`~vcf_validator.models.Diagnostic`.

Importing the package verifies that :mod:`pysam`, used to decompress
BGZF/gzip inputs, is available so later reads do not fail with a deferred
import error.
"""

from __future__ import annotations

__version__ = "0.1.0"


def _import_dependency(name: str):
    try:
        module = __import__(name)
    except ImportError as exc:  # pragma: no cover - exercised when dependency missing
        raise ModuleNotFoundError(
            f"The '{name}' package is required for the VCF validator. "
            f"Please install it with 'pip install {name}'."
        ) from exc
    return module


pysam = _import_dependency("pysam")

from .models import Diagnostic, ErrorKind, LineKind, ValidationOutcome  # noqa: E402
from .validation import validate_lines, validate_vcf  # noqa: E402

__all__ = [
    "__version__",
    "Diagnostic",
    "ErrorKind",
    "LineKind",
    "ValidationOutcome",
    "validate_lines",
    "validate_vcf",
]

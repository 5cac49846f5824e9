"""Command-line entry point for the vcf_validator package."""

from vcf_validator.cli import run


if __name__ == "__main__":  # pragma: no cover - entry point
    run()

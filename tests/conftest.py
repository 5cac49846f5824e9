"""Shared pytest fixtures for the vcf_validator test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

import pysam
import pytest

VALID_VCF_LINES = [
    "##fileformat=VCFv4.2",
    "##reference=GRCh38",
    "##contig=<ID=chr1,length=248956422>",
    '##INFO=<ID=DP,Number=1,Type=Integer,Description="Total Depth">',
    '##FILTER=<ID=q10,Description="Quality below 10">',
    '##FORMAT=<ID=GT,Number=1,Type=String,Description="Genotype">',
    '##FORMAT=<ID=DP,Number=1,Type=Integer,Description="Read Depth">',
    '##FORMAT=<ID=AD,Number=R,Type=Integer,Description="Allelic depths">',
    "#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\tFORMAT\tSAMPLE1\tSAMPLE2",
    "chr1\t100\trs1\tA\tT\t50.0\tPASS\tDP=30\tGT:DP:AD\t0/1:30:10,20\t1|1:12:0,12",
    "chr1\t200\t.\tG\tC,<DEL>\t.\tq10\tDP=5\tGT:DP:AD\t./.:0:0,0\t0/0:5:5,0",
]


@pytest.fixture
def valid_lines() -> list[str]:
    """Return the lines of a small, well-formed two-sample VCF."""
    return list(VALID_VCF_LINES)


@pytest.fixture
def write_vcf(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes *lines* to a ``.vcf`` or BGZF ``.vcf.gz`` file."""

    def _write(lines: Sequence[str], name: str = "input.vcf", compress: bool = False) -> Path:
        text = "".join(f"{line}\n" for line in lines)
        if not compress:
            path = tmp_path / name
            path.write_text(text, encoding="utf-8")
            return path

        plain_path = tmp_path / (name + ".plain.vcf")
        plain_path.write_text(text, encoding="utf-8")
        path = tmp_path / f"{name}.gz"
        pysam.tabix_compress(str(plain_path), str(path), force=True)
        plain_path.unlink()
        return path

    return _write

"""Input helpers that present a VCF file as a stream of decoded lines."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, Union

import pysam  # BGZF / gzip decompression

from .logging_utils import InputError, handle_critical_error, logger

PLAIN_TEXT_SUFFIX = ".vcf"
READ_CHUNK_SIZE = 1 << 16
TEXT_ENCODING = "utf-8"
DECODE_ERRORS = "surrogateescape"

PathLike = Union[str, Path]


def is_compressed_path(file_path: PathLike) -> bool:
    """Return True unless *file_path* names a plain ``.vcf`` file."""
    return not str(file_path).endswith(PLAIN_TEXT_SUFFIX)


def iter_byte_lines(handle, chunk_size: int = READ_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield ``\\n``-terminated byte lines from a binary *handle*.

    Only ``\\n`` ends a line; a lone ``\\r`` stays part of the line. Lines are
    split here rather than with the handle's own ``readline`` so plain and
    compressed inputs are split identically and empty lines are preserved.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be a positive integer")
    pending = b""
    while True:
        chunk = handle.read(chunk_size)
        if not chunk:
            break
        pending += chunk
        *complete, pending = pending.split(b"\n")
        for line in complete:
            yield line + b"\n"
    if pending:
        yield pending


def iter_vcf_lines(handle: Iterable[Union[str, bytes]]) -> Iterator[str]:
    """Yield decoded lines from *handle* with the line terminator removed.

    Bytes that are not valid UTF-8 are kept as surrogate escapes, so they
    reach the grammar checks instead of aborting the read.
    """

    for raw_line in handle:
        if isinstance(raw_line, bytes):
            line = raw_line.decode(TEXT_ENCODING, DECODE_ERRORS)
        else:
            line = raw_line
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        yield line


@contextmanager
def open_vcf_text(file_path: PathLike) -> Iterator[Iterator[str]]:
    """Open a VCF file and yield an iterator over its decoded lines.

    ``.vcf`` files are read as raw bytes. Everything else is handed to
    :class:`pysam.BGZFile`, which reads BGZF and ordinary gzip streams.
    The underlying handle is closed on every exit path.
    """

    path = Path(file_path)
    if not path.is_file():
        handle_critical_error(f"Failed to open file: {file_path}", InputError)

    compressed = is_compressed_path(path)
    try:
        if compressed:
            logger.debug("Opening %s through the BGZF decompressor", path)
            handle = pysam.BGZFile(str(path), "rb")
        else:
            handle = path.open("rb")
    except OSError as exc:
        handle_critical_error(f"Failed to open file: {file_path}: {exc}", InputError, exc_info=exc)

    try:
        yield iter_vcf_lines(iter_byte_lines(handle))
    finally:
        handle.close()


__all__ = [
    "PLAIN_TEXT_SUFFIX",
    "is_compressed_path",
    "iter_byte_lines",
    "iter_vcf_lines",
    "open_vcf_text",
]

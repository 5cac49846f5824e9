"""Shared logging helpers for the VCF validator.

The ``vcf_validator`` logger is configured at import time to write WARNING and
above to the console only, so library callers never get a log file they did
not ask for. :func:`configure_logging` is the idempotent entry point used by
the command-line interface: call it with ``log_level`` to adjust verbosity,
``log_file`` to add a persistent trail, disable the console handler, or set
``create_dirs`` when the log destination directory may not exist yet.
Repeated invocations clear previous handlers so no duplicate outputs are
accumulated.

For error handling the module defines :class:`VCFValidatorError` and the
specialised :class:`InputError` and :class:`FormatViolationError`. Format
problems found inside a file are normally reported as
:class:`~vcf_validator.models.ValidationOutcome` values; the exceptions are
reserved for unreadable input and for callers that explicitly ask for a raise.
"""
from __future__ import annotations

import logging
import os
from typing import Iterable

LOG_FORMAT = "%(asctime)s : %(levelname)s : %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("vcf_validator")
logger.propagate = False


def _normalize_level(level: int | str) -> int:
    """Return a numeric logging level for *level*."""
    if isinstance(level, str):
        name = level.upper()
        try:
            return logging._nameToLevel[name]  # type: ignore[attr-defined]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {level}") from exc
    return int(level)


def _clear_handlers(existing: Iterable[logging.Handler]) -> None:
    for h in list(existing):
        try:
            h.close()
        finally:
            logger.removeHandler(h)


def configure_logging(
    *,
    log_level: int | str = logging.WARNING,
    log_file: str | os.PathLike[str] | None = None,
    enable_file_logging: bool = True,
    enable_console: bool = True,
    create_dirs: bool = True,
) -> None:
    """Idempotent logger setup for the validator.

    A file handler is only attached when *log_file* is given and
    *enable_file_logging* is true.
    """
    level = _normalize_level(log_level)
    _clear_handlers(logger.handlers)
    logger.setLevel(level)

    fmt = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if enable_file_logging and log_file:
        path = os.fspath(log_file)
        if create_dirs:
            d = os.path.dirname(path)
            if d:
                os.makedirs(d, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8", errors="backslashreplace")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    if enable_console:
        sh = logging.StreamHandler()
        sh.setFormatter(fmt)
        logger.addHandler(sh)


class VCFValidatorError(RuntimeError):
    """Base exception for unrecoverable errors raised by the validator."""


class InputError(VCFValidatorError):
    """Raised when the input file cannot be opened or read."""


class FormatViolationError(VCFValidatorError):
    """Raised on request when a file does not conform to the VCF grammar."""

    def __init__(self, diagnostic) -> None:
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic


def log_message(
    message: str,
    verbose: bool = False,
    level: int = logging.INFO,
    *,
    exc_info: BaseException | bool | None = None,
) -> None:
    """Log *message* at the requested level and optionally echo it to stdout."""

    logger.log(level, message, exc_info=exc_info)
    if verbose:
        print(message)


def handle_critical_error(
    message: str,
    exc_cls=None,
    *,
    exc_info: BaseException | bool | None = None,
) -> None:
    """Log and raise a fatal error."""

    log_message(message, level=logging.ERROR)
    logger.critical(message, exc_info=exc_info)
    exception_class = exc_cls or VCFValidatorError
    if isinstance(exc_info, BaseException):
        raise exception_class(message) from exc_info
    raise exception_class(message)


__all__ = [
    "configure_logging",
    "logger",
    "log_message",
    "handle_critical_error",
    "VCFValidatorError",
    "InputError",
    "FormatViolationError",
]

# Default configuration: console only, warnings and above.
configure_logging(enable_file_logging=False)

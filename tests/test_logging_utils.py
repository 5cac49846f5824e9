"""Tests for the reusable logging helpers."""

from __future__ import annotations

import logging

import pytest

from vcf_validator import logging_utils as mod


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    mod.configure_logging(enable_file_logging=False, enable_console=False)


def test_default_configuration_is_console_only():
    mod.configure_logging(enable_file_logging=False)

    assert mod.logger.level == logging.WARNING
    assert not any(isinstance(h, logging.FileHandler) for h in mod.logger.handlers)
    assert len(mod.logger.handlers) == 1


def test_handle_critical_error_logs_before_raising(caplog):
    message = "unreadable input"
    mod.logger.propagate = True
    try:
        with caplog.at_level(logging.DEBUG, logger=mod.logger.name):
            with pytest.raises(mod.InputError):
                mod.handle_critical_error(message, mod.InputError)
    finally:
        mod.logger.propagate = False

    levels = {rec.levelno for rec in caplog.records if rec.message == message}
    assert {logging.ERROR, logging.CRITICAL} <= levels


def test_file_log_tolerates_undecodable_text(tmp_path):
    log_path = tmp_path / "escaped.log"

    mod.configure_logging(log_level="INFO", log_file=log_path, enable_console=False)
    mod.log_message("value 'caf\udce9'")

    for handler in mod.logger.handlers:
        handler.flush()
    assert "caf\\udce9" in log_path.read_text(encoding="utf-8")


def test_handle_critical_error_raises_and_chains():
    root_exc = ValueError("boom")

    with pytest.raises(mod.InputError) as excinfo:
        mod.handle_critical_error("fatal condition", mod.InputError, exc_info=root_exc)

    assert excinfo.value.__cause__ is root_exc
    assert isinstance(excinfo.value, mod.VCFValidatorError)


def test_configure_logging_custom_file(tmp_path):
    log_path = tmp_path / "nested" / "custom.log"

    mod.configure_logging(log_level="INFO", log_file=log_path, enable_console=False)
    mod.log_message("custom destination works")

    for handler in mod.logger.handlers:
        handler.flush()
    assert "custom destination works" in log_path.read_text(encoding="utf-8")


def test_configure_logging_is_idempotent(tmp_path):
    log_path = tmp_path / "run.log"
    mod.configure_logging(log_file=log_path)
    mod.configure_logging(log_file=log_path)

    file_handlers = [h for h in mod.logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1


def test_unknown_level_is_rejected():
    with pytest.raises(ValueError):
        mod.configure_logging(log_level="LOUD")


def test_log_message_echoes_when_verbose(capsys):
    mod.log_message("echoed", verbose=True)
    assert "echoed" in capsys.readouterr().out

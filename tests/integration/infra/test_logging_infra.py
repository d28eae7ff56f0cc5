from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
file persistence and clean shutdown.
"""

import logging
from pathlib import Path

import pytest

from elbuilder.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from elbuilder.infra.logging.config import (
    CONSOLE_FORMAT,
    FILE_FORMAT,
    LOG_FILE_BACKUPS,
    LOG_FILE_MAX_BYTES,
)
from elbuilder.infra.logging.core import _CONFIGURED_FLAG_ATTR, _QUEUE_LISTENER_ATTR, _parse_level
from elbuilder.infra.logging.handlers import _is_our_handler


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach our handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _our_handlers() -> list:
    return [h for h in logging.getLogger().handlers if _is_our_handler(h)]


def test_logging_idempotency() -> None:
    """Multiple configuration calls must not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert initial == 1
    assert len(_our_handlers()) == initial


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_log_file_receives_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "build.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("elbuilder.test").warning("layout missing")
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "WARNING  [elbuilder.test] layout missing" in content


def test_shutdown_clears_state() -> None:
    configure_logging(LoggingConfig())
    shutdown_logging()

    root = logging.getLogger()
    assert _our_handlers() == []
    assert getattr(root, _QUEUE_LISTENER_ATTR, None) is None
    assert not hasattr(root, _CONFIGURED_FLAG_ATTR)


def test_no_handlers_requested_is_noop() -> None:
    configure_logging(LoggingConfig(console=False, log_file=None))

    assert _our_handlers() == []


@pytest.mark.parametrize(
    "raw, expected",
    [("debug", logging.DEBUG), (" warn ", logging.WARNING), ("", logging.INFO), ("bogus", logging.INFO)],
)
def test_parse_level(raw: str, expected: int) -> None:
    assert _parse_level(raw) == expected


def test_console_and_file_handlers_use_build_formats(tmp_path: Path) -> None:
    configure_logging(LoggingConfig(log_file=str(tmp_path / "build.log")))

    listener = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)
    console, log_file = listener.handlers

    assert console.formatter._fmt == CONSOLE_FORMAT
    assert log_file.formatter._fmt == FILE_FORMAT
    assert log_file.maxBytes == LOG_FILE_MAX_BYTES
    assert log_file.backupCount == LOG_FILE_BACKUPS

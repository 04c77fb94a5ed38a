import logging
from pathlib import Path

import pytest

from pulsewatch.utilities.logging import SESSION_LOG_FILENAME, get_logger


def _flush(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


def test_loggers_share_one_session_log(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PULSEWATCH_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    feed = get_logger("pulsewatch.tests.feed")
    sync = get_logger("pulsewatch.tests.sync")
    feed.debug("tick recorded")
    sync.info("sync complete")
    _flush(feed)
    _flush(sync)

    lines = (tmp_path / SESSION_LOG_FILENAME).read_text().splitlines()
    assert "pulsewatch.tests.feed" in lines[0] and "tick recorded" in lines[0]
    assert "pulsewatch.tests.sync" in lines[1] and "sync complete" in lines[1]
    assert feed.level == logging.DEBUG
    assert feed.propagate is False


def test_file_logging_can_be_disabled(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PULSEWATCH_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("PULSEWATCH_LOG_FILE", "off")

    logger = get_logger("pulsewatch.tests.console_only")

    assert [type(handler) for handler in logger.handlers] == [logging.StreamHandler]
    assert not (tmp_path / SESSION_LOG_FILENAME).exists()


def test_get_logger_reuses_handlers(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PULSEWATCH_LOG_DIR", str(tmp_path))

    first = get_logger("pulsewatch.tests.reuse")
    handler_count = len(first.handlers)
    second = get_logger("pulsewatch.tests.reuse")

    assert first is second
    assert len(second.handlers) == handler_count == 2

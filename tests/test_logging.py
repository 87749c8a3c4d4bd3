"""Tests for logging setup and formatters."""

import json
import logging

from sauron.core.logging import ColorFormatter, StructuredFormatter, setup_logging


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("sauron.client", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_structured_formatter_emits_json_with_extras():
    line = StructuredFormatter().format(_record(path="/health", status=200, token="secret"))
    entry = json.loads(line)
    assert entry["msg"] == "hello"
    assert entry["level"] == "INFO"
    assert entry["logger"] == "sauron.client"
    assert entry["path"] == "/health"
    assert entry["status"] == 200
    assert "token" not in entry


def test_color_formatter_plain_when_disabled():
    line = ColorFormatter(use_color=False).format(_record())
    assert "\033[" not in line
    assert "[sauron.client] INFO: hello" in line


def test_color_formatter_leaves_record_untouched():
    record = _record()
    line = ColorFormatter(use_color=True).format(record)
    assert "\033[32mINFO\033[0m" in line
    assert record.levelname == "INFO"
    assert record.name == "sauron.client"


def test_setup_logging_respects_env(monkeypatch):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    monkeypatch.setenv("SAURON_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SAURON_LOG_FORMAT", "json")
    try:
        setup_logging()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_explicit_level_wins(monkeypatch):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    monkeypatch.setenv("SAURON_LOG_LEVEL", "DEBUG")
    try:
        setup_logging("error")
        assert root.level == logging.ERROR
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

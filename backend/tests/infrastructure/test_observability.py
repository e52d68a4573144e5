"""Structured Logging: JSONFormatter output and settings-driven setup."""

import json
import logging
import sys

import pytest

from ticketcore.config import Settings
from ticketcore.core.errors import InvalidStatusError
from ticketcore.infrastructure import observability
from ticketcore.infrastructure.observability import (
    JSONFormatter, configure_logging, setup_logging,
)
from ticketcore.services.ticket_factory import create_ticket


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        "ticketcore.test", logging.INFO, __file__, 1, msg, None, None,
    )
    for key, val in extra.items():
        setattr(record, key, val)
    return record


def test_json_formatter_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "ticketcore.test"
    assert out["message"] == "hello"
    assert "timestamp" in out


def test_json_formatter_surfaces_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(ticket_status="Open", error_code="INVALID_STATUS", other="x"),
    ))
    assert out["ticket_status"] == "Open"
    assert out["error_code"] == "INVALID_STATUS"
    assert "other" not in out
    assert "field" not in out


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            "x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info(),
        )
    out = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in out["exception"]


@pytest.fixture
def restore_root(monkeypatch):
    monkeypatch.setattr(observability, "_installed_handler", None)
    level = logging.root.level
    handlers = list(logging.root.handlers)
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


@pytest.mark.parametrize("fmt, formatter_type", [("json", JSONFormatter), ("text", logging.Formatter)])
def test_setup_logging_installs_handler(restore_root, fmt, formatter_type):
    handler = setup_logging("debug", fmt)
    assert handler in logging.root.handlers
    assert type(handler.formatter) is formatter_type
    assert logging.root.level == logging.DEBUG


def test_setup_logging_twice_keeps_one_handler(restore_root):
    baseline = len(logging.root.handlers)
    first = setup_logging("info", "json")
    second = setup_logging("info", "text")
    assert first not in logging.root.handlers
    assert second in logging.root.handlers
    assert len(logging.root.handlers) == baseline + 1


def test_configure_logging_reads_environment(restore_root, monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "text")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    handler = configure_logging()
    assert type(handler.formatter) is logging.Formatter
    assert logging.root.level == logging.DEBUG


def test_configure_logging_with_injected_settings(restore_root):
    handler = configure_logging(Settings(log_level="warning", log_format="json"))
    assert isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING


def test_rejection_record_serializes_error_extras(caplog):
    caplog.set_level(logging.WARNING, logger="ticketcore.services.ticket_factory")
    with pytest.raises(InvalidStatusError):
        create_ticket("t", "d", "open", settings=Settings(ticket_strict_status=True))
    [record] = caplog.records
    out = json.loads(JSONFormatter().format(record))
    assert out["level"] == "WARNING"
    assert out["error_code"] == "INVALID_STATUS"
    assert out["field"] == "status"
    assert "ticket_status" not in out

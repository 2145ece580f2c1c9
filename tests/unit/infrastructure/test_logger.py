# tests/unit/infrastructure/test_logger.py
from __future__ import annotations

import contextvars
import json
import logging
import sys

import pytest

from ixbrl_inspector.infrastructure.logging.logger import (
    _REPORT_ID_CTX,
    JsonFormatter,
    configure_root_logging,
    get_json_logger,
    get_report_id,
    set_report_context,
)


def _render(record_msg: str, level: int = logging.INFO, **attrs: object) -> dict:
    """Build a log record and return the parsed JSON payload."""
    logger = logging.getLogger("test.logger")
    record = logger.makeRecord(
        name=logger.name,
        level=level,
        fn="test_logger",
        lno=123,
        msg=record_msg,
        args=(),
        exc_info=None,
    )
    for k, v in attrs.items():
        setattr(record, k, v)
    return json.loads(JsonFormatter().format(record))


def test_configure_root_logging_installs_json_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    """Root logger should get a JSON formatter and respect LOG_LEVEL."""
    monkeypatch.setenv("LOG_LEVEL", "debug")
    root = logging.getLogger()
    root.handlers.clear()

    configure_root_logging()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_configure_root_logging_is_idempotent() -> None:
    root = logging.getLogger()
    root.handlers.clear()

    configure_root_logging("warning")
    configure_root_logging(logging.ERROR)

    assert root.level == logging.ERROR
    assert len(root.handlers) == 1


def test_json_formatter_basic_fields() -> None:
    payload = _render("hello-world")

    assert payload["message"] == "hello-world"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert "ts" in payload


def test_json_formatter_merges_extra_payload() -> None:
    payload = _render("facts.describe.start", extra={"fact_id": "f1", "covered": ["u"]})

    assert payload["fact_id"] == "f1"
    assert payload["covered"] == ["u"]


def test_report_id_from_record_then_context_then_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REPORT_ID", raising=False)

    def _scenario() -> None:
        _REPORT_ID_CTX.set(None)
        assert "report_id" not in _render("none")

        monkeypatch.setenv("REPORT_ID", "env-id")
        assert _render("env")["report_id"] == "env-id"

        set_report_context(report_id="ctx-id")
        assert get_report_id() == "ctx-id"
        assert _render("ctx")["report_id"] == "ctx-id"

        set_report_context(report_id=None)
        assert get_report_id() == "ctx-id"
        assert _render("record", report_id="rec-id")["report_id"] == "rec-id"

    # Run in a copied context so the contextvar does not leak into other tests.
    contextvars.copy_context().run(_scenario)


def test_json_formatter_includes_exception_info() -> None:
    logger = logging.getLogger("test.logger.exc")
    try:
        raise ValueError("boom")
    except ValueError:
        record = logger.makeRecord(
            logger.name, logging.ERROR, "f", 1, "failure", (), sys.exc_info()
        )
    payload = json.loads(JsonFormatter().format(record))

    assert payload["exc_type"] == "ValueError"
    assert payload["exc_message"] == "boom"


def test_get_json_logger_propagates() -> None:
    logger = get_json_logger("ixbrl_inspector.test")

    assert logger.name == "ixbrl_inspector.test"
    assert logger.propagate is True

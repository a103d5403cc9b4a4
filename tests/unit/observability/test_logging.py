"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest
import structlog

from livetable.application.table import SortFields
from livetable.kernel.errors import UnknownSortFieldError
from livetable.observability.logging import JsonLoggerFactory, TableContextProcessor, get_logger


@pytest.fixture(autouse=True)
def _reset_structlog() -> Any:
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


class TestTableContextProcessor:
    def test_adds_component(self) -> None:
        event = TableContextProcessor()(None, "info", {"event": "x", "table": "users"})
        assert event["component"] == "table:users"

    def test_no_table_untouched(self) -> None:
        assert TableContextProcessor()(None, "info", {"event": "x"}) == {"event": "x"}

    def test_existing_component_kept(self) -> None:
        event = TableContextProcessor()(None, "info", {"table": "users", "component": "admin"})
        assert event["component"] == "admin"

    def test_custom_field(self) -> None:
        event = TableContextProcessor("widget")(None, "info", {"table": "orders"})
        assert event["widget"] == "table:orders"


class TestGetLogger:
    def test_returns_bindable_logger(self) -> None:
        logger = get_logger("livetable.test")
        assert hasattr(logger, "bind")
        assert hasattr(logger, "warning")

    def test_initial_values_bound(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("livetable.test", table="users").info("rendered")
        assert logs == [{"table": "users", "event": "rendered", "log_level": "info"}]


class TestJsonLoggerFactory:
    def test_configure_emits_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        get_logger("livetable.json").info("page_rendered", table="users", page=2)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "page_rendered"
        assert payload["component"] == "table:users"
        assert payload["level"] == "info"
        assert "timestamp" in payload

    def test_redact_search(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.DEBUG, redact_search=True)
        get_logger("livetable.json").info("searched", search="jane@example.com")
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["search"] == JsonLoggerFactory.REDACTED

    def test_level_respected(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.WARNING)
        get_logger("livetable.json").info("hidden")
        assert "hidden" not in capsys.readouterr().err


class TestEngineLogEvents:
    def test_rejected_sort_field_logged(self) -> None:
        with structlog.testing.capture_logs() as logs:
            with pytest.raises(UnknownSortFieldError):
                SortFields({"id"}).check("password")
        assert logs[0]["event"] == "sort_field_rejected"
        assert logs[0]["field"] == "password"
        assert logs[0]["log_level"] == "warning"

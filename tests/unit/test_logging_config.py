"""Tests for structured logging configuration."""

import json
import logging

import pytest
import structlog

from orgledger.logging_config import bind_request_context, get_logger, setup_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


class TestSetupLogging:
    """Test logging setup function."""

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    def test_accepts_log_levels(self, level):
        setup_logging(json_logs=False, log_level=level)
        assert logging.getLogger().level == getattr(logging, level)

    def test_noisy_loggers_quietened(self):
        setup_logging(json_logs=False, log_level="DEBUG")
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_invalid_level_raises(self):
        with pytest.raises(AttributeError):
            setup_logging(log_level="LOUD")


class TestStructuredOutput:
    def test_json_output_is_parseable(self, capsys):
        setup_logging(json_logs=True, log_level="INFO")
        logger = get_logger("orgledger.test")

        logger.info("employee_added", department_id=2, employee="Frank Ocean")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "employee_added"
        assert payload["department_id"] == 2
        assert payload["level"] == "info"
        assert payload["logger"] == "orgledger.test"
        assert "timestamp" in payload

    def test_request_context_bound(self, capsys):
        setup_logging(json_logs=True, log_level="INFO")
        bind_request_context(request_id="abc123", path="/health")

        get_logger("orgledger.test").info("request_seen")

        payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert payload["request_id"] == "abc123"
        assert payload["path"] == "/health"

    def test_bind_replaces_previous_context(self, capsys):
        setup_logging(json_logs=True, log_level="INFO")
        bind_request_context(request_id="first")
        bind_request_context(request_id="second")

        get_logger("orgledger.test").info("request_seen")

        payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert payload["request_id"] == "second"

    def test_level_filters_messages(self, capsys):
        setup_logging(json_logs=True, log_level="ERROR")
        logger = get_logger("orgledger.test")

        logger.info("info_event")
        logger.error("error_event")

        out = capsys.readouterr().out
        assert "info_event" not in out
        assert "error_event" in out

    def test_console_output_contains_event(self, capsys):
        setup_logging(json_logs=False, log_level="INFO")
        get_logger("orgledger.test").info("test_event", key="value")
        assert "test_event" in capsys.readouterr().out

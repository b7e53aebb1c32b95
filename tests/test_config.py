"""Tests for settings and logging configuration."""

import json
import logging

import pytest
from pydantic import ValidationError

from grocerylist.config import Settings, get_settings
from grocerylist.logging_config import (
    ContextLogger,
    ContextualFormatter,
    LoggingContext,
    StructuredJsonFormatter,
    clear_context,
    configure_logging,
    current_context,
    get_logger,
    set_context,
)


def _record(message: str = "built list") -> logging.LogRecord:
    return logging.LogRecord(
        name="grocerylist.plan",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.csv_escape_quotes is False
        assert settings.checklist_divider_width == 40

    def test_environment_override(self, monkeypatch):
        """Test values are read from the environment."""
        monkeypatch.setenv("CSV_ESCAPE_QUOTES", "1")
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = Settings(_env_file=None)

        assert settings.csv_escape_quotes is True
        assert settings.environment == "production"

    def test_divider_width_bounds(self):
        """Test invalid divider widths are rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, checklist_divider_width=0)

    def test_get_settings_is_cached(self):
        """Test the settings instance is shared."""
        assert get_settings() is get_settings()


class TestLoggingContext:
    """Tests for logging context helpers."""

    def test_set_and_clear(self):
        """Test setting and clearing context variables."""
        set_context(request_id="req-123", plan_id="plan-1")
        assert current_context() == {"request_id": "req-123", "plan_id": "plan-1"}

        clear_context()
        assert current_context() == {}

    def test_context_manager_restores(self):
        """Test the context manager resets values on exit."""
        set_context(plan_id="outer")

        with LoggingContext(plan_id="inner", request_id="req-9"):
            assert current_context() == {"request_id": "req-9", "plan_id": "inner"}

        assert current_context() == {"plan_id": "outer"}

    def test_logger_adapter_adds_context(self):
        """Test the adapter attaches context as record extras."""
        logger = get_logger("grocerylist.test")
        assert isinstance(logger, ContextLogger)

        with LoggingContext(plan_id="plan-7"):
            _, kwargs = logger.process("message", {})

        assert kwargs["extra"] == {"plan_id": "plan-7"}


class TestFormatters:
    """Tests for the log formatters."""

    def test_json_formatter(self):
        """Test JSON output includes context and location."""
        with LoggingContext(request_id="abcdef123456", plan_id="plan-1"):
            data = json.loads(StructuredJsonFormatter().format(_record()))

        assert data["message"] == "built list"
        assert data["level"] == "INFO"
        assert data["plan_id"] == "plan-1"
        assert data["request_id"] == "abcdef123456"
        assert data["timestamp"].endswith("Z")
        assert data["location"]["line"] == 1

    def test_contextual_formatter(self):
        """Test human-readable output shortens the request id."""
        with LoggingContext(request_id="abcdef123456", plan_id="plan-1"):
            line = ContextualFormatter().format(_record())

        assert "[req=abcdef12, plan=plan-1]" in line
        assert line.endswith("| built list")

    def test_configure_logging(self, restore_root_logger):
        """Test configure_logging installs one handler with the chosen format."""
        configure_logging(log_level="debug", json_format=True)

        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, StructuredJsonFormatter)
        assert restore_root_logger.level == logging.DEBUG

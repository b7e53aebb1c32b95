"""Structured logging configuration for the grocery list engine."""

import json
import logging
import os
import sys
from contextvars import ContextVar, Token
from datetime import datetime, timezone
from typing import Any

from grocerylist.config import get_settings

# Context variables bound by the calling service (one request builds one list)
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
plan_id_ctx: ContextVar[str | None] = ContextVar("plan_id", default=None)

_CONTEXT_VARS: dict[str, ContextVar[str | None]] = {
    "request_id": request_id_ctx,
    "plan_id": plan_id_ctx,
}


def current_context() -> dict[str, str]:
    """Return the context variables that are currently set."""
    return {name: value for name, var in _CONTEXT_VARS.items() if (value := var.get())}


class StructuredJsonFormatter(logging.Formatter):
    """JSON formatter for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(current_context())

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data["location"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        return json.dumps(log_data, default=str)


class ContextualFormatter(logging.Formatter):
    """Human-readable formatter with context for development."""

    def format(self, record: logging.LogRecord) -> str:
        context = current_context()
        context_parts = []
        if request_id := context.get("request_id"):
            context_parts.append(f"req={request_id[:8]}")
        if plan_id := context.get("plan_id"):
            context_parts.append(f"plan={plan_id}")
        context_str = f" [{', '.join(context_parts)}]" if context_parts else ""

        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname.ljust(8)
        formatted = f"{timestamp} | {level} | {record.name}{context_str} | {record.getMessage()}"

        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)

        return formatted


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that attaches the bound context to every record."""

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        extra = kwargs.get("extra", {})
        extra.update(current_context())
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str) -> ContextLogger:
    """Get a context-aware logger for the given module name."""
    return ContextLogger(logging.getLogger(name), {})


def configure_logging(
    log_level: str | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Minimum log level. Falls back to LOG_LEVEL, then to settings.
        json_format: Use JSON output. If None, JSON is used when LOG_FORMAT=json
            or when running non-interactively in production.
        log_file: Optional file path to also write logs to.
    """
    settings = get_settings()

    if json_format is None:
        json_format = os.getenv("LOG_FORMAT", "").lower() == "json" or (
            not sys.stdout.isatty() and settings.environment == "production"
        )

    level_str = (log_level or os.getenv("LOG_LEVEL") or settings.log_level).upper()
    level = getattr(logging, level_str, logging.INFO)

    formatter: logging.Formatter
    if json_format:
        formatter = StructuredJsonFormatter()
    else:
        formatter = ContextualFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    logging.getLogger("grocerylist").setLevel(level)

    get_logger(__name__).info(
        f"Logging configured: level={level_str}, format={'json' if json_format else 'text'}"
    )


def set_context(request_id: str | None = None, plan_id: str | None = None) -> None:
    """Set logging context variables."""
    if request_id is not None:
        request_id_ctx.set(request_id)
    if plan_id is not None:
        plan_id_ctx.set(plan_id)


def clear_context() -> None:
    """Clear all logging context variables."""
    for var in _CONTEXT_VARS.values():
        var.set(None)


class LoggingContext:
    """Context manager binding request and plan identifiers for a block."""

    def __init__(self, request_id: str | None = None, plan_id: str | None = None):
        self.values = {"request_id": request_id, "plan_id": plan_id}
        self._tokens: dict[str, Token] = {}

    def __enter__(self) -> "LoggingContext":
        for name, value in self.values.items():
            if value is not None:
                self._tokens[name] = _CONTEXT_VARS[name].set(value)
        return self

    def __exit__(self, *args: Any) -> None:
        for name, token in self._tokens.items():
            _CONTEXT_VARS[name].reset(token)
        self._tokens.clear()

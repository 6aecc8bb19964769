"""
Logging configuration and utilities.

Every record carries the request-scoped context bound by the request logging
middleware (request/trace ids, HTTP metadata) and by the Bedrock client
(model, region, Bedrock request id).
"""
import json
import logging
import sys
from contextvars import ContextVar, Token
from datetime import datetime, timezone
from typing import Dict, Optional

from config.settings import settings

_log_context: ContextVar[Optional[Dict[str, str]]] = ContextVar("log_context", default=None)

# Context keys grouped under a nested JSON object, keyed by prefix
NESTED_GROUPS = ("http", "aws")
TOP_LEVEL_FIELDS = {
    "request_id": "requestId",
    "trace_id": "traceId",
    "span_id": "spanId",
}


def get_log_context() -> Dict[str, str]:
    """Return a copy of the context bound to the current request."""
    return dict(_log_context.get() or {})


def bind_log_context(**fields: Optional[str]) -> Token:
    """
    Add fields to the current log context.

    Dotted keys can't be keyword arguments, so ``http_method`` is stored as
    ``http.method`` for every prefix in NESTED_GROUPS. Blank values are skipped.

    Returns:
        Token that restores the previous context when passed to reset_log_context
    """
    context = get_log_context()
    for key, value in fields.items():
        if value is None or not str(value).strip():
            continue
        prefix, _, rest = key.partition("_")
        if prefix in NESTED_GROUPS and rest:
            key = f"{prefix}.{rest}"
        context[key] = str(value)
    return _log_context.set(context)


def reset_log_context(token: Token) -> None:
    _log_context.reset(token)


class RequestContextFilter(logging.Filter):
    """Attach the current request context to each log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = get_log_context()
        record.log_context = context
        record.request_id = context.get("request_id", "-")
        return True


class JsonFormatter(logging.Formatter):
    """Render records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = getattr(record, "log_context", None) or {}
        for key, field in TOP_LEVEL_FIELDS.items():
            if context.get(key):
                payload[field] = context[key]

        for group in NESTED_GROUPS:
            values = {
                key.split(".", 1)[1]: value
                for key, value in context.items()
                if key.startswith(f"{group}.") and value
            }
            if values:
                payload[group] = values

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


def setup_logger(name: str) -> logging.Logger:
    """
    Setup logger with consistent formatting.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(settings.LOG_LEVEL)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(settings.LOG_LEVEL)
    console_handler.addFilter(RequestContextFilter())

    # Formatter
    if settings.LOG_JSON:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(settings.LOG_FORMAT)
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    return logger

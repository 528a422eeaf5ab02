"""Structlog-based logging configuration for dconfig.

Console output is human-readable by default. JSON output can be requested
explicitly or through the DCONFIG_JSON_LOGS environment variable.
"""

import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog


def _add_static_context(extra_fields: dict[str, str]) -> Callable:
    """Processor to add static context fields to all log entries."""

    def processor(
        logger: structlog.BoundLogger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.update(extra_fields)
        return event_dict

    return processor


def _configure_processors(json_logs: bool, extra_fields: dict[str, str]) -> list:
    """Build the structlog processor chain."""
    processors = [
        structlog.contextvars.merge_contextvars,
        _add_static_context({"service": "dconfig", **extra_fields}),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    return processors


def _configure_handlers(log_level: int) -> None:
    """Route rendered log lines to stderr through the root logger."""
    root_logger = logging.getLogger()

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(log_level)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(log_level)
    stderr_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(stderr_handler)


def configure_structlog(
    level: str = "INFO",
    json_logs: bool = False,
    extra_fields: dict[str, str] | None = None,
) -> None:
    """Configure structlog-based logging system.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG").
        json_logs: Render JSON lines instead of console output.
        extra_fields: Static fields added to every log entry.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    processors = _configure_processors(json_logs, extra_fields or {})

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configure_handlers(log_level)

    logger = structlog.get_logger(__name__)
    logger.debug("Structured logging configured", log_level=level, json_output=json_logs)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog BoundLogger instance
    """
    return structlog.get_logger(name)

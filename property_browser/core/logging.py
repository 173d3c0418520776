"""Logging configuration for property_browser.

Provides structured logging using structlog with JSON output for production
and plain console output for development.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

# Log file location
LOG_DIR = Path(__file__).parent.parent.parent / "logs"
LOG_FILE = LOG_DIR / "property_browser.log"

# Module-level state for lazy initialization
_configured: bool = False


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
) -> structlog.BoundLogger:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to settings.
        json_output: If True, output JSON lines. Defaults to settings.

    Returns:
        Configured logger instance.
    """
    global _configured

    if _configured:
        return structlog.get_logger()

    from property_browser.core.settings import get_settings

    settings = get_settings()
    log_level = (level or settings.log_level).upper()
    numeric_level = getattr(logging, log_level, logging.INFO)
    if json_output is None:
        json_output = settings.json_logs

    handlers: list[logging.Handler] = [
        logging.StreamHandler(sys.stdout),
    ]

    # No log file while running under pytest
    if not os.environ.get("PYTEST_CURRENT_TEST"):
        try:
            LOG_DIR.mkdir(exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                str(LOG_FILE), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
            handlers.append(file_handler)
        except OSError:
            pass

    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=handlers,
        force=True,
    )

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _configured = True
    return structlog.get_logger()


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger instance, optionally bound to a specific name.

    This function lazily initializes logging on first call.

    Args:
        name: Optional logger name (usually module name).

    Returns:
        Bound logger instance.
    """
    if not _configured:
        configure_logging()

    logger = structlog.get_logger()
    if name:
        return logger.bind(logger_name=name)
    return logger


def bind_catalog_context(catalog_size: int, source: str | None = None) -> None:
    """Attach catalog details to every log event of the current run.

    Args:
        catalog_size: Number of properties in the session catalog.
        source: Catalog file the session was loaded from.
    """
    context: dict[str, Any] = {"catalog_size": catalog_size}
    if source is not None:
        context["catalog_source"] = source
    structlog.contextvars.bind_contextvars(**context)

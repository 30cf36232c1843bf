"""Logging configuration for roi_engine.

Structured logging via structlog on top of the standard library handlers.
Console output during development, JSON lines when ``json_output`` is set.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

from roi_engine.core.settings import get_settings

LOG_DIR = Path(__file__).parent.parent.parent / "logs"
LOG_FILE = LOG_DIR / "roi_engine.log"

_configured: bool = False


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
    log_to_file: bool = False,
) -> structlog.BoundLogger:
    """Configure structured logging for the engine.

    Args:
        level: Log level name. Defaults to the ``ROI_LOG_LEVEL`` setting.
        json_output: Render JSON lines instead of the console format.
            Defaults to the ``ROI_JSON_LOGS`` setting.
        log_to_file: Also write to a rotating file under ``logs/``.

    Returns:
        Configured logger instance.
    """
    global _configured

    if _configured:
        return structlog.get_logger()

    settings = get_settings()
    log_level = (level or settings.log_level).upper()
    numeric_level = getattr(logging, log_level, logging.INFO)
    if json_output is None:
        json_output = settings.json_logs

    handlers: list[logging.Handler] = [
        logging.StreamHandler(sys.stdout),
    ]

    # No file output while pytest is running
    if log_to_file and not os.environ.get("PYTEST_CURRENT_TEST"):
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.append(
                logging.handlers.RotatingFileHandler(
                    str(LOG_FILE), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
                )
            )
        except OSError as e:
            sys.stderr.write(f"roi_engine: file logging disabled ({e})\n")

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
    """Get a logger, configuring logging on first use.

    Args:
        name: Optional logger name (usually ``__name__``).

    Returns:
        Bound logger instance.
    """
    if not _configured:
        configure_logging()

    logger = structlog.get_logger()
    if name:
        return logger.bind(logger_name=name)
    return logger

"""Logging configuration for the Hacker News client.

Library modules only call ``logging.getLogger(__name__)``. Applications and
scripts that want console output call ``setup_logging`` once; it attaches a
single stdout handler to the ``hackernews`` logger and keeps the chatty
``httpx``/``httpcore`` loggers at WARNING unless LOG_LEVEL is DEBUG.
"""

import json
import logging
import sys
from typing import Any

from hackernews.utils.config import get_settings

PACKAGE_LOGGER = "hackernews"
HTTP_LOGGERS = ("httpx", "httpcore")

# Request fields the client passes through ``extra=``
REQUEST_FIELDS = ("method", "url", "status_code", "elapsed_ms", "hits")


class JsonFormatter(logging.Formatter):
    """One JSON object per line, with request fields when present."""

    def format(self, record: logging.LogRecord) -> str:
        settings = get_settings()

        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "app_name": settings.APP_NAME,
            "environment": settings.ENVIRONMENT,
        }

        for field in REQUEST_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class StandardFormatter(logging.Formatter):
    """Plain text formatter: ``[time] LEVEL - name - message``."""

    def __init__(self) -> None:
        fmt = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"
        datefmt = "%Y-%m-%d %H:%M:%S"
        super().__init__(fmt=fmt, datefmt=datefmt)


_logging_configured = False


def setup_logging(use_json: bool = False, force_reconfigure: bool = False) -> None:
    """
    Attach a stdout handler to the ``hackernews`` logger.

    Calling it again is a no-op unless ``force_reconfigure`` is set, in which
    case the previous handler is replaced rather than duplicated.

    Args:
        use_json: If True, use JSON format. If False, use standard text format.
        force_reconfigure: If True, rebuild the handler with current settings.
    """
    global _logging_configured

    if _logging_configured and not force_reconfigure:
        return

    settings = get_settings()
    log_level = getattr(logging, settings.LOG_LEVEL)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if isinstance(handler, logging.StreamHandler) and handler.stream == sys.stdout:
            package_logger.removeHandler(handler)

    package_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(JsonFormatter() if use_json else StandardFormatter())
    package_logger.addHandler(console_handler)

    http_level = logging.DEBUG if log_level == logging.DEBUG else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)

    _logging_configured = True

    logging.getLogger(__name__).debug(
        f"Logging configured: level={settings.LOG_LEVEL}, "
        f"format={'json' if use_json else 'standard'}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger, configuring output first if nobody has yet.

    Args:
        name: Logger name (typically ``__name__`` of the calling script)

    Returns:
        Logger instance
    """
    if not _logging_configured:
        setup_logging()

    return logging.getLogger(name)


def reset_logging() -> None:
    """Remove the handler installed by ``setup_logging``. Used by tests."""
    global _logging_configured

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)

    _logging_configured = False

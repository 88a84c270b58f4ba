"""Structured logging framework using structlog.

Provides the library-wide logging configuration:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Sanitization of sensitive fields (connection passwords, tokens)
- Optional daily rotated log file

Configuration is loaded from table_backend_utils.config.settings:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- LOG_TO_FILE: Enable file logging. Default: disabled
- LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from table_backend_utils.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("table_reflection.loaded", schema="dbo", table="orders")
"""

import logging
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, MutableMapping

import structlog
from structlog.types import EventDict, Processor

from table_backend_utils.config import get_settings

SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
    re.compile(r".*credential.*", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Redact sensitive values from a dictionary before logging.

    Args:
        data: Dictionary that may contain sensitive data

    Returns:
        New dictionary with sensitive values replaced by [REDACTED]

    Example:
        >>> sanitize_for_logging({"password": "secret123", "user": "admin"})
        {'password': '[REDACTED]', 'user': 'admin'}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(pattern.match(key) for pattern in SENSITIVE_PATTERNS):
            sanitized[key] = REDACTED_VALUE
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor that sanitizes sensitive fields in event_dict."""
    return sanitize_for_logging(dict(event_dict))


def _get_log_level() -> int:
    level_name = get_settings().LOG_LEVEL
    return getattr(logging, level_name, logging.INFO)


def _get_log_file_path(log_dir: Path) -> Path:
    """Get the log file path with date-based naming."""
    log_dir.mkdir(parents=True, exist_ok=True)
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"table-backend-utils-{date_str}.log"


def _configure_library_logger() -> None:
    """Attach level and handlers to the ``table_backend_utils`` stdlib logger.

    The global structlog configuration and the root logger are left to the
    host application.
    """
    settings = get_settings()
    level = _get_log_level()

    library_logger = logging.getLogger("table_backend_utils")
    library_logger.setLevel(level)
    if not library_logger.handlers:
        stdout_handler = logging.StreamHandler()
        stdout_handler.setLevel(level)
        library_logger.addHandler(stdout_handler)

        if settings.LOG_TO_FILE:
            file_handler = TimedRotatingFileHandler(
                filename=str(_get_log_file_path(Path(settings.LOG_FILE_DIR))),
                when="midnight",
                interval=1,
                backupCount=30,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            library_logger.addHandler(file_handler)


PROCESSORS: list[Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    sanitization_processor,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]

_configure_library_logger()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger over the stdlib logger of that name, with the
        library processors bound to it rather than set globally
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(dialect="synapse", schema="dbo")
        >>> logger.info("table_reflection.loaded", table="orders")
    """
    return get_logger("table_backend_utils").bind(**kwargs)

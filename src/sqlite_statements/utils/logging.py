"""Structured logging for sqlite-statements.

Modules log through ``get_logger(__name__)``: JSON events emitted on stdlib
loggers under ``sqlite_statements``. Nothing is configured on import and
structlog's global configuration is never changed. Hosts route the events
with their own logging setup, or call ``configure_logging()`` once at startup
for a level and handlers on the package logger.

Settings used by configure_logging (see sqlite_statements.config):
- LOG_LEVEL: level applied to the ``sqlite_statements`` logger
- SQLSTMT_LOG_TO_FILE / SQLSTMT_LOG_FILE_DIR: daily rotated log file
"""

import logging
import os
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, MutableMapping, Optional

import structlog
from pydantic import ValidationError
from structlog.types import EventDict, Processor

from sqlite_statements.config import Settings, get_settings

PACKAGE_LOGGER = "sqlite_statements"

SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*api_key.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"

_installed_handlers: List[logging.Handler] = []
_configured = False


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Replace values of sensitive keys with [REDACTED], recursing into dicts.

    Example:
        >>> sanitize_for_logging({"password": "hunter2", "table": "users"})
        {'password': '[REDACTED]', 'table': 'users'}
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
    return sanitize_for_logging(dict(event_dict))


_PROCESSORS: List[Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    sanitization_processor,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]


def _load_settings() -> Optional[Settings]:
    try:
        return get_settings()
    except ValidationError:
        return None


def _resolve_level(level: Optional[str], settings: Optional[Settings]) -> int:
    if level is None:
        level = settings.LOG_LEVEL if settings else os.getenv("LOG_LEVEL", "INFO")
    return getattr(logging, level.upper(), logging.INFO)


def _log_file_path(log_dir: Path) -> Path:
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f"sqlite-statements-{datetime.now():%Y%m%d}.log"


def configure_logging(level: Optional[str] = None, force: bool = False) -> None:
    """Set the level and handlers of the ``sqlite_statements`` logger.

    Repeated calls are no-ops unless ``force`` is set, in which case the
    handlers installed by the previous call are replaced. A stdout handler
    is only added when the root logger has none, so hosts with their own
    handlers do not see duplicate lines.

    Args:
        level: Level name for the package logger; LOG_LEVEL when omitted
        force: Re-apply configuration after an earlier call
    """
    global _configured
    if _configured and not force:
        return

    settings = _load_settings()
    resolved = _resolve_level(level, settings)
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in _installed_handlers:
        package_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    package_logger.setLevel(resolved)
    if not logging.root.handlers:
        _installed_handlers.append(logging.StreamHandler())
    if settings is not None and settings.log_to_file:
        _installed_handlers.append(
            TimedRotatingFileHandler(
                filename=str(_log_file_path(Path(settings.log_file_dir))),
                when="midnight",
                backupCount=30,
                encoding="utf-8",
            )
        )
    for handler in _installed_handlers:
        handler.setLevel(resolved)
        package_logger.addHandler(handler)

    _configured = True


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger backed by the stdlib logger ``name``.

    Events render as JSON through this package's own processors and are
    filtered by stdlib levels, so the host's structlog configuration is
    left untouched.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=list(_PROCESSORS),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )

"""
Core Logger Module

Centralized logging configuration for api-tester.
Console output for humans goes through rich; this module only covers diagnostics.
"""

import logging
import logging.config
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping

from apitester.core.config import settings

_REDACT_KEYWORDS = (
    "authorization",
    "password",
    "secret",
    "token",
    "api_key",
    "apikey",
    "api-key",
    "cookie",
)


def _get_setting(name: str, default: Any) -> Any:
    """Get a setting with a default fallback."""
    return getattr(settings, name, default)


def redact_headers(headers: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of headers with credential-like values masked for logging."""
    safe: Dict[str, Any] = {}
    for k, v in headers.items():
        lk = str(k).lower()
        if any(word in lk for word in _REDACT_KEYWORDS):
            safe[k] = "<redacted>"
        else:
            safe[k] = v
    return safe


def get_logging_config() -> Dict[str, Any]:
    """
    Generate logging configuration (stderr console + optional rotating file).

    Returns:
        Dict: Logging configuration dictionary
    """
    log_level = (_get_setting("log_level", "warning") or "warning").upper()

    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": log_level,
            "formatter": "simple",
            "stream": sys.stderr,
        },
    }
    app_handlers = ["console"]

    if _get_setting("log__file_enabled", False):
        logs_dir = Path(_get_setting("log__dir", "logs"))
        logs_dir.mkdir(parents=True, exist_ok=True)

        file_path = _get_setting("log__file_path", None)
        if file_path is None:
            file_path = str(logs_dir / "apitester.log")

        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": _get_setting("log__file_level", "INFO"),
            "formatter": "detailed",
            "filename": file_path,
            "maxBytes": int(_get_setting("log__file_max_bytes", 10 * 1024 * 1024)),
            "backupCount": int(_get_setting("log__file_backup_count", 3)),
            "encoding": "utf-8",
        }
        app_handlers.append("file")

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%H:%M:%S",
            },
            "detailed": {
                "format": (
                    "%(asctime)s - %(name)s - %(levelname)s - "
                    "%(module)s:%(lineno)d - %(message)s"
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            "apitester": {
                "level": "DEBUG" if _get_setting("debug", False) else log_level,
                "handlers": app_handlers,
                "propagate": False,
            },
            # Third-party library loggers
            "httpx": {"level": "WARNING", "propagate": True},
            "httpcore": {"level": "WARNING", "propagate": True},
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }

    return config


@lru_cache(maxsize=1)
def setup_logging() -> None:
    """
    Set up logging configuration.
    This function should be called once during application startup.
    """
    logging.config.dictConfig(get_logging_config())

    logger = logging.getLogger("apitester.startup")
    logger.debug(
        "Logging system initialized - Level: %s, File logging: %s",
        _get_setting("log_level", "warning"),
        _get_setting("log__file_enabled", False),
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with automatic 'apitester' prefix.

    Args:
        name: Logger name, typically __name__ of the calling module.
              Will be prefixed with 'apitester.' if not already present.

    Returns:
        Logger: Configured logger instance with apitester prefix

    Example:
        logger = get_logger(__name__)  # Returns 'apitester.module_name'
        logger.info("This is an info message")
    """
    setup_logging()

    if not name.startswith("apitester"):
        name = f"apitester.{name}"

    return logging.getLogger(name)

"""
Core Package

Core configuration, error handling, and logging for api-tester.
"""

# ruff: noqa: F401  # All imports are re-exported via __all__

from .config import Settings, settings  # noqa: F401
from .error_codes import (  # noqa: F401
    EXIT_CODE_MAP,
    ConfigurationErrorCode,
    DataProcessErrorCode,
    ErrorCode,
    RequestParamErrorCode,
    StorageErrorCode,
    ValidationErrorCode,
    get_exit_code,
)
from .exceptions import (  # noqa: F401
    ApplicationException,
    ConfigurationException,
    DataProcessException,
    RequestParamException,
    StorageException,
    ValidationException,
)
from .logger import get_logger, redact_headers  # noqa: F401

__all__ = [
    # Configuration
    "Settings",
    "settings",
    # Error handling
    "ErrorCode",
    "ConfigurationErrorCode",
    "StorageErrorCode",
    "DataProcessErrorCode",
    "ValidationErrorCode",
    "RequestParamErrorCode",
    "EXIT_CODE_MAP",
    "get_exit_code",
    # Exceptions
    "ApplicationException",
    "ConfigurationException",
    "StorageException",
    "DataProcessException",
    "ValidationException",
    "RequestParamException",
    # Logger
    "get_logger",
    "redact_headers",
]

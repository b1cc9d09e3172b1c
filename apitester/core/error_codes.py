"""
Error Codes

Standardized error codes for api-tester.
"""

from enum import StrEnum
from types import MappingProxyType
from typing import Mapping


class ErrorCode(StrEnum):
    """Base error code enum (string-based)."""


class ConfigurationErrorCode(ErrorCode):
    """Configuration-related error codes."""

    CONFIG_LOAD_FAILED = "CONFIGURATION_LOAD_FAILED"


class StorageErrorCode(ErrorCode):
    """Local file storage error codes."""

    WRITE_FAILED = "STORAGE_WRITE_FAILED"


class DataProcessErrorCode(ErrorCode):
    """Data processing error codes."""

    FILE_NOT_FOUND = "DATA_PROCESS_FILE_NOT_FOUND"
    PARSING_FAILED = "DATA_PROCESS_PARSING_FAILED"
    VALIDATION_FAILED = "DATA_PROCESS_VALIDATION_FAILED"


class ValidationErrorCode(ErrorCode):
    """Schema validation error codes."""

    INVALID_SCHEMA = "VALIDATION_INVALID_SCHEMA"


class RequestParamErrorCode(ErrorCode):
    """Request parameter error codes."""

    INVALID_PARAMETER = "REQUEST_PARAM_INVALID"


# Error code to process exit status mapping
#
# CONVENTIONS FOR ADDING NEW ERROR CODES:
# 1. Error code names use UPPER_SNAKE_CASE
# 2. Error code values MUST carry their domain prefix (STORAGE_*, DATA_PROCESS_*, ...)
# 3. Always add the exit status mapping here:
#    - 1: input errors the user can fix (bad files, bad JSON)
#    - 2: configuration errors
#    - 3: local storage errors
#
EXIT_CODE_MAP: Mapping[ErrorCode, int] = MappingProxyType(
    {
        # Configuration errors
        ConfigurationErrorCode.CONFIG_LOAD_FAILED: 2,
        # Storage errors
        StorageErrorCode.WRITE_FAILED: 3,
        # Data processing errors
        DataProcessErrorCode.FILE_NOT_FOUND: 1,
        DataProcessErrorCode.PARSING_FAILED: 1,
        DataProcessErrorCode.VALIDATION_FAILED: 1,
        # Validation errors
        ValidationErrorCode.INVALID_SCHEMA: 1,
        # Request parameter errors
        RequestParamErrorCode.INVALID_PARAMETER: 1,
    }
)


def _get_exit_code_for_string(error_code_str: str) -> int:
    """Helper function to get exit code for string error code."""
    for code in EXIT_CODE_MAP:
        if code.value == error_code_str:
            return EXIT_CODE_MAP[code]
    return 1


def get_exit_code(error_code: ErrorCode | str) -> int:
    """
    Get process exit status for an error code.

    Args:
        error_code: Error code enum or string

    Returns:
        Exit status (defaults to 1 if not found)
    """
    if isinstance(error_code, ErrorCode):
        return EXIT_CODE_MAP.get(error_code, 1)
    return _get_exit_code_for_string(error_code)


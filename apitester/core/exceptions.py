"""
Custom Exceptions

Application-specific exception classes.

USAGE GUIDELINES:
- Always use ErrorCode enum members, not string literals
- Each exception subclass should use its corresponding domain error code
- Use the wrap() class method to preserve exception chains when wrapping
  lower-level exceptions
- Transport failures are never raised; they are captured into a ResponseFailure
"""

import json
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from apitester.core.error_codes import ErrorCode


def _safe_serialize(obj: Any) -> Any:
    """Safely serialize an object for JSON, using repr() for unserializable ones."""
    try:
        json.dumps(obj)
        return obj
    except (TypeError, ValueError):
        return repr(obj)


class ApplicationException(Exception):
    """Base exception for api-tester errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional["ErrorCode | str"] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization with safe handling."""
        safe_details = {k: _safe_serialize(v) for k, v in self.details.items()}

        result = {
            "message": self.message,
            "code": (
                self.error_code.value
                if self.error_code is not None and hasattr(self.error_code, "value")
                else self.error_code
            ),
            "details": safe_details,
        }

        # Priority: custom cause > __cause__ > __context__
        cause = (
            self.cause
            or getattr(self, "__cause__", None)
            or getattr(self, "__context__", None)
        )
        if cause:
            result["cause"] = {"type": cause.__class__.__name__, "message": str(cause)}

        return result

    @classmethod
    def wrap(
        cls,
        exc: Exception,
        message: str,
        error_code: Optional["ErrorCode"] = None,
        **context: Any,
    ) -> "ApplicationException":
        """
        Wrap a lower-level exception while preserving the exception chain.

        Args:
            exc: The original exception to wrap
            message: User-facing error message
            error_code: ErrorCode enum member (strongly recommended over string)
            **context: Additional context to include in details

        Returns:
            New exception instance with preserved exception chain

        Example:
            try:
                json.loads(text)
            except json.JSONDecodeError as e:
                raise DataProcessException.wrap(
                    e, "Invalid JSON input",
                    DataProcessErrorCode.PARSING_FAILED,
                    field="headers",
                ) from e
        """
        return cls(message=message, error_code=error_code, details=context, cause=exc)

    def __str__(self) -> str:
        """String representation with error code and details."""
        parts = [self.message]
        if self.error_code:
            code_str = (
                self.error_code.value
                if hasattr(self.error_code, "value")
                else self.error_code
            )
            parts.append(f"[{code_str}]")
        if self.details:
            parts.append(f"Details: {self.details}")
        return " ".join(parts)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r}, "
            f"cause={self.cause!r})"
        )

    @property
    def exit_code(self) -> int:
        """Get the process exit status for this exception (lazy-loaded)."""
        if self.error_code:
            from apitester.core.error_codes import get_exit_code

            return get_exit_code(self.error_code)
        return 1


class ConfigurationException(ApplicationException):
    """Exception raised for configuration-related errors."""


class StorageException(ApplicationException):
    """Exception raised when a local file cannot be written."""


class DataProcessException(ApplicationException):
    """Exception raised for unreadable or malformed input documents."""


class ValidationException(ApplicationException):
    """Exception raised when a JSON Schema itself is unusable."""


class RequestParamException(ApplicationException):
    """Exception raised for request parameter errors."""


__all__ = [
    "ApplicationException",
    "ConfigurationException",
    "StorageException",
    "DataProcessException",
    "ValidationException",
    "RequestParamException",
]

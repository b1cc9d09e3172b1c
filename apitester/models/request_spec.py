"""Request specification model."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

QueryValue = Union[str, int, float, bool, None]


def _header_text(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


class HttpMethod(StrEnum):
    """HTTP methods the tool can send."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def accepts_body(self) -> bool:
        return self in (HttpMethod.POST, HttpMethod.PUT)


class RequestSpec(BaseModel):
    """A single HTTP request, immutable once built."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod = Field(..., description="HTTP method")
    url: str = Field(..., description="Absolute request URL")
    headers: Dict[str, str] = Field(
        default_factory=dict, description="Static request headers"
    )
    query: Dict[str, QueryValue] = Field(
        default_factory=dict, description="Query string parameters"
    )
    body: Optional[Any] = Field(None, description="JSON request body")

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, v: Any) -> Any:
        """Accept lower-case method names."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("headers", mode="before")
    @classmethod
    def stringify_header_values(cls, v: Any) -> Any:
        """Send scalar header values the way they are written in JSON."""
        if not isinstance(v, dict):
            return v
        return {key: _header_text(value) for key, value in v.items()}

    def __repr__(self) -> str:
        return f"<RequestSpec(method='{self.method}', url='{self.url}')>"


__all__ = ["HttpMethod", "QueryValue", "RequestSpec"]

"""
Response Outcome Models

A sent request ends in exactly one of two shapes: a received response
(any status code) or a transport error message.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

NO_RESPONSE_TIME = "N/A"


class ResponseSuccess(BaseModel):
    """A response was received from the server."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    status: int = Field(..., description="HTTP status code")
    headers: Dict[str, Any] = Field(
        default_factory=dict, description="Response headers"
    )
    data: Any = Field(None, description="Parsed JSON body, or body text")
    response_time: str = Field(
        NO_RESPONSE_TIME,
        alias="responseTime",
        description="Server-reported response time header value",
    )

    @property
    def is_error(self) -> bool:
        return False


class ResponseFailure(BaseModel):
    """The request never produced a response."""

    model_config = ConfigDict(extra="forbid")

    error: str = Field(..., description="Transport error message")

    @property
    def is_error(self) -> bool:
        return True


def _outcome_tag(value: Any) -> str:
    if isinstance(value, dict):
        return "failure" if "error" in value else "success"
    return "failure" if isinstance(value, ResponseFailure) else "success"


ResponseOutcome = Annotated[
    Union[
        Annotated[ResponseSuccess, Tag("success")],
        Annotated[ResponseFailure, Tag("failure")],
    ],
    Discriminator(_outcome_tag),
]


__all__ = [
    "NO_RESPONSE_TIME",
    "ResponseFailure",
    "ResponseOutcome",
    "ResponseSuccess",
]

"""
Request Executor

Sends a single HTTP request and normalizes whatever happens into a ResponseOutcome.
"""

from typing import Any, Optional

import httpx

from apitester.core.config import settings
from apitester.core.logger import get_logger, redact_headers
from apitester.models import (
    NO_RESPONSE_TIME,
    RequestSpec,
    ResponseFailure,
    ResponseOutcome,
    ResponseSuccess,
)

logger = get_logger(__name__)


def _parse_body(response: httpx.Response) -> Any:
    """Decode a JSON body when possible, otherwise return the text."""
    if not response.content:
        return ""
    try:
        return response.json()
    except ValueError:
        return response.text


def _to_outcome(response: httpx.Response) -> ResponseSuccess:
    return ResponseSuccess(
        status=response.status_code,
        headers=dict(response.headers),
        data=_parse_body(response),
        response_time=response.headers.get(
            settings.http__response_time_header, NO_RESPONSE_TIME
        ),
    )


class RequestExecutor:
    """Issues requests over httpx; every status code counts as a response."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self.client = client

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=settings.http__timeout,
            follow_redirects=settings.http__follow_redirects,
            verify=settings.http__verify_ssl,
        )

    async def _request(
        self, client: httpx.AsyncClient, spec: RequestSpec
    ) -> httpx.Response:
        return await client.request(
            method=spec.method.value,
            url=spec.url,
            headers=spec.headers,
            params=spec.query,
            json=spec.body,
        )

    async def send(self, spec: RequestSpec) -> ResponseOutcome:
        """
        Send a request and capture the result.

        Args:
            spec: Request to send

        Returns:
            ResponseSuccess for any received response, ResponseFailure when the
            request could not be completed. Never raises.
        """
        logger.info(
            "Sending %s %s headers=%s query=%s",
            spec.method.value,
            spec.url,
            redact_headers(spec.headers),
            spec.query,
        )
        try:
            if self.client is not None:
                response = await self._request(self.client, spec)
            else:
                async with self._create_client() as client:
                    response = await self._request(client, spec)
        except Exception as e:
            error_message = str(e) or e.__class__.__name__
            logger.warning(
                "Request %s %s failed: %s", spec.method.value, spec.url, error_message
            )
            return ResponseFailure(error=error_message)

        logger.info(
            "Received %s from %s %s", response.status_code, spec.method.value, spec.url
        )
        return _to_outcome(response)


__all__ = ["RequestExecutor"]

import io
from typing import Callable, List

import httpx
import pytest
from rich.console import Console


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, highlight=False)


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(recorded_requests) -> Callable[..., httpx.AsyncClient]:
    """Build an AsyncClient whose transport records requests and calls a handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        def _recording_handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        return httpx.AsyncClient(transport=httpx.MockTransport(_recording_handler))

    return _make

import json

import httpx
import pytest

from apitester.models import RequestSpec, ResponseFailure, ResponseSuccess
from apitester.services.request_executor import RequestExecutor


@pytest.mark.asyncio
async def test_send_returns_parsed_json_response(make_client, recorded_requests):
    def handler(request):
        return httpx.Response(
            200, json={"id": 1}, headers={"x-response-time": "12ms"}
        )

    spec = RequestSpec(
        method="post",
        url="https://api.example.com/users",
        headers={"Authorization": "Bearer token"},
        query={"page": 2},
        body={"name": "John"},
    )
    async with make_client(handler) as client:
        outcome = await RequestExecutor(client).send(spec)

    assert isinstance(outcome, ResponseSuccess)
    assert outcome.status == 200
    assert outcome.data == {"id": 1}
    assert outcome.response_time == "12ms"

    sent = recorded_requests[0]
    assert sent.method == "POST"
    assert sent.url.params["page"] == "2"
    assert sent.headers["authorization"] == "Bearer token"
    assert json.loads(sent.content) == {"name": "John"}


@pytest.mark.asyncio
async def test_server_errors_are_still_responses(make_client):
    async with make_client(lambda request: httpx.Response(503, text="down")) as client:
        outcome = await RequestExecutor(client).send(
            RequestSpec(method="GET", url="https://api.example.com/health")
        )

    assert isinstance(outcome, ResponseSuccess)
    assert outcome.status == 503
    assert outcome.data == "down"
    assert outcome.response_time == "N/A"


@pytest.mark.asyncio
async def test_empty_body_and_no_body_sent_for_get(make_client, recorded_requests):
    async with make_client(lambda request: httpx.Response(200)) as client:
        outcome = await RequestExecutor(client).send(
            RequestSpec(method="GET", url="https://example.com/200")
        )

    assert isinstance(outcome, ResponseSuccess)
    assert outcome.data == ""
    assert recorded_requests[0].content == b""


@pytest.mark.asyncio
async def test_transport_error_becomes_failure(make_client):
    def handler(request):
        raise httpx.ConnectError("Connection refused", request=request)

    async with make_client(handler) as client:
        outcome = await RequestExecutor(client).send(
            RequestSpec(method="DELETE", url="https://unreachable.invalid/item/1")
        )

    assert isinstance(outcome, ResponseFailure)
    assert outcome.error == "Connection refused"
    assert outcome.model_dump() == {"error": "Connection refused"}


@pytest.mark.asyncio
async def test_empty_error_message_falls_back_to_exception_name(make_client):
    def handler(request):
        raise httpx.ReadTimeout("", request=request)

    async with make_client(handler) as client:
        outcome = await RequestExecutor(client).send(
            RequestSpec(method="GET", url="https://slow.example.com")
        )

    assert isinstance(outcome, ResponseFailure)
    assert outcome.error == "ReadTimeout"


def test_success_outcome_serializes_with_camel_case_response_time():
    outcome = ResponseSuccess(status=200, headers={}, data=None)

    assert outcome.model_dump(by_alias=True) == {
        "status": 200,
        "headers": {},
        "data": None,
        "responseTime": "N/A",
    }

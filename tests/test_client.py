import asyncio
import json
import time
from typing import List
from unittest.mock import patch

import httpx
import pytest

from ackack.client import APIClient
from ackack.config import DEFAULT_BASE_URL, APIConfig
from ackack.exceptions import (
    ClientError, ConfigurationError, RateLimitError, RequestEncodeError, RequestFailedError,
    ResponseDecodeError, ServerError, is_bad_request_error, is_not_found_error,
)
from ackack.models import CreateMonitorRequest, Monitor


class SleepRecorder:
    """Stands in for asyncio.sleep and records each requested delay"""

    def __init__(self):
        self.delays = []

    async def __call__(self, seconds):
        self.delays.append(seconds)


class Handler:
    """Replays a scripted sequence of responses (or exceptions), one per request"""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def sleep():
    return SleepRecorder()


def make_client(handler, sleep=None, **kwargs) -> APIClient:
    kwargs.setdefault("retry_base_delay", 1.0)
    return APIClient(
        api_key="test-key",
        base_url="https://api.example.com",
        version="1.2.3",
        transport=httpx.MockTransport(handler),
        sleep=sleep,
        **kwargs,
    )


def test_empty_api_key_is_rejected():
    """Constructing without credentials fails before any network access"""
    handler = Handler(httpx.Response(200))
    for api_key in ("", None):
        with pytest.raises(ConfigurationError):
            APIClient(api_key=api_key, transport=httpx.MockTransport(handler))
    assert handler.requests == []


def test_defaults():
    client = APIClient(api_key="test-key")
    assert client.config.base_url == DEFAULT_BASE_URL
    assert client.config.user_agent == "ackack-python"
    assert client.config.max_attempts == 3


@pytest.mark.asyncio
async def test_request_headers(sleep):
    handler = Handler(httpx.Response(200, json={"id": "m1"}))
    async with make_client(handler, sleep) as client:
        await client.get("/api/v1/monitors/m1", response_model=Monitor)
    request = handler.requests[0]
    assert request.url == "https://api.example.com/api/v1/monitors/m1"
    assert request.headers["Authorization"] == "Bearer test-key"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["User-Agent"] == "ackack-python/1.2.3"


@pytest.mark.asyncio
async def test_success_decodes_body(sleep):
    handler = Handler(httpx.Response(200, json={"id": "m1", "name": "site", "uptime_percentage": 99.5, "unknown": 1}))
    async with make_client(handler, sleep) as client:
        monitor = await client.get("/api/v1/monitors/m1", response_model=Monitor)
    assert monitor == Monitor(id="m1", name="site", uptime_percentage=99.5)
    assert len(handler.requests) == 1
    assert sleep.delays == []


@pytest.mark.asyncio
async def test_success_decodes_generic_shape(sleep):
    handler = Handler(httpx.Response(200, json=[{"id": "m1"}, {"id": "m2"}]))
    async with make_client(handler, sleep) as client:
        monitors = await client.get("/api/v1/monitors", response_model=List[Monitor])
    assert [m.id for m in monitors] == ["m1", "m2"]


@pytest.mark.asyncio
async def test_success_with_empty_body_returns_none(sleep):
    handler = Handler(httpx.Response(204))
    async with make_client(handler, sleep) as client:
        assert await client.get("/api/v1/monitors/m1", response_model=Monitor) is None


@pytest.mark.asyncio
async def test_delete_ignores_response_body(sleep):
    handler = Handler(httpx.Response(200, json={"deleted": True}))
    async with make_client(handler, sleep) as client:
        assert await client.delete("/api/v1/monitors/m1") is None
    assert handler.requests[0].method == "DELETE"


@pytest.mark.asyncio
async def test_undecodable_success_body_is_terminal(sleep):
    """A 2xx body that does not decode is not retried"""
    handler = Handler(httpx.Response(200, content=b"<html>not json</html>"))
    async with make_client(handler, sleep) as client:
        with pytest.raises(ResponseDecodeError):
            await client.get("/api/v1/monitors/m1", response_model=Monitor)
    assert len(handler.requests) == 1
    assert sleep.delays == []


@pytest.mark.asyncio
async def test_bad_request_is_not_retried(sleep):
    handler = Handler(httpx.Response(400, json={"error": "validation_failed", "message": "name is required"}))
    async with make_client(handler, sleep) as client:
        with pytest.raises(ClientError) as exc_info:
            await client.post("/api/v1/monitors", {"type": "http"}, response_model=Monitor)
    error = exc_info.value
    assert error.status_code == 400
    assert error.message == "name is required"
    assert error.error_field == "validation_failed"
    assert is_bad_request_error(error)
    assert len(handler.requests) == 1
    assert sleep.delays == []


@pytest.mark.asyncio
async def test_client_error_falls_back_to_error_field_then_reason_phrase(sleep):
    handler = Handler(httpx.Response(403, json={"error": "plan limit reached"}), httpx.Response(404, text="gone"))
    async with make_client(handler, sleep) as client:
        with pytest.raises(ClientError) as exc_info:
            await client.get("/api/v1/monitors/m1")
        assert exc_info.value.message == "plan limit reached"

        with pytest.raises(ClientError) as exc_info:
            await client.get("/api/v1/monitors/m2")
        assert exc_info.value.message == "Not Found"
        assert exc_info.value.error_field is None
        assert is_not_found_error(exc_info.value)


@pytest.mark.asyncio
async def test_rate_limit_waits_for_retry_after(sleep):
    """A 429 waits the server-specified time instead of the linear backoff"""
    handler = Handler(httpx.Response(429, headers={"Retry-After": "2"}), httpx.Response(200, json={"id": "m1"}))
    async with make_client(handler, sleep) as client:
        monitor = await client.get("/api/v1/monitors/m1", response_model=Monitor)
    assert monitor.id == "m1"
    assert len(handler.requests) == 2
    assert sleep.delays == [2.0]


@pytest.mark.asyncio
@pytest.mark.parametrize("headers", [{}, {"Retry-After": "soon"}])
async def test_rate_limit_default_wait(sleep, headers):
    handler = Handler(httpx.Response(429, headers=headers), httpx.Response(204))
    async with make_client(handler, sleep) as client:
        await client.get("/api/v1/monitors")
    assert sleep.delays == [60.0]


@pytest.mark.asyncio
async def test_rate_limit_exhausts_attempts(sleep):
    handler = Handler(httpx.Response(429, headers={"Retry-After": "1"}))
    async with make_client(handler, sleep) as client:
        with pytest.raises(RateLimitError) as exc_info:
            await client.get("/api/v1/monitors")
    assert exc_info.value.status_code == 429
    assert len(handler.requests) == 3
    assert sleep.delays == [1.0, 1.0]


@pytest.mark.asyncio
async def test_transport_failure_retries_with_linear_backoff(sleep):
    handler = Handler(httpx.ConnectError("connection refused"))
    async with make_client(handler, sleep, retry_base_delay=0.5) as client:
        with pytest.raises(RequestFailedError) as exc_info:
            await client.get("/api/v1/monitors")
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert len(handler.requests) == 3
    assert sleep.delays == [0.5, 1.0]


@patch.object(httpx.AsyncClient, 'send', side_effect=httpx.ReadTimeout("timed out"))
@pytest.mark.asyncio
async def test_timeout_is_retried(mock_send, sleep):
    """Timeouts are transport failures"""
    async with make_client(Handler(httpx.Response(200)), sleep) as client:
        with pytest.raises(RequestFailedError):
            await client.get("/api/v1/monitors")
    assert mock_send.call_count == 3


@pytest.mark.asyncio
async def test_server_error_then_success(sleep):
    handler = Handler(httpx.Response(503), httpx.Response(200, json={"id": "m1"}))
    async with make_client(handler, sleep) as client:
        monitor = await client.get("/api/v1/monitors/m1", response_model=Monitor)
    assert monitor.id == "m1"
    assert sleep.delays == [1.0]


@pytest.mark.asyncio
async def test_server_error_exhausts_attempts(sleep):
    handler = Handler(httpx.Response(500, json={"message": "database unavailable"}))
    async with make_client(handler, sleep) as client:
        with pytest.raises(ServerError) as exc_info:
            await client.get("/api/v1/monitors")
    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "database unavailable"
    assert str(exc_info.value) == "API error (status 500): database unavailable"
    assert len(handler.requests) == 3
    assert sleep.delays == [1.0, 2.0]


@pytest.mark.asyncio
async def test_body_is_serialized_on_every_attempt(sleep):
    handler = Handler(httpx.Response(502), httpx.Response(201, json={"id": "m1", "name": "site"}))
    request = CreateMonitorRequest(name="site", type="http", url="https://example.com")
    async with make_client(handler, sleep) as client:
        monitor = await client.post("/api/v1/monitors", request, response_model=Monitor)
    assert monitor.id == "m1"
    assert len(handler.requests) == 2
    bodies = [json.loads(r.content) for r in handler.requests]
    assert bodies[0] == bodies[1] == {"name": "site", "type": "http", "url": "https://example.com"}


@pytest.mark.asyncio
async def test_unserializable_body_is_terminal(sleep):
    handler = Handler(httpx.Response(200))
    async with make_client(handler, sleep) as client:
        with pytest.raises(RequestEncodeError):
            await client.post("/api/v1/monitors", {"when": object()})
    assert handler.requests == []


@pytest.mark.asyncio
async def test_deadline_interrupts_backoff_wait():
    """A caller deadline cancels the backoff wait and no further attempt is made"""
    handler = Handler(httpx.ConnectError("connection refused"))
    async with make_client(handler, retry_base_delay=30.0) as client:
        started = time.monotonic()
        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(client.get("/api/v1/monitors"), timeout=0.2)
        assert time.monotonic() - started < 5
    assert len(handler.requests) == 1


@pytest.mark.asyncio
async def test_cancel_during_rate_limit_wait():
    handler = Handler(httpx.Response(429, headers={"Retry-After": "30"}))
    async with make_client(handler) as client:
        task = asyncio.ensure_future(client.get("/api/v1/monitors"))
        await asyncio.sleep(0.1)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
    assert len(handler.requests) == 1


@pytest.mark.asyncio
async def test_config_object(sleep):
    config = APIConfig.build(api_key="other-key", base_url="https://staging.example.com")
    handler = Handler(httpx.Response(204))
    async with APIClient(config=config, transport=httpx.MockTransport(handler), sleep=sleep) as client:
        await client.get("/api/v1/alerts")
    assert handler.requests[0].url == "https://staging.example.com/api/v1/alerts"
    assert handler.requests[0].headers["Authorization"] == "Bearer other-key"

import httpx
import pytest

from goldrush_mcp.config import GoldRushConfig
from goldrush_mcp.goldrush_api.client import (
    GoldRushApiClient,
    GoldRushApiError,
    MalformedResponseError,
    NotFoundError,
    UnauthorizedError,
    UpstreamRateLimitedError,
    UpstreamUnavailableError,
)


class MockResponse:
    def __init__(self, status_code: int, json_body):
        self.status_code = status_code
        self._json = json_body

    def json(self):
        if isinstance(self._json, Exception):
            raise self._json
        return self._json


class MockAsyncClient:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []
        self.closed = False

    async def get(self, path, params=None, headers=None):
        self.calls.append({"path": path, "params": params, "headers": headers})
        if not self.responses:
            raise RuntimeError("No mock responses")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    async def aclose(self):
        self.closed = True


def _error_body(message, code):
    return {"data": None, "error": True, "error_message": message, "error_code": code}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status_code, exc_type",
    [
        (401, UnauthorizedError),
        (403, UnauthorizedError),
        (404, NotFoundError),
        (429, UpstreamRateLimitedError),
        (500, GoldRushApiError),
        (400, GoldRushApiError),
    ],
)
async def test_status_code_mapping(status_code, exc_type):
    mock = MockAsyncClient([MockResponse(status_code, _error_body("upstream says no", status_code))])
    client = GoldRushApiClient(api_key="k", async_client=mock)
    with pytest.raises(exc_type) as excinfo:
        await client.get_block("eth-mainnet", "latest")
    assert excinfo.value.status_code == status_code
    assert excinfo.value.code == status_code
    assert str(excinfo.value) == f"{status_code} - upstream says no"


@pytest.mark.asyncio
async def test_error_without_message_uses_fallback():
    mock = MockAsyncClient([MockResponse(401, None)])
    client = GoldRushApiClient(api_key="k", async_client=mock)
    with pytest.raises(UnauthorizedError) as excinfo:
        await client.get_approvals("eth-mainnet", "0xabc")
    assert "401" in str(excinfo.value)


@pytest.mark.asyncio
async def test_rate_limit_is_not_retried():
    mock = MockAsyncClient([MockResponse(429, _error_body("slow down", 429)), MockResponse(200, {"data": {}})])
    client = GoldRushApiClient(api_key="k", async_client=mock)
    with pytest.raises(UpstreamRateLimitedError):
        await client.get_block("eth-mainnet", "1")
    assert len(mock.calls) == 1


@pytest.mark.asyncio
async def test_transport_failure_maps_to_unavailable():
    mock = MockAsyncClient([httpx.ConnectError("connection refused")])
    client = GoldRushApiClient(api_key="k", async_client=mock)
    with pytest.raises(UpstreamUnavailableError):
        await client.get_block("eth-mainnet", "latest")


@pytest.mark.asyncio
async def test_timeout_maps_to_unavailable():
    mock = MockAsyncClient([httpx.ReadTimeout("timed out")])
    client = GoldRushApiClient(api_key="k", async_client=mock)
    with pytest.raises(UpstreamUnavailableError):
        await client.get_all_chain_status()


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [ValueError("not json"), ["a", "list"], "text"])
async def test_malformed_bodies(body):
    mock = MockAsyncClient([MockResponse(200, body)])
    client = GoldRushApiClient(api_key="k", async_client=mock)
    with pytest.raises(MalformedResponseError):
        await client.get_all_chain_status()


@pytest.mark.asyncio
async def test_error_envelope_on_success_status():
    mock = MockAsyncClient([MockResponse(200, _error_body("bad chain", 400))])
    client = GoldRushApiClient(api_key="k", async_client=mock)
    with pytest.raises(MalformedResponseError) as excinfo:
        await client.get_all_chain_status()
    assert "bad chain" in str(excinfo.value)


@pytest.mark.asyncio
async def test_api_key_never_in_error_text():
    mock = MockAsyncClient([MockResponse(401, _error_body("Invalid API key", 401))])
    client = GoldRushApiClient(api_key="cqt_secret", async_client=mock)
    with pytest.raises(UnauthorizedError) as excinfo:
        await client.get_all_chain_status()
    assert "cqt_secret" not in str(excinfo.value)


@pytest.mark.asyncio
async def test_missing_key_sends_no_authorization_header():
    mock = MockAsyncClient([MockResponse(200, {"data": {}})])
    client = GoldRushApiClient(GoldRushConfig(api_key=None), async_client=mock)
    await client.get_all_chain_status()
    assert "Authorization" not in mock.calls[0]["headers"]


@pytest.mark.asyncio
async def test_injected_client_not_closed():
    mock = MockAsyncClient([])
    client = GoldRushApiClient(api_key="k", async_client=mock)
    await client.aclose()
    assert mock.closed is False

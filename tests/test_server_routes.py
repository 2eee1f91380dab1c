import asyncio
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from goldrush_mcp import server
from goldrush_mcp.mcp import McpSession, build_registry
from goldrush_mcp.metrics import default_metrics


class KeyEchoClient:
    """Upstream stand-in that reports which API key it was built with."""

    def __init__(self, api_key):
        self.api_key = api_key
        self.closed = False

    async def get_block(self, chain_name, block_height):
        return {"data": {"served_with": self.api_key, "height": block_height}}

    async def aclose(self):
        self.closed = True


@pytest.fixture
def sessions(monkeypatch):
    created = []

    def factory(api_key, config):
        client = KeyEchoClient(api_key)
        created.append(client)
        return McpSession(client, build_registry(client, config))

    monkeypatch.setattr(server, "session_factory", factory)
    return created


def _block_call(rpc_id=1):
    return {
        "jsonrpc": "2.0",
        "id": rpc_id,
        "method": "tools/call",
        "params": {"name": "block", "arguments": {"chainName": "eth-mainnet", "blockHeight": "latest"}},
    }


def test_health_endpoint():
    client = TestClient(server.app)
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers.get("X-Request-ID")


@pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer   ", "Basic abc", "token-only"])
def test_missing_or_malformed_bearer_is_unauthorized(sessions, header):
    client = TestClient(server.app)
    headers = {} if header is None else {"Authorization": header}
    resp = client.post("/mcp", json=_block_call(), headers=headers)
    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == -32001
    assert resp.headers["WWW-Authenticate"] == "Bearer"
    assert resp.headers.get("X-Request-ID")
    assert sessions == []
    assert default_metrics.snapshot()["unauthorized"] == 1


def test_session_per_credential(sessions):
    client = TestClient(server.app)
    first = client.post("/mcp", json=_block_call(1), headers={"Authorization": "Bearer key-a"})
    second = client.post("/mcp", json=_block_call(2), headers={"Authorization": "Bearer key-b"})
    assert first.status_code == 200 and second.status_code == 200
    first_payload = json.loads(first.json()["result"]["content"][0]["text"])
    second_payload = json.loads(second.json()["result"]["content"][0]["text"])
    assert first_payload["served_with"] == "key-a"
    assert second_payload["served_with"] == "key-b"
    assert [session.api_key for session in sessions] == ["key-a", "key-b"]
    assert all(session.closed for session in sessions)


def test_parse_error(sessions):
    client = TestClient(server.app)
    resp = client.post(
        "/mcp",
        content="{not json",
        headers={"Authorization": "Bearer k", "Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == -32700
    assert sessions == []


def test_batch_body_is_invalid_request(sessions):
    client = TestClient(server.app)
    resp = client.post("/mcp", json=[_block_call()], headers={"Authorization": "Bearer k"})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == -32600


def test_notification_returns_202(sessions):
    client = TestClient(server.app)
    resp = client.post(
        "/mcp",
        json={"jsonrpc": "2.0", "method": "notifications/initialized"},
        headers={"Authorization": "Bearer k"},
    )
    assert resp.status_code == 202
    assert resp.content == b""
    assert sessions[0].closed is True


@pytest.mark.parametrize("verb", ["get", "delete"])
def test_get_and_delete_not_allowed(verb):
    client = TestClient(server.app)
    resp = getattr(client, verb)("/mcp")
    assert resp.status_code == 405
    assert resp.json()["error"]["code"] == -32000
    assert resp.headers["Allow"] == "POST"


def test_session_failure_is_internal_error(monkeypatch):
    def broken_factory(api_key, config):
        raise RuntimeError("cannot build session")

    monkeypatch.setattr(server, "session_factory", broken_factory)
    client = TestClient(server.app)
    resp = client.post("/mcp", json=_block_call(9), headers={"Authorization": "Bearer k"})
    assert resp.status_code == 500
    body = resp.json()
    assert body["id"] == 9
    assert body["error"]["code"] == -32603


def test_tool_error_result_is_http_200(monkeypatch):
    class FailingClient(KeyEchoClient):
        async def get_block(self, chain_name, block_height):
            raise RuntimeError("upstream exploded")

    def factory(api_key, config):
        client = FailingClient(api_key)
        return McpSession(client, build_registry(client, config))

    monkeypatch.setattr(server, "session_factory", factory)
    client = TestClient(server.app)
    resp = client.post("/mcp", json=_block_call(), headers={"Authorization": "Bearer k"})
    assert resp.status_code == 200
    result = resp.json()["result"]
    assert result["isError"] is True
    assert result["content"][0]["text"] == "Error: upstream exploded"


def test_metrics_endpoint_counts_requests_and_tools(sessions):
    client = TestClient(server.app)
    client.post("/mcp", json=_block_call(), headers={"Authorization": "Bearer k"})
    resp = client.get("/metrics")
    snapshot = resp.json()
    assert snapshot["requests"] >= 2
    assert snapshot["tool_success"] == {"block": 1}
    assert len(snapshot["recent_request_durations_ms"]) >= 1


def test_api_key_not_echoed_in_unauthorized_or_logs(sessions, caplog):
    client = TestClient(server.app)
    with caplog.at_level("DEBUG"):
        client.post("/mcp", json=_block_call(), headers={"Authorization": "Bearer super-secret-key"})
    assert all("super-secret-key" not in record.getMessage() for record in caplog.records)


@pytest.mark.asyncio
async def test_interleaved_requests_keep_credentials_apart(monkeypatch):
    both_in_flight = asyncio.Event()
    in_flight = []
    created = []

    class GatedClient(KeyEchoClient):
        async def get_block(self, chain_name, block_height):
            in_flight.append(self.api_key)
            if len(in_flight) == 2:
                both_in_flight.set()
            await asyncio.wait_for(both_in_flight.wait(), timeout=5)
            return await super().get_block(chain_name, block_height)

    def factory(api_key, config):
        client = GatedClient(api_key)
        created.append(client)
        return McpSession(client, build_registry(client, config))

    monkeypatch.setattr(server, "session_factory", factory)
    transport = httpx.ASGITransport(app=server.app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        first, second = await asyncio.gather(
            client.post("/mcp", json=_block_call(1), headers={"Authorization": "Bearer key-a"}),
            client.post("/mcp", json=_block_call(2), headers={"Authorization": "Bearer key-b"}),
        )

    assert sorted(in_flight) == ["key-a", "key-b"]
    for resp, rpc_id, key in ((first, 1, "key-a"), (second, 2, "key-b")):
        assert resp.status_code == 200
        body = resp.json()
        assert body["id"] == rpc_id
        assert body["result"]["isError"] is False
        assert json.loads(body["result"]["content"][0]["text"])["served_with"] == key
    assert sorted(session.api_key for session in created) == ["key-a", "key-b"]
    assert all(session.closed for session in created)

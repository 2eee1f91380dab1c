import json

import pytest

from goldrush_mcp.config import GoldRushConfig
from goldrush_mcp.goldrush_api import UnauthorizedError
from goldrush_mcp.mcp import MCP_SERVER_NAME, McpSession, build_registry, handle_message


class StubGoldRushClient:
    def __init__(self, block_exc=None):
        self.block_exc = block_exc
        self.calls = []
        self.closed = False

    async def get_block(self, chain_name, block_height):
        self.calls.append(("get_block", chain_name, block_height))
        if self.block_exc:
            raise self.block_exc
        return {"data": {"items": [{"height": 19000000, "gas_used": 2**62}]}, "error": False}

    def iter_chain_collections(self, chain_name, *, page_size=None, page_number=None, no_spam=None):
        self.calls.append(("iter_chain_collections", chain_name, page_size, page_number, no_spam))

        async def pages():
            for index in range(3):
                yield {"data": {"items": [f"c{index}a", f"c{index}b"], "pagination": {"has_more": index < 2}}}

        return pages()

    async def get_all_chain_status(self):
        return {"data": {"items": [{"name": "eth-mainnet", "chain_id": 1}]}}

    async def aclose(self):
        self.closed = True


def _session(client=None, config=None):
    client = client or StubGoldRushClient()
    return McpSession(client, build_registry(client, config))


def _rpc(method, params=None, rpc_id=1):
    body = {"jsonrpc": "2.0", "id": rpc_id, "method": method}
    if params is not None:
        body["params"] = params
    return body


@pytest.mark.asyncio
async def test_initialize_echoes_protocol_version():
    response = await handle_message(
        _session(),
        _rpc(
            "initialize",
            {"protocolVersion": "2025-03-26", "capabilities": {}, "clientInfo": {"name": "t", "version": "0"}},
        ),
    )
    result = response["result"]
    assert result["protocolVersion"] == "2025-03-26"
    assert result["serverInfo"]["name"] == MCP_SERVER_NAME
    assert "tools" in result["capabilities"]
    assert "resources" in result["capabilities"]


@pytest.mark.asyncio
async def test_initialize_requires_protocol_version():
    response = await handle_message(_session(), _rpc("initialize", {}))
    assert response["error"]["code"] == -32602


@pytest.mark.asyncio
async def test_ping():
    assert await handle_message(_session(), _rpc("ping", rpc_id="p")) == {
        "jsonrpc": "2.0",
        "id": "p",
        "result": {},
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["tools/list", "list_tools"])
async def test_tools_list(method):
    response = await handle_message(_session(), _rpc(method))
    tools = response["result"]["tools"]
    assert len(tools) == 44
    block = next(tool for tool in tools if tool["name"] == "block")
    assert block["inputSchema"]["required"] == ["chainName", "blockHeight"]


@pytest.mark.asyncio
async def test_tools_call_single_page_returns_data_text():
    client = StubGoldRushClient()
    response = await handle_message(
        _session(client),
        _rpc("tools/call", {"name": "block", "arguments": {"chainName": "eth-mainnet", "blockHeight": "latest"}}),
    )
    result = response["result"]
    assert result["isError"] is False
    payload = json.loads(result["content"][0]["text"])
    assert payload == {"items": [{"height": 19000000, "gas_used": str(2**62)}]}
    assert client.calls == [("get_block", "eth-mainnet", "latest")]


@pytest.mark.asyncio
async def test_call_tool_alias_with_params_key():
    response = await handle_message(
        _session(),
        _rpc("call_tool", {"tool": "block", "params": {"chainName": "eth-mainnet", "blockHeight": "1"}}),
    )
    assert response["result"]["isError"] is False


@pytest.mark.asyncio
async def test_tools_call_all_pages_aggregates_items():
    client = StubGoldRushClient()
    response = await handle_message(
        _session(client),
        _rpc("tools/call", {"name": "getChainCollections", "arguments": {"chainName": "eth-mainnet", "pageSize": 2}}),
    )
    payload = json.loads(response["result"]["content"][0]["text"])
    assert payload == {"items": ["c0a", "c0b", "c1a", "c1b", "c2a", "c2b"]}
    assert client.calls == [("iter_chain_collections", "eth-mainnet", 2, None, None)]


@pytest.mark.asyncio
async def test_all_pages_respects_configured_cap():
    session = _session(config=GoldRushConfig(max_aggregate_items=3))
    response = await handle_message(
        session,
        _rpc("tools/call", {"name": "getChainCollections", "arguments": {"chainName": "eth-mainnet"}}),
    )
    payload = json.loads(response["result"]["content"][0]["text"])
    assert payload == {"items": ["c0a", "c0b", "c1a"]}


@pytest.mark.asyncio
async def test_upstream_failure_is_in_band_error():
    client = StubGoldRushClient(block_exc=UnauthorizedError("401 - Invalid API key", status_code=401))
    response = await handle_message(
        _session(client),
        _rpc("tools/call", {"name": "block", "arguments": {"chainName": "eth-mainnet", "blockHeight": "1"}}),
    )
    assert response["result"] == {
        "content": [{"type": "text", "text": "Error: 401 - Invalid API key"}],
        "isError": True,
    }


@pytest.mark.asyncio
async def test_invalid_arguments_are_protocol_error():
    client = StubGoldRushClient()
    response = await handle_message(
        _session(client),
        _rpc("tools/call", {"name": "block", "arguments": {"chainName": "eth-mainnet", "blockHeight": 5}}),
    )
    assert response["error"]["code"] == -32602
    assert tuple(response["error"]["data"][0]["loc"]) == ("blockHeight",)
    assert client.calls == []


@pytest.mark.asyncio
async def test_unknown_tool_is_invalid_params():
    response = await handle_message(_session(), _rpc("tools/call", {"name": "nope", "arguments": {}}))
    assert response["error"]["code"] == -32602
    assert response["error"]["message"] == "Unknown tool: nope"


@pytest.mark.asyncio
async def test_missing_tool_name_is_invalid_params():
    response = await handle_message(_session(), _rpc("tools/call", {"arguments": {}}))
    assert response["error"]["code"] == -32602


@pytest.mark.asyncio
async def test_resources_methods():
    session = _session()
    listed = await handle_message(session, _rpc("resources/list"))
    assert len(listed["result"]["resources"]) == 3
    templates = await handle_message(session, _rpc("resources/templates/list"))
    assert templates["result"]["resourceTemplates"][0]["uriTemplate"] == "status://chain/{chainName}"
    read = await handle_message(session, _rpc("resources/read", {"uri": "status://chain/1"}))
    assert json.loads(read["result"]["contents"][0]["text"])["name"] == "eth-mainnet"


@pytest.mark.asyncio
async def test_unknown_resource():
    response = await handle_message(_session(), _rpc("resources/read", {"uri": "config://nothing"}))
    assert response["error"]["code"] == -32002
    assert response["error"]["message"] == "Resource not found"


@pytest.mark.asyncio
async def test_unknown_method():
    response = await handle_message(_session(), _rpc("sampling/createMessage"))
    assert response["error"]["code"] == -32601


@pytest.mark.asyncio
async def test_notification_gets_no_response():
    client = StubGoldRushClient()
    body = {"jsonrpc": "2.0", "method": "notifications/initialized"}
    assert await handle_message(_session(client), body) is None
    assert client.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [[1, 2], "text", {"jsonrpc": "2.0", "id": 3}])
async def test_invalid_requests(body):
    response = await handle_message(_session(), body)
    assert response["error"]["code"] == -32600


@pytest.mark.asyncio
async def test_non_object_params_rejected():
    response = await handle_message(_session(), _rpc("tools/list", [1, 2]))
    assert response["error"]["code"] == -32602


@pytest.mark.asyncio
async def test_closed_session_reports_internal_error():
    session = _session()
    await session.aclose()
    assert session.client.closed is True
    response = await handle_message(session, _rpc("tools/call", {"name": "block", "arguments": {}}))
    assert response["error"]["code"] == -32603

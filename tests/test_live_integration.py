import json
import os

import httpx
import pytest
import pytest_asyncio

from goldrush_mcp.config import default_config
from goldrush_mcp.goldrush_api.client import GoldRushApiClient, UnauthorizedError
from goldrush_mcp.mcp import McpSession, build_registry, handle_message

LIVE = os.getenv("LIVE_GOLDRUSH") in {"1", "true", "yes"}
SAMPLE_ADDRESS = os.getenv("GOLDRUSH_SAMPLE_ADDRESS", "demo.eth")


pytestmark = pytest.mark.skipif(
    not LIVE or not default_config.api_key, reason="Live GoldRush integration tests are disabled"
)


@pytest_asyncio.fixture
async def live_client():
    async with httpx.AsyncClient(base_url=default_config.base_url, timeout=30.0) as httpx_client:
        yield GoldRushApiClient(api_key=default_config.api_key, async_client=httpx_client)


@pytest.mark.asyncio
async def test_chain_status(live_client):
    envelope = await live_client.get_all_chain_status()
    names = {item["name"] for item in envelope["data"]["items"]}
    assert "eth-mainnet" in names


@pytest.mark.asyncio
async def test_native_balance_via_session(live_client):
    session = McpSession(live_client, build_registry(live_client))
    response = await handle_message(
        session,
        {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "tools/call",
            "params": {
                "name": "getNativeTokenBalance",
                "arguments": {"chainName": "eth-mainnet", "walletAddress": SAMPLE_ADDRESS},
            },
        },
    )
    result = response["result"]
    assert result["isError"] is False
    assert "items" in json.loads(result["content"][0]["text"])


@pytest.mark.asyncio
async def test_bad_key_is_unauthorized():
    async with httpx.AsyncClient(base_url=default_config.base_url, timeout=30.0) as httpx_client:
        client = GoldRushApiClient(api_key="cqt_invalid", async_client=httpx_client)
        with pytest.raises(UnauthorizedError):
            await client.get_all_chain_status()

"""Minimal sanity checks against the live GoldRush API."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from goldrush_mcp.config import default_config  # noqa: E402
from goldrush_mcp.mcp import create_session, handle_message  # noqa: E402

# Public address used for read-only lookups; override via env.
SAMPLE_ADDRESS = os.getenv("GOLDRUSH_SAMPLE_ADDRESS", "demo.eth")
SAMPLE_CHAIN = os.getenv("GOLDRUSH_SAMPLE_CHAIN", "eth-mainnet")


async def _call(session, method: str, params: dict) -> None:
    response = await handle_message(session, {"jsonrpc": "2.0", "id": method, "method": method, "params": params})
    print(f"{method} {params.get('name') or params.get('uri') or ''}:", response)


async def main() -> int:
    if not default_config.api_key:
        print("GOLDRUSH_API_KEY is not set", file=sys.stderr)
        return 1

    session = create_session(default_config.api_key, default_config)
    try:
        await _call(session, "resources/read", {"uri": f"status://chain/{SAMPLE_CHAIN}"})
        await _call(session, "tools/call", {"name": "block", "arguments": {"chainName": SAMPLE_CHAIN, "blockHeight": "latest"}})
        await _call(
            session,
            "tools/call",
            {
                "name": "getNativeTokenBalance",
                "arguments": {"chainName": SAMPLE_CHAIN, "walletAddress": SAMPLE_ADDRESS},
            },
        )
        await _call(session, "tools/call", {"name": "gas_prices", "arguments": {"chainName": SAMPLE_CHAIN, "eventType": "erc20"}})
    finally:
        await session.aclose()
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

"""
MCP resources: static configuration lists and live chain status.

Static resources never touch the upstream client. Chain status resources
make a fresh upstream call on every read.
"""

from __future__ import annotations

import json
import math
from typing import Any, Dict, List, Optional

from goldrush_mcp.constants import CHAIN_NAMES, QUOTE_CURRENCIES
from goldrush_mcp.encoding import stringify_with_bigint
from goldrush_mcp.pagination import single_page
from goldrush_mcp.registry import ResourceDefinition

SUPPORTED_CHAINS_TEXT = json.dumps(list(CHAIN_NAMES), indent=2)
QUOTE_CURRENCIES_TEXT = json.dumps(list(QUOTE_CURRENCIES), indent=2)


async def read_supported_chains(uri: str, variables: Dict[str, str], client: Any) -> str:
    return SUPPORTED_CHAINS_TEXT


async def read_quote_currencies(uri: str, variables: Dict[str, str], client: Any) -> str:
    return QUOTE_CURRENCIES_TEXT


async def read_all_chains_status(uri: str, variables: Dict[str, str], client: Any) -> str:
    return stringify_with_bigint(single_page(await client.get_all_chain_status()))


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if "_" in text:
            return None
        if text[:2].lower() in ("0x", "0o", "0b"):
            try:
                return float(int(text, 0))
            except ValueError:
                return None
        try:
            number = float(text)
        except ValueError:
            return None
        return None if math.isnan(number) else number
    return None


def find_chain_status(items: List[Any], chain_name: str) -> Optional[Dict[str, Any]]:
    """
    Return the first status entry matching ``chain_name``.

    An entry matches when its ``name`` equals ``chain_name`` exactly, or, when
    ``chain_name`` is numeric, when its ``chain_id`` equals that number.
    """
    wanted_id = _as_number(chain_name)
    for item in items:
        if not isinstance(item, dict):
            continue
        if item.get("name") == chain_name:
            return item
        if wanted_id is not None and _as_number(item.get("chain_id")) == wanted_id:
            return item
    return None


async def read_chain_status(uri: str, variables: Dict[str, str], client: Any) -> str:
    chain_name = variables["chainName"]
    data = single_page(await client.get_all_chain_status())
    items = data.get("items") if isinstance(data, dict) else None
    if not isinstance(items, list):
        return json.dumps({"error": "Failed to fetch chain status"}, indent=2)
    status = find_chain_status(items, chain_name)
    if status is None:
        return json.dumps({"error": f"Chain not found for: {chain_name}"}, indent=2)
    return stringify_with_bigint(status)


STATIC_RESOURCES = [
    ResourceDefinition(
        name="supported-chains",
        uri="config://supported-chains",
        title="Supported chains",
        description="Chain names accepted by the chainName tool parameter.",
        handler=read_supported_chains,
    ),
    ResourceDefinition(
        name="quote-currencies",
        uri="config://quote-currencies",
        title="Quote currencies",
        description="Currency codes accepted by the quoteCurrency tool parameter.",
        handler=read_quote_currencies,
    ),
]


DYNAMIC_RESOURCES = [
    ResourceDefinition(
        name="all-chains-status",
        uri="status://all-chains",
        title="All chains status",
        description="Live sync status of every supported chain.",
        handler=read_all_chains_status,
    ),
    ResourceDefinition(
        name="chain-status",
        uri_template="status://chain/{chainName}",
        title="Chain status",
        description="Live sync status of one chain, by name or numeric chain id.",
        handler=read_chain_status,
    ),
]


ALL_RESOURCES = [*STATIC_RESOURCES, *DYNAMIC_RESOURCES]

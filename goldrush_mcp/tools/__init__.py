"""Tool definitions grouped by upstream service area."""

from typing import List

from goldrush_mcp.registry import ToolDefinition

from . import all_chains, balances, base, bitcoin, nft, pricing, security, transactions

ALL_TOOLS: List[ToolDefinition] = [
    *all_chains.TOOLS,
    *base.TOOLS,
    *balances.TOOLS,
    *transactions.TOOLS,
    *bitcoin.TOOLS,
    *nft.TOOLS,
    *pricing.TOOLS,
    *security.TOOLS,
]

__all__ = ["ALL_TOOLS"]

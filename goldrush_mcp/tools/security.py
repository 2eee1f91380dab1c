"""Approval (allowance) inspection tools."""

from __future__ import annotations

from goldrush_mcp.registry import ToolDefinition
from goldrush_mcp.tools.params import Chain, ToolParams, WalletAddress, upstream


class ApprovalsParams(ToolParams):
    chain_name: Chain
    wallet_address: WalletAddress


TOOLS = [
    ToolDefinition(
        name="getApprovals",
        description=(
            "List token approvals a wallet has granted, with value at risk per spender. "
            "Requires chainName and walletAddress."
        ),
        params_model=ApprovalsParams,
        handler=upstream("get_approvals"),
    ),
    ToolDefinition(
        name="getNftApprovals",
        description="List NFT approvals a wallet has granted. Requires chainName and walletAddress.",
        params_model=ApprovalsParams,
        handler=upstream("get_nft_approvals"),
    ),
]

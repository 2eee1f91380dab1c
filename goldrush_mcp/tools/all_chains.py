"""Cross-chain tools (one call spanning several networks)."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import Field

from goldrush_mcp.constants import ChainName
from goldrush_mcp.registry import ToolDefinition
from goldrush_mcp.tools.params import Quote, ToolParams, WalletAddress, upstream


class MultiChainTransactionsParams(ToolParams):
    chains: Optional[List[Union[ChainName, int]]] = Field(
        default=None, description="Chain names or numeric chain ids to include."
    )
    addresses: Optional[List[str]] = Field(default=None, description="Wallet addresses to include.")
    limit: Optional[int] = Field(default=None, description="Maximum number of transactions.")
    before: Optional[str] = Field(default=None, description="Cursor: return transactions before this one.")
    after: Optional[str] = Field(default=None, description="Cursor: return transactions after this one.")
    with_logs: Optional[bool] = Field(default=None, description="Include raw event logs.")
    with_decoded_logs: Optional[bool] = Field(default=None, description="Include decoded event logs.")
    quote_currency: Quote = None


class MultiChainBalancesParams(ToolParams):
    wallet_address: WalletAddress
    quote_currency: Quote = None
    before: Optional[str] = Field(default=None, description="Pagination cursor.")
    limit: Optional[int] = Field(default=None, description="Maximum number of balances.")
    chains: Optional[List[Union[ChainName, int]]] = Field(
        default=None, description="Chain names or numeric chain ids to include."
    )
    cutoff_timestamp: Optional[int] = Field(
        default=None, description="Only include balances updated after this unix timestamp."
    )


class AddressActivityParams(ToolParams):
    wallet_address: WalletAddress
    testnets: Optional[bool] = Field(default=None, description="Include testnet activity.")


TOOLS = [
    ToolDefinition(
        name="getMultiChainMultiAddressTransactions",
        description=(
            "Fetch recent transactions for several addresses across several chains in one call. "
            "All parameters are optional; before/after are cursors returned by a previous call."
        ),
        params_model=MultiChainTransactionsParams,
        handler=upstream("get_multi_chain_multi_address_transactions"),
    ),
    ToolDefinition(
        name="getMultiChainBalances",
        description=(
            "Fetch token balances for a wallet across many chains. Requires walletAddress; "
            "optionally restrict chains and convert values with quoteCurrency."
        ),
        params_model=MultiChainBalancesParams,
        handler=upstream("get_multi_chain_balances"),
    ),
    ToolDefinition(
        name="getAddressActivity",
        description=(
            "List every chain on which a wallet has activity, with first and last seen times. "
            "Requires walletAddress."
        ),
        params_model=AddressActivityParams,
        handler=upstream("get_address_activity"),
    ),
]

"""Bitcoin wallet tools."""

from __future__ import annotations

from pydantic import Field

from goldrush_mcp.registry import ToolDefinition
from goldrush_mcp.tools.params import PageNumber, PageSize, Quote, ToolParams, upstream


class BitcoinWalletParams(ToolParams):
    wallet_address: str = Field(description="Bitcoin address, or xpub key for HD wallets.")
    quote_currency: Quote = None


class BitcoinTransactionsParams(ToolParams):
    address: str = Field(description="Non-HD bitcoin address.")
    page_size: PageSize = None
    page_number: PageNumber = None


TOOLS = [
    ToolDefinition(
        name="getBitcoinHdWalletBalances",
        description="Fetch balances for every address derived from an HD wallet xpub. Requires walletAddress.",
        params_model=BitcoinWalletParams,
        handler=upstream("get_bitcoin_hd_wallet_balances"),
    ),
    ToolDefinition(
        name="getTransactionsForBtcAddress",
        description="Fetch transactions for a non-HD bitcoin address. Requires address.",
        params_model=BitcoinTransactionsParams,
        handler=upstream("get_transactions_for_btc_address"),
    ),
    ToolDefinition(
        name="getBitcoinNonHdWalletBalances",
        description="Fetch the balance of a non-HD bitcoin address. Requires walletAddress.",
        params_model=BitcoinWalletParams,
        handler=upstream("get_bitcoin_non_hd_wallet_balances"),
    ),
]

"""Transaction history and lookup tools."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import Field

from goldrush_mcp.registry import AggregationPolicy, ToolDefinition
from goldrush_mcp.tools.params import Chain, Quote, ToolParams, WalletAddress, upstream

NoLogs = Optional[bool]


class AddressTransactionsParams(ToolParams):
    chain_name: Chain
    address: WalletAddress
    quote_currency: Quote = None
    no_logs: NoLogs = Field(default=None, description="Omit event logs.")
    block_signed_at_asc: Optional[bool] = Field(default=None, description="Oldest first.")
    with_internal: Optional[bool] = Field(default=None, description="Include internal transactions.")
    with_state: Optional[bool] = Field(default=None, description="Include state changes.")
    with_input_data: Optional[bool] = Field(default=None, description="Include raw input data.")


class TransactionParams(ToolParams):
    chain_name: Chain
    tx_hash: str = Field(description="Transaction hash.")


class BlockTransactionsParams(ToolParams):
    chain_name: Chain
    block_height: Union[str, int] = Field(description="Block number, or 'latest'.")
    quote_currency: Quote = None
    no_logs: NoLogs = Field(default=None, description="Omit event logs.")


class TransactionSummaryParams(ToolParams):
    chain_name: Chain
    wallet_address: WalletAddress
    quote_currency: Quote = None
    with_gas: Optional[bool] = Field(default=None, description="Include gas usage totals.")


class TransactionsV3Params(ToolParams):
    chain_name: Chain
    wallet_address: WalletAddress
    page: int = Field(description="Zero-based page of transactions to fetch.")
    quote_currency: Quote = None
    no_logs: NoLogs = Field(default=None, description="Omit event logs.")
    block_signed_at_asc: Optional[bool] = Field(default=None, description="Oldest first.")


class TimeBucketTransactionsParams(ToolParams):
    chain_name: Chain
    wallet_address: WalletAddress
    time_bucket: int = Field(
        description="Index of the 15-minute bucket (unix timestamp divided by 900)."
    )
    quote_currency: Quote = None
    no_logs: NoLogs = Field(default=None, description="Omit event logs.")


TOOLS = [
    ToolDefinition(
        name="getAllTransactionsForAddress",
        description=(
            "Fetch the complete transaction history of an address, following every page. "
            "Requires chainName and address. Can be large for busy addresses."
        ),
        params_model=AddressTransactionsParams,
        handler=upstream("iter_all_transactions_for_address"),
        policy=AggregationPolicy.ALL_PAGES,
    ),
    ToolDefinition(
        name="getAllTransactionsForAddressByPage",
        description=(
            "Fetch the most recent page of transactions for an address, with links to adjacent pages. "
            "Requires chainName and address."
        ),
        params_model=AddressTransactionsParams,
        handler=upstream("get_all_transactions_for_address_by_page"),
    ),
    ToolDefinition(
        name="getTransaction",
        description="Fetch a single transaction with its decoded event logs. Requires chainName and txHash.",
        params_model=TransactionParams,
        handler=upstream("get_transaction"),
    ),
    ToolDefinition(
        name="getTransactionsForBlock",
        description=(
            "Fetch every transaction in a block. Requires chainName and blockHeight "
            "(a number or 'latest')."
        ),
        params_model=BlockTransactionsParams,
        handler=upstream("get_transactions_for_block"),
    ),
    ToolDefinition(
        name="getTransactionSummary",
        description=(
            "Summarize a wallet's transactions: first and last transaction and total count. "
            "Requires chainName and walletAddress."
        ),
        params_model=TransactionSummaryParams,
        handler=upstream("get_transaction_summary"),
    ),
    ToolDefinition(
        name="getTransactionsForAddressV3",
        description=(
            "Fetch a specific page of a wallet's transactions. "
            "Requires chainName, walletAddress and page."
        ),
        params_model=TransactionsV3Params,
        handler=upstream("get_transactions_for_address_v3"),
    ),
    ToolDefinition(
        name="getTimeBucketTransactionsForAddress",
        description=(
            "Fetch a wallet's transactions within one 15-minute time bucket. "
            "Requires chainName, walletAddress and timeBucket."
        ),
        params_model=TimeBucketTransactionsParams,
        handler=upstream("get_time_bucket_transactions_for_address"),
    ),
]

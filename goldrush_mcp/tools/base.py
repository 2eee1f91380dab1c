"""Chain utility tools: gas prices, blocks, and event logs."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import Field

from goldrush_mcp.constants import GasEventType
from goldrush_mcp.registry import ToolDefinition
from goldrush_mcp.tools.params import Chain, Quote, ToolParams, upstream

BlockBound = Optional[Union[str, int]]


class GasPricesParams(ToolParams):
    chain_name: Chain
    event_type: GasEventType = Field(
        description="'erc20' for token transfers, 'nativetokens' for native transfers, 'uniswapv3' for swaps."
    )
    quote_currency: Quote = None


class BlockParams(ToolParams):
    chain_name: Chain
    block_height: str = Field(description="Block number, or 'latest'.")


class BlockHeightsParams(ToolParams):
    chain_name: Chain
    start_date: str = Field(description="Start date, YYYY-MM-DD.")
    end_date: str = Field(description="End date, YYYY-MM-DD, or 'latest'.")
    page_size: int = Field(default=10, description="Number of blocks per page.")
    page_number: int = Field(default=0, description="Zero-based page number.")


class LogEventsByAddressParams(ToolParams):
    chain_name: Chain
    contract_address: str = Field(description="Contract whose emitted events are returned.")
    starting_block: BlockBound = Field(default=None, description="First block of the range.")
    ending_block: BlockBound = Field(default=None, description="Last block of the range, or 'latest'.")
    page_size: int = Field(default=10, description="Number of events per page.")
    page_number: int = Field(default=0, description="Zero-based page number.")


class LogEventsByTopicParams(ToolParams):
    chain_name: Chain
    topic_hash: str = Field(description="Event signature hash (topic 0).")
    starting_block: BlockBound = Field(default=None, description="First block of the range.")
    ending_block: BlockBound = Field(default=None, description="Last block of the range, or 'latest'.")
    secondary_topics: Optional[str] = Field(
        default=None, description="Additional topic filters (topics 1-3)."
    )
    page_size: int = Field(default=10, description="Number of events per page.")
    page_number: int = Field(default=0, description="Zero-based page number.")


TOOLS = [
    ToolDefinition(
        name="gas_prices",
        description=(
            "Estimate gas prices (low, medium, high) on a network for an event type. "
            "Requires chainName and eventType (erc20, nativetokens or uniswapv3)."
        ),
        params_model=GasPricesParams,
        handler=upstream("get_gas_prices"),
    ),
    ToolDefinition(
        name="block",
        description="Fetch a single block by height (or 'latest'). Requires chainName and blockHeight.",
        params_model=BlockParams,
        handler=upstream("get_block"),
    ),
    ToolDefinition(
        name="block_heights",
        description=(
            "List block heights produced within a date range. Requires chainName, startDate and endDate; "
            "pageSize defaults to 10 and pageNumber to 0."
        ),
        params_model=BlockHeightsParams,
        handler=upstream("get_block_heights_by_page"),
    ),
    ToolDefinition(
        name="log_events_by_address",
        description=(
            "Fetch decoded event logs emitted by one contract, optionally within a block range. "
            "pageSize defaults to 10 and pageNumber to 0."
        ),
        params_model=LogEventsByAddressParams,
        handler=upstream("get_log_events_by_address_by_page"),
    ),
    ToolDefinition(
        name="log_events_by_topic",
        description=(
            "Fetch decoded event logs sharing a topic hash across all contracts on a chain. "
            "pageSize defaults to 10 and pageNumber to 0."
        ),
        params_model=LogEventsByTopicParams,
        handler=upstream("get_log_events_by_topic_hash_by_page"),
    ),
]

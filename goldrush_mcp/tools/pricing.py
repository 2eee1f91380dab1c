"""Historical token pricing."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from goldrush_mcp.constants import QuoteCurrency
from goldrush_mcp.registry import ToolDefinition
from goldrush_mcp.tools.params import Chain, ToolParams, upstream


class TokenPricesParams(ToolParams):
    chain_name: Chain
    quote_currency: QuoteCurrency = Field(description="Currency to quote prices in.")
    contract_address: str = Field(description="Token contract address.")
    from_date: str = Field(alias="from", description="Start date, YYYY-MM-DD.")
    to_date: str = Field(alias="to", description="End date, YYYY-MM-DD.")
    prices_at_asc: Optional[bool] = Field(default=None, description="Oldest price first.")


TOOLS = [
    ToolDefinition(
        name="getTokenPrices",
        description=(
            "Fetch historical daily prices of a token. "
            "Requires chainName, quoteCurrency, contractAddress, from and to."
        ),
        params_model=TokenPricesParams,
        handler=upstream("get_token_prices"),
    ),
]

"""Balance, portfolio, transfer and holder tools."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import Field

from goldrush_mcp.registry import AggregationPolicy, ToolDefinition
from goldrush_mcp.tools.params import (
    Chain,
    NoSpam,
    PageNumber,
    PageSize,
    Quote,
    ToolParams,
    WalletAddress,
    upstream,
)


class TokenBalancesParams(ToolParams):
    chain_name: Chain
    address: WalletAddress
    quote_currency: Quote = None
    nft: Optional[bool] = Field(default=None, description="Include NFT holdings.")
    no_nft_fetch: Optional[bool] = Field(default=None, description="Skip fetching NFT metadata.")
    no_spam: NoSpam = None
    no_nft_asset_metadata: Optional[bool] = Field(default=None, description="Skip NFT asset metadata.")


class HistoricalTokenBalancesParams(TokenBalancesParams):
    block_height: Optional[int] = Field(default=None, description="Block height to report balances at.")
    date: Optional[str] = Field(default=None, description="Date (YYYY-MM-DD) to report balances at.")


class PortfolioParams(ToolParams):
    chain_name: Chain
    wallet_address: WalletAddress
    quote_currency: Quote = None
    days: Optional[int] = Field(default=None, description="Number of days of history.")


class Erc20TransfersParams(ToolParams):
    chain_name: Chain
    wallet_address: WalletAddress
    quote_currency: Quote = None
    contract_address: Optional[str] = Field(default=None, description="Only transfers of this token.")
    starting_block: Optional[int] = Field(default=None, description="First block of the range.")
    ending_block: Optional[int] = Field(default=None, description="Last block of the range.")
    page_size: PageSize = None
    page_number: PageNumber = None


class TokenHoldersParams(ToolParams):
    chain_name: Chain
    token_address: str = Field(description="Token contract address.")
    block_height: Optional[Union[str, int]] = Field(
        default=None, description="Block height to report holders at."
    )
    date: Optional[str] = Field(default=None, description="Date (YYYY-MM-DD) to report holders at.")
    page_size: PageSize = None
    page_number: PageNumber = None


class NativeTokenBalanceParams(ToolParams):
    chain_name: Chain
    wallet_address: WalletAddress
    quote_currency: Quote = None
    block_height: Optional[Union[str, int]] = Field(
        default=None, description="Block height to report the balance at."
    )


TOOLS = [
    ToolDefinition(
        name="getTokenBalancesForWalletAddress",
        description=(
            "Fetch native and fungible token balances (optionally NFTs) with spot prices for an address. "
            "Requires chainName and address."
        ),
        params_model=TokenBalancesParams,
        handler=upstream("get_token_balances_for_wallet_address"),
    ),
    ToolDefinition(
        name="getHistoricalTokenBalancesForWalletAddress",
        description=(
            "Fetch token balances for an address at a past block height or date. "
            "Requires chainName and address."
        ),
        params_model=HistoricalTokenBalancesParams,
        handler=upstream("get_historical_token_balances_for_wallet_address"),
    ),
    ToolDefinition(
        name="getHistoricalPortfolioForWalletAddress",
        description=(
            "Fetch daily portfolio value per token for a wallet over the last N days. "
            "Requires chainName and walletAddress."
        ),
        params_model=PortfolioParams,
        handler=upstream("get_historical_portfolio_for_wallet_address"),
    ),
    ToolDefinition(
        name="getErc20TransfersForWalletAddress",
        description=(
            "Fetch every ERC20 transfer in and out of a wallet, following all pages. "
            "Requires chainName and walletAddress."
        ),
        params_model=Erc20TransfersParams,
        handler=upstream("iter_erc20_transfers_for_wallet_address"),
        policy=AggregationPolicy.ALL_PAGES,
    ),
    ToolDefinition(
        name="getErc20TransfersForWalletAddressByPage",
        description=(
            "Fetch one page of ERC20 transfers in and out of a wallet. "
            "Requires chainName and walletAddress."
        ),
        params_model=Erc20TransfersParams,
        handler=upstream("get_erc20_transfers_for_wallet_address_by_page"),
    ),
    ToolDefinition(
        name="getTokenHoldersV2ForTokenAddress",
        description=(
            "Fetch every holder of a token, following all pages. "
            "Requires chainName and tokenAddress."
        ),
        params_model=TokenHoldersParams,
        handler=upstream("iter_token_holders_v2_for_token_address"),
        policy=AggregationPolicy.ALL_PAGES,
    ),
    ToolDefinition(
        name="getTokenHoldersV2ForTokenAddressByPage",
        description="Fetch one page of holders of a token. Requires chainName and tokenAddress.",
        params_model=TokenHoldersParams,
        handler=upstream("get_token_holders_v2_for_token_address_by_page"),
    ),
    ToolDefinition(
        name="getNativeTokenBalance",
        description=(
            "Fetch only the native token balance of a wallet, optionally at a block height. "
            "Requires chainName and walletAddress."
        ),
        params_model=NativeTokenBalanceParams,
        handler=upstream("get_native_token_balance"),
    ),
]

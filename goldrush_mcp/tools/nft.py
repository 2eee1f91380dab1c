"""NFT collection, ownership and market tools."""

from __future__ import annotations

from typing import Optional

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

WithUncached = Optional[bool]


class ChainCollectionsParams(ToolParams):
    chain_name: Chain
    page_size: PageSize = None
    page_number: PageNumber = None
    no_spam: NoSpam = None


class NftsForAddressParams(ToolParams):
    chain_name: Chain
    wallet_address: WalletAddress
    no_spam: NoSpam = None
    no_nft_asset_metadata: Optional[bool] = Field(default=None, description="Skip asset metadata.")
    with_uncached: WithUncached = Field(default=None, description="Fetch metadata not yet cached.")


class TokenIdsWithMetadataParams(ToolParams):
    chain_name: Chain
    contract_address: str = Field(description="NFT collection contract.")
    no_metadata: Optional[bool] = Field(default=None, description="Omit metadata.")
    page_size: PageSize = None
    page_number: PageNumber = None
    traits_filter: Optional[str] = Field(default=None, description="Filter by trait names.")
    values_filter: Optional[str] = Field(default=None, description="Filter by trait values.")
    with_uncached: WithUncached = Field(default=None, description="Fetch metadata not yet cached.")


class NftMetadataParams(ToolParams):
    chain_name: Chain
    contract_address: str = Field(description="NFT collection contract.")
    token_id: str = Field(description="Token id within the collection.")
    no_metadata: Optional[bool] = Field(default=None, description="Omit metadata.")
    with_uncached: WithUncached = Field(default=None, description="Fetch metadata not yet cached.")


class NftTransactionsParams(ToolParams):
    chain_name: Chain
    contract_address: str = Field(description="NFT collection contract.")
    token_id: str = Field(description="Token id within the collection.")
    no_spam: NoSpam = None


class CollectionParams(ToolParams):
    chain_name: Chain
    collection_contract: str = Field(description="NFT collection contract.")


class TraitAttributesParams(CollectionParams):
    trait: str = Field(description="Trait name.")


class CollectionMarketParams(ToolParams):
    chain_name: Chain
    collection_address: str = Field(description="NFT collection contract.")
    quote_currency: Quote = None
    days: Optional[int] = Field(default=None, description="Number of days of history.")


class OwnershipParams(ToolParams):
    chain_name: Chain
    wallet_address: WalletAddress
    collection_contract: str = Field(description="NFT collection contract.")
    traits_filter: Optional[str] = Field(default=None, description="Filter by trait names.")
    values_filter: Optional[str] = Field(default=None, description="Filter by trait values.")


class TokenOwnershipParams(ToolParams):
    chain_name: Chain
    wallet_address: WalletAddress
    collection_contract: str = Field(description="NFT collection contract.")
    token_id: str = Field(description="Token id within the collection.")


TOOLS = [
    ToolDefinition(
        name="getChainCollections",
        description="List every NFT collection on a chain, following all pages. Requires chainName.",
        params_model=ChainCollectionsParams,
        handler=upstream("iter_chain_collections"),
        policy=AggregationPolicy.ALL_PAGES,
    ),
    ToolDefinition(
        name="getChainCollectionsByPage",
        description="List one page of NFT collections on a chain. Requires chainName.",
        params_model=ChainCollectionsParams,
        handler=upstream("get_chain_collections_by_page"),
    ),
    ToolDefinition(
        name="getNftsForAddress",
        description="List the NFTs held by a wallet, with metadata. Requires chainName and walletAddress.",
        params_model=NftsForAddressParams,
        handler=upstream("get_nfts_for_address"),
    ),
    ToolDefinition(
        name="getTokenIdsForContractWithMetadata",
        description=(
            "List every token id of a collection with metadata, following all pages. "
            "Requires chainName and contractAddress."
        ),
        params_model=TokenIdsWithMetadataParams,
        handler=upstream("iter_token_ids_for_contract_with_metadata"),
        policy=AggregationPolicy.ALL_PAGES,
    ),
    ToolDefinition(
        name="getTokenIdsForContractWithMetadataByPage",
        description=(
            "List one page of token ids of a collection with metadata. "
            "Requires chainName and contractAddress."
        ),
        params_model=TokenIdsWithMetadataParams,
        handler=upstream("get_token_ids_for_contract_with_metadata_by_page"),
    ),
    ToolDefinition(
        name="getNftMetadataForGivenTokenIdForContract",
        description=(
            "Fetch metadata for a single NFT. Requires chainName, contractAddress and tokenId."
        ),
        params_model=NftMetadataParams,
        handler=upstream("get_nft_metadata_for_given_token_id_for_contract"),
    ),
    ToolDefinition(
        name="getNftTransactionsForContractTokenId",
        description=(
            "Fetch the transfer and sale history of a single NFT. "
            "Requires chainName, contractAddress and tokenId."
        ),
        params_model=NftTransactionsParams,
        handler=upstream("get_nft_transactions_for_contract_token_id"),
    ),
    ToolDefinition(
        name="getTraitsForCollection",
        description="List the trait names used in a collection. Requires chainName and collectionContract.",
        params_model=CollectionParams,
        handler=upstream("get_traits_for_collection"),
    ),
    ToolDefinition(
        name="getAttributesForTraitInCollection",
        description=(
            "List the values of one trait in a collection with their counts. "
            "Requires chainName, collectionContract and trait."
        ),
        params_model=TraitAttributesParams,
        handler=upstream("get_attributes_for_trait_in_collection"),
    ),
    ToolDefinition(
        name="getCollectionTraitsSummary",
        description=(
            "Summarize trait rarity across a collection. Requires chainName and collectionContract."
        ),
        params_model=CollectionParams,
        handler=upstream("get_collection_traits_summary"),
    ),
    ToolDefinition(
        name="getHistoricalFloorPricesForCollection",
        description=(
            "Fetch daily floor prices of a collection. Requires chainName and collectionAddress."
        ),
        params_model=CollectionMarketParams,
        handler=upstream("get_historical_floor_prices_for_collection"),
    ),
    ToolDefinition(
        name="getHistoricalVolumeForCollection",
        description=(
            "Fetch daily trading volume of a collection. Requires chainName and collectionAddress."
        ),
        params_model=CollectionMarketParams,
        handler=upstream("get_historical_volume_for_collection"),
    ),
    ToolDefinition(
        name="getHistoricalSalesCountForCollection",
        description=(
            "Fetch daily sale counts of a collection. Requires chainName and collectionAddress."
        ),
        params_model=CollectionMarketParams,
        handler=upstream("get_historical_sales_count_for_collection"),
    ),
    ToolDefinition(
        name="checkOwnershipInNft",
        description=(
            "Check whether a wallet holds any token of a collection, optionally filtered by traits. "
            "Requires chainName, walletAddress and collectionContract."
        ),
        params_model=OwnershipParams,
        handler=upstream("check_ownership_in_nft"),
    ),
    ToolDefinition(
        name="checkOwnershipInNftForSpecificTokenId",
        description=(
            "Check whether a wallet holds a specific token of a collection. "
            "Requires chainName, walletAddress, collectionContract and tokenId."
        ),
        params_model=TokenOwnershipParams,
        handler=upstream("check_ownership_in_nft_for_specific_token_id"),
    ),
]

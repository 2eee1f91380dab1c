"""
Thin async HTTP client for the GoldRush (Covalent) REST API.

All methods are read-only and return the upstream envelope
(``{"data": ..., "error": false, ...}``). Failures are mapped to internal
exceptions; nothing is retried, cached, or throttled here.
"""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Dict, Iterable, Optional, Union
from urllib.parse import quote

import httpx

from goldrush_mcp.config import GoldRushConfig, default_config

logger = logging.getLogger(__name__)

BlockRef = Union[str, int]


class GoldRushApiError(Exception):
    """Base exception for GoldRush API errors."""

    def __init__(
        self,
        message: str,
        *,
        code: Optional[Union[str, int]] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code


class UnauthorizedError(GoldRushApiError):
    """Raised when the API key is missing, invalid, or lacks access."""


class NotFoundError(GoldRushApiError):
    """Raised when the requested chain, address, or object does not exist."""


class UpstreamRateLimitedError(GoldRushApiError):
    """Raised when the API answers 429. Passed through; never retried."""


class UpstreamUnavailableError(GoldRushApiError):
    """Raised when the API cannot be reached or times out."""


class MalformedResponseError(GoldRushApiError):
    """Raised when the API returns a body that is not a JSON envelope."""


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


def _format_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(_format_value(item)) for item in value)
    return value


def _build_params(options: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Drop unset options and render the rest the way the API expects."""
    params = {key: _format_value(value) for key, value in options.items() if value is not None}
    return params or None


def _error_message(status_code: int, body: Any, fallback: str) -> str:
    if isinstance(body, dict):
        message = body.get("error_message") or body.get("message")
        if isinstance(message, str) and message:
            return f"{status_code} - {message}"
    return f"{status_code} - {fallback}"


class GoldRushApiClient:
    """Async client for the GoldRush API surface exposed as MCP tools."""

    def __init__(
        self,
        config: GoldRushConfig | None = None,
        *,
        api_key: Optional[str] = None,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or default_config
        self._api_key = api_key if api_key is not None else self.config.api_key
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url, timeout=self.config.timeout
            )
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _build_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {"Accept": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    def _map_error(self, status_code: int, body: Any) -> GoldRushApiError:
        code = body.get("error_code") if isinstance(body, dict) else None
        if status_code in {401, 403}:
            return UnauthorizedError(
                _error_message(status_code, body, "Unauthorized or invalid API key."),
                code=code,
                status_code=status_code,
            )
        if status_code == 404:
            return NotFoundError(
                _error_message(status_code, body, "Resource not found."),
                code=code,
                status_code=status_code,
            )
        if status_code == 429:
            return UpstreamRateLimitedError(
                _error_message(status_code, body, "Too many requests."),
                code=code,
                status_code=status_code,
            )
        return GoldRushApiError(
            _error_message(status_code, body, "GoldRush API error."),
            code=code,
            status_code=status_code,
        )

    def _process_response(self, response: httpx.Response) -> Dict[str, Any]:
        try:
            body: Any = response.json()
        except ValueError:
            body = None

        if response.status_code >= 400:
            raise self._map_error(response.status_code, body)

        if not isinstance(body, dict):
            raise MalformedResponseError(
                "Unexpected response from GoldRush API.", status_code=response.status_code
            )

        if body.get("error") is True:
            raise MalformedResponseError(
                _error_message(
                    body.get("error_code") or response.status_code, body, "GoldRush API error."
                ),
                code=body.get("error_code"),
                status_code=response.status_code,
            )

        return body

    async def _request(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        client = await self._get_client()
        try:
            response = await client.get(path, params=params, headers=self._build_headers())
        except httpx.RequestError as exc:
            logger.warning("GoldRush API unreachable for path %s", path)
            raise UpstreamUnavailableError(f"GoldRush API unreachable: {exc}") from exc
        return self._process_response(response)

    async def _iter_page_numbers(
        self, path: str, options: Dict[str, Any]
    ) -> AsyncIterator[Dict[str, Any]]:
        """Yield pages by advancing ``page-number`` until ``has_more`` is false."""
        page_number = options.get("page-number") or 0
        while True:
            page = await self._request(
                path, params=_build_params({**options, "page-number": page_number})
            )
            yield page
            data = page.get("data")
            pagination = data.get("pagination") if isinstance(data, dict) else None
            if not isinstance(pagination, dict) or not pagination.get("has_more"):
                return
            page_number += 1

    async def _iter_prev_links(
        self, path: str, options: Dict[str, Any]
    ) -> AsyncIterator[Dict[str, Any]]:
        """Yield pages by following ``links.prev`` until it is null."""
        params = _build_params(options)
        next_path: Optional[str] = path
        while next_path:
            page = await self._request(next_path, params=params)
            yield page
            data = page.get("data")
            links = data.get("links") if isinstance(data, dict) else None
            prev = links.get("prev") if isinstance(links, dict) else None
            next_path = prev if isinstance(prev, str) and prev else None

    # Chain status -------------------------------------------------------

    async def get_all_chain_status(self) -> Dict[str, Any]:
        """Retrieve the sync status of every supported chain."""
        return await self._request("/v1/chains/status/")

    # Cross-chain -------------------------------------------------------

    async def get_multi_chain_multi_address_transactions(
        self,
        *,
        chains: Optional[Iterable[BlockRef]] = None,
        addresses: Optional[Iterable[str]] = None,
        limit: Optional[int] = None,
        before: Optional[str] = None,
        after: Optional[str] = None,
        with_logs: Optional[bool] = None,
        with_decoded_logs: Optional[bool] = None,
        quote_currency: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Retrieve recent transactions across several chains and addresses."""
        params = _build_params(
            {
                "chains": chains,
                "addresses": addresses,
                "limit": limit,
                "before": before,
                "after": after,
                "with-logs": with_logs,
                "with-decoded-logs": with_decoded_logs,
                "quote-currency": quote_currency,
            }
        )
        return await self._request("/v1/allchains/transactions/", params=params)

    async def get_multi_chain_balances(
        self,
        wallet_address: str,
        *,
        quote_currency: Optional[str] = None,
        before: Optional[str] = None,
        limit: Optional[int] = None,
        chains: Optional[Iterable[BlockRef]] = None,
        cutoff_timestamp: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Retrieve token balances for a wallet across chains."""
        params = _build_params(
            {
                "quote-currency": quote_currency,
                "before": before,
                "limit": limit,
                "chains": chains,
                "cutoff-timestamp": cutoff_timestamp,
            }
        )
        return await self._request(
            f"/v1/allchains/address/{_segment(wallet_address)}/balances/", params=params
        )

    async def get_address_activity(
        self, wallet_address: str, *, testnets: Optional[bool] = None
    ) -> Dict[str, Any]:
        """List the chains on which a wallet has been active."""
        return await self._request(
            f"/v1/address/{_segment(wallet_address)}/activity/",
            params=_build_params({"testnets": testnets}),
        )

    # Utility -----------------------------------------------------------

    async def get_gas_prices(
        self, chain_name: str, event_type: str, *, quote_currency: Optional[str] = None
    ) -> Dict[str, Any]:
        """Retrieve gas price estimates for an event type."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/event/{_segment(event_type)}/gas_prices/",
            params=_build_params({"quote-currency": quote_currency}),
        )

    async def get_block(self, chain_name: str, block_height: BlockRef) -> Dict[str, Any]:
        """Retrieve a single block."""
        return await self._request(f"/v1/{_segment(chain_name)}/block_v2/{_segment(block_height)}/")

    async def get_block_heights_by_page(
        self,
        chain_name: str,
        start_date: str,
        end_date: str,
        *,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Retrieve one page of block heights in a date range."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/block_v2/{_segment(start_date)}/{_segment(end_date)}/",
            params=_build_params({"page-size": page_size, "page-number": page_number}),
        )

    async def get_log_events_by_address_by_page(
        self,
        chain_name: str,
        contract_address: str,
        *,
        starting_block: Optional[BlockRef] = None,
        ending_block: Optional[BlockRef] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Retrieve one page of event logs emitted by a contract."""
        params = _build_params(
            {
                "starting-block": starting_block,
                "ending-block": ending_block,
                "page-size": page_size,
                "page-number": page_number,
            }
        )
        return await self._request(
            f"/v1/{_segment(chain_name)}/events/address/{_segment(contract_address)}/",
            params=params,
        )

    async def get_log_events_by_topic_hash_by_page(
        self,
        chain_name: str,
        topic_hash: str,
        *,
        starting_block: Optional[BlockRef] = None,
        ending_block: Optional[BlockRef] = None,
        secondary_topics: Optional[str] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Retrieve one page of event logs sharing a topic hash."""
        params = _build_params(
            {
                "starting-block": starting_block,
                "ending-block": ending_block,
                "secondary-topics": secondary_topics,
                "page-size": page_size,
                "page-number": page_number,
            }
        )
        return await self._request(
            f"/v1/{_segment(chain_name)}/events/topics/{_segment(topic_hash)}/", params=params
        )

    # Balances ----------------------------------------------------------

    async def get_token_balances_for_wallet_address(
        self,
        chain_name: str,
        address: str,
        *,
        quote_currency: Optional[str] = None,
        nft: Optional[bool] = None,
        no_nft_fetch: Optional[bool] = None,
        no_spam: Optional[bool] = None,
        no_nft_asset_metadata: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Retrieve native, fungible, and optionally NFT balances for an address."""
        params = _build_params(
            {
                "quote-currency": quote_currency,
                "nft": nft,
                "no-nft-fetch": no_nft_fetch,
                "no-spam": no_spam,
                "no-nft-asset-metadata": no_nft_asset_metadata,
            }
        )
        return await self._request(
            f"/v1/{_segment(chain_name)}/address/{_segment(address)}/balances_v2/", params=params
        )

    async def get_historical_token_balances_for_wallet_address(
        self,
        chain_name: str,
        address: str,
        *,
        quote_currency: Optional[str] = None,
        nft: Optional[bool] = None,
        no_nft_fetch: Optional[bool] = None,
        no_spam: Optional[bool] = None,
        no_nft_asset_metadata: Optional[bool] = None,
        block_height: Optional[int] = None,
        date: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Retrieve balances for an address at a past block height or date."""
        params = _build_params(
            {
                "quote-currency": quote_currency,
                "nft": nft,
                "no-nft-fetch": no_nft_fetch,
                "no-spam": no_spam,
                "no-nft-asset-metadata": no_nft_asset_metadata,
                "block-height": block_height,
                "date": date,
            }
        )
        return await self._request(
            f"/v1/{_segment(chain_name)}/address/{_segment(address)}/historical_balances/",
            params=params,
        )

    async def get_historical_portfolio_for_wallet_address(
        self,
        chain_name: str,
        wallet_address: str,
        *,
        quote_currency: Optional[str] = None,
        days: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Retrieve daily portfolio values for a wallet."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/address/{_segment(wallet_address)}/portfolio_v2/",
            params=_build_params({"quote-currency": quote_currency, "days": days}),
        )

    def _erc20_transfer_options(
        self,
        quote_currency: Optional[str],
        contract_address: Optional[str],
        starting_block: Optional[int],
        ending_block: Optional[int],
        page_size: Optional[int],
        page_number: Optional[int],
    ) -> Dict[str, Any]:
        return {
            "quote-currency": quote_currency,
            "contract-address": contract_address,
            "starting-block": starting_block,
            "ending-block": ending_block,
            "page-size": page_size,
            "page-number": page_number,
        }

    def iter_erc20_transfers_for_wallet_address(
        self,
        chain_name: str,
        wallet_address: str,
        *,
        quote_currency: Optional[str] = None,
        contract_address: Optional[str] = None,
        starting_block: Optional[int] = None,
        ending_block: Optional[int] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> AsyncIterator[Dict[str, Any]]:
        """Iterate over every page of ERC20 transfers for a wallet."""
        options = self._erc20_transfer_options(
            quote_currency, contract_address, starting_block, ending_block, page_size, page_number
        )
        return self._iter_page_numbers(
            f"/v1/{_segment(chain_name)}/address/{_segment(wallet_address)}/transfers_v2/", options
        )

    async def get_erc20_transfers_for_wallet_address_by_page(
        self,
        chain_name: str,
        wallet_address: str,
        *,
        quote_currency: Optional[str] = None,
        contract_address: Optional[str] = None,
        starting_block: Optional[int] = None,
        ending_block: Optional[int] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Retrieve one page of ERC20 transfers for a wallet."""
        options = self._erc20_transfer_options(
            quote_currency, contract_address, starting_block, ending_block, page_size, page_number
        )
        return await self._request(
            f"/v1/{_segment(chain_name)}/address/{_segment(wallet_address)}/transfers_v2/",
            params=_build_params(options),
        )

    def iter_token_holders_v2_for_token_address(
        self,
        chain_name: str,
        token_address: str,
        *,
        block_height: Optional[BlockRef] = None,
        date: Optional[str] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> AsyncIterator[Dict[str, Any]]:
        """Iterate over every page of holders of a token."""
        options = {
            "block-height": block_height,
            "date": date,
            "page-size": page_size,
            "page-number": page_number,
        }
        return self._iter_page_numbers(
            f"/v1/{_segment(chain_name)}/tokens/{_segment(token_address)}/token_holders_v2/", options
        )

    async def get_token_holders_v2_for_token_address_by_page(
        self,
        chain_name: str,
        token_address: str,
        *,
        block_height: Optional[BlockRef] = None,
        date: Optional[str] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Retrieve one page of holders of a token."""
        params = _build_params(
            {
                "block-height": block_height,
                "date": date,
                "page-size": page_size,
                "page-number": page_number,
            }
        )
        return await self._request(
            f"/v1/{_segment(chain_name)}/tokens/{_segment(token_address)}/token_holders_v2/",
            params=params,
        )

    async def get_native_token_balance(
        self,
        chain_name: str,
        wallet_address: str,
        *,
        quote_currency: Optional[str] = None,
        block_height: Optional[BlockRef] = None,
    ) -> Dict[str, Any]:
        """Retrieve the native token balance for a wallet."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/address/{_segment(wallet_address)}/balances_native/",
            params=_build_params({"quote-currency": quote_currency, "block-height": block_height}),
        )

    # Transactions ------------------------------------------------------

    async def get_transaction(self, chain_name: str, tx_hash: str) -> Dict[str, Any]:
        """Retrieve a single transaction with its decoded logs."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/transaction_v2/{_segment(tx_hash)}/"
        )

    def iter_all_transactions_for_address(
        self,
        chain_name: str,
        address: str,
        *,
        quote_currency: Optional[str] = None,
        no_logs: Optional[bool] = None,
        block_signed_at_asc: Optional[bool] = None,
        with_internal: Optional[bool] = None,
        with_state: Optional[bool] = None,
        with_input_data: Optional[bool] = None,
    ) -> AsyncIterator[Dict[str, Any]]:
        """Iterate over the full transaction history of an address, newest page first."""
        options = {
            "quote-currency": quote_currency,
            "no-logs": no_logs,
            "block-signed-at-asc": block_signed_at_asc,
            "with-internal": with_internal,
            "with-state": with_state,
            "with-input-data": with_input_data,
        }
        return self._iter_prev_links(
            f"/v1/{_segment(chain_name)}/address/{_segment(address)}/transactions_v3/", options
        )

    async def get_all_transactions_for_address_by_page(
        self,
        chain_name: str,
        address: str,
        *,
        quote_currency: Optional[str] = None,
        no_logs: Optional[bool] = None,
        block_signed_at_asc: Optional[bool] = None,
        with_internal: Optional[bool] = None,
        with_state: Optional[bool] = None,
        with_input_data: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Retrieve the most recent page of transactions, including paging links."""
        params = _build_params(
            {
                "quote-currency": quote_currency,
                "no-logs": no_logs,
                "block-signed-at-asc": block_signed_at_asc,
                "with-internal": with_internal,
                "with-state": with_state,
                "with-input-data": with_input_data,
            }
        )
        return await self._request(
            f"/v1/{_segment(chain_name)}/address/{_segment(address)}/transactions_v3/",
            params=params,
        )

    async def get_transactions_for_block(
        self,
        chain_name: str,
        block_height: BlockRef,
        *,
        quote_currency: Optional[str] = None,
        no_logs: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Retrieve all transactions in a block."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/block/{_segment(block_height)}/transactions_v3/",
            params=_build_params({"quote-currency": quote_currency, "no-logs": no_logs}),
        )

    async def get_transaction_summary(
        self,
        chain_name: str,
        wallet_address: str,
        *,
        quote_currency: Optional[str] = None,
        with_gas: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Retrieve first/last transaction and totals for a wallet."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/address/{_segment(wallet_address)}/transactions_summary/",
            params=_build_params({"quote-currency": quote_currency, "with-gas": with_gas}),
        )

    async def get_transactions_for_address_v3(
        self,
        chain_name: str,
        wallet_address: str,
        page: int,
        *,
        quote_currency: Optional[str] = None,
        no_logs: Optional[bool] = None,
        block_signed_at_asc: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Retrieve a specific page of a wallet's transactions."""
        params = _build_params(
            {
                "quote-currency": quote_currency,
                "no-logs": no_logs,
                "block-signed-at-asc": block_signed_at_asc,
            }
        )
        return await self._request(
            f"/v1/{_segment(chain_name)}/address/{_segment(wallet_address)}"
            f"/transactions_v3/page/{_segment(page)}/",
            params=params,
        )

    async def get_time_bucket_transactions_for_address(
        self,
        chain_name: str,
        wallet_address: str,
        time_bucket: int,
        *,
        quote_currency: Optional[str] = None,
        no_logs: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Retrieve a wallet's transactions within one 15-minute time bucket."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/bulk/transactions/{_segment(wallet_address)}"
            f"/{_segment(time_bucket)}/",
            params=_build_params({"quote-currency": quote_currency, "no-logs": no_logs}),
        )

    # Bitcoin -----------------------------------------------------------

    async def get_bitcoin_hd_wallet_balances(
        self, wallet_address: str, *, quote_currency: Optional[str] = None
    ) -> Dict[str, Any]:
        """Retrieve balances for each address derived from an HD wallet xpub."""
        return await self._request(
            f"/v1/btc-mainnet/address/{_segment(wallet_address)}/hd_wallets/",
            params=_build_params({"quote-currency": quote_currency}),
        )

    async def get_transactions_for_btc_address(
        self,
        address: str,
        *,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Retrieve transactions for a non-HD bitcoin address."""
        params = _build_params(
            {"address": address, "page-size": page_size, "page-number": page_number}
        )
        return await self._request("/v1/cq/covalent/app/bitcoin/transactions/", params=params)

    async def get_bitcoin_non_hd_wallet_balances(
        self, wallet_address: str, *, quote_currency: Optional[str] = None
    ) -> Dict[str, Any]:
        """Retrieve the balance of a non-HD bitcoin address."""
        return await self._request(
            f"/v1/btc-mainnet/address/{_segment(wallet_address)}/balances_v2/",
            params=_build_params({"quote-currency": quote_currency}),
        )

    # NFTs --------------------------------------------------------------

    def iter_chain_collections(
        self,
        chain_name: str,
        *,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
        no_spam: Optional[bool] = None,
    ) -> AsyncIterator[Dict[str, Any]]:
        """Iterate over every page of NFT collections on a chain."""
        options = {"page-size": page_size, "page-number": page_number, "no-spam": no_spam}
        return self._iter_page_numbers(f"/v1/{_segment(chain_name)}/nft/collections/", options)

    async def get_chain_collections_by_page(
        self,
        chain_name: str,
        *,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
        no_spam: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Retrieve one page of NFT collections on a chain."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/nft/collections/",
            params=_build_params(
                {"page-size": page_size, "page-number": page_number, "no-spam": no_spam}
            ),
        )

    async def get_nfts_for_address(
        self,
        chain_name: str,
        wallet_address: str,
        *,
        no_spam: Optional[bool] = None,
        no_nft_asset_metadata: Optional[bool] = None,
        with_uncached: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Retrieve the NFTs held by a wallet."""
        params = _build_params(
            {
                "no-spam": no_spam,
                "no-nft-asset-metadata": no_nft_asset_metadata,
                "with-uncached": with_uncached,
            }
        )
        return await self._request(
            f"/v1/{_segment(chain_name)}/address/{_segment(wallet_address)}/balances_nft/",
            params=params,
        )

    def iter_token_ids_for_contract_with_metadata(
        self,
        chain_name: str,
        contract_address: str,
        *,
        no_metadata: Optional[bool] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
        traits_filter: Optional[str] = None,
        values_filter: Optional[str] = None,
        with_uncached: Optional[bool] = None,
    ) -> AsyncIterator[Dict[str, Any]]:
        """Iterate over every page of token ids (with metadata) in a collection."""
        options = {
            "no-metadata": no_metadata,
            "page-size": page_size,
            "page-number": page_number,
            "traits-filter": traits_filter,
            "values-filter": values_filter,
            "with-uncached": with_uncached,
        }
        return self._iter_page_numbers(
            f"/v1/{_segment(chain_name)}/nft/{_segment(contract_address)}/metadata/", options
        )

    async def get_token_ids_for_contract_with_metadata_by_page(
        self,
        chain_name: str,
        contract_address: str,
        *,
        no_metadata: Optional[bool] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
        traits_filter: Optional[str] = None,
        values_filter: Optional[str] = None,
        with_uncached: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Retrieve one page of token ids (with metadata) in a collection."""
        params = _build_params(
            {
                "no-metadata": no_metadata,
                "page-size": page_size,
                "page-number": page_number,
                "traits-filter": traits_filter,
                "values-filter": values_filter,
                "with-uncached": with_uncached,
            }
        )
        return await self._request(
            f"/v1/{_segment(chain_name)}/nft/{_segment(contract_address)}/metadata/", params=params
        )

    async def get_nft_metadata_for_given_token_id_for_contract(
        self,
        chain_name: str,
        contract_address: str,
        token_id: str,
        *,
        no_metadata: Optional[bool] = None,
        with_uncached: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Retrieve metadata for a single NFT."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/nft/{_segment(contract_address)}/metadata/{_segment(token_id)}/",
            params=_build_params({"no-metadata": no_metadata, "with-uncached": with_uncached}),
        )

    async def get_nft_transactions_for_contract_token_id(
        self,
        chain_name: str,
        contract_address: str,
        token_id: str,
        *,
        no_spam: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Retrieve the transfer history of a single NFT."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/tokens/{_segment(contract_address)}"
            f"/nft_transactions/{_segment(token_id)}/",
            params=_build_params({"no-spam": no_spam}),
        )

    async def get_traits_for_collection(
        self, chain_name: str, collection_contract: str
    ) -> Dict[str, Any]:
        """List the traits used in a collection."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/nft/{_segment(collection_contract)}/traits/"
        )

    async def get_attributes_for_trait_in_collection(
        self, chain_name: str, collection_contract: str, trait: str
    ) -> Dict[str, Any]:
        """List the values of one trait in a collection."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/nft/{_segment(collection_contract)}"
            f"/traits/{_segment(trait)}/attributes/"
        )

    async def get_collection_traits_summary(
        self, chain_name: str, collection_contract: str
    ) -> Dict[str, Any]:
        """Summarize trait rarity in a collection."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/nft/{_segment(collection_contract)}/traits_summary/"
        )

    async def _nft_market(
        self,
        chain_name: str,
        collection_address: str,
        metric: str,
        *,
        quote_currency: Optional[str],
        days: Optional[int],
    ) -> Dict[str, Any]:
        return await self._request(
            f"/v1/{_segment(chain_name)}/nft_market/{_segment(collection_address)}/{metric}/",
            params=_build_params({"quote-currency": quote_currency, "days": days}),
        )

    async def get_historical_floor_prices_for_collection(
        self,
        chain_name: str,
        collection_address: str,
        *,
        quote_currency: Optional[str] = None,
        days: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Retrieve daily floor prices for a collection."""
        return await self._nft_market(
            chain_name, collection_address, "floor_price", quote_currency=quote_currency, days=days
        )

    async def get_historical_volume_for_collection(
        self,
        chain_name: str,
        collection_address: str,
        *,
        quote_currency: Optional[str] = None,
        days: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Retrieve daily trading volume for a collection."""
        return await self._nft_market(
            chain_name, collection_address, "volume", quote_currency=quote_currency, days=days
        )

    async def get_historical_sales_count_for_collection(
        self,
        chain_name: str,
        collection_address: str,
        *,
        quote_currency: Optional[str] = None,
        days: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Retrieve daily sale counts for a collection."""
        return await self._nft_market(
            chain_name, collection_address, "sale_count", quote_currency=quote_currency, days=days
        )

    async def check_ownership_in_nft(
        self,
        chain_name: str,
        wallet_address: str,
        collection_contract: str,
        *,
        traits_filter: Optional[str] = None,
        values_filter: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Check whether a wallet holds any token of a collection."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/address/{_segment(wallet_address)}"
            f"/collection/{_segment(collection_contract)}/",
            params=_build_params({"traits-filter": traits_filter, "values-filter": values_filter}),
        )

    async def check_ownership_in_nft_for_specific_token_id(
        self,
        chain_name: str,
        wallet_address: str,
        collection_contract: str,
        token_id: str,
    ) -> Dict[str, Any]:
        """Check whether a wallet holds a specific token of a collection."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/address/{_segment(wallet_address)}"
            f"/collection/{_segment(collection_contract)}/token/{_segment(token_id)}/"
        )

    # Pricing -----------------------------------------------------------

    async def get_token_prices(
        self,
        chain_name: str,
        quote_currency: str,
        contract_address: str,
        *,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
        prices_at_asc: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Retrieve historical prices for a token contract."""
        params = _build_params({"from": from_date, "to": to_date, "prices-at-asc": prices_at_asc})
        return await self._request(
            f"/v1/pricing/historical_by_addresses_v2/{_segment(chain_name)}"
            f"/{_segment(quote_currency)}/{_segment(contract_address)}/",
            params=params,
        )

    # Security ----------------------------------------------------------

    async def get_approvals(self, chain_name: str, wallet_address: str) -> Dict[str, Any]:
        """List token approvals granted by a wallet."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/approvals/{_segment(wallet_address)}/"
        )

    async def get_nft_approvals(self, chain_name: str, wallet_address: str) -> Dict[str, Any]:
        """List NFT approvals granted by a wallet."""
        return await self._request(
            f"/v1/{_segment(chain_name)}/nft/approvals/{_segment(wallet_address)}/"
        )

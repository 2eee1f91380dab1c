"""Fixed vocabularies used by tool parameter schemas and the config resources."""

from __future__ import annotations

from typing import Literal, Tuple

# Chain identifiers accepted by the GoldRush API.
CHAIN_NAMES: Tuple[str, ...] = (
    "eth-mainnet",
    "eth-sepolia",
    "eth-holesky",
    "matic-mainnet",
    "matic-amoy-testnet",
    "polygon-zkevm-mainnet",
    "polygon-zkevm-cardona-testnet",
    "bsc-mainnet",
    "bsc-testnet",
    "opbnb-mainnet",
    "opbnb-testnet",
    "avalanche-mainnet",
    "avalanche-testnet",
    "avalanche-beam-mainnet",
    "avalanche-dexalot-mainnet",
    "avalanche-dfk-mainnet",
    "avalanche-numbers",
    "avalanche-shrapnel-mainnet",
    "avalanche-xanachain",
    "arbitrum-mainnet",
    "arbitrum-nova-mainnet",
    "arbitrum-sepolia",
    "optimism-mainnet",
    "optimism-sepolia",
    "base-mainnet",
    "base-sepolia-testnet",
    "fantom-mainnet",
    "fantom-testnet",
    "gnosis-mainnet",
    "gnosis-testnet",
    "linea-mainnet",
    "linea-sepolia-testnet",
    "scroll-mainnet",
    "scroll-sepolia-testnet",
    "zksync-mainnet",
    "zksync-sepolia-testnet",
    "mantle-mainnet",
    "mantle-sepolia-testnet",
    "blast-mainnet",
    "blast-sepolia-testnet",
    "zora-mainnet",
    "zora-sepolia-testnet",
    "manta-pacific-mainnet",
    "manta-sepolia-testnet",
    "mode-mainnet",
    "mode-testnet",
    "taiko-mainnet",
    "taiko-hekla-testnet",
    "moonbeam-mainnet",
    "moonbeam-moonriver",
    "moonbeam-moonbase-alpha",
    "celo-mainnet",
    "aurora-mainnet",
    "aurora-testnet",
    "cronos-mainnet",
    "cronos-testnet",
    "cronos-zkevm-mainnet",
    "oasis-sapphire-mainnet",
    "oasis-sapphire-testnet",
    "emerald-paratime-mainnet",
    "metis-mainnet",
    "metis-sepolia-testnet",
    "boba-mainnet",
    "boba-bnb-mainnet",
    "harmony-mainnet",
    "klaytn-mainnet",
    "canto-mainnet",
    "evmos-mainnet",
    "evmos-testnet",
    "rsk-mainnet",
    "rsk-testnet",
    "astar-mainnet",
    "zetachain-mainnet",
    "zetachain-testnet",
    "axie-mainnet",
    "sei-mainnet",
    "berachain-mainnet",
    "berachain-testnet",
    "apechain-mainnet",
    "apechain-testnet",
    "world-mainnet",
    "world-sepolia-testnet",
    "unichain-mainnet",
    "unichain-sepolia-testnet",
    "ink-mainnet",
    "ink-sepolia-testnet",
    "sonic-mainnet",
    "sonic-blaze-testnet",
    "lens-mainnet",
    "lens-sepolia-testnet",
    "lisk-mainnet",
    "lisk-sepolia-testnet",
    "flarenetworks-flare-mainnet",
    "flarenetworks-flare-testnet",
    "horizen-eon-mainnet",
    "horizen-gobi-testnet",
    "merlin-mainnet",
    "merlin-testnet",
    "redstone-mainnet",
    "bob-mainnet",
    "cyber-mainnet",
    "cyber-testnet",
    "fraxtal-mainnet",
    "viction-mainnet",
    "viction-testnet",
    "gunzilla-testnet",
    "loot-mainnet",
    "monad-testnet",
    "movement-mevm-testnet",
    "btc-mainnet",
    "solana-mainnet",
)

# Quote currencies accepted for converted monetary values.
QUOTE_CURRENCIES: Tuple[str, ...] = (
    "USD",
    "CAD",
    "EUR",
    "SGD",
    "INR",
    "JPY",
    "VND",
    "CNY",
    "KRW",
    "RUB",
    "TRY",
    "NGN",
    "ARS",
    "AUD",
    "CHF",
    "GBP",
)

GAS_EVENT_TYPES: Tuple[str, ...] = ("erc20", "nativetokens", "uniswapv3")

# Literal aliases used by the pydantic parameter models.
ChainName = Literal[CHAIN_NAMES]  # type: ignore[valid-type]
QuoteCurrency = Literal[QUOTE_CURRENCIES]  # type: ignore[valid-type]
GasEventType = Literal[GAS_EVENT_TYPES]  # type: ignore[valid-type]

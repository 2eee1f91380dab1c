"""Shared pieces for tool parameter models."""

from __future__ import annotations

from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from goldrush_mcp.constants import ChainName, QuoteCurrency

Chain = Annotated[
    ChainName,
    Field(description="Blockchain network to query, e.g. 'eth-mainnet' or 'matic-mainnet'."),
]
Quote = Annotated[
    Optional[QuoteCurrency],
    Field(description="Currency for converted values, e.g. 'USD' or 'EUR'."),
]
WalletAddress = Annotated[
    str,
    Field(description="Wallet address; ENS, RNS, Lens handles and Unstoppable Domains are resolved upstream."),
]
PageSize = Annotated[Optional[int], Field(description="Number of items per page.")]
PageNumber = Annotated[Optional[int], Field(description="Zero-based page number.")]
NoSpam = Annotated[Optional[bool], Field(description="Exclude spam tokens when true.")]


class ToolParams(BaseModel):
    """
    Base model for tool arguments.

    Arguments are accepted under their camelCase names, unknown keys are
    rejected, and values are not coerced between JSON types.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        strict=True,
    )

    def options(self) -> Dict[str, Any]:
        """Return the validated arguments keyed by client keyword name."""
        return self.model_dump()


def upstream(method: str):
    """Build a handler forwarding validated params to ``client.<method>``."""

    def handler(client: Any, params: ToolParams) -> Any:
        return getattr(client, method)(**params.options())

    handler.__name__ = method
    return handler

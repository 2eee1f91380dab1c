"""HTTP client wrappers for the GoldRush API."""

from .client import (
    GoldRushApiClient,
    GoldRushApiError,
    MalformedResponseError,
    NotFoundError,
    UnauthorizedError,
    UpstreamRateLimitedError,
    UpstreamUnavailableError,
)

__all__ = [
    "GoldRushApiClient",
    "GoldRushApiError",
    "UnauthorizedError",
    "NotFoundError",
    "UpstreamRateLimitedError",
    "UpstreamUnavailableError",
    "MalformedResponseError",
]

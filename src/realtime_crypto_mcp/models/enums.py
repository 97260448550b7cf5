"""Enumeration types for Realtime Crypto MCP."""

from enum import Enum


class FetchStatus(str, Enum):
    """
    Outcome of a CoinCap request.

    Only RATE_LIMITED is retried; every other failure is final.
    """

    SUCCESS = "success"
    RATE_LIMITED = "rate_limited"
    HTTP_ERROR = "http_error"
    TRANSPORT_ERROR = "transport_error"
    DEADLINE_EXCEEDED = "deadline_exceeded"

    @property
    def is_success(self) -> bool:
        """Check if the request produced a usable body."""
        return self is FetchStatus.SUCCESS

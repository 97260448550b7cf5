"""Data models for Realtime Crypto MCP."""

from realtime_crypto_mcp.models.enums import FetchStatus
from realtime_crypto_mcp.models.outcomes import FetchOutcome
from realtime_crypto_mcp.models.schemas import (
    ExchangeEnvelope,
    ExchangeRecord,
    RateEnvelope,
    RateRecord,
    TextContentItem,
    ToolResult,
)

__all__ = [
    "FetchStatus",
    "FetchOutcome",
    "ExchangeRecord",
    "ExchangeEnvelope",
    "RateRecord",
    "RateEnvelope",
    "TextContentItem",
    "ToolResult",
]

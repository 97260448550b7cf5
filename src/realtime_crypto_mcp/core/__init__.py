"""Core utilities and configuration for Realtime Crypto MCP."""

from realtime_crypto_mcp.core.config import Settings, get_settings
from realtime_crypto_mcp.core.exceptions import (
    CoinCapConnectionError,
    CryptoMCPError,
    ToolExecutionError,
    UnknownToolError,
)

__all__ = [
    "Settings",
    "get_settings",
    "CryptoMCPError",
    "CoinCapConnectionError",
    "ToolExecutionError",
    "UnknownToolError",
]

"""MCP Tools for CoinCap lookups."""

from realtime_crypto_mcp.tools.exchanges import get_exchange_details
from realtime_crypto_mcp.tools.rates import get_rates

__all__ = [
    "get_exchange_details",
    "get_rates",
]

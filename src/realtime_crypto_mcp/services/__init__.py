"""Services for Realtime Crypto MCP."""

from realtime_crypto_mcp.services.coincap_client import CoinCapClient

__all__ = ["CoinCapClient"]

"""Realtime Crypto MCP - CoinCap lookups exposed as MCP tools."""

__version__ = "1.0.0"

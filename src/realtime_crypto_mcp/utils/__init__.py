"""Utility functions for Realtime Crypto MCP."""

from realtime_crypto_mcp.utils.formatters import (
    format_exchange_details,
    format_number,
    format_rate_details,
    format_timestamp,
    parse_decimal,
)

__all__ = [
    "parse_decimal",
    "format_number",
    "format_timestamp",
    "format_exchange_details",
    "format_rate_details",
]

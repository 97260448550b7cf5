"""Constants and URL helpers for Realtime Crypto MCP."""

from urllib.parse import quote

# CoinCap API
COINCAP_API_BASE = "https://api.coincap.io/v2"
USER_AGENT = "realtime-crypto-app/1.0"

# MCP server identity
SERVER_NAME = "realtime-crypto"
SERVER_VERSION = "1.0.0"

# Tool names exposed to the host
EXCHANGE_DETAILS_TOOL = "get-exchange-details"
RATES_TOOL = "get-rates"

# Placeholder for missing fields in formatted output
UNKNOWN = "Unknown"


def normalize_id(value: str) -> str:
    """
    Normalize a user supplied CoinCap identifier.

    CoinCap ids are lower-case slugs, e.g. "Kraken" -> "kraken".
    """
    return value.strip().lower()


def exchange_path(exchange_id: str) -> str:
    """Path of the exchange details endpoint, relative to the API base."""
    return f"/exchanges/{quote(exchange_id, safe='')}"


def rate_path(currency_id: str) -> str:
    """Path of the rate endpoint, relative to the API base."""
    return f"/rates/{quote(currency_id, safe='')}"

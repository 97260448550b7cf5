"""Dependency injection container for service management."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from realtime_crypto_mcp.services.coincap_client import CoinCapClient

# Singleton instances
_coincap_client: "CoinCapClient | None" = None
_initialized: bool = False


async def get_coincap_client() -> "CoinCapClient":
    """
    Get CoinCapClient singleton instance.

    The client is lazily initialized on first call and reused thereafter,
    so every tool shares one connection pool and one fetch policy.

    Returns:
        Initialized CoinCapClient instance
    """
    global _coincap_client

    if _coincap_client is None:
        from realtime_crypto_mcp.core.config import get_settings
        from realtime_crypto_mcp.services.coincap_client import CoinCapClient

        _coincap_client = CoinCapClient(get_settings())
        await _coincap_client.__aenter__()

    return _coincap_client


async def initialize() -> None:
    """Initialize all services. Safe to call repeatedly."""
    global _initialized

    if _initialized:
        return

    await get_coincap_client()
    _initialized = True


async def cleanup() -> None:
    """Close the HTTP client and forget all singletons."""
    global _coincap_client, _initialized

    if _coincap_client is not None:
        await _coincap_client.__aexit__(None, None, None)
        _coincap_client = None

    _initialized = False

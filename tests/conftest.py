"""Pytest fixtures and configuration."""

import asyncio

import pytest

from realtime_crypto_mcp.core import config, container
from realtime_crypto_mcp.core.config import Settings, reset_settings

API_BASE = "https://api.coincap.io/v2"


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings and install them as the singleton."""
    reset_settings()
    settings = Settings(
        api_base_url=API_BASE,
        timeout=5,
        max_retries=3,
        retry_delay=1.0,
        request_deadline=None,
        debug=True,
    )
    config._settings = settings
    return settings


@pytest.fixture
def sleep_calls(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Record backoff delays instead of waiting them out."""
    calls: list[float] = []
    real_sleep = asyncio.sleep

    async def fake_sleep(delay: float, *args, **kwargs):
        calls.append(delay)
        await real_sleep(0)

    monkeypatch.setattr(
        "realtime_crypto_mcp.services.coincap_client.asyncio.sleep", fake_sleep
    )
    return calls


@pytest.fixture
def bitcoin_rate() -> dict:
    """Sample /rates/bitcoin response."""
    return {
        "data": {
            "id": "bitcoin",
            "symbol": "BTC",
            "currencySymbol": "$",
            "type": "crypto",
            "rateUsd": "67123.456",
        },
        "timestamp": 1705314600000,
    }


@pytest.fixture
def kraken_exchange() -> dict:
    """Sample /exchanges/kraken response."""
    return {
        "data": {
            "exchangeId": "kraken",
            "name": "Kraken",
            "rank": "3",
            "percentTotalVolume": "4.567891",
            "volumeUsd": "1234567.8912",
            "tradingPairs": "512",
            "socket": False,
            "exchangeUrl": "https://kraken.com",
            "updated": 1705314600000,
        },
        "timestamp": 1705314600000,
    }


@pytest.fixture(autouse=True)
def cleanup_settings():
    """Clean up settings after each test."""
    yield
    reset_settings()


@pytest.fixture
async def services(test_settings: Settings):
    """Shared client from the container, closed after the test."""
    yield
    await container.cleanup()

"""Tests for the CoinCap tools."""

import pytest
import respx
from httpx import Response

from realtime_crypto_mcp.tools import exchanges, get_exchange_details, get_rates

API_BASE = "https://api.coincap.io/v2"

pytestmark = pytest.mark.usefixtures("services")


class TestGetExchangeDetails:
    """Tests for get_exchange_details."""

    @respx.mock
    async def test_success(self, kraken_exchange: dict):
        """Test formatted details for a known exchange."""
        respx.get(f"{API_BASE}/exchanges/kraken").mock(
            return_value=Response(200, json=kraken_exchange)
        )

        result = await get_exchange_details("kraken")

        assert not result.is_error
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.text.startswith("Exchange details for Kraken:\n\nName: Kraken\n")

    @respx.mock
    async def test_null_data_is_soft_miss(self):
        """Test an empty payload reports a plain failure with the normalized id."""
        route = respx.get(f"{API_BASE}/exchanges/kraken").mock(
            return_value=Response(200, json={"data": None, "timestamp": 1705314600000})
        )

        result = await get_exchange_details("Kraken")

        assert route.called
        assert not result.is_error
        assert result.text == "Failed to retrieve details for exchange: kraken"

    @respx.mock
    async def test_upstream_error_is_soft_miss(self, sleep_calls):
        """Test an upstream failure never raises."""
        respx.get(f"{API_BASE}/exchanges/nowhere").mock(return_value=Response(404))

        result = await get_exchange_details("nowhere")

        assert not result.is_error
        assert result.text == "Failed to retrieve details for exchange: nowhere"

    @respx.mock
    async def test_rate_limit_is_retried(self, kraken_exchange: dict, sleep_calls):
        """Test exchange lookups share the retrying fetch policy."""
        route = respx.get(f"{API_BASE}/exchanges/kraken")
        route.side_effect = [Response(429), Response(200, json=kraken_exchange)]

        result = await get_exchange_details("kraken")

        assert result.text.startswith("Exchange details for Kraken:")
        assert sleep_calls == [1.0]

    @respx.mock
    async def test_unexpected_failure_sets_error_flag(
        self, kraken_exchange: dict, monkeypatch: pytest.MonkeyPatch
    ):
        """Test exceptions outside the fetch layer become error results."""
        respx.get(f"{API_BASE}/exchanges/kraken").mock(
            return_value=Response(200, json=kraken_exchange)
        )

        def broken_formatter(record):
            raise ValueError("boom")

        monkeypatch.setattr(exchanges, "format_exchange_details", broken_formatter)

        result = await get_exchange_details("kraken")

        assert result.is_error
        assert result.text == "Error: boom"


class TestGetRates:
    """Tests for get_rates."""

    @respx.mock
    async def test_success(self, bitcoin_rate: dict):
        """Test formatted rate for a known currency."""
        respx.get(f"{API_BASE}/rates/bitcoin").mock(return_value=Response(200, json=bitcoin_rate))

        result = await get_rates("Bitcoin")

        assert not result.is_error
        assert result.text == (
            "Current rate for bitcoin:\n\n"
            "Symbol: BTC $\nType: crypto\nUSD Rate: $67,123.46"
        )

    @respx.mock
    async def test_rate_limit_exhausted_is_soft_miss(self, sleep_calls):
        """Test a persistent 429 degrades to a plain failure."""
        route = respx.get(f"{API_BASE}/rates/bitcoin").mock(return_value=Response(429))

        result = await get_rates("bitcoin")

        assert not result.is_error
        assert result.text == "Failed to retrieve rates for currency: bitcoin"
        assert route.call_count == 4
        assert sleep_calls == [1.0, 2.0, 3.0]

    @respx.mock
    async def test_non_object_body_is_soft_miss(self):
        """Test a JSON body without an envelope."""
        respx.get(f"{API_BASE}/rates/bitcoin").mock(return_value=Response(200, json=[]))

        result = await get_rates("bitcoin")

        assert not result.is_error
        assert result.text == "Failed to retrieve rates for currency: bitcoin"

    @respx.mock
    async def test_invalid_record_sets_error_flag(self):
        """Test a record that fails validation is reported as an error."""
        respx.get(f"{API_BASE}/rates/bitcoin").mock(
            return_value=Response(200, json={"data": "not-a-record"})
        )

        result = await get_rates("bitcoin")

        assert result.is_error
        assert result.text.startswith("Error: ")


class TestUnusualIdentifiers:
    """Tools return results for any string and quote it as one path segment."""

    @pytest.mark.parametrize(
        ("exchange", "raw_path", "normalized"),
        [
            ("", b"/v2/exchanges/", ""),
            ("Binance US", b"/v2/exchanges/binance%20us", "binance us"),
            ("a/b", b"/v2/exchanges/a%2Fb", "a/b"),
            ("../rates/bitcoin", b"/v2/exchanges/..%2Frates%2Fbitcoin", "../rates/bitcoin"),
        ],
    )
    @respx.mock
    async def test_exchange_ids(self, exchange: str, raw_path: bytes, normalized: str):
        route = respx.get(url__startswith=f"{API_BASE}/exchanges/").mock(
            return_value=Response(404)
        )

        result = await get_exchange_details(exchange)

        assert route.call_count == 1
        assert route.calls.last.request.url.raw_path == raw_path
        assert not result.is_error
        assert result.text == f"Failed to retrieve details for exchange: {normalized}"

    @pytest.mark.parametrize(
        ("currency", "raw_path"),
        [
            ("  US Dollar ", b"/v2/rates/us%20dollar"),
            ("btc?x=1", b"/v2/rates/btc%3Fx%3D1"),
        ],
    )
    @respx.mock
    async def test_rate_ids(self, currency: str, raw_path: bytes):
        route = respx.get(url__startswith=f"{API_BASE}/rates/").mock(
            return_value=Response(404)
        )

        result = await get_rates(currency)

        assert route.calls.last.request.url.raw_path == raw_path
        assert not result.is_error
        assert result.text.startswith("Failed to retrieve rates for currency: ")


class TestUnusualValues:
    """Odd upstream values only affect their own line."""

    @respx.mock
    async def test_fractional_updated(self, kraken_exchange: dict):
        kraken_exchange["data"]["updated"] = 1705314600000.5
        respx.get(f"{API_BASE}/exchanges/kraken").mock(
            return_value=Response(200, json=kraken_exchange)
        )

        result = await get_exchange_details("kraken")

        assert not result.is_error
        assert "Last Updated: 2024-01-15 10:30:00 UTC" in result.text

    @respx.mock
    async def test_huge_rate(self, bitcoin_rate: dict):
        bitcoin_rate["data"]["rateUsd"] = "1e40"
        respx.get(f"{API_BASE}/rates/bitcoin").mock(return_value=Response(200, json=bitcoin_rate))

        result = await get_rates("bitcoin")

        assert not result.is_error
        assert result.text.endswith(
            "USD Rate: $10,000,000,000,000,000,000,000,000,000,000,000,000,000"
        )

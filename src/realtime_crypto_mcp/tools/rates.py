"""Tool for fetching currency rates."""

from realtime_crypto_mcp.core.constants import normalize_id, rate_path
from realtime_crypto_mcp.core.container import get_coincap_client
from realtime_crypto_mcp.core.logging import get_logger
from realtime_crypto_mcp.models.schemas import RateEnvelope, ToolResult
from realtime_crypto_mcp.utils.formatters import format_rate_details

logger = get_logger(__name__)


async def get_rates(currency: str) -> ToolResult:
    """
    Get the USD rate of a crypto or fiat currency from CoinCap.

    Args:
        currency: Currency id, case-insensitive (e.g. "bitcoin", "euro")

    Returns:
        ToolResult with the formatted rate, a plain "Failed to retrieve"
        message when CoinCap has nothing, or an error result

    Example:
        >>> result = await get_rates("Bitcoin")
        >>> print(result.text)
        Current rate for bitcoin:
        <BLANKLINE>
        Symbol: BTC $
        Type: crypto
        USD Rate: $67,123.46
    """
    try:
        currency_id = normalize_id(currency)
        logger.info("fetching_rate", currency=currency_id)

        client = await get_coincap_client()
        outcome = await client.fetch_json(rate_path(currency_id))
        payload = outcome.value

        envelope = RateEnvelope.model_validate(payload) if isinstance(payload, dict) else None
        if envelope is None or envelope.data is None:
            return ToolResult.text_result(f"Failed to retrieve rates for currency: {currency_id}")

        record = envelope.data
        formatted = format_rate_details(record)
        return ToolResult.text_result(
            f"Current rate for {record.id or currency_id}:\n\n{formatted}"
        )

    except Exception as e:
        logger.exception("rate_lookup_failed", currency=currency)
        return ToolResult.text_result(f"Error: {e}", is_error=True)

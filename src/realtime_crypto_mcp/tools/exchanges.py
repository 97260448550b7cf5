"""Tool for looking up exchange details."""

from realtime_crypto_mcp.core.constants import exchange_path, normalize_id
from realtime_crypto_mcp.core.container import get_coincap_client
from realtime_crypto_mcp.core.logging import get_logger
from realtime_crypto_mcp.models.schemas import ExchangeEnvelope, ToolResult
from realtime_crypto_mcp.utils.formatters import format_exchange_details

logger = get_logger(__name__)


async def get_exchange_details(exchange: str) -> ToolResult:
    """
    Get details about a cryptocurrency exchange from CoinCap.

    Args:
        exchange: Exchange id, case-insensitive (e.g. "binance", "Kraken")

    Returns:
        ToolResult with the formatted details, a plain "Failed to retrieve"
        message when CoinCap has nothing, or an error result if formatting
        the response failed

    Example:
        >>> result = await get_exchange_details("kraken")
        >>> print(result.text.splitlines()[0])
        Exchange details for Kraken:
    """
    try:
        exchange_id = normalize_id(exchange)
        logger.info("fetching_exchange_details", exchange=exchange_id)

        client = await get_coincap_client()
        outcome = await client.fetch_json(exchange_path(exchange_id))
        payload = outcome.value

        envelope = ExchangeEnvelope.model_validate(payload) if isinstance(payload, dict) else None
        if envelope is None or envelope.data is None:
            return ToolResult.text_result(
                f"Failed to retrieve details for exchange: {exchange_id}"
            )

        record = envelope.data
        formatted = format_exchange_details(record)
        return ToolResult.text_result(
            f"Exchange details for {record.name or exchange_id}:\n\n{formatted}"
        )

    except Exception as e:
        logger.exception("exchange_details_failed", exchange=exchange)
        return ToolResult.text_result(f"Error: {e}", is_error=True)

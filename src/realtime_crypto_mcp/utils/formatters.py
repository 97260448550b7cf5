"""Output formatters for CoinCap data."""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from realtime_crypto_mcp.core.constants import UNKNOWN
from realtime_crypto_mcp.models.schemas import ExchangeRecord, RateRecord


def parse_decimal(value: str | None) -> Decimal | None:
    """
    Parse a CoinCap decimal string.

    Returns None for missing, empty or non-finite values so callers can
    render a placeholder instead of NaN.
    """
    if not value:
        return None
    try:
        number = Decimal(value.strip())
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number


def round_half_up(value: Decimal, fraction_digits: int) -> Decimal:
    """
    Round to ``fraction_digits`` places, half away from zero.

    Precision grows with the magnitude of ``value`` so very large amounts
    (e.g. "1e40") round instead of raising InvalidOperation.
    """
    quantum = Decimal(1).scaleb(-fraction_digits)
    with localcontext() as ctx:
        ctx.prec = max(28, value.adjusted() + fraction_digits + 2)
        return value.quantize(quantum, rounding=ROUND_HALF_UP)


def format_number(value: Decimal, max_fraction_digits: int = 3) -> str:
    """
    Format a number with thousands separators, en-US style.

    Rounds half away from zero to at most ``max_fraction_digits`` and drops
    trailing fractional zeros.

    Example:
        >>> format_number(Decimal("67123.456"), 2)
        '67,123.46'
    """
    rounded = round_half_up(value, max_fraction_digits)
    text = f"{rounded:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def format_timestamp(epoch_ms: float | None) -> str:
    """Render epoch milliseconds as a UTC date-time."""
    if not epoch_ms:
        return UNKNOWN
    try:
        moment = datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return UNKNOWN
    return moment.strftime("%Y-%m-%d %H:%M:%S UTC")


def format_exchange_details(data: ExchangeRecord) -> str:
    """
    Format exchange details for text display.

    Args:
        data: Exchange record to format

    Returns:
        Seven lines; missing fields read "Unknown"
    """
    volume = parse_decimal(data.volume_usd)
    percent = parse_decimal(data.percent_total_volume)

    volume_text = f"${format_number(volume)}" if volume is not None else UNKNOWN
    percent_text = (
        f"{round_half_up(percent, 2):f}%"
        if percent is not None
        else UNKNOWN
    )

    return "\n".join([
        f"Name: {data.name or UNKNOWN}",
        f"Rank: {data.rank or UNKNOWN}",
        f"Volume (USD): {volume_text}",
        f"% of Total Volume: {percent_text}",
        f"Trading Pairs: {data.trading_pairs or UNKNOWN}",
        f"Website: {data.exchange_url or UNKNOWN}",
        f"Last Updated: {format_timestamp(data.updated)}",
    ])


def format_rate_details(data: RateRecord) -> str:
    """Format a currency rate for text display."""
    rate = parse_decimal(data.rate_usd)
    rate_text = f"${format_number(rate, max_fraction_digits=2)}" if rate is not None else UNKNOWN

    return "\n".join([
        f"Symbol: {data.symbol or UNKNOWN} {data.currency_symbol or ''}",
        f"Type: {data.type or UNKNOWN}",
        f"USD Rate: {rate_text}",
    ])

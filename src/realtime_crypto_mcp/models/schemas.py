"""Pydantic models for CoinCap data and tool results."""

from typing import Literal

from mcp.types import TextContent
from pydantic import BaseModel, ConfigDict, Field


class CoinCapModel(BaseModel):
    """Base for upstream records: camelCase aliases, immutable, lenient."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class ExchangeRecord(CoinCapModel):
    """Single exchange as returned by ``/exchanges/{id}``."""

    exchange_id: str | None = Field(None, alias="exchangeId", description="Exchange id")
    name: str | None = Field(None, description="Display name")
    rank: str | None = Field(None, description="Rank by volume")
    percent_total_volume: str | None = Field(
        None, alias="percentTotalVolume", description="Share of total volume (decimal string)"
    )
    volume_usd: str | None = Field(None, alias="volumeUsd", description="24h volume in USD")
    trading_pairs: str | None = Field(None, alias="tradingPairs", description="Number of pairs")
    socket: bool | None = Field(None, description="Websocket feed available")
    exchange_url: str | None = Field(None, alias="exchangeUrl", description="Website")
    updated: float | None = Field(None, description="Last update (epoch milliseconds)")


class RateRecord(CoinCapModel):
    """Single currency rate as returned by ``/rates/{id}``."""

    id: str | None = Field(None, description="Currency id (e.g. bitcoin)")
    symbol: str | None = Field(None, description="Ticker symbol (e.g. BTC)")
    currency_symbol: str | None = Field(None, alias="currencySymbol", description="Sign (e.g. $)")
    type: str | None = Field(None, description="crypto or fiat")
    rate_usd: str | None = Field(None, alias="rateUsd", description="Rate in USD (decimal string)")


class ExchangeEnvelope(CoinCapModel):
    """CoinCap response wrapper for an exchange."""

    data: ExchangeRecord | None = None
    timestamp: int | None = None


class RateEnvelope(CoinCapModel):
    """CoinCap response wrapper for a rate."""

    data: RateRecord | None = None
    timestamp: int | None = None


class TextContentItem(BaseModel):
    """A text block of a tool result."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Result handed back to the MCP host for one tool invocation."""

    model_config = ConfigDict(frozen=True)

    content: list[TextContentItem] = Field(..., min_length=1)
    is_error: bool = False

    @classmethod
    def text_result(cls, text: str, is_error: bool = False) -> "ToolResult":
        """Build a result holding a single text item."""
        return cls(content=[TextContentItem(text=text)], is_error=is_error)

    @property
    def text(self) -> str:
        """All text items joined with newlines."""
        return "\n".join(item.text for item in self.content)

    def to_text_content(self) -> list[TextContent]:
        """Convert to MCP protocol content blocks."""
        return [TextContent(type="text", text=item.text) for item in self.content]

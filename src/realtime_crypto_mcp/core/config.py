"""Configuration management using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from realtime_crypto_mcp.core.constants import COINCAP_API_BASE, USER_AGENT


class Settings(BaseSettings):
    """Application settings loaded from environment and an optional .env file."""

    model_config = SettingsConfigDict(
        env_prefix="CRYPTO_MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # CoinCap API settings
    api_base_url: str = Field(default=COINCAP_API_BASE, description="CoinCap API base URL")
    user_agent: str = Field(default=USER_AGENT, description="User-Agent sent upstream")
    timeout: float = Field(default=10.0, description="Per-request timeout (seconds)")

    # Rate limit handling
    retry_enabled: bool = Field(default=True, description="Retry requests answered with HTTP 429")
    max_retries: int = Field(default=3, ge=0, description="Maximum retries after a 429")
    retry_delay: float = Field(
        default=1.0, ge=0, description="Base retry delay (seconds), multiplied by attempt number"
    )
    request_deadline: float | None = Field(
        default=30.0,
        description="Overall deadline for a fetch including retries (seconds, None disables)",
    )

    # General settings
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get settings singleton instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None

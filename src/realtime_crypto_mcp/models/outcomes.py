"""Tagged result of a CoinCap fetch."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from realtime_crypto_mcp.models.enums import FetchStatus


class FetchOutcome(BaseModel):
    """
    Result of ``CoinCapClient.fetch_json``.

    Failures are reported by value, never raised, so callers can log the
    precise cause and still collapse every failure into one message for the
    end user via ``value``.
    """

    model_config = ConfigDict(frozen=True)

    status: FetchStatus
    url: str
    attempts: int = Field(default=1, description="Number of requests sent")
    data: Any = Field(default=None, description="Parsed JSON body on success")
    status_code: int | None = Field(default=None, description="HTTP status of the last response")
    error: str | None = Field(default=None, description="Transport error detail")

    @classmethod
    def success(cls, url: str, data: Any, attempts: int = 1) -> "FetchOutcome":
        return cls(
            status=FetchStatus.SUCCESS,
            url=url,
            data=data,
            attempts=attempts,
            status_code=200,
        )

    @classmethod
    def rate_limited(cls, url: str, attempts: int) -> "FetchOutcome":
        return cls(status=FetchStatus.RATE_LIMITED, url=url, attempts=attempts, status_code=429)

    @classmethod
    def http_error(cls, url: str, status_code: int, attempts: int = 1) -> "FetchOutcome":
        return cls(
            status=FetchStatus.HTTP_ERROR,
            url=url,
            status_code=status_code,
            attempts=attempts,
        )

    @classmethod
    def transport_error(cls, url: str, error: str, attempts: int = 1) -> "FetchOutcome":
        return cls(status=FetchStatus.TRANSPORT_ERROR, url=url, error=error, attempts=attempts)

    @classmethod
    def deadline_exceeded(cls, url: str, deadline: float) -> "FetchOutcome":
        return cls(
            status=FetchStatus.DEADLINE_EXCEEDED,
            url=url,
            error=f"Deadline of {deadline}s exceeded",
        )

    @property
    def ok(self) -> bool:
        return self.status.is_success

    @property
    def value(self) -> Any:
        """Parsed body, or None when the upstream was unavailable."""
        return self.data if self.ok else None

    def describe(self) -> str:
        """Short human readable description of the outcome."""
        if self.status is FetchStatus.HTTP_ERROR:
            return f"HTTP error! status: {self.status_code}"
        if self.status is FetchStatus.RATE_LIMITED:
            return f"Rate limit exceeded after {self.attempts} attempts"
        if self.error:
            return self.error
        return self.status.value

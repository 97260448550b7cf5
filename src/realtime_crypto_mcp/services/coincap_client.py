"""CoinCap API client with rate limit retries."""

import asyncio
from types import TracebackType

import httpx
from typing_extensions import Self

from realtime_crypto_mcp.core.config import Settings
from realtime_crypto_mcp.core.exceptions import CoinCapConnectionError
from realtime_crypto_mcp.core.logging import get_logger
from realtime_crypto_mcp.models.outcomes import FetchOutcome

logger = get_logger(__name__)

_UNSET = object()


class CoinCapClient:
    """
    Async HTTP client for the CoinCap REST API.

    Features:
    - One fetch policy (headers, retries) shared by every tool
    - Linear backoff on HTTP 429: retry_delay * attempt
    - Overall deadline around the request and its retries
    - Failures returned as FetchOutcome values, never raised
    """

    def __init__(self, settings: Settings) -> None:
        """
        Initialize CoinCap client.

        Args:
            settings: Application settings
        """
        self.settings = settings
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> Self:
        """Enter async context manager."""
        self._client = httpx.AsyncClient(
            base_url=self.settings.api_base_url,
            timeout=httpx.Timeout(self.settings.timeout),
            follow_redirects=True,
            headers={
                "User-Agent": self.settings.user_agent,
                "Accept": "application/json",
            },
        )
        logger.debug("client_initialized", base_url=self.settings.api_base_url)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context manager."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.debug("client_closed")

    async def fetch_json(
        self,
        path: str,
        *,
        retry: bool | None = None,
        deadline: float | None | object = _UNSET,
    ) -> FetchOutcome:
        """
        GET ``path`` and parse the JSON body.

        Args:
            path: Path relative to the API base (e.g. "/rates/bitcoin")
            retry: Retry on HTTP 429; defaults to settings.retry_enabled
            deadline: Seconds allowed for the whole sequence including
                backoff; defaults to settings.request_deadline, None disables

        Returns:
            FetchOutcome describing success or the precise failure

        Raises:
            CoinCapConnectionError: If the client is used outside ``async with``
        """
        if self._client is None:
            raise CoinCapConnectionError("Client not initialized. Use 'async with' context.")

        if retry is None:
            retry = self.settings.retry_enabled
        if deadline is _UNSET:
            deadline = self.settings.request_deadline

        url = str(self._client.build_request("GET", path).url)

        try:
            outcome = await asyncio.wait_for(self._fetch_with_retry(path, url, retry), deadline)
        except asyncio.TimeoutError:
            outcome = FetchOutcome.deadline_exceeded(url, deadline)

        if not outcome.ok:
            logger.warning(
                "fetch_failed",
                url=url,
                status=outcome.status.value,
                status_code=outcome.status_code,
                attempts=outcome.attempts,
                error=outcome.describe(),
            )
        return outcome

    async def _fetch_with_retry(self, path: str, url: str, retry: bool) -> FetchOutcome:
        """Request loop: only 429 responses are retried."""
        if self._client is None:
            raise CoinCapConnectionError("Client not initialized. Use 'async with' context.")
        max_retries = self.settings.max_retries if retry else 0
        retries = 0

        while True:
            attempt = retries + 1
            logger.debug("fetching_url", url=url, attempt=attempt)

            try:
                response = await self._client.get(path)
            except httpx.TimeoutException as e:
                return FetchOutcome.transport_error(
                    url, f"Request timed out: {e!r}", attempts=attempt
                )
            except httpx.HTTPError as e:
                return FetchOutcome.transport_error(url, f"{type(e).__name__}: {e}", attempts=attempt)

            if response.status_code == 429:
                if retries >= max_retries:
                    return FetchOutcome.rate_limited(url, attempts=attempt)

                retries += 1
                delay = self.settings.retry_delay * retries
                logger.info(
                    "rate_limited",
                    url=url,
                    retry=retries,
                    max_retries=max_retries,
                    delay=delay,
                )
                await asyncio.sleep(delay)
                continue

            if not response.is_success:
                return FetchOutcome.http_error(url, response.status_code, attempts=attempt)

            try:
                data = response.json()
            except ValueError as e:
                return FetchOutcome.transport_error(
                    url, f"Malformed JSON body: {e}", attempts=attempt
                )

            return FetchOutcome.success(url, data, attempts=attempt)

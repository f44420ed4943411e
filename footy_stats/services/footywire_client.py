"""HTTP client for FootyWire round pages and AFL Tables season pages."""

import httpx
from loguru import logger

from footy_stats.core.config import HTTP_TIMEOUT
from footy_stats.core.exceptions import FetchFailure

FOOTYWIRE_BASE_URL = "https://www.footywire.com"
AFL_TABLES_BASE_URL = "https://afltables.com"


def supercoach_round_url(year: int, round_number: int) -> str:
    """URL of FootyWire's SuperCoach scores page for one round."""
    return (
        f"{FOOTYWIRE_BASE_URL}/afl/footy/supercoach_round"
        + f"?year={year}&round={round_number}&p=&s=T"
    )


def afl_tables_url(year: int) -> str:
    """URL of AFL Tables' player statistics page for a season."""
    return f"{AFL_TABLES_BASE_URL}/afl/stats/{year}.html"


class FootyWireClient:
    """Async fetcher for results pages.

    Use as an async context manager; ``fetch_round_page`` matches the
    ``fetch_page(year, round)`` signature the season pipeline expects:

        async with FootyWireClient() as client:
            scores = await fetch_season_scores(2024, 24, client.fetch_round_page)
    """

    def __init__(
        self,
        *,
        timeout: float = HTTP_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "FootyWireClient":
        self._client = httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport, follow_redirects=True
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("Client not initialized. Use 'async with'.")
        return self._client

    async def fetch_html(self, url: str) -> str:
        """Return the body of ``url``; raise FetchFailure on non-2xx or network errors."""
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.debug(f"HTTP error {status} for {url}")
            raise FetchFailure(
                message=f"HTTP error! status: {status}",
                details={"url": url, "status": status},
            ) from e
        except httpx.RequestError as e:
            logger.debug(f"Request error for {url}: {e!s}")
            raise FetchFailure(
                message=f"Request failed: {e!s}",
                details={"url": url},
            ) from e
        return response.text

    async def fetch_round_page(self, year: int, round_number: int) -> str:
        """Fetch the SuperCoach scores page for one round."""
        return await self.fetch_html(supercoach_round_url(year, round_number))

    async def fetch_afl_tables_page(self, year: int) -> str:
        """Fetch the AFL Tables player statistics page for a season."""
        return await self.fetch_html(afl_tables_url(year))

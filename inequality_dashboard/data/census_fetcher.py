"""Census ACS API data fetcher."""

import asyncio
import logging

import httpx

from inequality_dashboard.config import CENSUS_VARIABLES, Settings
from inequality_dashboard.data.fred_fetcher import redact_url
from inequality_dashboard.errors import UpstreamAPIError


logger = logging.getLogger(__name__)


class CensusFetcher:
    """Fetches state-level ACS 1-year estimates."""

    SOURCE = "Census"
    DATASET = "acs/acs1"

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

        if not self.settings.has_census_key():
            logger.warning("CENSUS_API_KEY not set")

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.settings.http_timeout, transport=self._transport
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "CensusFetcher":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def fetch_state_rows(self, year: str) -> tuple[list[str], list[list[str]]]:
        """
        Fetch one year of state rows.

        Returns:
            (header, rows) where header names each column position
        """
        params = {
            "get": ",".join(["NAME", *CENSUS_VARIABLES]),
            "for": "state:*",
            "key": self.settings.census_api_key,
        }
        url = f"{self.settings.census_base_url}/{year}/{self.DATASET}"

        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            safe_url = redact_url(e.request.url, "key")
            logger.error(
                f"Error fetching data for year {year}: {e.response.status_code} "
                f"{e.response.text[:500]} ({safe_url})"
            )
            raise UpstreamAPIError(
                self.SOURCE,
                f"{year} returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
                url=safe_url,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Request for year {year} failed: {type(e).__name__}: {e}")
            raise UpstreamAPIError(self.SOURCE, f"{year} request failed: {e}") from e

        table = response.json()
        if not isinstance(table, list) or not table:
            raise UpstreamAPIError(self.SOURCE, f"{year} returned no table")

        header, *rows = table
        return header, rows

    async def fetch_years(
        self, years: list[str]
    ) -> dict[str, tuple[list[str], list[list[str]]] | BaseException]:
        """
        Fetch several years concurrently, isolating failures.

        Returns:
            Mapping of year to (header, rows), or to the exception that year raised
        """
        results = await asyncio.gather(
            *[self.fetch_state_rows(year) for year in years], return_exceptions=True
        )
        return dict(zip(years, results))

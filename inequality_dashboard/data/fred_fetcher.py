"""FRED API data fetcher."""

import asyncio
import logging
from datetime import date

import httpx

from inequality_dashboard.config import Settings
from inequality_dashboard.errors import UpstreamAPIError
from inequality_dashboard.models import SeriesObservation


logger = logging.getLogger(__name__)


def redact_url(url: httpx.URL, *secret_params: str) -> str:
    """Render a request URL with API keys removed, for logs and errors."""
    for param in secret_params:
        url = url.copy_remove_param(param)
    return str(url)


class FredFetcher:
    """Fetches series observations from the FRED API."""

    SOURCE = "FRED"

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

        if not self.settings.has_fred_key():
            logger.warning("FRED_API_KEY not set")

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

    async def __aenter__(self) -> "FredFetcher":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def fetch_raw(self, series_id: str, observation_start: date | None = None) -> dict:
        """
        Fetch the observations payload for a series, unmodified.

        Args:
            series_id: FRED series ID
            observation_start: Only return observations on or after this date

        Returns:
            Decoded JSON body of the observations endpoint
        """
        params = {
            "series_id": series_id,
            "api_key": self.settings.fred_api_key,
            "file_type": "json",
        }
        if observation_start:
            params["observation_start"] = observation_start.isoformat()

        url = f"{self.settings.fred_base_url}/series/observations"
        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            safe_url = redact_url(e.request.url, "api_key")
            logger.error(
                f"HTTP error fetching {series_id}: {e.response.status_code} "
                f"{e.response.text[:500]} ({safe_url})"
            )
            raise UpstreamAPIError(
                self.SOURCE,
                f"{series_id} returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
                url=safe_url,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Request for {series_id} failed: {type(e).__name__}: {e}")
            raise UpstreamAPIError(self.SOURCE, f"{series_id} request failed: {e}") from e

        return response.json()

    async def fetch_observations(
        self, series_id: str, observation_start: date | None = None
    ) -> list[SeriesObservation]:
        """Fetch a series and parse its observations, missing values included."""
        data = await self.fetch_raw(series_id, observation_start)
        observations = [SeriesObservation.from_api(raw) for raw in data.get("observations", [])]
        logger.info(f"Fetched {len(observations)} observations for {series_id}")
        return observations

    async def fetch_many(
        self, series_ids: list[str], observation_start: date | None = None
    ) -> dict[str, list[SeriesObservation]]:
        """
        Fetch several series concurrently.

        Every request settles before the first failure is re-raised; there
        is no partial result.
        """
        results = await asyncio.gather(
            *[self.fetch_observations(sid, observation_start) for sid in series_ids],
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return dict(zip(series_ids, results))

"""
Lambda handler: GET /census-data

National median income, aggregate income and Gini index per year, built
from state-level ACS estimates.
"""

import asyncio
import logging

import httpx

from inequality_dashboard.api.responses import json_response, query_params
from inequality_dashboard.config import DEFAULT_CENSUS_YEARS, Settings
from inequality_dashboard.data import CensusFetcher
from inequality_dashboard.errors import UpstreamAPIError
from inequality_dashboard.metrics import aggregate_states
from inequality_dashboard.models import CensusYearResult


logger = logging.getLogger(__name__)


def parse_years(value: str | None) -> list[str]:
    """Split a comma-separated year list, keeping order and dropping blanks and repeats."""
    if not value:
        return list(DEFAULT_CENSUS_YEARS)

    years: list[str] = []
    for part in value.split(","):
        year = part.strip()
        if year and year not in years:
            years.append(year)
    return years or list(DEFAULT_CENSUS_YEARS)


class CensusDataHandler:
    """Aggregates each requested year independently; a failed year is dropped."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.transport = transport

    def __call__(self, event: dict | None, context: object = None) -> dict:
        try:
            years = parse_years(query_params(event).get("years"))
            logger.info(f"Starting to fetch data for years: {years}")

            results = asyncio.run(self.collect(years))
            logger.info(f"Returning {len(results)} of {len(years)} years")

            return json_response(200, [result.to_dict() for result in results])

        except Exception as e:
            logger.error(f"Error fetching Census data: {e}", exc_info=True)
            return json_response(
                500, {"error": "Failed to fetch Census data", "details": str(e)}
            )

    async def collect(self, years: list[str]) -> list[CensusYearResult]:
        """Fetch and aggregate every year, skipping the ones that fail."""
        async with CensusFetcher(self.settings, transport=self.transport) as fetcher:
            fetched = await fetcher.fetch_years(years)

        results = []
        for year in years:
            outcome = fetched[year]
            if isinstance(outcome, UpstreamAPIError):
                logger.error(
                    f"Dropping {year}: {outcome.message} "
                    f"(status={outcome.status_code}, url={outcome.url})"
                )
                continue
            if isinstance(outcome, BaseException):
                logger.error(f"Dropping {year}: {type(outcome).__name__}: {outcome}")
                continue

            header, rows = outcome
            try:
                result = aggregate_states(year, header, rows)
            except (KeyError, ValueError, TypeError) as e:
                logger.error(f"Dropping {year}: malformed table: {e}")
                continue

            logger.info(f"Processed result for {year}: {result}")
            results.append(result)

        return results


handler = CensusDataHandler()

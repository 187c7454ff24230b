"""
Lambda handler: GET /earnings-gap

Yearly gap between mean weekly earnings (average hourly earnings x average
weekly hours) and median weekly earnings.

Query parameters:
    startDate: ISO date, observations before it are ignored (default 2010-01-01)
    format: combined | weekly | annual (default combined)
"""

import asyncio
import logging
from datetime import date, datetime, timezone

import httpx

from inequality_dashboard.api.responses import json_response, query_params
from inequality_dashboard.config import DEFAULT_START_DATE, Settings
from inequality_dashboard.data import FredFetcher
from inequality_dashboard.metrics.earnings_gap import compute_earnings_gap, parse_format, project
from inequality_dashboard.models import EarningsGapRecord


logger = logging.getLogger(__name__)

DESCRIPTION = (
    "Mean weekly earnings (average hourly earnings x average weekly hours) "
    "compared with median weekly earnings. Annual figures are weekly x 52."
)


def parse_start_date(value: str | None) -> date:
    try:
        return date.fromisoformat((value or DEFAULT_START_DATE).strip())
    except ValueError:
        raise ValueError(f"startDate must be an ISO date (YYYY-MM-DD), got {value!r}")


class EarningsGapHandler:
    """All-or-nothing: any upstream failure fails the request."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.transport = transport

    @property
    def series(self) -> dict[str, str]:
        return {
            "meanHourlyEarnings": self.settings.hourly_earnings_series_id,
            "averageWeeklyHours": self.settings.weekly_hours_series_id,
            "medianWeeklyEarnings": self.settings.median_weekly_series_id,
        }

    def __call__(self, event: dict | None, context: object = None) -> dict:
        params = query_params(event)
        try:
            start_date = parse_start_date(params.get("startDate"))
            fmt = parse_format(params.get("format"))
        except ValueError as e:
            logger.warning(f"Rejected request: {e}")
            return json_response(400, {"error": "Invalid request", "message": str(e)})

        try:
            records = asyncio.run(self.compute(start_date))
        except Exception as e:
            logger.error(f"Error computing earnings gap: {e}", exc_info=True)
            return json_response(
                500,
                {
                    "error": "Failed to fetch earnings data",
                    "message": "One or more FRED series could not be retrieved",
                },
            )

        return json_response(
            200,
            {
                "metadata": {
                    "series": self.series,
                    "description": DESCRIPTION,
                    "format": fmt,
                    "startDate": start_date.isoformat(),
                    "generatedAt": datetime.now(timezone.utc).isoformat(),
                },
                "data": project(records, fmt),
            },
        )

    async def compute(self, start_date: date) -> list[EarningsGapRecord]:
        hourly_id = self.settings.hourly_earnings_series_id
        hours_id = self.settings.weekly_hours_series_id
        median_id = self.settings.median_weekly_series_id

        async with FredFetcher(self.settings, transport=self.transport) as fetcher:
            fetched = await fetcher.fetch_many([hourly_id, hours_id, median_id], start_date)

        return compute_earnings_gap(
            fetched[hourly_id], fetched[hours_id], fetched[median_id], start_date
        )


handler = EarningsGapHandler()

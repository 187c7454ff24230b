"""
Lambda handler: GET /wealth-data

Passes the FRED top-1% wealth share observations through unchanged.
"""

import asyncio
import logging

import httpx

from inequality_dashboard.api.responses import json_response
from inequality_dashboard.config import WEALTH_CACHE_SECONDS, Settings
from inequality_dashboard.data import FredFetcher


logger = logging.getLogger(__name__)


class WealthDataHandler:
    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.transport = transport

    def __call__(self, event: dict | None, context: object = None) -> dict:
        try:
            data = asyncio.run(self.fetch())
            return json_response(
                200, data, headers={"Cache-Control": f"max-age={WEALTH_CACHE_SECONDS}"}
            )
        except Exception as e:
            logger.error(f"Error fetching wealth data: {e}", exc_info=True)
            return json_response(500, {"error": "Failed to fetch data"})

    async def fetch(self) -> dict:
        async with FredFetcher(self.settings, transport=self.transport) as fetcher:
            return await fetcher.fetch_raw(self.settings.wealth_series_id)


handler = WealthDataHandler()

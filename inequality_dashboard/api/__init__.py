"""Lambda handlers for the dashboard endpoints."""

import logging
import os

from inequality_dashboard.api.census_handler import CensusDataHandler
from inequality_dashboard.api.earnings_gap_handler import EarningsGapHandler
from inequality_dashboard.api.wealth_handler import WealthDataHandler
from inequality_dashboard.config import Settings

logging.getLogger().setLevel(os.environ.get("LOG_LEVEL", "INFO"))

HANDLERS = {
    "census-data": CensusDataHandler,
    "wealth-data": WealthDataHandler,
    "earnings-gap": EarningsGapHandler,
}


def build_routes(settings: Settings | None = None, transport=None) -> dict:
    """Instantiate every handler with one shared configuration."""
    settings = settings or Settings()
    return {route: cls(settings, transport=transport) for route, cls in HANDLERS.items()}


__all__ = [
    "CensusDataHandler",
    "EarningsGapHandler",
    "WealthDataHandler",
    "HANDLERS",
    "build_routes",
]

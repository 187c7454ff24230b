"""Application configuration."""

from inequality_dashboard.config.settings import (
    CENSUS_VARIABLES,
    DEFAULT_CENSUS_YEARS,
    DEFAULT_START_DATE,
    EXCLUDED_REGIONS,
    FRED_SERIES,
    WEALTH_CACHE_SECONDS,
    WEEKS_PER_YEAR,
    Settings,
)

__all__ = [
    "CENSUS_VARIABLES",
    "DEFAULT_CENSUS_YEARS",
    "DEFAULT_START_DATE",
    "EXCLUDED_REGIONS",
    "FRED_SERIES",
    "WEALTH_CACHE_SECONDS",
    "WEEKS_PER_YEAR",
    "Settings",
]

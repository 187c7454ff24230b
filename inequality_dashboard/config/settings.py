"""Configuration settings for the inequality dashboard."""

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv


load_dotenv()


# ACS 1-year estimates requested per state
CENSUS_VARIABLES: dict[str, str] = {
    "B19013_001E": "Median Household Income",
    "B19025_001E": "Aggregate Household Income",
    "B19083_001E": "Gini Index of Income Inequality",
}

# Regions reported by the ACS that are not states
EXCLUDED_REGIONS: tuple[str, ...] = ("Puerto Rico", "District of Columbia")

# 2020 is absent: the ACS 1-year release was cancelled that year
DEFAULT_CENSUS_YEARS: list[str] = ["2019", "2021", "2022"]

DEFAULT_START_DATE = "2010-01-01"

WEEKS_PER_YEAR = 52

# Wealth share is published quarterly; 12 hours of client caching is plenty
WEALTH_CACHE_SECONDS = 43200

# FRED series definitions
FRED_SERIES: dict[str, str] = {
    "WFRBST01134": "Share of Total Net Worth Held by the Top 1%",
    "CES0500000003": "Average Hourly Earnings of All Employees, Total Private",
    "AWHAETP": "Average Weekly Hours of All Employees, Total Private",
    "LES1252881600Q": "Median Usual Weekly Real Earnings",
}


@dataclass
class Settings:
    """Application settings."""

    census_api_key: str = field(default_factory=lambda: os.getenv("CENSUS_API_KEY", ""))
    fred_api_key: str = field(default_factory=lambda: os.getenv("FRED_API_KEY", ""))
    census_base_url: str = field(
        default_factory=lambda: os.getenv("CENSUS_BASE_URL", "https://api.census.gov/data")
    )
    fred_base_url: str = field(
        default_factory=lambda: os.getenv("FRED_BASE_URL", "https://api.stlouisfed.org/fred")
    )
    http_timeout: float = field(
        default_factory=lambda: float(os.getenv("HTTP_TIMEOUT", "30"))
    )
    api_url: str = field(
        default_factory=lambda: os.getenv("API_URL", "http://localhost:8000")
    )
    wealth_series_id: str = field(
        default_factory=lambda: os.getenv("WEALTH_SERIES_ID", "WFRBST01134")
    )
    hourly_earnings_series_id: str = field(
        default_factory=lambda: os.getenv("HOURLY_EARNINGS_SERIES_ID", "CES0500000003")
    )
    weekly_hours_series_id: str = field(
        default_factory=lambda: os.getenv("WEEKLY_HOURS_SERIES_ID", "AWHAETP")
    )
    median_weekly_series_id: str = field(
        default_factory=lambda: os.getenv("MEDIAN_WEEKLY_SERIES_ID", "LES1252881600Q")
    )

    def has_census_key(self) -> bool:
        """Check if a Census API key is configured."""
        return bool(self.census_api_key)

    def has_fred_key(self) -> bool:
        """Check if a FRED API key is configured."""
        return bool(self.fred_api_key)

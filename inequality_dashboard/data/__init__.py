"""Upstream data fetching."""

from .fred_fetcher import FredFetcher
from .census_fetcher import CensusFetcher

__all__ = ["FredFetcher", "CensusFetcher"]

"""Record types shared by fetchers, calculators and handlers."""

from inequality_dashboard.models.records import (
    MISSING_VALUE,
    CensusYearResult,
    EarningsGapRecord,
    SeriesObservation,
    YearlyRecord,
)

__all__ = [
    "MISSING_VALUE",
    "CensusYearResult",
    "EarningsGapRecord",
    "SeriesObservation",
    "YearlyRecord",
]

"""Data models for upstream observations and derived yearly records."""

from dataclasses import dataclass


MISSING_VALUE = "."


@dataclass(frozen=True)
class SeriesObservation:
    """Single observation from a FRED series, as received."""

    date: str  # YYYY-MM-DD
    value: str

    @property
    def is_missing(self) -> bool:
        return self.value.strip() == MISSING_VALUE

    @property
    def year(self) -> int:
        return int(self.date[:4])

    @classmethod
    def from_api(cls, raw: dict) -> "SeriesObservation":
        return cls(date=str(raw.get("date", "")), value=str(raw.get("value", MISSING_VALUE)))


@dataclass
class YearlyRecord:
    """One value reduced to a calendar year."""

    year: int
    value: float


@dataclass
class CensusYearResult:
    """National metrics aggregated from one year of state rows."""

    year: str
    median_income: int | None
    aggregate_income: int
    gini_index: float | None
    skipped_values: int = 0

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "medianIncome": self.median_income,
            "aggregateIncome": self.aggregate_income,
            "giniIndex": self.gini_index,
            "skippedValues": self.skipped_values,
        }


@dataclass
class EarningsGapRecord:
    """Mean vs. median earnings for a single year."""

    year: int
    mean_weekly: float
    median_weekly: float
    weekly_gap: float
    weekly_gap_percent: float
    mean_annual: float
    median_annual: float
    annual_gap: float
    annual_gap_percent: float

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "meanWeekly": self.mean_weekly,
            "medianWeekly": self.median_weekly,
            "weeklyGap": self.weekly_gap,
            "weeklyGapPercent": self.weekly_gap_percent,
            "meanAnnual": self.mean_annual,
            "medianAnnual": self.median_annual,
            "annualGap": self.annual_gap,
            "annualGapPercent": self.annual_gap_percent,
        }

    def weekly_view(self) -> dict:
        return {
            "year": self.year,
            "mean": self.mean_weekly,
            "median": self.median_weekly,
            "gap": self.weekly_gap,
            "gapPercent": self.weekly_gap_percent,
        }

    def annual_view(self) -> dict:
        return {
            "year": self.year,
            "mean": self.mean_annual,
            "median": self.median_annual,
            "gap": self.annual_gap,
            "gapPercent": self.annual_gap_percent,
        }

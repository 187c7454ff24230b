"""Mean vs. median earnings gap from three FRED series."""

import logging
import math
from datetime import date

import pandas as pd

from inequality_dashboard.config import WEEKS_PER_YEAR
from inequality_dashboard.models import EarningsGapRecord, SeriesObservation, YearlyRecord


logger = logging.getLogger(__name__)

FORMATS = ("combined", "weekly", "annual")


def observations_frame(
    observations: list[SeriesObservation], start_date: date | None = None
) -> pd.DataFrame:
    """
    Convert observations to a date-sorted frame of floats.

    Missing-sentinel and unparseable values are dropped, as is anything
    dated before start_date.
    """
    present = [obs for obs in observations if not obs.is_missing]
    if not present:
        return pd.DataFrame(columns=["date", "value"])

    df = pd.DataFrame(
        {"date": [obs.date for obs in present], "value": [obs.value for obs in present]}
    )
    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    df["value"] = pd.to_numeric(df["value"], errors="coerce")
    df = df.dropna()

    if start_date is not None:
        df = df[df["date"] >= pd.Timestamp(start_date)]

    # Stable sort: same-date duplicates keep their upstream order
    return df.sort_values("date", kind="mergesort").reset_index(drop=True)


def latest_per_year(df: pd.DataFrame) -> list[YearlyRecord]:
    """Keep the latest observation of each calendar year."""
    if df.empty:
        return []
    by_year = df.groupby(df["date"].dt.year)["value"].last()
    return [YearlyRecord(year=int(year), value=float(value)) for year, value in by_year.items()]


def mean_weekly_by_year(hourly: pd.DataFrame, hours: pd.DataFrame) -> list[YearlyRecord]:
    """Weekly pay (hourly rate x weekly hours) on matching dates, reduced by year."""
    if hourly.empty or hours.empty:
        return []

    hours_by_date = hours.drop_duplicates("date", keep="last").set_index("date")["value"]
    matched = hourly.assign(hours=hourly["date"].map(hours_by_date)).dropna()
    matched = matched.assign(value=matched["value"] * matched["hours"])
    return latest_per_year(matched[["date", "value"]])


def gap_record(year: int, mean_weekly: float, median_weekly: float) -> EarningsGapRecord:
    """Build one year's record; money to 2 decimals, percentages to 1."""
    weekly_gap = mean_weekly - median_weekly
    gap_percent = 100 * weekly_gap / median_weekly if median_weekly else math.nan
    mean_annual = mean_weekly * WEEKS_PER_YEAR
    median_annual = median_weekly * WEEKS_PER_YEAR

    return EarningsGapRecord(
        year=year,
        mean_weekly=round(mean_weekly, 2),
        median_weekly=round(median_weekly, 2),
        weekly_gap=round(weekly_gap, 2),
        weekly_gap_percent=round(gap_percent, 1),
        mean_annual=round(mean_annual, 2),
        median_annual=round(median_annual, 2),
        annual_gap=round(mean_annual - median_annual, 2),
        # A percentage gap does not change when both sides scale by 52
        annual_gap_percent=round(gap_percent, 1),
    )


def compute_earnings_gap(
    hourly: list[SeriesObservation],
    hours: list[SeriesObservation],
    median: list[SeriesObservation],
    start_date: date | None = None,
) -> list[EarningsGapRecord]:
    """
    Compute the yearly mean vs. median earnings gap.

    Args:
        hourly: Mean hourly earnings observations
        hours: Average weekly hours observations
        median: Median weekly earnings observations
        start_date: Ignore observations dated before this

    Returns:
        One record per year that has both a mean and a median figure,
        in ascending year order
    """
    mean_by_year = {
        r.year: r.value
        for r in mean_weekly_by_year(
            observations_frame(hourly, start_date), observations_frame(hours, start_date)
        )
    }
    median_by_year = {
        r.year: r.value for r in latest_per_year(observations_frame(median, start_date))
    }

    records = []
    for year in sorted(set(mean_by_year) | set(median_by_year)):
        if year not in mean_by_year or year not in median_by_year:
            continue
        records.append(gap_record(year, mean_by_year[year], median_by_year[year]))

    logger.info(
        f"Earnings gap: {len(records)} years "
        f"({len(mean_by_year)} with mean, {len(median_by_year)} with median)"
    )
    return records


def parse_format(value: str | None) -> str:
    """Validate the requested output format."""
    fmt = (value or "combined").strip().lower()
    if fmt not in FORMATS:
        raise ValueError(f"format must be one of {', '.join(FORMATS)}, got {value!r}")
    return fmt


def project(records: list[EarningsGapRecord], fmt: str = "combined") -> list[dict]:
    """Shape records for the requested format."""
    if fmt == "weekly":
        return [r.weekly_view() for r in records]
    if fmt == "annual":
        return [r.annual_view() for r in records]
    return [r.to_dict() for r in records]

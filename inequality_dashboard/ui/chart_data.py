"""Shape endpoint payloads into chart-ready data."""

import httpx
import pandas as pd

from inequality_dashboard.config import Settings
from inequality_dashboard.models import SeriesObservation


DISPLAY_MODES = ("weekly", "annual")
DISPLAY_METRICS = ("absolute", "percent")

# Requested by the Census chart; 2020 has no ACS 1-year release
CHART_CENSUS_YEARS = ["2017", "2018", "2019", "2021"]


def fetch_endpoint(
    route: str, params: dict | None = None, settings: Settings | None = None
) -> dict | list:
    """GET one of the API endpoints and decode the JSON body."""
    settings = settings or Settings()
    response = httpx.get(
        f"{settings.api_url.rstrip('/')}/{route}",
        params=params,
        timeout=settings.http_timeout,
    )
    response.raise_for_status()
    return response.json()


def wealth_points(payload: dict) -> pd.DataFrame:
    """Top-1% wealth share by year, skipping missing observations."""
    observations = [SeriesObservation.from_api(raw) for raw in payload.get("observations", [])]
    present = [obs for obs in observations if not obs.is_missing]
    if not present:
        return pd.DataFrame(columns=["year", "value"])

    df = pd.DataFrame(
        {"year": [obs.year for obs in present], "value": [obs.value for obs in present]}
    )
    df["value"] = pd.to_numeric(df["value"], errors="coerce")
    return df.dropna().reset_index(drop=True)


def census_frame(records: list[dict]) -> pd.DataFrame:
    columns = ["year", "medianIncome", "aggregateIncome", "giniIndex"]
    if not records:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(records)[columns]


def gap_chart_rows(data: list[dict], mode: str = "weekly", metric: str = "absolute") -> list[dict]:
    """
    Rows for the earnings-gap chart.

    Args:
        data: Combined-format records from the earnings-gap endpoint
        mode: "weekly" or "annual" figures
        metric: "absolute" for a dollar gap, "percent" for a percentage gap
    """
    prefix = "weekly" if mode == "weekly" else "annual"
    suffix = "Gap" if metric == "absolute" else "GapPercent"
    return [
        {
            "year": item["year"],
            "mean": item[f"mean{prefix.capitalize()}"],
            "median": item[f"median{prefix.capitalize()}"],
            "gap": item[f"{prefix}{suffix}"],
        }
        for item in data
    ]


def format_money(value: float | None) -> str:
    if value is None:
        return "N/A"
    return f"${round(value):,}"


def format_gini(value: float | None) -> str:
    if value is None:
        return "N/A"
    return f"{value:.3f}"


def format_percent(value: float | None) -> str:
    if value is None:
        return "N/A"
    return f"{value:.1f}%"


def format_gap(item: dict, mode: str = "weekly", metric: str = "absolute") -> str:
    """Headline gap for the summary card."""
    prefix = "weekly" if mode == "weekly" else "annual"
    if metric == "percent":
        return format_percent(item[f"{prefix}GapPercent"])
    return format_money(item[f"{prefix}Gap"])


def latest(data: list[dict]) -> dict | None:
    """Most recent year's record."""
    return data[-1] if data else None

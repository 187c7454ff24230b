"""Shared fixtures: explicit settings and a fake upstream for FRED and Census."""

import httpx
import pytest

from inequality_dashboard.config import Settings


CENSUS_HEADER = ["NAME", "B19013_001E", "B19025_001E", "B19083_001E", "state"]


class FakeUpstream:
    """Serves canned FRED series and Census tables through httpx.MockTransport."""

    def __init__(self) -> None:
        self.series: dict[str, list[tuple[str, str]] | int] = {}
        self.census: dict[str, list[list[str]] | int] = {}
        self.requests: list[httpx.Request] = []

    def add_series(self, series_id: str, observations: list[tuple[str, str]] | int) -> None:
        """Register observations, or an HTTP status code to fail with."""
        self.series[series_id] = observations

    def add_census_year(self, year: str, rows: list[list[str]] | int) -> None:
        self.census[year] = rows

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if "series_id" in request.url.params:
            found = self.series.get(request.url.params["series_id"], 400)
            if isinstance(found, int):
                return httpx.Response(found, json={"error_message": "Bad Request"})
            return httpx.Response(
                200,
                json={
                    "units": "lin",
                    "observations": [
                        {"realtime_start": "2024-01-01", "date": d, "value": v}
                        for d, v in found
                    ],
                },
            )

        year = request.url.path.split("/")[2]
        found = self.census.get(year, 404)
        if isinstance(found, int):
            return httpx.Response(found, text="error: unknown/unsupported geography hierarchy")
        return httpx.Response(200, json=[CENSUS_HEADER, *found])

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture
def settings():
    """Settings that never read from the environment."""
    return Settings(
        census_api_key="test-census-key",
        fred_api_key="test-fred-key",
        census_base_url="https://census.test/data",
        fred_base_url="https://fred.test/fred",
        http_timeout=5.0,
        api_url="http://api.test",
        wealth_series_id="WFRBST01134",
        hourly_earnings_series_id="CES0500000003",
        weekly_hours_series_id="AWHAETP",
        median_weekly_series_id="LES1252881600Q",
    )


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def state_rows():
    """Two states plus the two regions that must be excluded."""
    return [
        ["Alabama", "50000", "1000", "0.40", "01"],
        ["Alaska", "70000", "3000", "0.50", "02"],
        ["District of Columbia", "90000", "5000", "0.60", "11"],
        ["Puerto Rico", "20000", "500", "0.55", "72"],
    ]


@pytest.fixture
def earnings_series():
    """Hourly earnings, weekly hours and median weekly earnings for 2019-2020."""
    return {
        "hourly": [("2019-06-01", "19.00"), ("2019-12-01", "19.50"), ("2020-01-01", "20.00")],
        "hours": [("2019-06-01", "34.0"), ("2019-12-01", "34.5"), ("2020-01-01", "35.0")],
        "median": [("2019-10-01", "640"), ("2020-01-01", "650")],
    }

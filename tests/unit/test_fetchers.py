"""Tests for the FRED and Census fetchers against a mocked transport."""

from datetime import date

import httpx
import pytest

from inequality_dashboard.data import CensusFetcher, FredFetcher
from inequality_dashboard.errors import UpstreamAPIError


class TestFredFetcher:

    @pytest.mark.asyncio
    async def test_fetch_raw_sends_series_params(self, settings, upstream):
        upstream.add_series("WFRBST01134", [("2020-01-01", "31.2")])

        async with FredFetcher(settings, transport=upstream.transport) as fetcher:
            data = await fetcher.fetch_raw("WFRBST01134", date(2015, 1, 1))

        assert data["observations"][0]["value"] == "31.2"
        params = upstream.requests[0].url.params
        assert params["series_id"] == "WFRBST01134"
        assert params["api_key"] == "test-fred-key"
        assert params["file_type"] == "json"
        assert params["observation_start"] == "2015-01-01"
        assert upstream.requests[0].url.path == "/fred/series/observations"

    @pytest.mark.asyncio
    async def test_no_start_date_param_when_omitted(self, settings, upstream):
        upstream.add_series("WFRBST01134", [])

        async with FredFetcher(settings, transport=upstream.transport) as fetcher:
            await fetcher.fetch_raw("WFRBST01134")

        assert "observation_start" not in upstream.requests[0].url.params

    @pytest.mark.asyncio
    async def test_fetch_observations_keeps_missing(self, settings, upstream):
        upstream.add_series("AWHAETP", [("2020-01-01", "."), ("2020-02-01", "34.1")])

        async with FredFetcher(settings, transport=upstream.transport) as fetcher:
            observations = await fetcher.fetch_observations("AWHAETP")

        assert [obs.is_missing for obs in observations] == [True, False]

    @pytest.mark.asyncio
    async def test_http_error_is_wrapped_and_redacted(self, settings, upstream):
        upstream.add_series("WFRBST01134", 500)

        async with FredFetcher(settings, transport=upstream.transport) as fetcher:
            with pytest.raises(UpstreamAPIError) as exc_info:
                await fetcher.fetch_raw("WFRBST01134")

        error = exc_info.value
        assert error.status_code == 500
        assert error.source == "FRED"
        assert "test-fred-key" not in error.url
        assert "series_id=WFRBST01134" in error.url

    @pytest.mark.asyncio
    async def test_transport_error_is_wrapped(self, settings):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with FredFetcher(settings, transport=httpx.MockTransport(refuse)) as fetcher:
            with pytest.raises(UpstreamAPIError, match="request failed"):
                await fetcher.fetch_raw("WFRBST01134")

    @pytest.mark.asyncio
    async def test_fetch_many(self, settings, upstream):
        upstream.add_series("A", [("2020-01-01", "1")])
        upstream.add_series("B", [("2020-01-01", "2")])

        async with FredFetcher(settings, transport=upstream.transport) as fetcher:
            results = await fetcher.fetch_many(["A", "B"])

        assert results["A"][0].value == "1"
        assert results["B"][0].value == "2"

    @pytest.mark.asyncio
    async def test_fetch_many_fails_as_a_whole(self, settings, upstream):
        upstream.add_series("A", [("2020-01-01", "1")])
        upstream.add_series("B", 503)

        async with FredFetcher(settings, transport=upstream.transport) as fetcher:
            with pytest.raises(UpstreamAPIError):
                await fetcher.fetch_many(["A", "B"])


class TestCensusFetcher:

    @pytest.mark.asyncio
    async def test_fetch_state_rows(self, settings, upstream, state_rows):
        upstream.add_census_year("2019", state_rows)

        async with CensusFetcher(settings, transport=upstream.transport) as fetcher:
            header, rows = await fetcher.fetch_state_rows("2019")

        assert header[0] == "NAME"
        assert len(rows) == 4

        request = upstream.requests[0]
        assert request.url.path == "/data/2019/acs/acs1"
        assert request.url.params["get"] == "NAME,B19013_001E,B19025_001E,B19083_001E"
        assert request.url.params["for"] == "state:*"
        assert request.url.params["key"] == "test-census-key"

    @pytest.mark.asyncio
    async def test_fetch_years_isolates_failures(self, settings, upstream, state_rows):
        upstream.add_census_year("2019", state_rows)
        upstream.add_census_year("2021", 400)

        async with CensusFetcher(settings, transport=upstream.transport) as fetcher:
            results = await fetcher.fetch_years(["2019", "2021"])

        assert isinstance(results["2021"], UpstreamAPIError)
        assert results["2021"].status_code == 400
        assert "test-census-key" not in results["2021"].url
        header, rows = results["2019"]
        assert len(rows) == 4

    @pytest.mark.asyncio
    async def test_empty_table_is_an_error(self, settings):
        def empty(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[])

        async with CensusFetcher(settings, transport=httpx.MockTransport(empty)) as fetcher:
            with pytest.raises(UpstreamAPIError, match="no table"):
                await fetcher.fetch_state_rows("2019")

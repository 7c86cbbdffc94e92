"""Tests for the USGS feed client.

Uses the `responses` library to mock HTTP requests. The client's
coroutine is driven with asyncio.run.
"""

import asyncio
from unittest.mock import Mock

import pytest
import requests
import responses

from quakeboard.core.config import USGS_FEED_BASE
from quakeboard.core.errors import (
    FeedError,
    HttpStatusFailure,
    MalformedFeed,
    NetworkFailure,
)
from quakeboard.shell.usgs_client import USGSClient


DAY_URL = f"{USGS_FEED_BASE}/all_day.geojson"

SAMPLE_GEOJSON = {
    "type": "FeatureCollection",
    "metadata": {"count": 3},
    "features": [
        {
            "type": "Feature",
            "id": "us7000test1",
            "properties": {
                "mag": 4.5,
                "place": "10km NE of Somewhere",
                "time": 1700000000000,
                "tsunami": 1,
                "url": "https://earthquake.usgs.gov/earthquakes/eventpage/us7000test1",
            },
            "geometry": {"type": "Point", "coordinates": [-118.5, 34.0, 10.0]},
        },
        {
            "type": "Feature",
            "id": "us7000test2",
            "properties": {
                "mag": None,
                "place": None,
                "time": 1699999000000,
            },
            "geometry": {"type": "Point", "coordinates": [-117.2, 33.5, 5.5]},
        },
        {"type": "Feature", "properties": {"mag": 1.0}},
    ],
}


def _fetch(client, timeframe="day"):
    return asyncio.run(client.fetch(timeframe))


class TestFeedUrl:
    def test_builds_summary_url(self):
        assert USGSClient().feed_url("day") == DAY_URL

    def test_strips_trailing_slash(self):
        client = USGSClient(base_url="http://localhost/feed/")
        assert client.feed_url("week") == "http://localhost/feed/all_week.geojson"

    def test_unknown_timeframe_raises(self):
        with pytest.raises(ValueError, match="Unknown timeframe"):
            USGSClient().feed_url("century")


class TestFetch:
    """Tests for USGSClient.fetch()."""

    @responses.activate
    def test_parses_response_in_feed_order(self):
        responses.add(responses.GET, DAY_URL, json=SAMPLE_GEOJSON, status=200)

        records = _fetch(USGSClient())

        assert [r.id for r in records] == ["us7000test1", "us7000test2"]
        assert records[0].magnitude == 4.5
        assert records[0].tsunami is True
        assert records[1].magnitude is None
        assert records[1].place is None

    @responses.activate
    def test_empty_features_is_valid(self):
        responses.add(responses.GET, DAY_URL, json={"features": []}, status=200)
        assert _fetch(USGSClient()) == []

    def test_passes_timeout_to_session(self):
        session = Mock()
        session.get.return_value = Mock(status_code=200, json=Mock(return_value={"features": []}))

        _fetch(USGSClient(timeout=7, session=session))

        session.get.assert_called_once_with(DAY_URL, timeout=7)

    def test_unknown_timeframe_raises_before_io(self):
        with pytest.raises(ValueError):
            _fetch(USGSClient(), timeframe="century")


class TestFetchErrors:
    """Tests for the feed error taxonomy."""

    @responses.activate
    def test_http_error_carries_status_code(self):
        responses.add(responses.GET, DAY_URL, status=503)

        with pytest.raises(HttpStatusFailure) as exc_info:
            _fetch(USGSClient())

        assert exc_info.value.status_code == 503
        assert "503" in exc_info.value.user_message

    @responses.activate
    def test_connection_error_is_network_failure(self):
        responses.add(
            responses.GET,
            DAY_URL,
            body=requests.ConnectionError("Name or service not known"),
        )

        with pytest.raises(NetworkFailure) as exc_info:
            _fetch(USGSClient())

        assert exc_info.value.user_message == "Network error. Please check your connection."

    @responses.activate
    def test_timeout_is_network_failure(self):
        responses.add(responses.GET, DAY_URL, body=requests.Timeout("read timed out"))

        with pytest.raises(NetworkFailure):
            _fetch(USGSClient())

    @responses.activate
    def test_invalid_json_is_malformed(self):
        responses.add(responses.GET, DAY_URL, body="<html>oops</html>", status=200)

        with pytest.raises(MalformedFeed):
            _fetch(USGSClient())

    @pytest.mark.parametrize("document", [
        {"type": "FeatureCollection"},
        {"features": "not a list"},
        {"features": None},
        [1, 2, 3],
    ])
    @responses.activate
    def test_missing_features_array_is_malformed(self, document):
        """No truncated or partial results on a bad shape."""
        responses.add(responses.GET, DAY_URL, json=document, status=200)

        with pytest.raises(MalformedFeed):
            _fetch(USGSClient())

    def test_all_failures_are_feed_errors(self):
        for error_class in (NetworkFailure, HttpStatusFailure, MalformedFeed):
            assert issubclass(error_class, FeedError)


class TestCancellation:
    @responses.activate
    def test_cancelled_fetch_raises_cancelled_error(self):
        responses.add(responses.GET, DAY_URL, json=SAMPLE_GEOJSON, status=200)

        async def scenario():
            task = asyncio.create_task(USGSClient().fetch("day"))
            await asyncio.sleep(0)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        asyncio.run(scenario())

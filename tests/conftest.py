"""Shared fixtures: watch page builders and fake transports."""

import asyncio
import json
from collections.abc import Mapping
from typing import Any

import pytest

from most_replayed import FetchConfig, TransportResponse


def build_watch_page(initial_data: Any) -> str:
    """Wrap ytInitialData in a minimal watch page."""
    return (
        "<html><head><script>var ytcfg = {};</script></head><body>"
        f"<script>var ytInitialData = {json.dumps(initial_data)};</script>"
        "<script>var ytInitialPlayerResponse = {};</script>"
        "</body></html>"
    )


def build_initial_data(markers_list: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build ytInitialData with an optional heatmap markers list."""
    mutations: list[dict[str, Any]] = []
    if markers_list is not None:
        mutations.append({"payload": {"macroMarkersListEntity": {"markersList": markers_list}}})
    return {"frameworkUpdates": {"entityBatchUpdate": {"mutations": mutations}}}


class FakeTransport:
    """Transport that replays scripted responses and records calls.

    Each scripted item is a TransportResponse to return, an exception to
    raise, or a float number of seconds to hang before returning "{}".
    The last item repeats once the script runs out.
    """

    def __init__(self, *script: TransportResponse | BaseException | float, delay: float = 0.0) -> None:
        self.script = list(script)
        self.delay = delay
        self.calls: list[tuple[str, dict[str, str]]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def __call__(self, url: str, headers: Mapping[str, str]) -> TransportResponse:
        self.calls.append((url, dict(headers)))
        step = self.script[min(len(self.calls), len(self.script)) - 1]

        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if isinstance(step, BaseException):
                raise step
            if isinstance(step, float):
                await asyncio.sleep(step)
                return TransportResponse(status=200, reason="OK", text="{}")
            return step
        finally:
            self.in_flight -= 1

    @property
    def attempts(self) -> int:
        return len(self.calls)


def ok_page(initial_data: Any) -> TransportResponse:
    return TransportResponse(status=200, reason="OK", text=build_watch_page(initial_data))


@pytest.fixture
def heatmap_markers_list() -> dict[str, Any]:
    """A heatmap markers list shaped like YouTube's."""
    return {
        "markerType": "MARKER_TYPE_HEATMAP",
        "markers": [
            {"startMillis": "0", "durationMillis": "5000", "intensityScoreNormalized": 0.5},
            {"startMillis": "5000", "durationMillis": "5000", "intensityScoreNormalized": 0.8},
            {"startMillis": "10000", "durationMillis": "5000", "intensityScoreNormalized": 0.3},
        ],
        "markersDecoration": {
            "timedMarkerDecorations": [
                {
                    "visibleTimeRangeStartMillis": "0",
                    "visibleTimeRangeEndMillis": "15000",
                    "label": {"runs": [{"text": "Most replayed"}]},
                    "decorationTimeMillis": 5000,
                }
            ]
        },
    }


@pytest.fixture
def heatmap_page(heatmap_markers_list: dict[str, Any]) -> TransportResponse:
    return ok_page(build_initial_data(heatmap_markers_list))


@pytest.fixture
def empty_page() -> TransportResponse:
    return ok_page(build_initial_data())


@pytest.fixture
def fast_config() -> FetchConfig:
    """Config with a short timeout and no backoff wait."""
    return FetchConfig(timeout_ms=200, retry_delay_ms=0)

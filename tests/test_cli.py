"""Tests for the command line interface."""

import json

import pytest

from conftest import FakeTransport
from most_replayed import FetchConfig, HeatmapMarker, MostReplayedData, TransportResponse
from most_replayed import __main__ as cli


@pytest.fixture
def use_transport(monkeypatch):
    def install(transport: FakeTransport) -> FakeTransport:
        config = FetchConfig(timeout_ms=200, retry_delay_ms=0, transport=transport)
        monkeypatch.setattr(cli, "get_fetch_config", lambda: config)
        return transport

    return install


def test_no_arguments_prints_usage(capsys):
    assert cli.main([]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_single_video_report(use_transport, heatmap_page, capsys):
    use_transport(FakeTransport(heatmap_page))

    assert cli.main(["https://youtu.be/dQw4w9WgXcQ"]) == 0

    out = capsys.readouterr().out
    assert "Fetching most replayed data for: dQw4w9WgXcQ" in out
    assert "Heatmap segments: 3" in out
    assert "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=5" in out


def test_single_video_without_data(use_transport, empty_page, capsys):
    use_transport(FakeTransport(empty_page))

    assert cli.main(["dQw4w9WgXcQ"]) == 0
    assert "No most replayed data available" in capsys.readouterr().out


def test_single_video_json(use_transport, heatmap_page, capsys):
    use_transport(FakeTransport(heatmap_page))

    assert cli.main(["--json", "dQw4w9WgXcQ"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert len(payload["markers"]) == 3
    assert payload["peak_segment"]["start_millis"] == 5000


def test_invalid_id_reports_error(use_transport, capsys):
    transport = use_transport(FakeTransport(TransportResponse(status=200)))

    assert cli.main(["bogus"]) == 1
    assert "Error [INVALID_VIDEO_ID]" in capsys.readouterr().err
    assert transport.attempts == 0


def test_http_error_reports_error(use_transport, capsys):
    use_transport(FakeTransport(TransportResponse(status=404, reason="Not Found")))

    assert cli.main(["dQw4w9WgXcQ"]) == 1
    assert "HTTP 404: Not Found" in capsys.readouterr().err


def test_batch_reports_each_input(use_transport, heatmap_page, capsys):
    use_transport(FakeTransport(heatmap_page))

    assert cli.main(["dQw4w9WgXcQ", "bogus"]) == 1

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "dQw4w9WgXcQ: 3 markers, peak at 0:05"
    assert lines[1].startswith("bogus: error [INVALID_VIDEO_ID]")


def test_format_report_sections():
    markers = [
        HeatmapMarker(start_millis=i * 10_000, duration_millis=10_000, intensity_score_normalized=i / 10)
        for i in range(10)
    ]
    data = MostReplayedData(
        markers=markers,
        video_duration_millis=100_000,
        peak_segment=markers[-1],
        average_intensity=0.45,
    )

    report = cli.format_report("dQw4w9WgXcQ", data)

    assert "Heatmap segments: 10" in report
    assert "Estimated duration: 1:40" in report
    assert "Average intensity: 45.0%" in report
    assert "Time: 1:30" in report
    assert "=== Hot Segments (>50% intensity): 5 ===" in report
    assert "=== Segment at 1:00 ===" in report
    assert "Intensity: 60.0%" in report
    assert "Timed Markers" not in report

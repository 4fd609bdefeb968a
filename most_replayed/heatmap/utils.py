"""Helpers for presenting most replayed data."""

from most_replayed.heatmap.schemas import HeatmapMarker, MostReplayedData
from most_replayed.transport.page_fetcher import build_watch_url


def format_time(millis: int) -> str:
    """Format milliseconds as M:SS, or H:MM:SS past the first hour."""
    total_seconds = millis // 1000
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def get_top_segments(data: MostReplayedData, count: int = 5) -> list[HeatmapMarker]:
    """Get the most replayed segments, highest intensity first."""
    ranked = sorted(data.markers, key=lambda m: m.intensity_score_normalized, reverse=True)
    return ranked[:count]


def get_segment_at_time(data: MostReplayedData, time_millis: int) -> HeatmapMarker | None:
    """Get the segment playing at a given time.

    Returns the last marker starting at or before ``time_millis``.
    """
    for marker in reversed(data.markers):
        if marker.start_millis <= time_millis:
            return marker
    return None


def get_segment_duration(data: MostReplayedData) -> int:
    """Approximate segment length, taken from the first marker."""
    if not data.markers:
        return 0
    return data.markers[0].duration_millis


def generate_timestamp_url(video_id: str, time_millis: int) -> str:
    """Build a watch URL that starts playback at the given time."""
    return f"{build_watch_url(video_id)}&t={time_millis // 1000}"


def filter_by_intensity(data: MostReplayedData, threshold: float) -> list[HeatmapMarker]:
    """Get the segments at or above an intensity threshold (0-1)."""
    return [m for m in data.markers if m.intensity_score_normalized >= threshold]

"""Turns the raw markersList into clean, typed most replayed data."""

from most_replayed.common.errors import ParseFailedError
from most_replayed.heatmap.schemas import (
    HeatmapMarker,
    MostReplayedData,
    TimedMarkerDecoration,
)
from most_replayed.page_parser.schemas import (
    MarkersList,
    RawMarker,
    RawTimedMarkerDecoration,
)


def _parse_millis(raw: str, field_name: str) -> int:
    """Parse a base-10 millisecond string."""
    try:
        return int(raw, 10)
    except ValueError as e:
        msg = f"Invalid {field_name} in markers data: {raw!r}"
        raise ParseFailedError(msg, e) from e


def _parse_optional_millis(raw: str | None, field_name: str) -> int:
    return _parse_millis(raw, field_name) if raw else 0


def transform_markers(raw_markers: list[RawMarker]) -> list[HeatmapMarker]:
    """Transform raw markers into typed markers sorted by start time.

    Markers without a start time are dropped. Missing durations and
    intensities default to 0. The sort is stable.
    """
    markers = [
        HeatmapMarker(
            start_millis=_parse_millis(raw.start_millis, "startMillis"),
            duration_millis=_parse_optional_millis(raw.duration_millis, "durationMillis"),
            intensity_score_normalized=raw.intensity_score_normalized or 0.0,
        )
        for raw in raw_markers
        if raw.start_millis is not None
    ]
    return sorted(markers, key=lambda m: m.start_millis)


def transform_timed_marker_decorations(
    raw_decorations: list[RawTimedMarkerDecoration],
) -> list[TimedMarkerDecoration]:
    """Transform raw decorations into typed decorations sorted by start time.

    Decorations missing either bound are dropped.
    """
    decorations = [
        TimedMarkerDecoration(
            visible_time_range_start_millis=_parse_millis(
                raw.visible_time_range_start_millis, "visibleTimeRangeStartMillis"
            ),
            visible_time_range_end_millis=_parse_millis(
                raw.visible_time_range_end_millis, "visibleTimeRangeEndMillis"
            ),
        )
        for raw in raw_decorations
        if raw.visible_time_range_start_millis is not None
        and raw.visible_time_range_end_millis is not None
    ]
    return sorted(decorations, key=lambda d: d.visible_time_range_start_millis)


def find_peak_segment(markers: list[HeatmapMarker]) -> HeatmapMarker | None:
    """Find the marker with the highest intensity (first one on ties)."""
    peak: HeatmapMarker | None = None
    for marker in markers:
        if peak is None or marker.intensity_score_normalized > peak.intensity_score_normalized:
            peak = marker
    return peak


def calculate_average_intensity(markers: list[HeatmapMarker]) -> float:
    """Average intensity across all markers, 0 when there are none."""
    if not markers:
        return 0.0
    return sum(m.intensity_score_normalized for m in markers) / len(markers)


def estimate_video_duration(
    markers: list[HeatmapMarker],
    raw_markers: list[RawMarker],
) -> int:
    """Estimate the video duration from the markers.

    The last normalized marker's start plus the duration of the last *raw*
    marker. The two can be different entries when trailing raw markers
    were dropped for lacking a start time.
    """
    if not markers:
        return 0

    segment_duration = 0
    if raw_markers:
        segment_duration = _parse_optional_millis(raw_markers[-1].duration_millis, "durationMillis")

    return markers[-1].start_millis + segment_duration


def build_most_replayed_data(markers_list: MarkersList) -> MostReplayedData | None:
    """Build the most replayed data from a located markers list.

    Args:
        markers_list: The heatmap markers list found in ytInitialData.

    Returns:
        The most replayed data, or None if no usable markers remain.

    Raises:
        ParseFailedError: If a millisecond field is not an integer.
    """
    raw_markers = markers_list.markers or []
    markers = transform_markers(raw_markers)
    if not markers:
        return None

    timed_marker_decorations: list[TimedMarkerDecoration] | None = None
    decoration = markers_list.markers_decoration
    if decoration is not None and decoration.timed_marker_decorations:
        timed_marker_decorations = (
            transform_timed_marker_decorations(decoration.timed_marker_decorations) or None
        )

    return MostReplayedData(
        markers=markers,
        timed_marker_decorations=timed_marker_decorations,
        video_duration_millis=estimate_video_duration(markers, raw_markers),
        peak_segment=find_peak_segment(markers),
        average_intensity=calculate_average_intensity(markers),
    )

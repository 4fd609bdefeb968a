"""Schemas for the markersList payload holding the heatmap."""

from most_replayed.page_parser.schemas.raw_youtube_model import RawYouTubeModel


class RawMarker(RawYouTubeModel):
    """A heatmap marker as YouTube serves it (millis are strings)."""

    start_millis: str | None = None
    duration_millis: str | None = None
    intensity_score_normalized: float | None = None


class RawTimedMarkerDecoration(RawYouTubeModel):
    """A timed marker decoration as YouTube serves it."""

    visible_time_range_start_millis: str | None = None
    visible_time_range_end_millis: str | None = None


class MarkersDecoration(RawYouTubeModel):
    """Decoration block attached to a markers list."""

    timed_marker_decorations: list[RawTimedMarkerDecoration] | None = None


class MarkersList(RawYouTubeModel):
    """The markersList entity: raw markers plus optional decorations."""

    markers: list[RawMarker] | None = None
    markers_decoration: MarkersDecoration | None = None

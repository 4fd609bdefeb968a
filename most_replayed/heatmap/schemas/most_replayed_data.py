"""Most replayed data schema - the output of the pipeline."""

from most_replayed.common.base_most_replayed_model import BaseMostReplayedModel
from most_replayed.heatmap.schemas.heatmap_marker import HeatmapMarker
from most_replayed.heatmap.schemas.timed_marker_decoration import TimedMarkerDecoration


class MostReplayedData(BaseMostReplayedModel):
    """The complete most replayed data for a video."""

    # Sorted by start_millis
    markers: list[HeatmapMarker]
    timed_marker_decorations: list[TimedMarkerDecoration] | None = None

    # Derived from the markers, not reported by YouTube
    video_duration_millis: int
    peak_segment: HeatmapMarker | None = None
    average_intensity: float

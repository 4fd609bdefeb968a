"""Heatmap marker schema."""

from most_replayed.common.base_most_replayed_model import BaseMostReplayedModel


class HeatmapMarker(BaseMostReplayedModel):
    """One time bucket of the heatmap and how often it is replayed."""

    start_millis: int
    duration_millis: int
    # 0-1, relative to the most replayed bucket
    intensity_score_normalized: float

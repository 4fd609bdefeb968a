"""Heatmap schemas."""

from most_replayed.heatmap.schemas.heatmap_marker import HeatmapMarker
from most_replayed.heatmap.schemas.most_replayed_data import MostReplayedData
from most_replayed.heatmap.schemas.timed_marker_decoration import TimedMarkerDecoration

__all__ = [
    "HeatmapMarker",
    "MostReplayedData",
    "TimedMarkerDecoration",
]

"""Page parser schemas."""

from most_replayed.page_parser.schemas.initial_data import (
    EntityBatchUpdate,
    FrameworkUpdates,
    InitialData,
    MacroMarkersListEntity,
    Mutation,
    MutationPayload,
)
from most_replayed.page_parser.schemas.markers_list import (
    MarkersDecoration,
    MarkersList,
    RawMarker,
    RawTimedMarkerDecoration,
)

__all__ = [
    "EntityBatchUpdate",
    "FrameworkUpdates",
    "InitialData",
    "MacroMarkersListEntity",
    "MarkersDecoration",
    "MarkersList",
    "Mutation",
    "MutationPayload",
    "RawMarker",
    "RawTimedMarkerDecoration",
]

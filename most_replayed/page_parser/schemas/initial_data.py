"""Schemas for the path from ytInitialData down to a markersList.

Every field is optional: a missing key anywhere on the path means the
heatmap is not present, not that the page is broken. The markersList itself
is kept as a raw mapping; the locator validates it once it has been chosen.
"""

from typing import Any

from pydantic import field_validator

from most_replayed.page_parser.schemas.raw_youtube_model import RawYouTubeModel


class MacroMarkersListEntity(RawYouTubeModel):
    """Entity wrapping a markers list."""

    markers_list: dict[str, Any] | None = None

    @field_validator("markers_list", mode="before")
    @classmethod
    def _drop_non_mapping(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None


class MutationPayload(RawYouTubeModel):
    """Payload of an entity mutation."""

    macro_markers_list_entity: MacroMarkersListEntity | None = None


class Mutation(RawYouTubeModel):
    """A single entity mutation."""

    payload: MutationPayload | None = None


class EntityBatchUpdate(RawYouTubeModel):
    """Batch of entity mutations.

    Mutations stay unvalidated here so that one malformed entry does not
    hide the others; the locator validates them one at a time.
    """

    mutations: list[Any] | None = None

    @field_validator("mutations", mode="before")
    @classmethod
    def _drop_non_list(cls, value: Any) -> Any:
        return value if isinstance(value, list) else None


class FrameworkUpdates(RawYouTubeModel):
    """The frameworkUpdates section of ytInitialData."""

    entity_batch_update: EntityBatchUpdate | None = None


class InitialData(RawYouTubeModel):
    """The part of ytInitialData we read."""

    framework_updates: FrameworkUpdates | None = None

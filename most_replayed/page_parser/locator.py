"""Locates the heatmap markersList inside ytInitialData."""

import logging
from typing import Any

from pydantic import ValidationError

from most_replayed.common.errors import ParseFailedError
from most_replayed.page_parser.schemas import InitialData, MarkersList, Mutation

logger = logging.getLogger(__name__)


def _mutations(tree: Any) -> list[Any]:
    """Walk frameworkUpdates -> entityBatchUpdate -> mutations."""
    if not isinstance(tree, dict):
        return []

    try:
        initial_data = InitialData.model_validate(tree)
    except ValidationError as e:
        logger.debug("ytInitialData does not match the expected shape: %s", e)
        return []

    framework_updates = initial_data.framework_updates
    if framework_updates is None or framework_updates.entity_batch_update is None:
        return []
    return framework_updates.entity_batch_update.mutations or []


def find_markers_list(tree: Any) -> MarkersList | None:
    """Find the heatmap markers list in a parsed ytInitialData tree.

    Mutations are checked in order. The first markersList that carries a
    markersDecoration is the heatmap; other mutations are unrelated entities.
    Only that markersList is validated in full, so a malformed heatmap is
    reported rather than passed over for a later one.

    Args:
        tree: The parsed ytInitialData.

    Returns:
        The heatmap markers list, or None if the page has none.

    Raises:
        ParseFailedError: If the heatmap markers list is malformed.
    """
    for index, raw_mutation in enumerate(_mutations(tree)):
        try:
            mutation = Mutation.model_validate(raw_mutation)
        except ValidationError:
            logger.debug("Skipping mutation %d that does not match the expected shape", index)
            continue

        if mutation.payload is None or mutation.payload.macro_markers_list_entity is None:
            continue

        raw_markers_list = mutation.payload.macro_markers_list_entity.markers_list
        if raw_markers_list is None or raw_markers_list.get("markersDecoration") is None:
            continue

        try:
            return MarkersList.model_validate(raw_markers_list)
        except ValidationError as e:
            msg = f"Malformed heatmap markersList in mutation {index}"
            raise ParseFailedError(msg, e) from e

    return None

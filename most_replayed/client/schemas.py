"""Batch result schema."""

from typing import Any

from pydantic import ConfigDict, field_serializer

from most_replayed.common.base_most_replayed_model import BaseMostReplayedModel
from most_replayed.common.errors import MostReplayedError
from most_replayed.heatmap.schemas import MostReplayedData


class BatchResult(BaseMostReplayedModel):
    """Result of a batch fetch for a single input."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    # The input exactly as given
    video_id_or_url: str
    # None when the input was not a valid ID or URL
    video_id: str | None = None
    # None when no heatmap exists or the fetch failed
    data: MostReplayedData | None = None
    error: MostReplayedError | None = None

    @property
    def ok(self) -> bool:
        """Whether the item completed without error."""
        return self.error is None

    @field_serializer("error")
    def _serialize_error(self, error: MostReplayedError | None) -> dict[str, Any] | None:
        if error is None:
            return None
        return {"code": str(error.code), "message": error.message}

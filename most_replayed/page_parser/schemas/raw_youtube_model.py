from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from most_replayed.common.base_most_replayed_model import BaseMostReplayedModel


class RawYouTubeModel(BaseMostReplayedModel):
    """Base model for fragments of YouTube's ytInitialData.

    Fields are snake_case in Python and camelCase on the wire. Unknown keys
    are ignored, since the upstream payload carries far more than we read.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

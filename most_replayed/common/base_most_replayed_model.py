from pydantic import BaseModel, ConfigDict


class BaseMostReplayedModel(BaseModel):
    """Immutable base for every model in most_replayed.

    Parsed heatmap data, raw YouTube fragments and fetch settings are all
    frozen once built; they are revalidated when passed into another model
    and accept either field names or aliases.
    """

    model_config = ConfigDict(
        frozen=True,
        revalidate_instances="always",
        validate_assignment=True,
        populate_by_name=True,
    )

"""Timed marker decoration schema."""

from most_replayed.common.base_most_replayed_model import BaseMostReplayedModel


class TimedMarkerDecoration(BaseMostReplayedModel):
    """A highlighted range of the timeline (e.g. the "Most replayed" label)."""

    visible_time_range_start_millis: int
    visible_time_range_end_millis: int

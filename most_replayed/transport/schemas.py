"""Transport schemas."""

from collections.abc import Awaitable, Callable, Mapping

from most_replayed.common.base_most_replayed_model import BaseMostReplayedModel


class TransportResponse(BaseMostReplayedModel):
    """A fully read HTTP response."""

    status: int
    reason: str = ""
    text: str = ""

    @property
    def ok(self) -> bool:
        """Whether the status is 2xx."""
        return 200 <= self.status < 300


# Async callable taking (url, headers). Timeouts are applied by the caller.
Transport = Callable[[str, Mapping[str, str]], Awaitable[TransportResponse]]

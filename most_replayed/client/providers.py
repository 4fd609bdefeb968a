"""Providers for the most replayed service."""

from functools import cache

from most_replayed.client.service import MostReplayedService
from most_replayed.config import get_fetch_config


@cache
def most_replayed_service() -> MostReplayedService:
    """Provide a cached MostReplayedService configured from the environment."""
    return MostReplayedService(config=get_fetch_config())

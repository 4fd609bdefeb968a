"""Fetch configuration and environment settings."""

import os

from dotenv import load_dotenv
from pydantic import Field

from most_replayed.common.base_most_replayed_model import BaseMostReplayedModel
from most_replayed.transport.schemas import Transport

load_dotenv()

DEFAULT_TIMEOUT_MS = 10_000
DEFAULT_RETRIES = 1
DEFAULT_RETRY_DELAY_MS = 1_000
DEFAULT_CONCURRENCY = 5
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class FetchConfig(BaseMostReplayedModel):
    """Configuration for fetching most replayed data."""

    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    user_agent: str = DEFAULT_USER_AGENT

    # Total number of attempts, so 1 means no retry
    retries: int = Field(default=DEFAULT_RETRIES, ge=1)
    retry_delay_ms: int = Field(default=DEFAULT_RETRY_DELAY_MS, ge=0)

    # Batch only: max number of in-flight fetches per window
    concurrency: int = Field(default=DEFAULT_CONCURRENCY, ge=1)

    # Replaces the default aiohttp transport (mainly for tests)
    transport: Transport | None = Field(default=None, exclude=True)

    @property
    def timeout_seconds(self) -> float:
        """Per-attempt timeout in seconds."""
        return self.timeout_ms / 1000


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(msg) from None


def get_fetch_config() -> FetchConfig:
    """Get fetch configuration from environment variables.

    Environment variables:
        MOST_REPLAYED_TIMEOUT_MS: Per-attempt timeout (default: 10000)
        MOST_REPLAYED_USER_AGENT: User-Agent header (default: desktop Chrome)
        MOST_REPLAYED_RETRIES: Total attempts per fetch (default: 1)
        MOST_REPLAYED_RETRY_DELAY_MS: Base backoff delay (default: 1000)
        MOST_REPLAYED_CONCURRENCY: Batch window size (default: 5)
    """
    user_agent = os.environ.get("MOST_REPLAYED_USER_AGENT", "").strip() or DEFAULT_USER_AGENT

    return FetchConfig(
        timeout_ms=_int_from_env("MOST_REPLAYED_TIMEOUT_MS", DEFAULT_TIMEOUT_MS),
        user_agent=user_agent,
        retries=_int_from_env("MOST_REPLAYED_RETRIES", DEFAULT_RETRIES),
        retry_delay_ms=_int_from_env("MOST_REPLAYED_RETRY_DELAY_MS", DEFAULT_RETRY_DELAY_MS),
        concurrency=_int_from_env("MOST_REPLAYED_CONCURRENCY", DEFAULT_CONCURRENCY),
    )

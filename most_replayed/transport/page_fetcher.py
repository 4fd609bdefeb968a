"""Fetches YouTube watch pages with timeout and linear-backoff retries."""

import asyncio
import logging
from collections.abc import Mapping

import aiohttp

from most_replayed.common.errors import (
    FetchFailedError,
    MostReplayedError,
    TimedOutError,
)
from most_replayed.config import FetchConfig
from most_replayed.transport.schemas import TransportResponse

logger = logging.getLogger(__name__)

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
ACCEPT_LANGUAGE = "en-US,en;q=0.9"


def build_watch_url(video_id: str) -> str:
    """Build the watch page URL for a video ID."""
    return WATCH_URL.format(video_id=video_id)


def is_retryable_status(status: int) -> bool:
    """Server errors and rate limiting are worth retrying, other 4xx are not."""
    return status >= 500 or status == 429


def backoff_delay_seconds(retry_delay_ms: int, attempt: int) -> float:
    """Delay to wait after a failed attempt (1-based) before the next one."""
    return retry_delay_ms * attempt / 1000


async def aiohttp_transport(url: str, headers: Mapping[str, str]) -> TransportResponse:
    """Default transport: a GET through a short-lived aiohttp session."""
    async with aiohttp.ClientSession(headers=dict(headers)) as session:
        async with session.get(url) as response:
            text = await response.text(errors="replace")
            return TransportResponse(
                status=response.status,
                reason=response.reason or "",
                text=text,
            )


async def fetch_video_page(video_id: str, config: FetchConfig) -> str:
    """Fetch the watch page HTML for a video.

    Every attempt runs under ``config.timeout_ms``. Network faults, timeouts
    and retryable statuses (5xx, 429) are retried until ``config.retries``
    attempts are used; other non-2xx statuses fail immediately.

    Args:
        video_id: A validated 11-character video ID.
        config: Fetch configuration.

    Returns:
        The decoded response body.

    Raises:
        FetchFailedError: On a terminal status, or when the last attempt
            failed with a status or a network fault.
        TimedOutError: When the last attempt timed out.
    """
    transport = config.transport or aiohttp_transport
    url = build_watch_url(video_id)
    headers = {
        "Accept-Language": ACCEPT_LANGUAGE,
        "User-Agent": config.user_agent,
    }

    last_error: MostReplayedError | None = None

    for attempt in range(1, config.retries + 1):
        try:
            async with asyncio.timeout(config.timeout_seconds):
                response = await transport(url, headers)
        except TimeoutError as e:
            last_error = TimedOutError(f"Request timed out after {config.timeout_ms}ms", e)
        except Exception as e:
            last_error = FetchFailedError(f"Failed to fetch video page: {e}", e)
        else:
            if response.ok:
                logger.debug(
                    "[video=%s] Fetched watch page on attempt %d (%d chars)",
                    video_id,
                    attempt,
                    len(response.text),
                )
                return response.text

            error = FetchFailedError.from_status(response.status, response.reason)
            if not is_retryable_status(response.status):
                raise error
            last_error = error

        if attempt < config.retries:
            delay = backoff_delay_seconds(config.retry_delay_ms, attempt)
            logger.warning(
                "[video=%s] Fetch attempt %d/%d failed (%s), retrying in %.2fs",
                video_id,
                attempt,
                config.retries,
                last_error,
                delay,
            )
            await asyncio.sleep(delay)

    assert last_error is not None, "retries >= 1, so at least one attempt has failed by now"
    raise last_error

"""Fetch YouTube's "Most Replayed" heatmap data.

Example:
    >>> import asyncio
    >>> from most_replayed import get_most_replayed
    >>> data = asyncio.run(get_most_replayed("dQw4w9WgXcQ"))
    >>> if data:
    ...     print(f"{len(data.markers)} segments, peak at {data.peak_segment.start_millis}ms")
"""

from most_replayed.client.providers import most_replayed_service
from most_replayed.client.schemas import BatchResult
from most_replayed.client.service import MostReplayedService
from most_replayed.common.errors import (
    FetchFailedError,
    InvalidVideoIdError,
    MostReplayedError,
    MostReplayedErrorCode,
    NoDataAvailableError,
    ParseFailedError,
    TimedOutError,
)
from most_replayed.config import FetchConfig, get_fetch_config
from most_replayed.heatmap.schemas import (
    HeatmapMarker,
    MostReplayedData,
    TimedMarkerDecoration,
)
from most_replayed.heatmap.utils import (
    filter_by_intensity,
    format_time,
    generate_timestamp_url,
    get_segment_at_time,
    get_segment_duration,
    get_top_segments,
)
from most_replayed.transport.schemas import Transport, TransportResponse
from most_replayed.video_id import extract_video_id, is_valid_video_id


def _service(config: FetchConfig | None) -> MostReplayedService:
    return MostReplayedService(config) if config is not None else most_replayed_service()


async def get_most_replayed(
    video_id_or_url: str,
    config: FetchConfig | None = None,
) -> MostReplayedData | None:
    """Fetch the most replayed data for a video.

    Args:
        video_id_or_url: A video ID (11 characters) or a YouTube URL.
        config: Optional fetch configuration; read from the environment if omitted.

    Returns:
        The most replayed data, or None if it is not available for this video.
    """
    return await _service(config).get_most_replayed(video_id_or_url)


async def get_most_replayed_batch(
    video_ids_or_urls: list[str],
    config: FetchConfig | None = None,
) -> list[BatchResult]:
    """Fetch the most replayed data for several videos with bounded concurrency.

    Args:
        video_ids_or_urls: Video IDs or YouTube URLs.
        config: Optional fetch configuration; read from the environment if omitted.

    Returns:
        One BatchResult per input, in input order. Never raises.
    """
    return await _service(config).get_most_replayed_batch(video_ids_or_urls)


__all__ = [
    "BatchResult",
    "FetchConfig",
    "FetchFailedError",
    "HeatmapMarker",
    "InvalidVideoIdError",
    "MostReplayedData",
    "MostReplayedError",
    "MostReplayedErrorCode",
    "MostReplayedService",
    "NoDataAvailableError",
    "ParseFailedError",
    "TimedMarkerDecoration",
    "TimedOutError",
    "Transport",
    "TransportResponse",
    "extract_video_id",
    "filter_by_intensity",
    "format_time",
    "generate_timestamp_url",
    "get_fetch_config",
    "get_most_replayed",
    "get_most_replayed_batch",
    "get_segment_at_time",
    "get_segment_duration",
    "get_top_segments",
    "is_valid_video_id",
    "most_replayed_service",
]

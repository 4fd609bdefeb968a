"""Most replayed service: the per-video pipeline and batch fan-out."""

import asyncio
import logging

from most_replayed.client.schemas import BatchResult
from most_replayed.common.errors import (
    FetchFailedError,
    InvalidVideoIdError,
    MostReplayedError,
)
from most_replayed.config import FetchConfig
from most_replayed.heatmap.normalizer import build_most_replayed_data
from most_replayed.heatmap.schemas import MostReplayedData
from most_replayed.page_parser.deserializer import parse_initial_data
from most_replayed.page_parser.extractor import extract_initial_data_json
from most_replayed.page_parser.locator import find_markers_list
from most_replayed.transport.page_fetcher import fetch_video_page
from most_replayed.video_id import extract_video_id

logger = logging.getLogger(__name__)


class MostReplayedService:
    """Service for fetching YouTube's "Most Replayed" heatmap data."""

    def __init__(self, config: FetchConfig | None = None) -> None:
        """Initialize the service.

        Args:
            config: Fetch configuration. Defaults are used if not provided.
        """
        self._config = config or FetchConfig()

    @property
    def config(self) -> FetchConfig:
        """Get the fetch configuration."""
        return self._config

    async def get_most_replayed(self, video_id_or_url: str) -> MostReplayedData | None:
        """Fetch the most replayed data for a video.

        Args:
            video_id_or_url: A video ID or a YouTube URL.

        Returns:
            The most replayed data, or None if the video has no heatmap.

        Raises:
            InvalidVideoIdError: If the input is not a video ID or URL.
            FetchFailedError: If the watch page could not be fetched.
            TimedOutError: If the last fetch attempt timed out.
            ParseFailedError: If the embedded data could not be parsed.
        """
        video_id = extract_video_id(video_id_or_url)
        return await self._fetch_video(video_id)

    async def get_most_replayed_batch(self, video_ids_or_urls: list[str]) -> list[BatchResult]:
        """Fetch the most replayed data for several videos.

        Inputs are validated up front. Valid ones are fetched in windows of
        ``config.concurrency``; each window completes before the next starts.
        Failures are captured per item and never raised.

        Args:
            video_ids_or_urls: Video IDs or YouTube URLs.

        Returns:
            One BatchResult per input, in input order.
        """
        results: list[BatchResult | None] = [None] * len(video_ids_or_urls)
        pending: list[tuple[int, str]] = []

        for index, video_id_or_url in enumerate(video_ids_or_urls):
            try:
                pending.append((index, extract_video_id(video_id_or_url)))
            except InvalidVideoIdError as e:
                results[index] = BatchResult(video_id_or_url=video_id_or_url, error=e)

        logger.info(
            "Batch of %d inputs: %d valid, %d invalid, concurrency=%d",
            len(video_ids_or_urls),
            len(pending),
            len(video_ids_or_urls) - len(pending),
            self._config.concurrency,
        )

        async def fetch_one(index: int, video_id: str) -> None:
            video_id_or_url = video_ids_or_urls[index]
            try:
                data = await self._fetch_video(video_id)
            except MostReplayedError as e:
                logger.info("[video=%s] Failed: %s", video_id, e)
                results[index] = BatchResult(
                    video_id_or_url=video_id_or_url, video_id=video_id, error=e
                )
                return
            except Exception as e:
                logger.exception("[video=%s] Unexpected failure", video_id)
                error = FetchFailedError(f"Unexpected error: {type(e).__name__}: {e}", e)
                results[index] = BatchResult(
                    video_id_or_url=video_id_or_url, video_id=video_id, error=error
                )
                return

            results[index] = BatchResult(
                video_id_or_url=video_id_or_url, video_id=video_id, data=data
            )

        concurrency = self._config.concurrency
        for start in range(0, len(pending), concurrency):
            window = pending[start : start + concurrency]
            await asyncio.gather(*(fetch_one(index, video_id) for index, video_id in window))

        return [result for result in results if result is not None]

    async def _fetch_video(self, video_id: str) -> MostReplayedData | None:
        """Run fetch, extract, parse, locate and normalize for one video."""
        html = await fetch_video_page(video_id, self._config)

        json_string = extract_initial_data_json(html)
        initial_data = parse_initial_data(json_string)

        markers_list = find_markers_list(initial_data)
        if markers_list is None:
            logger.info("[video=%s] No markers list in ytInitialData", video_id)
            return None

        data = build_most_replayed_data(markers_list)
        if data is None:
            logger.info("[video=%s] Markers list has no usable markers", video_id)
            return None

        logger.info(
            "[video=%s] Parsed %d markers, peak at %dms",
            video_id,
            len(data.markers),
            data.peak_segment.start_millis if data.peak_segment else 0,
        )
        return data

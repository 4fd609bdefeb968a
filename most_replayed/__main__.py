"""Command line entry point: python -m most_replayed <VIDEO_ID_OR_URL>..."""

import asyncio
import logging
import sys

from most_replayed import (
    MostReplayedData,
    MostReplayedError,
    extract_video_id,
    filter_by_intensity,
    format_time,
    generate_timestamp_url,
    get_fetch_config,
    get_segment_at_time,
    get_top_segments,
)
from most_replayed.client.service import MostReplayedService

USAGE = """\
Usage: python -m most_replayed [--json] <VIDEO_ID_OR_URL> [<VIDEO_ID_OR_URL> ...]

Examples:
  python -m most_replayed dQw4w9WgXcQ
  python -m most_replayed "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
  python -m most_replayed --json https://youtu.be/dQw4w9WgXcQ
"""


def _percent(intensity: float) -> str:
    return f"{intensity * 100:.1f}%"


def format_report(video_id: str, data: MostReplayedData) -> str:
    """Format a human readable report for one video."""
    lines = [
        "=== Video Statistics ===",
        f"  Heatmap segments: {len(data.markers)}",
        f"  Estimated duration: {format_time(data.video_duration_millis)}",
        f"  Average intensity: {_percent(data.average_intensity)}",
    ]

    if data.peak_segment:
        peak = data.peak_segment
        lines += [
            "",
            "=== Peak Moment ===",
            f"  Time: {format_time(peak.start_millis)}",
            f"  Intensity: {_percent(peak.intensity_score_normalized)}",
            f"  URL: {generate_timestamp_url(video_id, peak.start_millis)}",
        ]

    lines += ["", "=== Top 5 Most Replayed Moments ==="]
    for rank, segment in enumerate(get_top_segments(data, 5), start=1):
        lines.append(
            f"  {rank}. {format_time(segment.start_millis)} - "
            f"{_percent(segment.intensity_score_normalized)}"
        )
        lines.append(f"     {generate_timestamp_url(video_id, segment.start_millis)}")

    hot_segments = filter_by_intensity(data, 0.5)
    if hot_segments:
        lines += ["", f"=== Hot Segments (>50% intensity): {len(hot_segments)} ==="]
        for segment in hot_segments[:5]:
            lines.append(
                f"  {format_time(segment.start_millis)} - "
                f"{_percent(segment.intensity_score_normalized)}"
            )
        if len(hot_segments) > 5:
            lines.append(f"  ... and {len(hot_segments) - 5} more")

    segment_at_one_minute = get_segment_at_time(data, 60_000)
    if segment_at_one_minute:
        lines += [
            "",
            "=== Segment at 1:00 ===",
            f"  Intensity: {_percent(segment_at_one_minute.intensity_score_normalized)}",
        ]

    if data.timed_marker_decorations:
        lines += ["", f"=== Timed Markers: {len(data.timed_marker_decorations)} ==="]
        for decoration in data.timed_marker_decorations[:5]:
            lines.append(
                f"  {format_time(decoration.visible_time_range_start_millis)} - "
                f"{format_time(decoration.visible_time_range_end_millis)}"
            )

    return "\n".join(lines)


async def _run_single(service: MostReplayedService, video_id_or_url: str, as_json: bool) -> int:
    video_id = extract_video_id(video_id_or_url)
    if not as_json:
        print(f"Fetching most replayed data for: {video_id}\n")

    data = await service.get_most_replayed(video_id)

    if as_json:
        print(data.model_dump_json(indent=2) if data else "null")
        return 0

    if data is None:
        print("No most replayed data available for this video.")
        print("This can happen for videos with low view counts or very new videos.")
        return 0

    print(format_report(video_id, data))
    return 0


async def _run_batch(service: MostReplayedService, video_ids_or_urls: list[str], as_json: bool) -> int:
    results = await service.get_most_replayed_batch(video_ids_or_urls)

    for result in results:
        if as_json:
            print(result.model_dump_json())
        elif result.error:
            print(f"{result.video_id_or_url}: error [{result.error.code}] {result.error.message}")
        elif result.data:
            peak = result.data.peak_segment
            peak_time = format_time(peak.start_millis) if peak else "-"
            print(f"{result.video_id_or_url}: {len(result.data.markers)} markers, peak at {peak_time}")
        else:
            print(f"{result.video_id_or_url}: no data")

    return 1 if any(result.error for result in results) else 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface."""
    args = list(sys.argv[1:] if argv is None else argv)
    as_json = "--json" in args
    inputs = [arg for arg in args if arg != "--json"]

    if not inputs:
        print(USAGE, file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    service = MostReplayedService(get_fetch_config())

    try:
        if len(inputs) == 1:
            return asyncio.run(_run_single(service, inputs[0], as_json))
        return asyncio.run(_run_batch(service, inputs, as_json))
    except MostReplayedError as e:
        print(f"Error [{e.code}]: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

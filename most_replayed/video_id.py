"""YouTube video ID validation and extraction."""

import re

from most_replayed.common.errors import InvalidVideoIdError

# Valid IDs are 11 characters of letters, digits, hyphens and underscores
VIDEO_ID_PATTERN = re.compile(r"[a-zA-Z0-9_-]{11}")

VIDEO_URL_PATTERNS = (
    re.compile(
        r"(?:youtube\.com/watch\?v=|youtube\.com/embed/|youtu\.be/"
        r"|youtube\.com/v/|youtube\.com/shorts/)([a-zA-Z0-9_-]{11})"
    ),
)


def is_valid_video_id(video_id: str) -> bool:
    """Check whether a string is a well-formed YouTube video ID."""
    return VIDEO_ID_PATTERN.fullmatch(video_id) is not None


def extract_video_id(video_id_or_url: str) -> str:
    """Extract a video ID from a YouTube URL, or return the ID if already valid.

    Args:
        video_id_or_url: A bare video ID or a watch/embed/short/shorts URL.

    Returns:
        The 11-character video ID.

    Raises:
        InvalidVideoIdError: If no video ID can be found.
    """
    trimmed = video_id_or_url.strip()

    if is_valid_video_id(trimmed):
        return trimmed

    for pattern in VIDEO_URL_PATTERNS:
        match = pattern.search(trimmed)
        if match:
            return match.group(1)

    msg = f'Invalid YouTube video ID or URL: "{video_id_or_url}"'
    raise InvalidVideoIdError(msg)

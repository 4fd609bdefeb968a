"""Tests for video ID validation and URL extraction."""

import pytest

from most_replayed import (
    InvalidVideoIdError,
    MostReplayedErrorCode,
    extract_video_id,
    is_valid_video_id,
)


class TestIsValidVideoId:
    @pytest.mark.parametrize("video_id", ["dQw4w9WgXcQ", "abc123XYZ_-", "___________", "-----------"])
    def test_valid(self, video_id):
        assert is_valid_video_id(video_id)

    @pytest.mark.parametrize(
        "video_id",
        ["", "dQw4w9WgXc", "dQw4w9WgXcQQ", "dQw4w9WgXc!", "dQw4w9 gXcQ", "dQw4w9WgXcQ\n"],
    )
    def test_invalid(self, video_id):
        assert not is_valid_video_id(video_id)


class TestExtractVideoId:
    @pytest.mark.parametrize(
        "value",
        [
            "dQw4w9WgXcQ",
            "  dQw4w9WgXcQ  ",
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
            "https://m.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
            "https://youtu.be/dQw4w9WgXcQ",
            "https://youtu.be/dQw4w9WgXcQ?si=abc",
            "https://www.youtube.com/v/dQw4w9WgXcQ",
            "https://www.youtube.com/shorts/dQw4w9WgXcQ",
            "youtube.com/watch?v=dQw4w9WgXcQ",
        ],
    )
    def test_extracts(self, value):
        assert extract_video_id(value) == "dQw4w9WgXcQ"

    @pytest.mark.parametrize(
        "value",
        ["", "   ", "invalid", "https://example.com/watch", "https://www.youtube.com/watch?v=short"],
    )
    def test_rejects(self, value):
        with pytest.raises(InvalidVideoIdError) as exc_info:
            extract_video_id(value)

        assert exc_info.value.code == MostReplayedErrorCode.INVALID_VIDEO_ID

    def test_error_message_quotes_input(self):
        with pytest.raises(InvalidVideoIdError, match='"bogus"'):
            extract_video_id("bogus")

"""Error types raised by the most_replayed pipeline."""

from enum import StrEnum


class MostReplayedErrorCode(StrEnum):
    """Error codes for the library."""

    INVALID_VIDEO_ID = "INVALID_VIDEO_ID"
    FETCH_FAILED = "FETCH_FAILED"
    PARSE_FAILED = "PARSE_FAILED"
    # Reserved: "no data" is returned as None rather than raised.
    NO_DATA_AVAILABLE = "NO_DATA_AVAILABLE"
    TIMEOUT = "TIMEOUT"


class MostReplayedError(Exception):
    """Base error for the library.

    Every error carries a ``code`` so callers can branch without isinstance
    checks, and an optional ``cause`` that is also chained as ``__cause__``.
    """

    code: MostReplayedErrorCode = MostReplayedErrorCode.FETCH_FAILED

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!s}, message={self.message!r})"


class InvalidVideoIdError(MostReplayedError):
    """The video ID or URL is malformed."""

    code = MostReplayedErrorCode.INVALID_VIDEO_ID


class FetchFailedError(MostReplayedError):
    """The watch page could not be fetched."""

    code = MostReplayedErrorCode.FETCH_FAILED

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        *,
        status: int | None = None,
        status_text: str | None = None,
    ) -> None:
        super().__init__(message, cause)
        self.status = status
        self.status_text = status_text

    @classmethod
    def from_status(cls, status: int, status_text: str) -> "FetchFailedError":
        """Build the error for a non-2xx HTTP response."""
        return cls(f"HTTP {status}: {status_text}", status=status, status_text=status_text)


class TimedOutError(MostReplayedError):
    """The final fetch attempt was aborted by its timeout."""

    code = MostReplayedErrorCode.TIMEOUT


class ParseFailedError(MostReplayedError):
    """The embedded initial data could not be located or parsed."""

    code = MostReplayedErrorCode.PARSE_FAILED


class NoDataAvailableError(MostReplayedError):
    """No heatmap is available for the video.

    Not raised by the pipeline itself, which returns None instead.
    """

    code = MostReplayedErrorCode.NO_DATA_AVAILABLE

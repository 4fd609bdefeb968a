"""Extracts the embedded ytInitialData JSON from watch page HTML."""

from most_replayed.common.errors import ParseFailedError

INITIAL_DATA_MARKER = "var ytInitialData = "
INITIAL_DATA_TERMINATOR = ";</script>"


def extract_initial_data_json(html: str) -> str:
    """Extract the raw ytInitialData JSON string from watch page HTML.

    This is a plain textual scan: the payload starts right after the first
    ``var ytInitialData = `` and ends at the first ``;</script>`` after it.

    Args:
        html: The watch page HTML.

    Returns:
        The JSON text exactly as embedded in the page.

    Raises:
        ParseFailedError: If either marker is missing.
    """
    start_index = html.find(INITIAL_DATA_MARKER)
    if start_index == -1:
        msg = "Could not find ytInitialData in page HTML"
        raise ParseFailedError(msg)

    json_start = start_index + len(INITIAL_DATA_MARKER)
    end_index = html.find(INITIAL_DATA_TERMINATOR, json_start)
    if end_index == -1:
        msg = "Could not find end of ytInitialData JSON"
        raise ParseFailedError(msg)

    return html[json_start:end_index]

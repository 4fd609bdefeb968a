"""Deserializes the extracted ytInitialData JSON."""

import json
from typing import Any

from most_replayed.common.errors import ParseFailedError


def parse_initial_data(json_string: str) -> Any:
    """Parse the ytInitialData JSON string into a plain tree.

    Raises:
        ParseFailedError: If the text is not valid JSON.
    """
    try:
        return json.loads(json_string)
    except json.JSONDecodeError as e:
        msg = f"Failed to parse ytInitialData JSON: {e.msg} at position {e.pos}"
        raise ParseFailedError(msg, e) from e

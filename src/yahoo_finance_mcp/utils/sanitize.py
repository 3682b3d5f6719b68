"""Text sanitization utilities."""

import re
from typing import Any

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def clean_field(value: Any, max_length: int | None = None) -> str:
    """
    Render an untrusted upstream field as single-line text.

    None and empty values become "". Control characters (newlines included)
    are removed so one field cannot break a line-oriented layout.

    Args:
        value: Upstream value (usually a string)
        max_length: Truncate with "..." beyond this many characters

    Returns:
        Sanitized text
    """
    if value is None or value == "":
        return ""

    text = _CONTROL_CHARS.sub("", str(value))

    if max_length is not None and len(text) > max_length:
        text = text[:max_length] + "..."

    return text.strip()

"""Text processing utilities shared by the workflows."""

import re

_ENGLISH_CHAR = re.compile(r"[a-zA-Z\s]")


def truncate_text(text: str, limit: int, marker: str = "...", keep_marker_in_limit: bool = False) -> str:
    """
    Cut text to ``limit`` characters, appending ``marker`` when cut.

    Args:
        text: Text to shorten
        limit: Maximum number of characters kept from ``text``
        marker: Appended when the text was truncated
        keep_marker_in_limit: Reserve room for the marker so the result
            itself never exceeds ``limit``

    Returns:
        The original text if short enough, else the truncated text + marker
    """
    if len(text) <= limit:
        return text
    if keep_marker_in_limit:
        return text[: max(0, limit - len(marker))] + marker
    return text[:limit] + marker


def english_ratio(text: str) -> float:
    """Share of characters that are ASCII letters or whitespace (0.0 for empty text)."""
    if not text:
        return 0.0
    return len(_ENGLISH_CHAR.findall(text)) / len(text)

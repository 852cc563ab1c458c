"""Plain-text excerpts for post listings."""

from __future__ import annotations

ELLIPSIS = "..."


def excerpt(content: str, max_len: int = 200) -> str:
    """Truncate content to max_len characters at a word boundary.

    The result is plain text; escape it where it is embedded in HTML.
    """
    text = content.strip()
    if len(text) <= max_len:
        return text
    cut = text[: max(max_len, 0)]
    space = cut.rfind(" ")
    if space > 0:
        cut = cut[:space]
    return cut + ELLIPSIS

"""Inline formatting for a single block's text: **bold** and `code` spans."""

from __future__ import annotations

BOLD = "**"
CODE = "`"


def pair_delimiters(text: str, delimiter: str, open_tag: str, close_tag: str) -> str:
    """Replace delimiter pairs with tags, scanning left to right.

    Pairs never nest or overlap. A trailing delimiter without a partner is
    left as literal text.
    """
    while True:
        start = text.find(delimiter)
        if start == -1:
            return text
        end = text.find(delimiter, start + len(delimiter))
        if end == -1:
            return text
        text = (
            text[:start]
            + open_tag
            + text[start + len(delimiter) : end]
            + close_tag
            + text[end + len(delimiter) :]
        )


def format_inline(text: str) -> str:
    """Format one already-escaped text segment. Bold runs before code."""
    text = pair_delimiters(text, BOLD, "<strong>", "</strong>")
    return pair_delimiters(text, CODE, "<code>", "</code>")

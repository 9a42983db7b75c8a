"""Text processing utilities for ppr.

Whitespace handling shared by the paragraph splitter and the scanner.
"Whitespace" means any character for which ``str.isspace`` is true.

Example:
    >>> from ppr.utils.text import collapse_whitespace
    >>> collapse_whitespace("  Hello \\t\\n world  ")
    'Hello world'
"""

from __future__ import annotations


def collapse_whitespace(text: str) -> str:
    """Trim text and collapse each interior whitespace run to one space.

    Idempotent: collapsing an already collapsed string returns it unchanged.

    Examples:
        >>> collapse_whitespace("a   b")
        'a b'
        >>> collapse_whitespace(collapse_whitespace(" a \\n b "))
        'a b'
    """
    return " ".join(text.split())


def is_blank(text: str) -> bool:
    """Whether text is empty or holds only whitespace."""
    return not text or text.isspace()


def skip_whitespace(text: str, pos: int, end: int | None = None) -> int:
    """Return the first position at or after pos that is not whitespace.

    Args:
        text: Text to scan
        pos: Start position
        end: Scan limit (defaults to len(text))

    Returns:
        Position of the first non-whitespace character, or end.
    """
    limit = len(text) if end is None else end
    while pos < limit and text[pos].isspace():
        pos += 1
    return pos

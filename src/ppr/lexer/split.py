"""Paragraph splitting.

A source is a sequence of paragraphs joined by a separator: a backslash by
default, or a line break under the legacy convention. Paragraph indices
count every segment, so the index in an error always matches the n-th
segment of the source even when blank segments are skipped.
"""

from __future__ import annotations

from dataclasses import dataclass

from ppr.config import DEFAULT_SEPARATOR
from ppr.utils.text import is_blank

BYTE_ORDER_MARK = "\ufeff"


@dataclass(frozen=True, slots=True)
class ParagraphSpan:
    """One paragraph segment of the source.

    Attributes:
        index: Segment index in the source (0-indexed)
        offset: Absolute offset of the segment's first character
        text: Raw segment text, marker included

    """

    index: int
    offset: int
    text: str


def strip_bom(source: str) -> str:
    """Drop a leading byte order mark."""
    return source.removeprefix(BYTE_ORDER_MARK)


def split_paragraphs(source: str, separator: str = DEFAULT_SEPARATOR) -> list[ParagraphSpan]:
    """Split source into paragraph spans.

    Blank segments (empty or whitespace only) are not paragraphs and are
    skipped; this lets a file end with a separator or a trailing newline.
    They are the one exception to "every paragraph yields a block or an
    error" besides bookmarks: a blank segment yields neither. Its index is
    still consumed, so later error indices match the source.

    Args:
        source: Full markup source
        separator: Paragraph separator

    Returns:
        Non-blank paragraph spans in source order.

    Example:
        >>> [s.text for s in split_paragraphs("P one\\\\P two")]
        ['P one', 'P two']
    """
    spans: list[ParagraphSpan] = []
    offset = 0
    for index, segment in enumerate(source.split(separator)):
        if not is_blank(segment):
            spans.append(ParagraphSpan(index, offset, segment))
        offset += len(segment) + len(separator)
    return spans

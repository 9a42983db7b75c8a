"""Block marker classifier mixin."""

from ppr.errors import MalformedHeadingMarker, UnrecognizedBlockMarker
from ppr.location import SourceLocation
from ppr.tokens import BLOCK_MARKERS, TokenKind

# Heading levels are a single decimal digit; H0 names no level
HEADING_LEVEL_DIGITS = frozenset("123456789")


class MarkerClassifierMixin:
    """Mixin providing block marker classification."""

    _text: str
    _index: int

    def _location_at(self, pos: int) -> SourceLocation:
        """Source location of a paragraph position. Implemented by Lexer."""
        raise NotImplementedError

    def _classify_marker(self, pos: int) -> tuple[TokenKind, int | None, int]:
        """Classify the block marker starting at pos.

        Markers: ``P`` paragraph, ``T`` title, ``H`` plus one digit heading,
        ``B`` bookmark.

        Args:
            pos: Position of the marker's first character

        Returns:
            (kind, heading level or None, position just past the marker)

        Raises:
            UnrecognizedBlockMarker: pos holds no known marker
            MalformedHeadingMarker: ``H`` is not followed by a digit 1-9
        """
        text = self._text
        marker = text[pos] if pos < len(text) else ""
        kind = BLOCK_MARKERS.get(marker)

        if kind is None:
            loc = self._location_at(pos)
            raise UnrecognizedBlockMarker(
                self._index,
                marker,
                lineno=loc.lineno,
                col_offset=loc.col_offset,
                source_file=loc.source_file,
            )

        if kind is not TokenKind.HEADING:
            return kind, None, pos + 1

        digit = text[pos + 1] if pos + 1 < len(text) else ""
        if digit not in HEADING_LEVEL_DIGITS:
            loc = self._location_at(pos + 1)
            raise MalformedHeadingMarker(
                self._index,
                digit,
                lineno=loc.lineno,
                col_offset=loc.col_offset,
                source_file=loc.source_file,
            )
        return kind, int(digit), pos + 2

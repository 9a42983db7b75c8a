"""Token definitions for the ppr lexer.

The lexer produces one LexToken per paragraph: a block kind plus the
ordered styled text runs scanned from the paragraph body.

Thread Safety:
LexToken and TextRun are frozen (immutable) and safe to share across threads.
Style and TokenKind are enums (inherently immutable).

"""

from dataclasses import dataclass, field
from enum import Enum, Flag, auto

from ppr.location import SourceLocation


class Style(Flag):
    """Inline styles toggled on and off inside a paragraph.

    A style set is a single Style value used as a bitmask: ``Style(0)`` is
    the empty set, ``Style.BOLD | Style.ITALICS`` holds two styles.

    """

    BOLD = auto()
    ITALICS = auto()
    UNDERLINE = auto()
    STRIKETHROUGH = auto()


NO_STYLE = Style(0)

# Two-character toggles recognized inside a paragraph body
TOGGLE_MARKERS: dict[str, Style] = {
    "//": Style.ITALICS,
    "__": Style.UNDERLINE,
    "**": Style.BOLD,
    "--": Style.STRIKETHROUGH,
}


class TokenKind(Enum):
    """Block kinds selected by a paragraph's leading marker."""

    PARAGRAPH = auto()  # P
    TITLE = auto()  # T
    HEADING = auto()  # H<digit>
    BOOKMARK = auto()  # B


BLOCK_MARKERS: dict[str, TokenKind] = {
    "P": TokenKind.PARAGRAPH,
    "T": TokenKind.TITLE,
    "H": TokenKind.HEADING,
    "B": TokenKind.BOOKMARK,
}


@dataclass(frozen=True, slots=True)
class TextRun:
    """A maximal span of paragraph text sharing one style set.

    Attributes:
        text: Literal text with whitespace already collapsed
        styles: Styles open while the text was scanned

    """

    text: str
    styles: Style = NO_STYLE

    def has(self, style: Style) -> bool:
        """Whether style is part of this run's style set."""
        return style in self.styles

    def __repr__(self) -> str:
        names = "|".join(sorted(s.name for s in self.styles)) or "-"
        return f"TextRun({self.text!r}, {names})"


@dataclass(frozen=True, slots=True)
class LexToken:
    """The lexical result for one paragraph.

    Attributes:
        kind: Block kind from the leading marker
        runs: Styled text runs in scan order
        index: Paragraph index in the source (0-indexed)
        level: Heading level (1-9), None for other kinds
        location: Where the paragraph starts in the source

    """

    kind: TokenKind
    runs: tuple[TextRun, ...]
    index: int = 0
    level: int | None = None
    location: SourceLocation = field(default_factory=SourceLocation.unknown, compare=False)

    @property
    def text(self) -> str:
        """Concatenated run text without styling."""
        return "".join(run.text for run in self.runs)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        kind = self.kind.name
        if self.level is not None:
            kind = f"{kind}{self.level}"
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"LexToken({kind}, {val!r}, #{self.index})"

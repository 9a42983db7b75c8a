"""Typed document nodes for ppr.

All nodes are frozen dataclasses with slots, so a compiled Document is
immutable and safe to share across threads.

Node Hierarchy:
Node (base)
├── Document
└── Block (content blocks)
    ├── Paragraph
    ├── Title
    └── Heading

Bookmark paragraphs are recognized by the lexer but have no node; the
builder drops them.

"""

from dataclasses import dataclass
from typing import TypeAlias

from ppr.location import SourceLocation
from ppr.tokens import TextRun


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all document nodes.

    All nodes track their source location for error messages and debugging.

    """

    location: SourceLocation


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Body paragraph.

    Markup: P text with **bold** and //italic//
    Exported run by run, keeping each run's inline styles.

    """

    runs: tuple[TextRun, ...]

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


@dataclass(frozen=True, slots=True)
class Title(Node):
    """Document title.

    Markup: T My Title
    Exported as one centred, unstyled run.

    """

    runs: tuple[TextRun, ...]

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """Section heading.

    Markup: H2 Section name
    Exported as one bold run sized by level.

    """

    level: int
    runs: tuple[TextRun, ...]

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


# Type alias for content blocks
Block: TypeAlias = Paragraph | Title | Heading


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node: the ordered content blocks of one compilation.

    Block order is output paragraph order and never changes after
    construction.

    """

    children: tuple[Block, ...]

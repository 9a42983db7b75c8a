"""RichTextBackend protocol: the document library seen by the exporter.

The exporter never touches a concrete file format. It drives a backend
through three calls: add_paragraph, add_run and save.
``DocxBackend`` is the reference implementation.

Example:
    from ppr.renderers.protocol import RichTextBackend

    def write_greeting(backend: RichTextBackend) -> None:
        backend.add_paragraph()
        backend.add_run("Hello", bold=True)

"""

from enum import Enum
from pathlib import Path
from typing import Protocol


class Justification(Enum):
    """Paragraph-level justification."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    BOTH = "both"


class RichTextBackend(Protocol):
    """Protocol for rich-text document backends.

    Formatting flags left as None are not written at all, so the run
    inherits whatever the paragraph style says.

    """

    def add_paragraph(self, *, justification: Justification | None = None) -> None:
        """Start a new paragraph; later runs are appended to it."""
        ...

    def add_run(
        self,
        text: str,
        *,
        bold: bool | None = None,
        italic: bool | None = None,
        strike: bool | None = None,
        underline_color: str | None = None,
        size: int | None = None,
        preserve_space: bool = False,
    ) -> None:
        """Append a run to the current paragraph.

        Args:
            text: Literal run text
            bold: Bold flag
            italic: Italic flag
            strike: Strikethrough flag
            underline_color: Hex RGB colour; underlines the run when set
            size: Font size in half-points
            preserve_space: Keep whitespace exactly as given

        """
        ...

    def save(self, path: Path) -> None:
        """Serialize the accumulated document to path (create or truncate)."""
        ...

"""python-docx backend.

Implements RichTextBackend on top of python-docx. The OOXML package
itself (zip layout, parts, relationships) is entirely python-docx's job;
this module only maps paragraph and run calls onto its object model.

Writes go to a temporary sibling file that is moved onto the target with
os.replace, so a failed save never leaves a truncated document behind.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path

import docx
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.shared import Pt
from docx.text.paragraph import Paragraph as DocxParagraph
from docx.text.run import Run

from ppr.errors import ExportWriteError, RenderError
from ppr.renderers.protocol import Justification
from ppr.utils.logger import get_logger

logger = get_logger(__name__)

_ALIGNMENT = {
    Justification.LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    Justification.CENTER: WD_ALIGN_PARAGRAPH.CENTER,
    Justification.RIGHT: WD_ALIGN_PARAGRAPH.RIGHT,
    Justification.BOTH: WD_ALIGN_PARAGRAPH.JUSTIFY,
}


def _set_underline_color(run: Run, color: str) -> None:
    """Write the underline colour attribute (w:u/@w:color)."""
    r_pr = run._r.get_or_add_rPr()
    underline = r_pr.find(qn("w:u"))
    if underline is not None:
        underline.set(qn("w:color"), color)


def _preserve_space(run: Run) -> None:
    for text in run._r.findall(qn("w:t")):
        text.set(qn("xml:space"), "preserve")


class DocxBackend:
    """RichTextBackend writing .docx files with python-docx.

    Usage:
        >>> backend = DocxBackend()
        >>> backend.add_paragraph(justification=Justification.CENTER)
        >>> backend.add_run("Title")
        >>> backend.save(Path("out.docx"))

    """

    __slots__ = ("_document", "_paragraph")

    def __init__(self, template: str | Path | None = None) -> None:
        """Create an empty document.

        Args:
            template: Optional .docx file whose styles seed the document
        """
        self._document = docx.Document(str(template) if template is not None else None)
        self._paragraph: DocxParagraph | None = None

    @property
    def document(self):
        """The underlying python-docx Document."""
        return self._document

    def add_paragraph(self, *, justification: Justification | None = None) -> None:
        self._paragraph = self._document.add_paragraph()
        if justification is not None:
            self._paragraph.alignment = _ALIGNMENT[justification]

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
        if self._paragraph is None:
            raise RenderError("add_run called before add_paragraph")

        run = self._paragraph.add_run(text)
        if bold is not None:
            run.bold = bold
        if italic is not None:
            run.italic = italic
        if strike is not None:
            run.font.strike = strike
        if size is not None:
            # OOXML sizes are half-points
            run.font.size = Pt(size / 2)
        if underline_color is not None:
            run.underline = True
            _set_underline_color(run, underline_color)
        if preserve_space:
            _preserve_space(run)

    def save(self, path: Path) -> None:
        """Save atomically to path (create or truncate).

        Raises:
            ExportWriteError: The file or its temporary sibling could not be written
        """
        path = Path(path)
        tmp = path.with_name(f".{path.name}.tmp{threading.get_ident()}")
        try:
            self._document.save(str(tmp))
            os.replace(tmp, path)
        except OSError as exc:
            tmp.unlink(missing_ok=True)
            raise ExportWriteError(path, exc.strerror or str(exc)) from exc
        logger.debug("Saved %s", path)

"""Document exporter: walks a Document and drives a rich-text backend.

One output paragraph per content block, in document order:

- Title: centred paragraph holding one unstyled run with the title text.
  Inline styles are discarded.
- Heading: one bold run with the heading text, sized from
  ExportConfig.heading_sizes by min(level, last index). Inline styles
  other than bold are discarded.
- Paragraph: one run per text run, bold/italic/strike copied from the
  run's styles, underline drawn in ExportConfig.underline_color, and
  whitespace preserved (it was already collapsed by the lexer).

Thread Safety:
An exporter holds only immutable configuration. Each export() call creates
its own backend, so one exporter can be shared across threads.

"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ppr.config import ExportConfig
from ppr.errors import ExportWriteError
from ppr.nodes import Block, Document, Heading, Paragraph, Title
from ppr.renderers.docx import DocxBackend
from ppr.renderers.protocol import Justification, RichTextBackend
from ppr.tokens import Style
from ppr.utils.logger import get_logger

logger = get_logger(__name__)


def output_path_for(input_path: str | Path, extension: str = ".docx") -> Path:
    """Derive the output path by replacing the input's extension.

    Raises:
        ExportWriteError: The derived path is the input file itself
    """
    input_path = Path(input_path)
    output = input_path.with_suffix(extension)
    if output == input_path:
        raise ExportWriteError(output, "output would overwrite the input file")
    return output


class DocumentExporter:
    """Export a Document through a RichTextBackend.

    Usage:
        >>> exporter = DocumentExporter()
        >>> exporter.export(parse("T Notes\\\\P Hello **world**"), "notes.docx")
        PosixPath('notes.docx')

    """

    __slots__ = ("_backend_factory", "_config")

    def __init__(
        self,
        backend_factory: Callable[[], RichTextBackend] = DocxBackend,
        config: ExportConfig | None = None,
    ) -> None:
        """Initialize exporter.

        Args:
            backend_factory: Creates a fresh backend per export
            config: Export configuration (defaults to ExportConfig())
        """
        self._backend_factory = backend_factory
        self._config = config or ExportConfig()

    @property
    def config(self) -> ExportConfig:
        return self._config

    def export(self, doc: Document, path: str | Path) -> Path:
        """Render doc into a new backend and save it to path.

        Returns:
            The path written

        Raises:
            ExportWriteError: The backend could not write path
        """
        path = Path(path)
        backend = self._backend_factory()
        self.render(doc, backend)
        backend.save(path)
        logger.info("Wrote %d paragraphs to %s", len(doc.children), path)
        return path

    def render(self, doc: Document, backend: RichTextBackend) -> None:
        """Issue paragraph and run calls for every block, in order."""
        for block in doc.children:
            self._render_block(block, backend)

    def _render_block(self, block: Block, backend: RichTextBackend) -> None:
        match block:
            case Title():
                backend.add_paragraph(justification=Justification.CENTER)
                backend.add_run(block.text)
            case Heading():
                backend.add_paragraph()
                backend.add_run(
                    block.text,
                    bold=True,
                    size=self._config.heading_size(block.level),
                )
            case Paragraph():
                backend.add_paragraph()
                for run in block.runs:
                    backend.add_run(
                        run.text,
                        bold=run.has(Style.BOLD),
                        italic=run.has(Style.ITALICS),
                        strike=run.has(Style.STRIKETHROUGH),
                        underline_color=(
                            self._config.underline_color if run.has(Style.UNDERLINE) else None
                        ),
                        preserve_space=True,
                    )

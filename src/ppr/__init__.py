"""
ppr: compile "paper" markup into word-processing documents.

A paper source is a list of paragraphs separated by backslashes. Each
paragraph starts with a block marker (``P`` paragraph, ``T`` title,
``H1``-``H9`` heading, ``B`` bookmark) and may toggle inline styles with
``**`` bold, ``//`` italics, ``__`` underline and ``--`` strikethrough.

Quick Start:
    >>> from ppr import parse
    >>> doc = parse("T My //Title//\\\\P Hello **world**")
    >>> doc.children[1].runs
    (TextRun('Hello ', -), TextRun('world', BOLD))

    >>> # Or convert a file end to end
    >>> from ppr import convert
    >>> convert("notes.ppr")
    PosixPath('notes.docx')
"""

from collections.abc import Callable
from pathlib import Path

from ppr.builder import build_document, classify
from ppr.config import (
    CompileConfig,
    ExportConfig,
    compile_config_context,
    get_compile_config,
    reset_compile_config,
    set_compile_config,
)
from ppr.errors import (
    ExportWriteError,
    InputReadError,
    MalformedHeadingMarker,
    ParseError,
    PprError,
    RenderError,
    UnrecognizedBlockMarker,
)
from ppr.lexer import Lexer, lex, split_paragraphs
from ppr.location import SourceLocation
from ppr.nodes import Block, Document, Heading, Node, Paragraph, Title
from ppr.renderers import (
    DocumentExporter,
    DocxBackend,
    Justification,
    RichTextBackend,
    output_path_for,
)
from ppr.serialization import to_dict, to_json
from ppr.source import read_source
from ppr.tokens import NO_STYLE, LexToken, Style, TextRun, TokenKind

__version__ = "0.3.0"


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: CompileConfig | None = None,
) -> Document:
    """Compile markup source into a Document.

    Args:
        source: Markup source text
        source_file: Optional source file path for error messages
        config: Compile configuration (defaults to the context's config)

    Returns:
        Document with one block per non-bookmark paragraph, in source order

    Raises:
        ParseError: Any paragraph fails to classify; nothing is returned

    Example:
        >>> doc = parse("H2 Section //One//")
        >>> doc.children[0].level
        2
    """
    tokens = lex(source, source_file=source_file, config=config)
    return build_document(tokens, source_file=source_file)


def export(
    doc: Document,
    path: str | Path,
    *,
    config: ExportConfig | None = None,
) -> Path:
    """Export a Document to a .docx file.

    Returns:
        The path written

    Raises:
        ExportWriteError: The file could not be written
    """
    return DocumentExporter(config=config).export(doc, path)


def convert(
    input_path: str | Path,
    output_path: str | Path | None = None,
    *,
    config: CompileConfig | None = None,
    export_config: ExportConfig | None = None,
) -> Path:
    """Read, compile and export one markup file.

    The output defaults to the input path with its extension replaced.

    Returns:
        The path written

    Raises:
        InputReadError: The input could not be read
        ParseError: The input failed to compile (no output is written)
        ExportWriteError: The output could not be written, or is the input file
    """
    converter = Converter(config=config, export_config=export_config)
    return converter(input_path, output_path)


class Converter:
    """High-level converter combining lexer, builder and exporter.

    Usage:
        >>> converter = Converter(config=CompileConfig(separator="\\n"))
        >>> converter("legacy.ppr")
        PosixPath('legacy.docx')

        >>> # Access the document tree
        >>> doc = converter.parse("P one\\nP two")
        >>> len(doc.children)
        2

    Thread Safety:
        Holds only immutable configuration. Compile config is applied through
        a ContextVar (thread-local), so instances are safe to share.

    """

    __slots__ = ("_config", "_export_config", "_backend_factory")

    def __init__(
        self,
        *,
        config: CompileConfig | None = None,
        export_config: ExportConfig | None = None,
        backend_factory: Callable[[], RichTextBackend] = DocxBackend,
    ) -> None:
        """Initialize converter.

        Args:
            config: Compile configuration (defaults to CompileConfig())
            export_config: Export configuration (defaults to ExportConfig())
            backend_factory: Creates the rich-text backend for each export
        """
        self._config = config or CompileConfig()
        self._export_config = export_config or ExportConfig()
        self._backend_factory = backend_factory

    @property
    def config(self) -> CompileConfig:
        return self._config

    @property
    def export_config(self) -> ExportConfig:
        return self._export_config

    def __call__(
        self,
        input_path: str | Path,
        output_path: str | Path | None = None,
    ) -> Path:
        """Convert one file. See convert()."""
        input_path = Path(input_path)
        if output_path is None:
            output_path = output_path_for(input_path, self._export_config.extension)
        elif Path(output_path).resolve() == input_path.resolve():
            raise ExportWriteError(output_path, "output would overwrite the input file")

        source = read_source(input_path)
        doc = self.parse(source, source_file=str(input_path))
        return self.export(doc, output_path)

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Compile source into a Document under this converter's config."""
        with compile_config_context(self._config):
            return parse(source, source_file=source_file)

    def export(self, doc: Document, path: str | Path) -> Path:
        """Export doc to path."""
        exporter = DocumentExporter(self._backend_factory, self._export_config)
        return exporter.export(doc, path)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "export",
    "convert",
    "read_source",
    "Converter",
    # Pipeline stages
    "Lexer",
    "lex",
    "split_paragraphs",
    "classify",
    "build_document",
    # Tokens
    "LexToken",
    "TokenKind",
    "TextRun",
    "Style",
    "NO_STYLE",
    # Document nodes
    "Node",
    "Block",
    "Document",
    "Paragraph",
    "Title",
    "Heading",
    # Export
    "DocumentExporter",
    "DocxBackend",
    "RichTextBackend",
    "Justification",
    "output_path_for",
    # Serialization
    "to_dict",
    "to_json",
    # Configuration (ContextVar-based)
    "CompileConfig",
    "ExportConfig",
    "get_compile_config",
    "set_compile_config",
    "reset_compile_config",
    "compile_config_context",
    # Errors
    "PprError",
    "ParseError",
    "UnrecognizedBlockMarker",
    "MalformedHeadingMarker",
    "InputReadError",
    "ExportWriteError",
    "RenderError",
    # Location
    "SourceLocation",
]

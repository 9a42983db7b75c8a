"""Per-paragraph lexer and the order-preserving parallel lexing pass.

Each paragraph is lexed by its own single-use Lexer. Paragraphs share no
state, so `lex` fans them out over a thread pool and reassembles the
tokens in source order (ThreadPoolExecutor.map yields results in input
order regardless of completion order).

Thread Safety:
Lexer instances are single-use. Create one per paragraph.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from ppr.config import CompileConfig, get_compile_config
from ppr.lexer.classifiers import MarkerClassifierMixin
from ppr.lexer.scanners import RunScannerMixin
from ppr.lexer.split import ParagraphSpan, split_paragraphs, strip_bom
from ppr.location import SourceLocation
from ppr.tokens import LexToken
from ppr.utils.logger import get_logger
from ppr.utils.text import skip_whitespace

logger = get_logger(__name__)


class Lexer(
    MarkerClassifierMixin,
    RunScannerMixin,
):
    """Single-paragraph lexer.

    1. Skip whitespace before the block marker
    2. Classify the marker (pure, raises on unknown markers)
    3. Trim the body on both sides
    4. Scan the body into styled runs

    Usage:
        >>> Lexer("P Hello **world**").tokenize()
        LexToken(PARAGRAPH, 'Hello world', #0)

    Thread Safety:
        Lexer instances are single-use. Create one per paragraph.

    """

    __slots__ = (
        "_text",
        "_index",
        "_offset",
        "_source",
        "_source_file",
        "_keep_empty_runs",
    )

    def __init__(
        self,
        text: str,
        index: int = 0,
        *,
        offset: int = 0,
        source: str | None = None,
        source_file: str | None = None,
        keep_empty_runs: bool = False,
    ) -> None:
        """Initialize lexer with one paragraph.

        Args:
            text: Paragraph text, block marker included
            index: Paragraph index in the source (for error messages)
            offset: Absolute offset of text within source
            source: Full source text (for line/column tracking)
            source_file: Optional source file path for error messages
            keep_empty_runs: Keep empty runs flushed at toggles
        """
        self._text = text
        self._index = index
        self._offset = offset if source is not None else 0
        self._source = source if source is not None else text
        self._source_file = source_file
        self._keep_empty_runs = keep_empty_runs

    @classmethod
    def for_span(
        cls,
        span: ParagraphSpan,
        source: str,
        *,
        source_file: str | None = None,
        keep_empty_runs: bool = False,
    ) -> Lexer:
        """Create a lexer for a span produced by split_paragraphs."""
        return cls(
            span.text,
            span.index,
            offset=span.offset,
            source=source,
            source_file=source_file,
            keep_empty_runs=keep_empty_runs,
        )

    def tokenize(self) -> LexToken:
        """Lex the paragraph into a token.

        Returns:
            LexToken with the block kind and its styled runs

        Raises:
            UnrecognizedBlockMarker: Unknown leading marker
            MalformedHeadingMarker: ``H`` without a level digit
        """
        text = self._text
        start = skip_whitespace(text, 0)
        kind, level, body_start = self._classify_marker(start)

        body_start = skip_whitespace(text, body_start)
        body_end = max(len(text.rstrip()), body_start)

        return LexToken(
            kind=kind,
            runs=self._scan_runs(body_start, body_end),
            index=self._index,
            level=level,
            location=self._location_at(start, len(text)),
        )

    def _location_at(self, pos: int, end: int | None = None) -> SourceLocation:
        """Source location of a paragraph position."""
        return SourceLocation.from_offset(
            self._source,
            self._offset + pos,
            end_offset=None if end is None else self._offset + end,
            source_file=self._source_file,
        )


def lex(
    source: str,
    *,
    source_file: str | None = None,
    config: CompileConfig | None = None,
) -> list[LexToken]:
    """Lex a full source into one token per paragraph.

    Args:
        source: Markup source text
        source_file: Optional source file path for error messages
        config: Compile configuration (defaults to the context's config)

    Returns:
        Tokens in paragraph order. result[i] is always the i-th paragraph.

    Raises:
        ParseError: The first paragraph, in source order, that fails to lex
    """
    config = config or get_compile_config()
    source = strip_bom(source)
    spans = split_paragraphs(source, config.separator)

    def scan(span: ParagraphSpan) -> LexToken:
        return Lexer.for_span(
            span,
            source,
            source_file=source_file,
            keep_empty_runs=config.keep_empty_runs,
        ).tokenize()

    if config.max_workers == 1 or len(spans) < config.parallel_threshold:
        logger.debug("Lexing %d paragraphs inline", len(spans))
        return [scan(span) for span in spans]

    logger.debug("Lexing %d paragraphs across worker threads", len(spans))
    with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
        return list(executor.map(scan, spans))

"""Document builder: lexical tokens to typed content blocks.

Maps each LexToken 1:1 onto a content block, in order. Bookmark tokens
are recognized by the lexer but have no document representation yet, so
they are dropped here rather than rejected.

Thread Safety:
Pure functions over immutable tokens; the resulting Document is frozen.

"""

from __future__ import annotations

from collections.abc import Iterable

from ppr.location import SourceLocation
from ppr.nodes import Block, Document, Heading, Paragraph, Title
from ppr.tokens import LexToken, TokenKind
from ppr.utils.logger import get_logger

logger = get_logger(__name__)


def classify(token: LexToken) -> Block | None:
    """Map one token onto its content block.

    Args:
        token: Token produced by the lexer

    Returns:
        The content block, or None for kinds with no block (bookmarks).
    """
    match token.kind:
        case TokenKind.PARAGRAPH:
            return Paragraph(location=token.location, runs=token.runs)
        case TokenKind.TITLE:
            return Title(location=token.location, runs=token.runs)
        case TokenKind.HEADING:
            assert token.level is not None, "heading token without level"
            return Heading(location=token.location, level=token.level, runs=token.runs)
        case TokenKind.BOOKMARK:
            logger.debug("Dropping bookmark paragraph %d", token.index)
            return None


def build_document(
    tokens: Iterable[LexToken],
    *,
    source_file: str | None = None,
) -> Document:
    """Build a Document from tokens, preserving their order.

    Args:
        tokens: Tokens in paragraph order
        source_file: Optional source file path recorded on the document

    Returns:
        Document whose children follow token order
    """
    blocks: list[Block] = []
    for token in tokens:
        block = classify(token)
        if block is not None:
            blocks.append(block)

    logger.debug("Built document with %d blocks", len(blocks))
    return Document(
        location=SourceLocation(lineno=1, col_offset=1, source_file=source_file),
        children=tuple(blocks),
    )

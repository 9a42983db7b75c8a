"""Tests for classifying tokens into document blocks."""

from __future__ import annotations

import dataclasses

import pytest

from ppr import parse
from ppr.builder import build_document, classify
from ppr.lexer import lex
from ppr.nodes import Document, Heading, Paragraph, Title
from ppr.tokens import NO_STYLE, LexToken, Style, TextRun, TokenKind

RUNS = (TextRun("plain ", NO_STYLE), TextRun("bold", Style.BOLD))


class TestClassify:
    """One token maps to one block (or none for bookmarks)."""

    def test_paragraph(self) -> None:
        block = classify(LexToken(TokenKind.PARAGRAPH, RUNS))
        assert isinstance(block, Paragraph)
        assert block.runs == RUNS

    def test_title(self) -> None:
        block = classify(LexToken(TokenKind.TITLE, RUNS))
        assert isinstance(block, Title)
        assert block.runs == RUNS

    def test_heading_keeps_level(self) -> None:
        block = classify(LexToken(TokenKind.HEADING, RUNS, level=4))
        assert isinstance(block, Heading)
        assert block.level == 4
        assert block.runs == RUNS

    def test_bookmark_is_dropped(self) -> None:
        assert classify(LexToken(TokenKind.BOOKMARK, RUNS)) is None

    def test_location_is_carried(self) -> None:
        token = lex("P a\\T b")[1]
        block = classify(token)
        assert block is not None
        assert block.location == token.location
        assert block.location.offset == 4


class TestBuildDocument:
    """Document assembly keeps source order."""

    def test_order_preserved(self) -> None:
        doc = build_document(lex("T t\\H1 h\\P p\\H3 h3\\P q"))
        assert [type(b) for b in doc.children] == [Title, Heading, Paragraph, Heading, Paragraph]
        assert [b.text for b in doc.children] == ["t", "h", "p", "h3", "q"]

    def test_bookmarks_removed_without_reordering(self) -> None:
        doc = parse("P one\\B mark\\P two\\B other")
        assert [b.text for b in doc.children] == ["one", "two"]

    def test_empty(self) -> None:
        doc = build_document([])
        assert doc.children == ()

    def test_source_file_recorded(self) -> None:
        doc = build_document([], source_file="notes.ppr")
        assert doc.location.source_file == "notes.ppr"

    def test_document_is_immutable(self) -> None:
        doc = parse("P x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.children = ()  # type: ignore[misc]
        assert isinstance(doc.children, tuple)

    def test_block_text_discards_styles(self) -> None:
        doc = parse("H2 Section //One//")
        heading = doc.children[0]
        assert isinstance(heading, Heading)
        assert heading.text == "Section One"

    def test_returns_document(self) -> None:
        assert isinstance(parse(""), Document)

"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from __future__ import annotations

from functools import reduce

from hypothesis import given, settings
from hypothesis import strategies as st

from ppr.config import CompileConfig
from ppr.errors import ParseError
from ppr.lexer import Lexer, lex
from ppr.tokens import NO_STYLE, TOGGLE_MARKERS, Style
from ppr.utils.text import collapse_whitespace

words = st.text(alphabet="abcxyz", min_size=1, max_size=6)
toggles = st.sampled_from(sorted(TOGGLE_MARKERS))
pieces = st.lists(st.one_of(words, toggles), max_size=20)
joiners = st.sampled_from(["", " ", "  ", "\t"])
whitespace_text = st.text(alphabet="ab \t\n\r\x0b\x0c", max_size=60)


def open_styles(markers: list[str]) -> Style:
    return reduce(lambda acc, m: acc ^ TOGGLE_MARKERS[m], markers, NO_STYLE)


class TestToggleInvariants:
    """Style state follows the toggles exactly."""

    @given(items=pieces, joiner=joiners)
    @settings(max_examples=200)
    def test_one_run_per_toggle_plus_final(self, items: list[str], joiner: str) -> None:
        """With empty runs kept, flushes happen exactly at toggles and the end."""
        token = Lexer("P " + joiner.join(items), keep_empty_runs=True).tokenize()
        markers = [item for item in items if item in TOGGLE_MARKERS]

        assert len(token.runs) == len(markers) + 1

    @given(items=pieces, joiner=joiners)
    @settings(max_examples=200)
    def test_each_run_carries_open_styles(self, items: list[str], joiner: str) -> None:
        """Run k holds exactly the styles toggled an odd number of times before it."""
        token = Lexer("P " + joiner.join(items), keep_empty_runs=True).tokenize()
        markers = [item for item in items if item in TOGGLE_MARKERS]

        for k, run in enumerate(token.runs):
            assert run.styles == open_styles(markers[:k])

    @given(items=pieces)
    @settings(max_examples=100)
    def test_doubling_toggles_closes_everything(self, items: list[str]) -> None:
        """Every toggle repeated twice leaves no style open at the end."""
        doubled = [m for item in items for m in ([item, item] if item in TOGGLE_MARKERS else [item])]
        token = Lexer("P " + " ".join(doubled), keep_empty_runs=True).tokenize()

        assert token.runs[-1].styles == NO_STYLE

    @given(items=pieces, joiner=joiners)
    @settings(max_examples=200)
    def test_runs_never_contain_toggles(self, items: list[str], joiner: str) -> None:
        token = Lexer("P " + joiner.join(items)).tokenize()

        for run in token.runs:
            for marker in TOGGLE_MARKERS:
                assert marker not in run.text

    @given(st.text(alphabet="ab */_-\t", max_size=40))
    @settings(max_examples=300)
    def test_stray_marker_characters_never_leak_toggles(self, body: str) -> None:
        """Single marker characters stay literal and never form a toggle inside a run."""
        token = Lexer("P " + body).tokenize()

        for run in token.runs:
            for marker in TOGGLE_MARKERS:
                assert marker not in run.text

    @given(items=pieces, joiner=joiners)
    @settings(max_examples=200)
    def test_text_is_preserved(self, items: list[str], joiner: str) -> None:
        """Dropping toggles never loses words or reorders them."""
        token = Lexer("P " + joiner.join(items)).tokenize()
        expected = [item for item in items if item not in TOGGLE_MARKERS]

        assert collapse_whitespace(token.text).replace(" ", "") == "".join(expected)

    @given(items=pieces, joiner=joiners)
    @settings(max_examples=100)
    def test_no_empty_runs_by_default(self, items: list[str], joiner: str) -> None:
        token = Lexer("P " + joiner.join(items)).tokenize()
        assert all(run.text for run in token.runs)


class TestWhitespaceInvariants:
    """Whitespace normalization is stable."""

    @given(whitespace_text)
    @settings(max_examples=200)
    def test_collapse_is_idempotent(self, text: str) -> None:
        once = collapse_whitespace(text)
        assert collapse_whitespace(once) == once

    @given(whitespace_text)
    @settings(max_examples=200)
    def test_lexed_body_matches_collapse(self, text: str) -> None:
        token = Lexer("P " + text).tokenize()
        assert token.text == collapse_whitespace(text)

    @given(whitespace_text)
    @settings(max_examples=100)
    def test_relexing_normalized_text_is_identity(self, text: str) -> None:
        first = Lexer("P " + text).tokenize().text
        assert Lexer("P " + first).tokenize().text == first


class TestOrdering:
    """Parallel lexing reassembles paragraphs in source order."""

    @given(st.lists(words, min_size=1, max_size=80))
    @settings(max_examples=30, deadline=None)
    def test_block_order_matches_source(self, texts: list[str]) -> None:
        config = CompileConfig(max_workers=4, parallel_threshold=0)
        source = "\\".join(f"P {text}" for text in texts)

        tokens = lex(source, config=config)

        assert [t.text for t in tokens] == texts
        assert [t.index for t in tokens] == list(range(len(texts)))


class TestClassificationTotality:
    """Every paragraph yields one token or one typed error."""

    @given(st.text(alphabet="PTHBXp0129 ab*/", min_size=1, max_size=12))
    @settings(max_examples=300)
    def test_token_or_parse_error(self, paragraph: str) -> None:
        try:
            tokens = lex(paragraph)
        except ParseError as exc:
            assert exc.paragraph_index == 0
        else:
            assert len(tokens) == (0 if paragraph.isspace() else 1)

"""Paragraph lexer for the ppr markup language.

Splits a source into paragraphs and scans each into a LexToken: a block
kind plus its styled text runs.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, lex, split_paragraphs
├── core.py              # Lexer class (mixin composition) + parallel lex()
├── split.py             # Paragraph splitting, BOM handling
├── classifiers/         # Block marker classification
│   └── marker.py        # P / T / H<digit> / B
└── scanners/            # Body scanning
    └── runs.py          # Toggle-aware styled run scanner

Usage:
    >>> from ppr.lexer import lex
    >>> lex("T My //Title//\\\\P Hello **world**")
    [LexToken(TITLE, 'My Title', #0), LexToken(PARAGRAPH, 'Hello world', #1)]

"""

from ppr.lexer.core import Lexer, lex
from ppr.lexer.split import ParagraphSpan, split_paragraphs, strip_bom

__all__ = ["Lexer", "ParagraphSpan", "lex", "split_paragraphs", "strip_bom"]

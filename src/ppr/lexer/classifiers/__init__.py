"""Block classifiers for the ppr lexer.

Each classifier is a mixin that decides which block kind a paragraph
belongs to, without scanning its body.
"""

from ppr.lexer.classifiers.marker import (
    HEADING_LEVEL_DIGITS,
    MarkerClassifierMixin,
)

__all__ = [
    "HEADING_LEVEL_DIGITS",
    "MarkerClassifierMixin",
]

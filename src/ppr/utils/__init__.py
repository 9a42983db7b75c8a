"""Utility modules for ppr.

Provides:
- logger: get_logger and the CLI's configure_logging
- text: whitespace helpers shared by the lexer
"""

from ppr.utils.logger import configure_logging, get_logger
from ppr.utils.text import collapse_whitespace, is_blank

__all__ = [
    "collapse_whitespace",
    "configure_logging",
    "get_logger",
    "is_blank",
]

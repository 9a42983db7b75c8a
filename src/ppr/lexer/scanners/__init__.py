"""Body scanners for the ppr lexer.

Scanners walk a paragraph body after its block marker has been classified.
"""

from ppr.lexer.scanners.runs import RunScannerMixin

__all__ = ["RunScannerMixin"]

"""Document exporters for ppr.

Provides:
- exporter: DocumentExporter, which walks a Document once
- protocol: RichTextBackend, the document library interface it drives
- docx: DocxBackend, the python-docx implementation
"""

from ppr.renderers.docx import DocxBackend
from ppr.renderers.exporter import DocumentExporter, output_path_for
from ppr.renderers.protocol import Justification, RichTextBackend

__all__ = [
    "DocumentExporter",
    "DocxBackend",
    "Justification",
    "RichTextBackend",
    "output_path_for",
]

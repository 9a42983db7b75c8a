"""Exception classes for ppr.

Provides standardized exceptions for error handling throughout ppr.
Any error raised while compiling aborts the whole conversion; no partial
document and no output file are produced.
"""

from __future__ import annotations

from pathlib import Path


class PprError(Exception):
    """Base exception for all ppr errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(PprError):
    """Error while compiling markup into a document.

    Raised when a paragraph cannot be classified or scanned.
    """

    def __init__(
        self,
        message: str,
        paragraph_index: int | None = None,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            paragraph_index: Index of the offending paragraph (0-indexed)
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.paragraph_index = paragraph_index
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class UnrecognizedBlockMarker(ParseError):
    """A paragraph starts with a character that names no block kind."""

    def __init__(
        self,
        paragraph_index: int,
        marker: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.marker = marker
        super().__init__(
            f"paragraph {paragraph_index}: unrecognized block marker {marker!r}",
            paragraph_index=paragraph_index,
            lineno=lineno,
            col_offset=col_offset,
            source_file=source_file,
        )


class MalformedHeadingMarker(ParseError):
    """An ``H`` marker is not followed by a heading level digit (1-9)."""

    def __init__(
        self,
        paragraph_index: int,
        found: str = "",
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.found = found
        detail = f"got {found!r}" if found else "got end of paragraph"
        super().__init__(
            f"paragraph {paragraph_index}: heading marker needs a level digit 1-9, {detail}",
            paragraph_index=paragraph_index,
            lineno=lineno,
            col_offset=col_offset,
            source_file=source_file,
        )


class InputReadError(PprError):
    """The markup source file could not be read or decoded."""

    def __init__(self, path: str | Path, reason: str) -> None:
        """Initialize input read error.

        Args:
            path: Path of the file that failed to load
            reason: Description of the failure
        """
        self.path = Path(path)
        super().__init__(f"cannot read {self.path}: {reason}")


class ExportWriteError(PprError):
    """The exported document could not be written to disk."""

    def __init__(self, path: str | Path, reason: str) -> None:
        """Initialize export write error.

        Args:
            path: Destination path of the document
            reason: Description of the failure
        """
        self.path = Path(path)
        super().__init__(f"cannot write {self.path}: {reason}")


class RenderError(PprError):
    """Error while issuing document calls to a rich-text backend.

    Raised when the exporter or a backend is driven out of order.
    """

    pass

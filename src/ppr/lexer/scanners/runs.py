"""Styled run scanner mixin.

Scans a trimmed paragraph body left to right, threading the open style set
through the loop as a local accumulator. Runs are flushed at every toggle
and at the end of the body, so no run ever spans a style change.
"""

from ppr.tokens import NO_STYLE, TOGGLE_MARKERS, Style, TextRun
from ppr.utils.text import skip_whitespace


class RunScannerMixin:
    """Mixin providing toggle-aware run scanning."""

    _text: str
    _keep_empty_runs: bool

    def _scan_runs(self, pos: int, end: int) -> tuple[TextRun, ...]:
        """Scan text[pos:end] into styled runs.

        Toggles (``//``, ``__``, ``**``, ``--``) flush the buffer with the
        style set open before the toggle, then flip that style. A whitespace
        run collapses to one space. An unterminated toggle simply stays open
        until the end of the body.

        Args:
            pos: Start of the trimmed body
            end: End of the trimmed body (exclusive)

        Returns:
            Runs in scan order.
        """
        text = self._text
        runs: list[TextRun] = []
        styles = NO_STYLE
        buffer: list[str] = []

        while pos < end:
            if pos + 1 < end:
                toggle = TOGGLE_MARKERS.get(text[pos : pos + 2])
                if toggle is not None:
                    self._flush_run(runs, buffer, styles)
                    buffer = []
                    styles ^= toggle
                    pos += 2
                    continue

            char = text[pos]
            if char.isspace():
                buffer.append(" ")
                pos = skip_whitespace(text, pos, end)
                continue

            buffer.append(char)
            pos += 1

        self._flush_run(runs, buffer, styles)
        return tuple(runs)

    def _flush_run(self, runs: list[TextRun], buffer: list[str], styles: Style) -> None:
        """Append the buffered text as a run tagged with styles."""
        if buffer or self._keep_empty_runs:
            runs.append(TextRun("".join(buffer), styles))

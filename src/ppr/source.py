"""Reading markup sources from disk."""

from __future__ import annotations

from pathlib import Path

from ppr.errors import InputReadError
from ppr.utils.logger import get_logger

logger = get_logger(__name__)


def read_source(path: str | Path) -> str:
    """Read a whole markup file as text.

    Decodes as UTF-8; a leading byte order mark is dropped.

    Raises:
        InputReadError: The file is missing, unreadable or not valid UTF-8
    """
    path = Path(path)
    try:
        source = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise InputReadError(path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise InputReadError(path, exc.strerror or str(exc)) from exc
    logger.debug("Read %d characters from %s", len(source), path)
    return source

"""Document serialization: JSON view of compiled documents.

Converts typed nodes to JSON-compatible dicts for debugging and
inspection (``ppr --dump-json``). Output is deterministic (sorted keys,
sorted style names).

Example:
    from ppr import parse
    from ppr.serialization import to_json

    print(to_json(parse("H1 Hello **World**"), indent=2))

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from ppr.location import SourceLocation
from ppr.nodes import Document, Node
from ppr.tokens import Style, TextRun


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field naming the node class.
    Recursively serializes child nodes, runs and SourceLocation objects.

    Args:
        node: Any ppr document node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, TextRun):
        return {"text": value.text, "styles": _serialize_value(value.styles)}
    if isinstance(value, Style):
        return sorted(style.name for style in value)
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            "lineno": value.lineno,
            "col_offset": value.col_offset,
            "offset": value.offset,
            "end_offset": value.end_offset,
            "source_file": value.source_file,
        }
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


__all__ = ["to_dict", "to_json"]

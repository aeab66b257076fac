"""Document serialization: JSON round-trip for cmarkparser nodes.

Converts nodes to/from JSON-compatible dicts. All output is deterministic
(sorted keys). Content bytes are stored as text decoded with
``surrogateescape``, so bytes that are not valid UTF-8 survive the trip.

Example:
    from cmarkparser import parse
    from cmarkparser.serialization import to_json, from_json

    doc = parse(b"# Hello")
    restored = from_json(to_json(doc))
    assert doc.equal(restored)

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import json
from typing import Any

from cmarkparser.location import SourceLocation
from cmarkparser.nodes import Document, Node, NodeType


def to_dict(node: Document | Node) -> dict[str, Any]:
    """Convert a Document or Node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    """
    if isinstance(node, Document):
        return {
            "_type": "Document",
            "children": [to_dict(child) for child in node.children],
            "location": _serialize_location(node.location),
        }
    return {
        "_type": "Node",
        "type": node.type.value,
        "content": _encode_content(node.content),
        "children": [to_dict(child) for child in node.children],
        "location": _serialize_location(node.location),
    }


def _encode_content(content: bytes) -> str:
    return content.decode("utf-8", errors="surrogateescape")


def _decode_content(content: str) -> bytes:
    return content.encode("utf-8", errors="surrogateescape")


def _serialize_location(location: SourceLocation | None) -> dict[str, Any] | None:
    if location is None:
        return None
    return {
        "_type": "SourceLocation",
        "lineno": location.lineno,
        "col_offset": location.col_offset,
        "offset": location.offset,
        "end_offset": location.end_offset,
        "end_lineno": location.end_lineno,
        "source_file": location.source_file,
    }


def _deserialize_location(value: dict[str, Any] | None) -> SourceLocation | None:
    if value is None:
        return None
    return SourceLocation(
        lineno=value["lineno"],
        col_offset=value.get("col_offset", 1),
        offset=value.get("offset", 0),
        end_offset=value.get("end_offset", 0),
        end_lineno=value.get("end_lineno"),
        source_file=value.get("source_file"),
    )


def from_dict(data: dict[str, Any]) -> Document | Node:
    """Reconstruct a Document or Node from a dict.

    Raises:
        ValueError: If ``_type`` is missing or unknown, or a node type
            name is not recognised.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    children = tuple(_node_from_dict(child) for child in data.get("children", ()))
    location = _deserialize_location(data.get("location"))

    if type_name == "Document":
        return Document(children=children, location=location)
    if type_name == "Node":
        return Node(
            type=NodeType.from_name(data["type"]),
            content=_decode_content(data.get("content", "")),
            children=children,
            location=location,
        )

    msg = f"Unknown node type: {type_name!r}"
    raise ValueError(msg)


def _node_from_dict(data: dict[str, Any]) -> Node:
    node = from_dict(data)
    if not isinstance(node, Node):
        msg = f"Expected Node, got {type(node).__name__}"
        raise ValueError(msg)
    return node


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string (sorted keys)."""
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    raw = json.loads(data)
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node

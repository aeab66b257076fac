"""Tests for cmarkparser.serialization: Document JSON round-trip."""

import json

import pytest

from cmarkparser import parse
from cmarkparser.location import SourceLocation
from cmarkparser.nodes import Document, Node, NodeType
from cmarkparser.serialization import from_dict, from_json, to_dict, to_json


class TestToDict:
    """Dict shape."""

    def test_node_dict(self) -> None:
        node = Node(NodeType.HEADING2, b"Title", location=SourceLocation(lineno=3))
        data = to_dict(node)
        assert data["_type"] == "Node"
        assert data["type"] == "H2"
        assert data["content"] == "Title"
        assert data["children"] == []
        assert data["location"]["lineno"] == 3

    def test_document_without_location(self) -> None:
        assert to_dict(Document()) == {"_type": "Document", "children": [], "location": None}


class TestRoundTrip:
    """Parsed documents survive JSON."""

    def test_parsed_document(self) -> None:
        doc = parse(b"# Title\n\nfirst\nsecond\n\n* * *\n", source_file="a.md")
        restored = from_json(to_json(doc))
        assert restored.equal(doc)
        assert restored.children[0].location == doc.children[0].location

    def test_invalid_utf8_content_survives(self) -> None:
        doc = parse(b"caf\xe9 \xff\n")
        restored = from_json(to_json(doc))
        assert restored.children[0].content == b"caf\xe9 \xff"

    def test_json_is_deterministic(self) -> None:
        doc = parse(b"# a\nb")
        assert to_json(doc) == to_json(parse(b"# a\nb"))
        assert json.loads(to_json(doc, indent=2)) == json.loads(to_json(doc))


class TestErrors:
    """Malformed input is rejected."""

    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing '_type'"):
            from_dict({"children": []})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            from_dict({"_type": "Table"})

    def test_unknown_node_type_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            from_dict({"_type": "Node", "type": "H7"})

    def test_from_json_requires_document(self) -> None:
        with pytest.raises(ValueError, match="Expected Document"):
            from_json(json.dumps({"_type": "Node", "type": "Par", "content": "x"}))

    def test_document_child_must_be_node(self) -> None:
        with pytest.raises(ValueError, match="Expected Node"):
            from_dict({"_type": "Document", "children": [{"_type": "Document"}]})

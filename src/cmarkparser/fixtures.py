"""File-based expectations for parser tests.

A fixture is a ``<name>.md`` input next to a ``<name>.json`` expectation:

    {"Children": [{"Type": "H1", "Content": ["Title"], "Children": []}]}

``Content`` is a list of lines joined with ``\\n``; ``Type`` is a stable
node type name. Inputs are read byte for byte.

Example:
    >>> for source, expected in iter_fixtures("tests/fixtures"):
    ...     assert check_fixture(source, expected) is None

"""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from cmarkparser.nodes import Document, Node, NodeType

INPUT_SUFFIX = ".md"
EXPECTATION_SUFFIX = ".json"


def expected_from_dict(data: dict[str, Any]) -> Document:
    """Build the expected Document from a decoded expectation file.

    Raises:
        ValueError: If the data is not an object or a node type is unknown.
    """
    if not isinstance(data, dict):
        msg = f"Expectation must be a JSON object, got {type(data).__name__}"
        raise ValueError(msg)
    return Document(children=tuple(_node_from_dict(n) for n in data.get("Children") or ()))


def _node_from_dict(data: dict[str, Any]) -> Node:
    content = data.get("Content") or []
    if isinstance(content, str):
        content = [content]
    return Node(
        type=NodeType.from_name(data["Type"]),
        content="\n".join(content).encode("utf-8"),
        children=tuple(_node_from_dict(n) for n in data.get("Children") or ()),
    )


def load_expected(path: str | Path) -> Document:
    """Load an expectation file."""
    with open(path, encoding="utf-8") as f:
        return expected_from_dict(json.load(f))


def expectation_path(source: str | Path) -> Path:
    """Path of the expectation file belonging to an input file."""
    return Path(source).with_suffix(EXPECTATION_SUFFIX)


def iter_fixtures(directory: str | Path) -> Iterator[tuple[Path, Path]]:
    """Yield (input, expectation) pairs under directory, sorted by path.

    Inputs without an expectation file are skipped.
    """
    for source in sorted(Path(directory).rglob(f"*{INPUT_SUFFIX}")):
        expected = expectation_path(source)
        if expected.is_file():
            yield source, expected


def check_fixture(source: str | Path, expected: str | Path | None = None) -> str | None:
    """Parse an input file and compare it to its expectation.

    Returns:
        None when the documents are equal, otherwise a message showing
        both documents.
    """
    from cmarkparser import parse

    source = Path(source)
    expected_doc = load_expected(expected or expectation_path(source))
    doc = parse(source.read_bytes(), source_file=str(source))
    if doc.equal(expected_doc):
        return None
    return f"{source}:\n{doc.to_display_string()}\n_________________\n{expected_doc.to_display_string()}"

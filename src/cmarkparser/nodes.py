"""Typed block nodes for cmarkparser.

All nodes are frozen dataclasses with slots:
- Immutability: a node is finalized once and never mutated afterwards
- Structural equality: type, content and children; locations are ignored

Node Hierarchy:
Document
└── Node (Par, H1..H6, TBreak)

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from cmarkparser.location import SourceLocation


class NodeType(Enum):
    """Closed set of block kinds.

    The value is the stable name used in display output, fixtures and
    serialization.

    """

    PARAGRAPH = "Par"
    HEADING1 = "H1"
    HEADING2 = "H2"
    HEADING3 = "H3"
    HEADING4 = "H4"
    HEADING5 = "H5"
    HEADING6 = "H6"
    THEMATIC_BREAK = "TBreak"

    def __str__(self) -> str:
        return self.value

    @property
    def level(self) -> int:
        """Heading level 1..6, or 0 for non-heading types."""
        if self.value.startswith("H"):
            return int(self.value[1:])
        return 0

    @property
    def is_heading(self) -> bool:
        return self.level > 0

    @classmethod
    def heading(cls, level: int) -> NodeType:
        """Return the heading type for a level between 1 and 6."""
        if not 1 <= level <= 6:
            msg = f"Heading level must be between 1 and 6, got {level}"
            raise ValueError(msg)
        return cls(f"H{level}")

    @classmethod
    def from_name(cls, name: str) -> NodeType:
        """Resolve a stable name ("H1") or a member name ("HEADING1").

        Raises:
            ValueError: If the name matches no node type.
        """
        try:
            return cls(name)
        except ValueError:
            pass
        try:
            return cls[name]
        except KeyError:
            msg = f"Unknown node type: {name!r}"
            raise ValueError(msg) from None


@dataclass(frozen=True, slots=True)
class Node:
    """One block-level unit.

    Attributes:
        type: Block kind
        content: Normalized bytes (heading text, break symbol, paragraph lines)
        children: Always empty; kept for future nesting
        location: Span in the source, not part of equality

    """

    type: NodeType
    content: bytes = b""
    children: tuple[Node, ...] = ()
    location: SourceLocation | None = field(default=None, compare=False)

    @property
    def text(self) -> str:
        """Content decoded as UTF-8 (invalid bytes replaced)."""
        return self.content.decode("utf-8", errors="replace")

    def equal(self, other: Node) -> bool:
        """Structural equality on type, content and children."""
        return self == other


@dataclass(frozen=True, slots=True)
class Document:
    """Root of a parsed buffer.

    Children appear in the order their blocks closed in the source.

    """

    children: tuple[Node, ...] = ()
    location: SourceLocation | None = field(default=None, compare=False)

    def __len__(self) -> int:
        return len(self.children)

    def __str__(self) -> str:
        return self.to_display_string()

    def equal(self, other: Document) -> bool:
        """Structural equality: same node types, contents and children, in order."""
        if not isinstance(other, Document):
            return False
        return self.children == other.children

    def to_display_string(self) -> str:
        """Human-readable dump, one node per line.

        Example:
            >>> doc = Document(children=(Node(NodeType.HEADING1, b"Title"),))
            >>> print(doc.to_display_string())
            Document (1)
              H1 'Title'

        """
        lines = [f"Document ({len(self.children)})"]
        for node in self.children:
            _display_lines(node, 1, lines)
        return "\n".join(lines)


def _display_lines(node: Node, depth: int, lines: list[str]) -> None:
    lines.append(f"{'  ' * depth}{node.type.value} {node.text!r}")
    for child in node.children:
        _display_lines(child, depth + 1, lines)


__all__ = [
    "Document",
    "Node",
    "NodeType",
]

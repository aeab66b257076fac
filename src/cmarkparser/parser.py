"""Block assembler: turns the lexer's line tokens into nodes.

A small explicit state machine drives the assembly:

    LINE_START ──PARAGRAPH_LINE──▶ IN_BLOCK ──PARAGRAPH_LINE──▶ IN_BLOCK
        │                             │
        └──heading/break/blank──▶ BLOCK_CLOSED ◀──heading/break/blank/EOF

Only paragraphs span several lines; headings and thematic breaks are
finalized on the line that opens them. Each node is finalized exactly
once and appended in closing order.

Thread Safety:
Parser instances are single-use. Configuration is read from a ContextVar.

"""

from __future__ import annotations

from enum import Enum, auto

from cmarkparser.lexer import Lexer
from cmarkparser.nodes import Node, NodeType
from cmarkparser.tokens import Token, TokenType
from cmarkparser.utils.logger import get_logger

logger = get_logger(__name__)

# Separator re-inserted between joined paragraph lines
LINE_SEPARATOR = b"\n"


class ScanState(Enum):
    """Assembler states between two line tokens."""

    LINE_START = auto()  # Nothing consumed yet
    IN_BLOCK = auto()  # A paragraph is open
    BLOCK_CLOSED = auto()  # Last block finalized, nothing open


class _OpenBlock:
    """Mutable accumulator for the paragraph being built."""

    __slots__ = ("lines", "first", "last")

    def __init__(self, token: Token) -> None:
        self.lines: list[bytes] = [token.value]
        self.first = token
        self.last = token

    def extend(self, token: Token) -> None:
        self.lines.append(token.value)
        self.last = token

    def finalize(self) -> Node:
        location = self.first.location.span_to(self.last.location)
        return Node(
            type=NodeType.PARAGRAPH,
            content=LINE_SEPARATOR.join(self.lines),
            location=location,
        )


class Parser:
    """Single-pass block scanner over a byte buffer.

    Usage:
        >>> parser = Parser(b"# Title\\n\\nfirst line\\nsecond line\\n")
        >>> [(n.type.value, n.content) for n in parser.parse()]
        [('H1', b'Title'), ('Par', b'first line\\nsecond line')]

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_state",
        "_open",
        "_children",
    )

    def __init__(self, source: bytes, source_file: str | None = None) -> None:
        self._source = source
        self._source_file = source_file
        self._state = ScanState.LINE_START
        self._open: _OpenBlock | None = None
        self._children: list[Node] = []

    @property
    def state(self) -> ScanState:
        return self._state

    def parse(self) -> list[Node]:
        """Walk the buffer once and return the finished nodes in order."""
        lexer = Lexer(self._source, source_file=self._source_file)
        for token in lexer.tokenize():
            self._dispatch(token)
        return self._children

    def _dispatch(self, token: Token) -> None:
        token_type = token.type
        if token_type is TokenType.PARAGRAPH_LINE:
            if self._state is ScanState.IN_BLOCK:
                self._extend_block(token)
            else:
                self._mark_block_start(token)
        elif token_type is TokenType.BLANK_LINE:
            self._close_block()
        elif token_type is TokenType.ATX_HEADING:
            self._close_block()
            self._emit(
                Node(
                    type=NodeType.heading(token.level),
                    content=token.value,
                    location=token.location,
                )
            )
        elif token_type is TokenType.THEMATIC_BREAK:
            self._close_block()
            self._emit(
                Node(
                    type=NodeType.THEMATIC_BREAK,
                    content=token.value,
                    location=token.location,
                )
            )
        elif token_type is TokenType.EOF:
            self._handle_end_of_input()

    # =========================================================================
    # Transition points
    # =========================================================================

    def _mark_block_start(self, token: Token) -> None:
        self._open = _OpenBlock(token)
        self._state = ScanState.IN_BLOCK

    def _extend_block(self, token: Token) -> None:
        assert self._open is not None
        self._open.extend(token)

    def _close_block(self) -> None:
        """Finalize the open paragraph, if any."""
        if self._open is not None:
            self._emit(self._open.finalize())
            self._open = None
        self._state = ScanState.BLOCK_CLOSED

    def _emit(self, node: Node) -> None:
        self._children.append(node)
        self._state = ScanState.BLOCK_CLOSED

    def _handle_end_of_input(self) -> None:
        self._close_block()
        logger.debug(
            "scanned %d bytes into %d blocks",
            len(self._source),
            len(self._children),
        )


"""Line-window lexer with O(n) guaranteed performance.

Implements a window-based approach: read an entire line as classified
cells, classify the line, then emit. The cursor only moves forward.

Thread Safety:
Lexer instances are single-use. Create one per source buffer.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from cmarkparser.charsets import REPLACEMENT_CHAR, Cell, CharClass, classify
from cmarkparser.config import get_parse_config
from cmarkparser.lexer.classifiers import (
    HeadingClassifierMixin,
    ThematicClassifierMixin,
)
from cmarkparser.lexer.scanners import BlockScannerMixin
from cmarkparser.tokens import Token, TokenType


class Lexer(
    # Classifiers (pure logic, no position mutation)
    HeadingClassifierMixin,
    ThematicClassifierMixin,
    # Scanners
    BlockScannerMixin,
):
    """Line-window lexer over a byte buffer.

    For each physical line:
    1. Read cells up to the line terminator (classify every character)
    2. Classify the line (pure logic, no position changes)
    3. Emit one token; the cursor is already past the terminator

    Usage:
            >>> lexer = Lexer(b"# Hello\\n\\nWorld")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(ATX_HEADING, b'Hello', 1)
        Token(BLANK_LINE, b'', 2)
        Token(PARAGRAPH_LINE, b'World', 3)
        Token(EOF, b'', 3)

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_source_file",
        "_consumed_newline",
        "_line_end",
        "_saved_lineno",
        "_max_indent",
        "_text_transformer",
    )

    def __init__(
        self,
        source: bytes,
        source_file: str | None = None,
        text_transformer: Callable[[bytes], bytes] | None = None,
    ) -> None:
        """Initialize lexer with a source buffer.

        Args:
            source: Markdown source bytes
            source_file: Optional source file path for locations
            text_transformer: Optional callback to transform paragraph lines
                (defaults to the active ParseConfig's)
        """
        config = get_parse_config()
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._source_file = source_file
        self._max_indent = config.max_indent
        self._text_transformer = text_transformer or config.text_transformer

        self._consumed_newline: bool = False
        self._line_end: int = 0
        self._saved_lineno: int = 1

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a line token stream.

        Yields:
            Token objects one at a time, ending with exactly one EOF.

        Complexity: O(n) where n = len(source)
        """
        while self._pos < self._source_len:
            yield from self._scan_block()

        yield self._make_token_at_current(TokenType.EOF, b"")

    # =========================================================================
    # Window navigation helpers
    # =========================================================================

    def _read_line(self) -> list[Cell]:
        """Read classified cells up to the next line terminator.

        Consumes the terminator (``\\r\\n`` counts as one), records where
        the line content ended in ``_line_end`` and sets ``_consumed_newline``.
        Null bytes are replaced here, before any opener is classified.

        Returns:
            Cells of the line, terminator excluded.
        """
        source = self._source
        source_len = self._source_len
        cells: list[Cell] = []
        self._consumed_newline = False

        while self._pos < source_len:
            char_class, width = classify(source, self._pos)
            if char_class is CharClass.EOL:
                self._line_end = self._pos
                self._commit_newline()
                return cells
            if char_class is CharClass.NUL:
                cells.append((CharClass.LINE_CHAR, REPLACEMENT_CHAR))
            else:
                cells.append((char_class, source[self._pos : self._pos + width]))
            self._pos += width

        self._line_end = self._pos
        return cells

    def _commit_newline(self) -> None:
        """Consume the terminator at the cursor."""
        pos = self._pos
        if self._source[pos] == 0x0D and self._source[pos + 1 : pos + 2] == b"\n":
            self._pos += 2
        else:
            self._pos += 1
        self._lineno += 1
        self._consumed_newline = True

    def _calc_indent(self, cells: list[Cell]) -> int:
        """Count leading SPACE cells, up to the configured maximum.

        Returns:
            Number of cells to skip before opener detection.
        """
        indent = 0
        for char_class, _ in cells:
            if indent >= self._max_indent or char_class is not CharClass.SPACE:
                break
            indent += 1
        return indent

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save current line number before reading a line."""
        self._saved_lineno = self._lineno

    def _make_token(
        self,
        token_type: TokenType,
        value: bytes,
        start_pos: int,
        end_pos: int,
        *,
        marker: bytes = b"",
        line_indent: int = 0,
    ) -> Token:
        """Create a Token for the line that started at start_pos."""
        return Token(
            type=token_type,
            value=value,
            _lineno=self._saved_lineno,
            _start_offset=start_pos,
            _end_offset=end_pos,
            marker=marker,
            line_indent=line_indent,
            _source_file=self._source_file,
        )

    def _make_token_at_current(self, token_type: TokenType, value: bytes) -> Token:
        """Create a Token at current position (for EOF)."""
        # A final terminator does not start a new line
        lineno = self._lineno - 1 if self._consumed_newline else self._lineno
        return Token(
            type=token_type,
            value=value,
            _lineno=lineno,
            _start_offset=self._pos,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )

"""Block mode scanner mixin."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from cmarkparser.charsets import ASCII_SPACE, HEADING_MARKER, THEMATIC_BREAK_CHARS, Cell
from cmarkparser.tokens import Token, TokenType
from cmarkparser.utils.logger import get_logger

logger = get_logger(__name__)


class BlockScannerMixin:
    """Mixin providing block mode scanning logic.

    Scans one physical line per call:
    1. Read the line as classified cells (cursor moves past the terminator)
    2. Classify the line content (pure logic)
    3. Emit one token

    """

    # These will be set by the Lexer class
    _lineno: int
    _line_end: int
    _pos: int
    _saved_lineno: int
    _text_transformer: Callable[[bytes], bytes] | None

    def _save_location(self) -> None:
        """Save current location before reading a line."""
        raise NotImplementedError

    def _read_line(self) -> list[Cell]:
        """Read classified cells of the current line."""
        raise NotImplementedError

    def _calc_indent(self, cells: list[Cell]) -> int:
        """Count tolerated indentation cells."""
        raise NotImplementedError

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
        raise NotImplementedError

    # Classifier methods (provided by classifier mixins)
    def _try_classify_atx_heading(
        self, content: list[Cell], line_start: int, line_end: int, indent: int = 0
    ) -> Token | None:
        raise NotImplementedError

    def _try_classify_thematic_break(
        self, content: list[Cell], line_start: int, line_end: int, indent: int = 0
    ) -> Token | None:
        raise NotImplementedError

    def _scan_block(self) -> Iterator[Token]:
        """Scan one line and yield its token."""
        self._save_location()
        line_start = self._pos
        cells = self._read_line()
        line_end = self._line_end

        # Unicode spaces alone on a line are content, not a blank line
        if all(len(data) == 1 and data[0] in ASCII_SPACE for _, data in cells):
            yield self._make_token(TokenType.BLANK_LINE, b"", line_start, line_end)
            return

        indent = self._calc_indent(cells)
        content = cells[indent:]
        first = content[0][1] if content else b""

        if first and first[0] == HEADING_MARKER:
            token = self._try_classify_atx_heading(content, line_start, line_end, indent)
            if token:
                yield token
                return
            logger.debug("line %d: '#' run does not open a heading", self._saved_lineno)

        if len(first) == 1 and first[0] in THEMATIC_BREAK_CHARS:
            token = self._try_classify_thematic_break(content, line_start, line_end, indent)
            if token:
                yield token
                return

        line = b"".join(data for _, data in cells)
        if self._text_transformer:
            line = self._text_transformer(line)

        yield self._make_token(
            TokenType.PARAGRAPH_LINE,
            line,
            line_start,
            line_end,
            line_indent=indent,
        )

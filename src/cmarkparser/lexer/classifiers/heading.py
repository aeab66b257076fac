"""ATX heading classifier mixin."""

from __future__ import annotations

from cmarkparser.charsets import HEADING_MARKER, Cell, CharClass
from cmarkparser.tokens import Token, TokenType

_MARKER = bytes([HEADING_MARKER])


def _is_marker(cell: Cell) -> bool:
    return cell[0] is CharClass.PUNCT and cell[1] == _MARKER


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

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
        """Create token with raw coordinates. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_atx_heading(
        self, content: list[Cell], line_start: int, line_end: int, indent: int = 0
    ) -> Token | None:
        """Try to classify content as ATX heading.

        ATX headings start with 1-6 # characters followed by a SPACE or the
        end of the line. Trailing # sequences are removed if preceded by a
        SPACE.

        Args:
            content: Line cells with the tolerated indentation skipped
            line_start: Offset in source where the line starts
            line_end: Offset in source where the line content ends
            indent: Number of indentation cells skipped

        Returns:
            Token if valid heading with non-empty text, None otherwise.
        """
        level = 0
        pos = 0
        content_len = len(content)
        while pos < content_len and _is_marker(content[pos]):
            level += 1
            pos += 1

        if level == 0 or level > 6:
            return None

        if pos < content_len and content[pos][0] is not CharClass.SPACE:
            return None

        # Skip every space between marker and text
        while pos < content_len and content[pos][0] is CharClass.SPACE:
            pos += 1

        end = _strip_trailing_spaces(content, pos, content_len)

        # Remove trailing # run (if preceded by space)
        if end > pos and _is_marker(content[end - 1]):
            trailing_start = end
            while trailing_start > pos and _is_marker(content[trailing_start - 1]):
                trailing_start -= 1
            if trailing_start == pos:
                end = pos
            elif content[trailing_start - 1][0] is CharClass.SPACE:
                end = _strip_trailing_spaces(content, pos, trailing_start)

        if end == pos:
            return None

        value = b"".join(cell[1] for cell in content[pos:end])
        return self._make_token(
            TokenType.ATX_HEADING,
            value,
            line_start,
            line_end,
            marker=_MARKER * level,
            line_indent=indent,
        )


def _strip_trailing_spaces(content: list[Cell], start: int, end: int) -> int:
    while end > start and content[end - 1][0] is CharClass.SPACE:
        end -= 1
    return end

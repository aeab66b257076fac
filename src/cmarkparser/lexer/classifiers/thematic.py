"""Thematic break classifier mixin."""

from __future__ import annotations

from cmarkparser.charsets import THEMATIC_BREAK_CHARS, Cell, CharClass
from cmarkparser.tokens import Token, TokenType


class ThematicClassifierMixin:
    """Mixin providing thematic break classification."""

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

    def _try_classify_thematic_break(
        self, content: list[Cell], line_start: int, line_end: int, indent: int = 0
    ) -> Token | None:
        """Try to classify content as thematic break.

        Thematic breaks are 3+ of the same character (-, *, _) with
        optional SPACE characters between them. A line mixing symbols is
        rejected, whatever the counts.

        Args:
            content: Line cells with the tolerated indentation skipped
            line_start: Offset in source where the line starts
            line_end: Offset in source where the line content ends
            indent: Number of indentation cells skipped

        Returns:
            Token whose value is the break symbol, None otherwise.
        """
        if not content:
            return None

        symbol = content[0][1]
        if len(symbol) != 1 or symbol[0] not in THEMATIC_BREAK_CHARS:
            return None

        count = 0
        for char_class, data in content:
            if data == symbol:
                count += 1
            elif char_class is CharClass.SPACE:
                continue
            else:
                return None

        if count >= 3:
            return self._make_token(
                TokenType.THEMATIC_BREAK,
                symbol,
                line_start,
                line_end,
                marker=symbol,
                line_indent=indent,
            )

        return None

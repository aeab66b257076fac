"""Token and TokenType definitions for the cmarkparser lexer.

The lexer classifies whole physical lines and hands one Token per line to
the parser, which assembles them into nodes.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cmarkparser.location import SourceLocation


class TokenType(Enum):
    """Line classes produced by the lexer."""

    # Document structure
    EOF = auto()
    BLANK_LINE = auto()

    # Block openers
    ATX_HEADING = auto()  # # Heading
    THEMATIC_BREAK = auto()  # ---, ***, ___

    # Paragraph text
    PARAGRAPH_LINE = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A classified line.

    Attributes:
        type: The token type (from TokenType enum)
        value: Normalized content: heading text, break symbol, or the
            literal paragraph line (nulls already replaced)
        _lineno: Line number (1-indexed)
        _start_offset: Byte offset where the line starts
        _end_offset: Byte offset where the line content ends
            (terminator excluded)
        marker: Opener marker run (b"###" for a level-3 heading,
            the symbol for a break, empty otherwise)
        line_indent: Leading SPACE characters skipped before the opener
        _source_file: Optional source file path

    """

    type: TokenType
    value: bytes
    _lineno: int
    _start_offset: int
    _end_offset: int
    marker: bytes = b""
    line_indent: int = 0
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from cmarkparser.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=1,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._lineno,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def level(self) -> int:
        """Heading level for ATX_HEADING tokens, 0 otherwise."""
        if self.type is TokenType.ATX_HEADING:
            return len(self.marker)
        return 0

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + b"..."
        return f"Token({self.type.name}, {val!r}, {self._lineno})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

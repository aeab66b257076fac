"""Source location tracking for nodes and tokens.

Offsets are byte offsets into the scanned buffer. Line numbers are
1-indexed and count every line terminator (``\\n``, ``\\r`` or ``\\r\\n``).

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Span of a token or block in the source buffer.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start byte offset
        end_offset: Absolute end byte offset (exclusive, terminator not included)
        end_lineno: Ending line number (optional)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=1, source_file="README.md")
            >>> str(loc)
        'README.md:3:1'

    """

    lineno: int
    col_offset: int = 1
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.md:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end.

        Args:
            end: Ending location

        Returns:
            New SourceLocation with this start and end's end positions
        """
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            end_lineno=end.end_lineno or end.lineno,
            source_file=self.source_file,
        )

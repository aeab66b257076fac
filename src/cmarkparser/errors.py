"""Exception classes for cmarkparser.

The scanner degrades malformed markup to paragraph text, so the only
parse failure today is an empty buffer.
"""

from __future__ import annotations


class CmarkParserError(Exception):
    """Base exception for all cmarkparser errors."""

    pass


class ParseError(CmarkParserError):
    """Error during block scanning.

    Raised when the input cannot produce a document at all.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class EmptyInputError(ParseError):
    """Raised when the source buffer has zero length."""

    def __init__(self, source_file: str | None = None) -> None:
        super().__init__("empty document", source_file=source_file)

"""
cmarkparser — block-level scanner for a CommonMark subset

Turns a byte buffer into a flat sequence of typed block nodes: ATX
headings (six levels), thematic breaks, and paragraphs. Inline syntax
(emphasis, links) is kept verbatim in paragraph text.

Quick Start:
    >>> from cmarkparser import parse
    >>> doc = parse(b"# Hello\\n\\nSome *text*\\n")
    >>> print(doc)
    Document (2)
      H1 'Hello'
      Par 'Some *text*'

Installation:
    pip install cmarkparser              # Core scanner (zero deps)
    pip install cmarkparser[test]        # + pytest and hypothesis
"""

from cmarkparser.charsets import CharClass, classify
from cmarkparser.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from cmarkparser.errors import CmarkParserError, EmptyInputError, ParseError
from cmarkparser.lexer import Lexer
from cmarkparser.location import SourceLocation
from cmarkparser.nodes import Document, Node, NodeType
from cmarkparser.parser import Parser
from cmarkparser.serialization import from_dict, from_json, to_dict, to_json
from cmarkparser.tokens import Token, TokenType

__version__ = "0.1.0"


def parse(
    source: bytes | str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Parse a Markdown buffer into a Document.

    Args:
        source: Markdown source bytes (str is encoded as UTF-8)
        source_file: Optional source file path recorded in node locations
        config: Parse configuration for this call (defaults to the active
            context's config)

    Returns:
        Document whose children are the blocks in source order

    Raises:
        EmptyInputError: If the buffer is empty.

    Example:
        >>> parse(b"### ana are mere\\n").children[0].content
        b'ana are mere'
    """
    if isinstance(source, str):
        source = source.encode("utf-8")
    if not source:
        raise EmptyInputError(source_file=source_file)

    with parse_config_context(config or get_parse_config()):
        blocks = Parser(source, source_file=source_file).parse()

    loc = SourceLocation(
        lineno=1,
        col_offset=1,
        offset=0,
        end_offset=len(source),
        source_file=source_file,
    )
    return Document(children=tuple(blocks), location=loc)


__all__ = [
    # Main API
    "parse",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Nodes
    "Document",
    "Node",
    "NodeType",
    "SourceLocation",
    # Low-level
    "CharClass",
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "classify",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Errors
    "CmarkParserError",
    "EmptyInputError",
    "ParseError",
]

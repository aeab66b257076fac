"""Tests for lexer position and line tracking."""

from cmarkparser.config import ParseConfig, parse_config_context
from cmarkparser.lexer import Lexer
from cmarkparser.tokens import TokenType


def _types(source: bytes) -> list[TokenType]:
    return [t.type for t in Lexer(source).tokenize()]


class TestLineClassification:
    """One token per physical line, then EOF."""

    def test_heading_blank_paragraph(self) -> None:
        assert _types(b"# Hello\n\nWorld") == [
            TokenType.ATX_HEADING,
            TokenType.BLANK_LINE,
            TokenType.PARAGRAPH_LINE,
            TokenType.EOF,
        ]

    def test_final_terminator_does_not_add_a_line(self) -> None:
        assert _types(b"text\n") == [TokenType.PARAGRAPH_LINE, TokenType.EOF]

    def test_crlf_is_one_terminator(self) -> None:
        assert _types(b"a\r\nb\r\n") == [
            TokenType.PARAGRAPH_LINE,
            TokenType.PARAGRAPH_LINE,
            TokenType.EOF,
        ]

    def test_lf_cr_is_two_terminators(self) -> None:
        assert _types(b"a\n\rb") == [
            TokenType.PARAGRAPH_LINE,
            TokenType.BLANK_LINE,
            TokenType.PARAGRAPH_LINE,
            TokenType.EOF,
        ]

    def test_heading_token_carries_marker(self) -> None:
        token = next(Lexer(b"  ### Title ###\n").tokenize())
        assert token.type is TokenType.ATX_HEADING
        assert token.value == b"Title"
        assert token.marker == b"###"
        assert token.level == 3
        assert token.line_indent == 2

    def test_break_token_carries_symbol(self) -> None:
        token = next(Lexer(b"_ _ _").tokenize())
        assert token.type is TokenType.THEMATIC_BREAK
        assert token.value == b"_"
        assert token.level == 0

    def test_paragraph_token_is_literal_line(self) -> None:
        token = next(Lexer(b"   _*-*__\n").tokenize())
        assert token.type is TokenType.PARAGRAPH_LINE
        assert token.value == b"   _*-*__"


class TestPositionTracking:
    """Verify offsets and line numbers."""

    def test_position_at_source_end(self) -> None:
        for source in [b"hello", b"hello\n", b"# heading\n\npara", b"a\r\n"]:
            lexer = Lexer(source)
            list(lexer.tokenize())
            assert lexer._pos == len(source)

    def test_line_numbers(self) -> None:
        tokens = list(Lexer(b"line1\nline2\r\nline3\rline4").tokenize())
        assert [t.lineno for t in tokens] == [1, 2, 3, 4, 4]

    def test_eof_line_after_trailing_newline(self) -> None:
        tokens = list(Lexer(b"a\nb\n").tokenize())
        assert tokens[-1].lineno == 2

    def test_offsets_exclude_terminator(self) -> None:
        tokens = list(Lexer(b"ab\r\ncd").tokenize())
        assert (tokens[0].location.offset, tokens[0].location.end_offset) == (0, 2)
        assert (tokens[1].location.offset, tokens[1].location.end_offset) == (4, 6)

    def test_offsets_count_raw_null_bytes(self) -> None:
        token = next(Lexer(b"\x00\x00\n").tokenize())
        assert token.location.end_offset == 2
        assert token.value == "\ufffd\ufffd".encode()

    def test_location_is_cached(self) -> None:
        token = next(Lexer(b"x").tokenize())
        assert token.location is token.location

    def test_source_file_recorded(self) -> None:
        token = next(Lexer(b"x", source_file="doc.md").tokenize())
        assert str(token.location) == "doc.md:1:1"


class TestConfiguredLexer:
    """Lexer reads the active ParseConfig when created."""

    def test_max_indent_zero(self) -> None:
        with parse_config_context(ParseConfig(max_indent=0)):
            token = next(Lexer(b" # x").tokenize())
        assert token.type is TokenType.PARAGRAPH_LINE

    def test_larger_max_indent(self) -> None:
        with parse_config_context(ParseConfig(max_indent=4)):
            token = next(Lexer(b"    # x").tokenize())
        assert token.type is TokenType.ATX_HEADING

    def test_transformer_argument_overrides_config(self) -> None:
        with parse_config_context(ParseConfig(text_transformer=bytes.lower)):
            token = next(Lexer(b"Mixed", text_transformer=bytes.upper).tokenize())
        assert token.value == b"MIXED"

"""Error-path and malformed input tests.

Only an empty buffer is an error; every other input degrades to
paragraph text.
"""

import pytest

from cmarkparser import NodeType, parse
from cmarkparser.errors import CmarkParserError, EmptyInputError, ParseError


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected input")
        assert str(err) == "unexpected input"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_and_column(self) -> None:
        err = ParseError("bad", lineno=10, col_offset=5)
        assert "10:5" in str(err)

    def test_with_source_file(self) -> None:
        err = ParseError("error", lineno=1, col_offset=1, source_file="test.md")
        assert str(err) == "test.md:1:1 error"

    def test_is_base_error(self) -> None:
        assert isinstance(ParseError("x"), CmarkParserError)


class TestEmptyInput:
    """The single failure mode."""

    def test_hierarchy(self) -> None:
        err = EmptyInputError()
        assert isinstance(err, ParseError)
        assert str(err) == "empty document"

    def test_source_file_in_message(self) -> None:
        with pytest.raises(EmptyInputError, match="^empty.md empty document$"):
            parse(b"", source_file="empty.md")

    def test_caught_as_base_error(self) -> None:
        with pytest.raises(CmarkParserError):
            parse(b"")


class TestGracefulDegradation:
    """Malformed markup never raises."""

    @pytest.mark.parametrize(
        "source",
        [
            b"#######",
            b"# ",
            b"-*-",
            b"\xff\xfe\xfd",
            b"\xe2\x80",
            b"\r\r\r",
            b"\x00\x00\n\x00",
            b"[unclosed link(",
        ],
    )
    def test_no_exception(self, source: bytes) -> None:
        doc = parse(source)
        assert all(n.type in (NodeType.PARAGRAPH,) for n in doc.children)

    def test_invalid_utf8_preserved_verbatim(self) -> None:
        doc = parse(b"a\xffb")
        assert doc.children[0].content == b"a\xffb"

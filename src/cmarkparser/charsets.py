"""Character classification for the block scanner.

Every position in the source buffer maps to exactly one CharClass. Multi-byte
UTF-8 sequences are classified by their decoded codepoint; bytes that do not
start a valid sequence are classified on their own as LINE_CHAR.

All sets are frozensets of byte values for O(1) membership testing.

Usage:
    from cmarkparser.charsets import CharClass, classify

    char_class, width = classify(b"# Hello", 0)
    # (CharClass.PUNCT, 1)
"""

import unicodedata
from enum import Enum, auto


class CharClass(Enum):
    """Semantic class of a character in the source buffer."""

    NUL = auto()  # 0x00, stored as U+FFFD
    SPACE = auto()  # space, tab, Unicode space separators
    PUNCT = auto()  # ASCII punctuation
    LINE_CHAR = auto()  # anything else that belongs to a line
    EOL = auto()  # \n or \r


# A classified character and the bytes it contributes to line content
Cell = tuple[CharClass, bytes]


# Stored in place of every null byte
REPLACEMENT_CHAR: bytes = "\ufffd".encode()

# https://spec.commonmark.org/0.31.2/#ascii-punctuation-character
ASCII_PUNCTUATION: frozenset[int] = frozenset(b"!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

ASCII_SPACE: frozenset[int] = frozenset(b" \t")

EOL_BYTES: frozenset[int] = frozenset(b"\n\r")

HEADING_MARKER: int = ord("#")

# Thematic break characters
THEMATIC_BREAK_CHARS: frozenset[int] = frozenset(b"-*_")

def _classify_ascii(byte: int) -> CharClass:
    if byte == 0:
        return CharClass.NUL
    if byte in EOL_BYTES:
        return CharClass.EOL
    if byte in ASCII_SPACE:
        return CharClass.SPACE
    if byte in ASCII_PUNCTUATION:
        return CharClass.PUNCT
    return CharClass.LINE_CHAR


# Lookup table for the ASCII range
_ASCII_CLASSES: tuple[CharClass, ...] = tuple(_classify_ascii(b) for b in range(128))


def classify_byte(byte: int) -> CharClass:
    """Classify a single byte value.

    Bytes outside the ASCII range are LINE_CHAR; use classify() to look at
    the full UTF-8 sequence they start.
    """
    if byte < 128:
        return _ASCII_CLASSES[byte]
    return CharClass.LINE_CHAR


def sequence_width(lead: int) -> int:
    """Length of the UTF-8 sequence announced by a lead byte (1 if invalid)."""
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 1


def is_unicode_space(codepoint: int) -> bool:
    """Check if a codepoint is a Unicode space separator (category Zs).

    Covers U+00A0 and U+2000..U+200A among others. ASCII space is included.
    """
    return unicodedata.category(chr(codepoint)) == "Zs"


def classify(buffer: bytes, pos: int) -> tuple[CharClass, int]:
    """Classify the character starting at ``buffer[pos]``.

    Args:
        buffer: Source bytes
        pos: Offset of the first byte of the character (must be in range)

    Returns:
        (char_class, width) where width is the number of bytes consumed.
    """
    lead = buffer[pos]
    if lead < 128:
        return _ASCII_CLASSES[lead], 1

    width = sequence_width(lead)
    if width == 1 or pos + width > len(buffer):
        return CharClass.LINE_CHAR, 1
    try:
        char = buffer[pos : pos + width].decode("utf-8")
    except UnicodeDecodeError:
        return CharClass.LINE_CHAR, 1

    if is_unicode_space(ord(char)):
        return CharClass.SPACE, width
    return CharClass.LINE_CHAR, width


__all__ = [
    "ASCII_PUNCTUATION",
    "ASCII_SPACE",
    "EOL_BYTES",
    "HEADING_MARKER",
    "REPLACEMENT_CHAR",
    "THEMATIC_BREAK_CHARS",
    "Cell",
    "CharClass",
    "classify",
    "classify_byte",
    "is_unicode_space",
    "sequence_width",
]

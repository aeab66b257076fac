"""Line-window lexer for the cmarkparser block scanner.

The lexer reads one physical line at a time as classified cells,
decides which block opener (if any) the line carries, and yields one
token per line.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition + navigation)
├── classifiers/         # Block opener classification mixins
│   ├── heading.py       # ATX heading
│   └── thematic.py      # Thematic break
└── scanners/
    └── block.py         # Line dispatch

Usage:
    >>> from cmarkparser.lexer import Lexer
    >>> [t.type.name for t in Lexer(b"# Hello\\n\\nWorld").tokenize()]
    ['ATX_HEADING', 'BLANK_LINE', 'PARAGRAPH_LINE', 'EOF']

"""

from cmarkparser.lexer.core import Lexer

__all__ = ["Lexer"]

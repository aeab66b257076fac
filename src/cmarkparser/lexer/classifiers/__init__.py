"""Block opener classifiers for the cmarkparser lexer.

Each classifier is a mixin that decides whether a line of classified
cells opens a particular block type. Classifiers never move the cursor.
"""

from cmarkparser.lexer.classifiers.heading import (
    HeadingClassifierMixin,
)
from cmarkparser.lexer.classifiers.thematic import (
    ThematicClassifierMixin,
)

__all__ = [
    "HeadingClassifierMixin",
    "ThematicClassifierMixin",
]

"""Command-line dump of a parsed Markdown file.

Usage:
    python -m cmarkparser README.md
    python -m cmarkparser --json README.md
    cat README.md | python -m cmarkparser
"""

from __future__ import annotations

import argparse
import logging
import sys

from cmarkparser import parse
from cmarkparser.errors import CmarkParserError
from cmarkparser.serialization import to_json
from cmarkparser.utils.logger import get_logger

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cmarkparser", description="Scan a Markdown file into block nodes"
    )
    parser.add_argument("file", nargs="?", help="Input file (reads stdin if omitted)")
    parser.add_argument("--json", action="store_true", help="Print the document as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.file:
            with open(args.file, "rb") as f:
                data = f.read()
        else:
            data = sys.stdin.buffer.read()
    except OSError as e:
        logger.error("cannot read %s: %s", args.file, e)
        return 1

    try:
        doc = parse(data, source_file=args.file)
    except CmarkParserError as e:
        logger.error("%s", e)
        return 1

    print(to_json(doc, indent=2) if args.json else doc.to_display_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())

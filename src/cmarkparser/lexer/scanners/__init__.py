"""Mode-specific scanners for the cmarkparser lexer."""

from cmarkparser.lexer.scanners.block import BlockScannerMixin

__all__ = ["BlockScannerMixin"]

"""Mode-specific scanners for the bibparse lexer.

Each scanner is a mixin that provides scanning logic for part of the
grammar (entries, string values).
"""

from __future__ import annotations

from bibparse.lexer.scanners.entry import EntryScannerMixin
from bibparse.lexer.scanners.string import StringScannerMixin

__all__ = [
    "EntryScannerMixin",
    "StringScannerMixin",
]

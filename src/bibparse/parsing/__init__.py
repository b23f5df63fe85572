"""Parsing package for bibparse.

Provides the token cursor, the per-parse context and the
recursive-descent entry rules used by BibtexParser.
"""

from bibparse.parsing.context import ParseContext
from bibparse.parsing.entries import (
    parse_entry,
    parse_field,
    parse_fields,
    parse_simple_value,
    parse_value,
)
from bibparse.parsing.token_nav import TokenCursor

__all__ = [
    "ParseContext",
    "TokenCursor",
    "parse_entry",
    "parse_field",
    "parse_fields",
    "parse_simple_value",
    "parse_value",
]

"""
bibparse: BibTeX Parser for Python

Reads BibTeX text or files into typed Entry records, with ``@string``
macro substitution and ``#`` concatenation, and splits person names into
forename/von/surname/suffix parts.

Quick Start:
    >>> from bibparse import parse
    >>> entries = parse('@string{jan = "January"}\\n@article{k, month = jan}')
    >>> entries[0].fields
    {'month': 'January'}

    >>> # Reuse macros across several sources
    >>> from bibparse import BibtexParser, MONTH_MACROS
    >>> parser = BibtexParser(MONTH_MACROS)
    >>> entries = parser.parse_file("refs.bib")

    >>> # Split an author list
    >>> from bibparse import parse_persons
    >>> [p.surname for p in parse_persons("Donald E. Knuth and Leslie Lamport")]
    ['Knuth', 'Lamport']

"""

import os
from collections.abc import Mapping

from bibparse.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from bibparse.cursors import CharacterCursor, FileCursor, StringCursor
from bibparse.errors import (
    BibparseError,
    ParseError,
    SourceError,
    UnexpectedEndError,
    UnexpectedTokenError,
    UnknownMacroError,
)
from bibparse.lexer import Lexer
from bibparse.macros import MONTH_MACROS
from bibparse.names import PersonName, parse_person, parse_persons
from bibparse.nodes import Entry
from bibparse.parser import BibtexParser
from bibparse.parsing import TokenCursor
from bibparse.tokens import Token, TokenType

__version__ = "0.1.0"


def parse(source: str, macros: Mapping[str, str] | None = None) -> list[Entry]:
    """Parse BibTeX text into entries.

    Args:
        source: BibTeX source text
        macros: Optional macros to seed the table with

    Returns:
        Entries in source order

    Raises:
        ParseError: On the first malformed construct.

    Example:
        >>> parse("@book{k, title = {T}}")[0].key
        'k'
    """
    return BibtexParser(macros).parse_string(source)


def parse_file(
    path: str | os.PathLike[str],
    macros: Mapping[str, str] | None = None,
    *,
    encoding: str | None = None,
) -> list[Entry]:
    """Parse a BibTeX file into entries.

    Args:
        path: Path to the file
        macros: Optional macros to seed the table with
        encoding: Text encoding (defaults to the active ParseConfig's)

    Raises:
        SourceError: If the file cannot be opened or read.
        ParseError: On the first malformed construct.
    """
    config = get_parse_config()
    if encoding is not None:
        config = ParseConfig(macros=config.macros, encoding=encoding)
    return BibtexParser(macros, config=config).parse_file(path)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "parse",
    "parse_file",
    "parse_person",
    "parse_persons",
    "BibtexParser",
    # Records
    "Entry",
    "PersonName",
    # Macros
    "MONTH_MACROS",
    # Parser components
    "CharacterCursor",
    "FileCursor",
    "Lexer",
    "StringCursor",
    "Token",
    "TokenCursor",
    "TokenType",
    # Errors
    "BibparseError",
    "ParseError",
    "SourceError",
    "UnexpectedEndError",
    "UnexpectedTokenError",
    "UnknownMacroError",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]

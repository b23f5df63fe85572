"""Recursive descent parser producing BibTeX entries.

Two passes: the Lexer materializes the whole token list, then the
recursive-descent rules in ``bibparse.parsing.entries`` consume it
through a TokenCursor.

Architecture:
- `Lexer`: characters -> tokens (NEWLINE markers included)
- `TokenCursor`: hides NEWLINE markers, tracks the line number
- `ParseContext`: cursor + macro table + source file, passed to each rule
- `BibtexParser`: owns the macro table across calls

Thread Safety:
A BibtexParser's macro table outlives a single parse so that ``@string``
definitions carry over between calls. Do not run two parses on the same
instance concurrently; create one parser per thread instead.

"""

from __future__ import annotations

import os
from collections.abc import Mapping
from types import MappingProxyType

from bibparse.config import ParseConfig, get_parse_config
from bibparse.cursors import CharacterCursor, FileCursor, StringCursor
from bibparse.lexer import Lexer
from bibparse.macros import MacroTable
from bibparse.nodes import Entry
from bibparse.parsing import ParseContext, TokenCursor, parse_entry
from bibparse.utils.logger import get_logger

logger = get_logger(__name__)


class BibtexParser:
    """BibTeX parser with a persistent macro table.

    Usage:
            >>> parser = BibtexParser({"ieee": "IEEE"})
            >>> entries = parser.parse_string('@misc{k, publisher = ieee # " Press"}')
            >>> entries[0].fields
        {'publisher': 'IEEE Press'}

    Macros:
        The table starts as the active ParseConfig's macros overlaid with
        ``macros``. Every ``@string{name = value}`` parsed by this instance
        adds ``name.lower()``; definitions persist across calls.

    """

    __slots__ = ("_macros", "_encoding")

    def __init__(
        self,
        macros: Mapping[str, str] | None = None,
        *,
        config: ParseConfig | None = None,
    ) -> None:
        """Initialize parser.

        Args:
            macros: Macros to seed the table with (e.g. MONTH_MACROS)
            config: Configuration to use instead of the active ParseConfig

        """
        if config is None:
            config = get_parse_config()
        self._macros: MacroTable = dict(config.macros)
        if macros:
            self._macros.update(macros)
        self._encoding = config.encoding

    @property
    def macros(self) -> Mapping[str, str]:
        """Read-only view of the current macro table."""
        return MappingProxyType(self._macros)

    def parse_string(self, source: str) -> list[Entry]:
        """Parse BibTeX text.

        Raises:
            ParseError: On the first malformed construct.
        """
        return self.parse(StringCursor(source))

    def parse_file(self, path: str | os.PathLike[str]) -> list[Entry]:
        """Parse a BibTeX file.

        Raises:
            SourceError: If the file cannot be opened or read.
            ParseError: On the first malformed construct.
        """
        path = os.fspath(path)
        with FileCursor(path, self._encoding) as cursor:
            return self.parse(cursor, source_file=path)

    def parse(self, source: CharacterCursor, source_file: str | None = None) -> list[Entry]:
        """Parse every entry from a character cursor.

        Entries parsed before a failure are discarded with it.

        Args:
            source: Character source positioned at the start
            source_file: Optional source file path for error messages

        Returns:
            Entries in source order; ``@string``, ``@preamble`` and
            ``@comment`` produce none.
        """
        tokens = Lexer(source).tokenize()
        ctx = ParseContext(TokenCursor(tokens), self._macros, source_file)

        entries: list[Entry] = []
        while not ctx.cursor.at_end():
            entry = parse_entry(ctx)
            if entry is not None:
                entries.append(entry)

        logger.debug(
            "Parsed %d entries from %s", len(entries), source_file or "<string>"
        )
        return entries

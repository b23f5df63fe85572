"""State-machine lexer for BibTeX sources.

Reads a CharacterCursor one character at a time and materializes the
complete token list before parsing begins.

Two levels of grammar:
- TOP_LEVEL: only ``@``, ``%`` comments and newlines matter; the rest is junk
- IN_ENTRY: fields, punctuation and string values up to the entry closer

Thread Safety:
Lexer instances are single-use. Create one per source.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from bibparse.cursors import CharacterCursor, StringCursor
from bibparse.lexer.modes import WHITESPACE, LexerMode
from bibparse.lexer.scanners import EntryScannerMixin, StringScannerMixin
from bibparse.tokens import Token, TokenType
from bibparse.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Listed first so its implementations win over the stubs in EntryScannerMixin
    StringScannerMixin,
    EntryScannerMixin,
):
    """State-machine lexer for BibTeX.

    Every character is consumed exactly once, and scanning always makes
    forward progress, so tokenizing terminates on any input.

    Usage:
            >>> tokens = Lexer("@string(foo={bar})").tokenize()
            >>> [str(t) for t in tokens]
        ['AT()', 'NAME(string)', 'ENTRY_OPEN()', 'NAME(foo)', 'EQUALS()',
         'STRING(bar)', 'ENTRY_CLOSE()']

    Thread Safety:
        Lexer instances are single-use. Create one per source.

    """

    __slots__ = (
        "_cursor",
        "_mode",
        "_tokens",
    )

    def __init__(self, source: CharacterCursor | str) -> None:
        """Initialize lexer with a character source.

        Args:
            source: A CharacterCursor, or a string to wrap in a StringCursor
        """
        self._cursor = StringCursor(source) if isinstance(source, str) else source
        self._mode = LexerMode.TOP_LEVEL
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Tokenize the whole source.

        Returns:
            All tokens in source order, NEWLINE markers included.

        Complexity: O(n) where n = number of characters
        """
        cursor = self._cursor
        while not cursor.at_end():
            self._dispatch_mode()

        logger.debug("Lexed %d tokens", len(self._tokens))
        return self._tokens

    def _dispatch_mode(self) -> None:
        """Dispatch to the appropriate scanner based on current mode."""
        if self._mode == LexerMode.TOP_LEVEL:
            self._scan_top_level()
        elif self._mode == LexerMode.IN_ENTRY:
            self._scan_entry()

    def _scan_top_level(self) -> None:
        """Consume one top-level character."""
        cursor = self._cursor
        char = cursor.peek()

        if char == "%":
            self._read_line_comment()
            return

        cursor.advance()
        if char == "@":
            self._emit(TokenType.AT)
            self._mode = LexerMode.IN_ENTRY
        elif char == "\n":
            self._emit(TokenType.NEWLINE)
        elif char in WHITESPACE:
            pass
        # Anything else outside an entry is junk

    def _emit(self, token_type: TokenType, value: str | None = None) -> None:
        """Append a token to the output list."""
        self._tokens.append(Token(token_type, value))

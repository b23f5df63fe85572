"""In-entry scanner mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bibparse.lexer.modes import (
    COMMENT_ENTRY,
    ENTRY_CLOSERS,
    NAME_CHARS,
    STRING_DELIMITERS,
    WHITESPACE,
    LexerMode,
    is_numeric,
)
from bibparse.tokens import TokenType

if TYPE_CHECKING:
    from bibparse.cursors import CharacterCursor


# Single-character punctuation tokens inside an entry
_PUNCTUATION = {
    "=": TokenType.EQUALS,
    "#": TokenType.HASH,
    ",": TokenType.COMMA,
}


class EntryScannerMixin:
    """Mixin providing IN_ENTRY mode scanning logic.

    Scans one entry after its ``@``: the entry type, the opener, then
    field tokens until the matching closer. ``@comment`` bodies are read
    as a single string and discarded.

    """

    # These will be set by the Lexer class
    _cursor: CharacterCursor
    _mode: LexerMode

    def _emit(self, token_type: TokenType, value: str | None = None) -> None:
        """Append a token. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_string(self, delimiter: str, *, keep: bool = True) -> None:
        """Scan a string value. Implemented by StringScannerMixin."""
        raise NotImplementedError

    def _scan_entry(self) -> None:
        """Scan a whole entry and return to TOP_LEVEL mode."""
        cursor = self._cursor
        self._mode = LexerMode.TOP_LEVEL

        entry_type = self._read_name_or_number()
        opener = self._read_entry_opener()
        if opener is None:
            return
        closer = ENTRY_CLOSERS[opener]

        if entry_type.lower() == COMMENT_ENTRY:
            self._scan_string(opener, keep=False)
            self._emit(TokenType.ENTRY_CLOSE)
            return

        while not cursor.at_end():
            char = cursor.peek()

            if char == closer:
                cursor.advance()
                self._emit(TokenType.ENTRY_CLOSE)
                return
            if char == "\n":
                self._emit(TokenType.NEWLINE)
                cursor.advance()
            elif char == "%":
                self._read_line_comment()
            elif char in WHITESPACE:
                cursor.advance()
            elif char in STRING_DELIMITERS:
                cursor.advance()
                self._scan_string(char)
            elif char in _PUNCTUATION:
                self._emit(_PUNCTUATION[char])
                cursor.advance()
            elif not self._read_name_or_number():
                # Not part of any token; skip it to guarantee progress
                cursor.advance()

    def _read_entry_opener(self) -> str | None:
        """Consume characters up to and including ``(`` or ``{``.

        Other characters are skipped. Emits ENTRY_OPEN when an opener is
        found, and NEWLINE for each newline passed on the way.

        Returns:
            The opener, or None if input ended first.
        """
        cursor = self._cursor
        while not cursor.at_end():
            char = cursor.peek()
            cursor.advance()
            if char in ENTRY_CLOSERS:
                self._emit(TokenType.ENTRY_OPEN)
                return char
            if char == "\n":
                self._emit(TokenType.NEWLINE)
        return None

    def _read_name_or_number(self) -> str:
        """Read a run of name characters and emit it as NAME or NUMBER.

        Returns:
            The run, empty if the current character cannot start one.
        """
        cursor = self._cursor
        chars: list[str] = []
        while not cursor.at_end():
            char = cursor.peek()
            if char not in NAME_CHARS:
                break
            chars.append(char)
            cursor.advance()

        run = "".join(chars)
        if run:
            self._emit(TokenType.NUMBER if is_numeric(run) else TokenType.NAME, run)
        return run

    def _read_line_comment(self) -> None:
        """Skip to the end of the line, emitting NEWLINE if one ends it."""
        cursor = self._cursor
        while not cursor.at_end():
            char = cursor.peek()
            cursor.advance()
            if char == "\n":
                self._emit(TokenType.NEWLINE)
                return

"""String value scanner mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bibparse.lexer.modes import ENTRY_CLOSERS
from bibparse.tokens import TokenType

if TYPE_CHECKING:
    from bibparse.cursors import CharacterCursor


class StringScannerMixin:
    """Mixin providing the string sub-lexer.

    Reads a ``"..."`` or ``{...}`` value whose opening delimiter has
    already been consumed. Newlines inside the value are kept in the text
    and counted, so that the matching NEWLINE tokens can be replayed after
    the STRING token.

    """

    # These will be set by the Lexer class
    _cursor: CharacterCursor

    def _emit(self, token_type: TokenType, value: str | None = None) -> None:
        """Append a token. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_string(self, delimiter: str, *, keep: bool = True) -> None:
        """Scan a string value and emit its tokens.

        Args:
            delimiter: The consumed opening character (``"``, ``{`` or ``(``)
            keep: Emit the STRING token. When False only the NEWLINE
                tokens are emitted and the text is discarded.
        """
        if delimiter == '"':
            text, newlines = self._read_quoted()
        else:
            text, newlines = self._read_nested(delimiter, ENTRY_CLOSERS[delimiter])

        if keep:
            self._emit(TokenType.STRING, text)
        for _ in range(newlines):
            self._emit(TokenType.NEWLINE)

    def _read_quoted(self) -> tuple[str, int]:
        """Read up to an unescaped ``"``.

        A backslash escapes exactly the next character. The backslash is
        dropped and the escaped character kept verbatim.

        Returns:
            (text, newline_count)
        """
        cursor = self._cursor
        chars: list[str] = []
        newlines = 0
        escaped = False

        while not cursor.at_end():
            char = cursor.peek()
            cursor.advance()

            if char == "\n":
                newlines += 1

            if not escaped and char == "\\":
                escaped = True
            elif not escaped and char == '"':
                break
            else:
                chars.append(char)
                escaped = False

        return "".join(chars), newlines

    def _read_nested(self, opener: str, closer: str) -> tuple[str, int]:
        """Read up to the closer that balances the consumed opener.

        Nested openers and closers are kept in the text. An unterminated
        value ends at end of input with whatever was accumulated.

        Returns:
            (text, newline_count)
        """
        cursor = self._cursor
        chars: list[str] = []
        newlines = 0
        depth = 1

        while not cursor.at_end():
            char = cursor.peek()
            cursor.advance()

            if char == "\n":
                newlines += 1

            if char == opener:
                depth += 1
            elif char == closer:
                depth -= 1
                if depth == 0:
                    break

            chars.append(char)

        return "".join(chars), newlines

"""Token navigation for the bibparse parser.

Provides TokenCursor, which walks the lexer's token list and hides NEWLINE
markers from the parser while counting them for line numbers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bibparse.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Sequence


class TokenCursor:
    """Cursor over a finished token sequence.

    Offers the same peek/advance/at_end/rewind surface as a character
    cursor. NEWLINE tokens are skipped transparently; each one skipped
    advances ``line`` by one.

    Usage:
            >>> cursor = TokenCursor([Token(TokenType.NEWLINE), Token(TokenType.AT)])
            >>> cursor.peek(), cursor.line
        (Token(AT), 2)

    """

    __slots__ = ("_tokens", "_tokens_len", "_pos", "_line")

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tokens
        self._tokens_len = len(tokens)
        self._pos = 0
        self._line = 1
        self._skip_newlines()

    @property
    def line(self) -> int:
        """Line of the current token (1-indexed)."""
        return self._line

    @property
    def position(self) -> int:
        """Index of the current token in the underlying sequence."""
        return self._pos

    def peek(self) -> Token | None:
        """Current token, or None when exhausted."""
        if self._pos < self._tokens_len:
            return self._tokens[self._pos]
        return None

    def advance(self) -> bool:
        """Move to the next non-NEWLINE token.

        Returns:
            True if a token is available afterwards.
        """
        if self._pos < self._tokens_len:
            self._pos += 1
            self._skip_newlines()
        return self._pos < self._tokens_len

    def at_end(self) -> bool:
        return self._pos >= self._tokens_len

    def rewind(self) -> None:
        """Return to the first token and line 1."""
        self._pos = 0
        self._line = 1
        self._skip_newlines()

    def _skip_newlines(self) -> None:
        tokens = self._tokens
        while self._pos < self._tokens_len and tokens[self._pos].type == TokenType.NEWLINE:
            self._line += 1
            self._pos += 1

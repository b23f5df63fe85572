"""Per-parse context for the recursive-descent entry parser.

ParseContext bundles the mutable state one parse works on: the token
cursor, the macro table and the source file used in error messages.
The recursive-descent functions in ``bibparse.parsing.entries`` receive
it explicitly instead of reaching into parser instance state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bibparse.errors import UnexpectedEndError, UnexpectedTokenError, UnknownMacroError

if TYPE_CHECKING:
    from bibparse.macros import MacroTable
    from bibparse.parsing.token_nav import TokenCursor
    from bibparse.tokens import Token, TokenType


@dataclass(slots=True)
class ParseContext:
    """Mutable state for one parse.

    Attributes:
        cursor: Token cursor positioned at the next unread token
        macros: Macro table; ``@string`` definitions are written into it
        source_file: Optional source file path for error messages

    """

    cursor: TokenCursor
    macros: MacroTable
    source_file: str | None = None

    def require(self, kind: TokenType | None = None) -> Token:
        """Read the current token, which must exist and match ``kind``.

        Args:
            kind: Required token type, or None to accept any token

        Returns:
            The consumed token.

        Raises:
            UnexpectedEndError: If the tokens are exhausted.
            UnexpectedTokenError: If the token has a different type.
        """
        token = self.cursor.peek()
        if token is None:
            raise UnexpectedEndError(kind, self.cursor.line, self.source_file)
        if kind is not None and token.type != kind:
            raise UnexpectedTokenError(kind, token.type, self.cursor.line, self.source_file)
        self.cursor.advance()
        return token

    def try_read(self, kind: TokenType) -> Token | None:
        """Read the current token only if it matches ``kind``.

        Returns:
            The consumed token, or None without advancing.
        """
        token = self.cursor.peek()
        if token is None or token.type != kind:
            return None
        self.cursor.advance()
        return token

    def current_is(self, kind: TokenType) -> bool:
        """Check the type of the current token without consuming it."""
        token = self.cursor.peek()
        return token is not None and token.type == kind

    def lookup_macro(self, name: str, lineno: int) -> str:
        """Resolve a macro reference exactly as written.

        Args:
            name: Macro name as it appeared in the source
            lineno: Line of the reference, for the error message

        Raises:
            UnknownMacroError: If no macro of that name is defined.
        """
        try:
            return self.macros[name]
        except KeyError:
            raise UnknownMacroError(name, lineno, self.source_file) from None

"""Token and TokenType definitions for the bibparse lexer.

The lexer produces a list of Token objects that the parser consumes.
Each Token has a type and, for NAME/STRING/NUMBER, a payload string.

NEWLINE tokens carry no payload. They exist so the token cursor can
recompute line numbers and are never visible to the entry parser.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer.

    The set is closed: every token the lexer emits is one of these ten.

    """

    # Line tracking
    NEWLINE = auto()

    # Entry structure
    AT = auto()  # @
    ENTRY_OPEN = auto()  # ( or {
    ENTRY_CLOSE = auto()  # ) or }

    # Values
    NAME = auto()  # article, author, jan
    STRING = auto()  # "..." or {...}
    NUMBER = auto()  # 2011

    # Punctuation
    EQUALS = auto()  # =
    COMMA = auto()  # ,
    HASH = auto()  # #


#: Token types that always carry a payload.
VALUE_TOKEN_TYPES = frozenset({TokenType.NAME, TokenType.STRING, TokenType.NUMBER})


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Payload for NAME/STRING/NUMBER tokens, None otherwise

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    value: str | None = None

    def __str__(self) -> str:
        """Human readable form, e.g. ``NAME(author)`` or ``AT()``."""
        return f"{self.type.name}({self.value if self.value is not None else ''})"

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.value is None:
            return f"Token({self.type.name})"
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r})"

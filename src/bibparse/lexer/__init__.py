"""Modular state-machine lexer for the bibparse BibTeX parser.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (mixin composition + top level)
├── modes.py             # LexerMode enum, character classes
└── scanners/            # Mode-specific scanners
    ├── entry.py         # In-entry mode (fields, punctuation, names)
    └── string.py        # "..." and {...} values

Usage:
    >>> from bibparse.lexer import Lexer
    >>> for token in Lexer("@misc{k}").tokenize():
    ...     print(token)
AT()
NAME(misc)
ENTRY_OPEN()
NAME(k)
ENTRY_CLOSE()

"""

from bibparse.lexer.core import Lexer
from bibparse.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode"]

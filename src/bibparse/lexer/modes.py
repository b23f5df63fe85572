"""Lexer operating modes and character classes.

This module defines the finite state machine modes for the lexer
and the constant sets used to classify characters.
"""

from __future__ import annotations

import re
import string
from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - TOP_LEVEL: Between entries, everything but ``@``, ``%`` and newlines is junk
    - IN_ENTRY: After ``@``, scanning one entry up to its closer

    """

    TOP_LEVEL = auto()  # Between entries
    IN_ENTRY = auto()  # Inside @type{...}


# Characters allowed in a NAME or NUMBER run (ASCII only)
NAME_CHARS = frozenset(string.ascii_letters + string.digits + "!$&*+-./:;<>?[]^_`|")

# Discarded between tokens
WHITESPACE = frozenset(" \t\r")

# Entry opener -> matching closer
ENTRY_CLOSERS = {"{": "}", "(": ")"}

# Delimiters that start a string value inside an entry
STRING_DELIMITERS = frozenset('{"')

# Entry types whose body is lexed as a single discarded string
COMMENT_ENTRY = "comment"

# Whole-run numeric test: sign, digits with optional fraction, optional exponent
NUMERIC_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def is_numeric(text: str) -> bool:
    """Check whether a NAME-or-NUMBER run is entirely numeric.

    Examples:
        >>> is_numeric("2011"), is_numeric("-1.5e3"), is_numeric("2011a")
        (True, True, False)
    """
    return NUMERIC_PATTERN.fullmatch(text) is not None

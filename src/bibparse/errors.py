"""Exception classes for bibparse.

Provides standardized exceptions for error handling throughout bibparse.
Every parse failure aborts the whole parse; there is no recovery.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bibparse.tokens import TokenType


class BibparseError(Exception):
    """Base exception for all bibparse errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(BibparseError):
    """Error during BibTeX parsing.

    Raised when the parser encounters invalid or unexpected input.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + ": "

        super().__init__(f"{location}{message}")


class UnexpectedTokenError(ParseError):
    """A required token was present but of the wrong kind.

    ``expected`` is None when any value token (STRING, NUMBER or NAME)
    would have been accepted.
    """

    def __init__(
        self,
        expected: TokenType | None,
        actual: TokenType,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        if expected is None:
            message = f"Expected a value, but got '{actual.name}'"
        else:
            message = f"Expected a token of type '{expected.name}', but got '{actual.name}'"
        super().__init__(message, lineno, source_file)


class UnexpectedEndError(ParseError):
    """Input ended while a token was required."""

    def __init__(
        self,
        expected: TokenType | None,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.expected = expected
        message = "Reached end of input"
        if expected is not None:
            message += f", but expected '{expected.name}'"
        super().__init__(message, lineno, source_file)


class UnknownMacroError(ParseError):
    """A name used in value position has no entry in the macro table."""

    def __init__(
        self,
        name: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.name = name
        super().__init__(f"Unknown macro '{name}'", lineno, source_file)


class SourceError(BibparseError):
    """A file-backed source could not be opened or read.

    Distinct from ParseError: I/O failures are never reported as an
    unexpected end of input.
    """

    def __init__(self, path: str, reason: str) -> None:
        """Initialize source error.

        Args:
            path: Path of the file that failed
            reason: Description of the underlying failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read '{path}': {reason}")

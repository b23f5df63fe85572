"""Character cursors over BibTeX sources.

The lexer is written once against the CharacterCursor protocol. Two
implementations satisfy it:

- StringCursor: walks an in-memory string
- FileCursor: reads a file character by character through one open handle

Both report the current 1-based line number. The line advances when the
cursor moves past a ``\\n``, so a newline character itself still belongs
to the line it terminates.

Thread Safety:
Cursors are stateful and single-owner. Do not share one between threads.

"""

from __future__ import annotations

from typing import IO, Protocol, Self, runtime_checkable

from bibparse.errors import SourceError
from bibparse.utils.logger import get_logger

logger = get_logger(__name__)


@runtime_checkable
class CharacterCursor(Protocol):
    """Protocol for character sources consumed by the lexer."""

    @property
    def line(self) -> int:
        """Current line number (1-indexed)."""
        ...

    @property
    def position(self) -> int:
        """Index of the current character."""
        ...

    def peek(self) -> str:
        """Current character, or empty string at end of input."""
        ...

    def advance(self) -> bool:
        """Move to the next character.

        Returns:
            True if a character is available afterwards.
        """
        ...

    def at_end(self) -> bool:
        """Check if the source is exhausted."""
        ...

    def rewind(self) -> None:
        """Return to the first character and line 1."""
        ...


class StringCursor:
    """Cursor over an in-memory string.

    Usage:
        >>> cursor = StringCursor("A\\nB")
        >>> cursor.peek(), cursor.line
        ('A', 1)
        >>> cursor.advance(); cursor.advance()
        True
        True
        >>> cursor.peek(), cursor.line
        ('B', 2)

    """

    __slots__ = ("_source", "_source_len", "_pos", "_line")

    def __init__(self, source: str) -> None:
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._line = 1

    @property
    def line(self) -> int:
        return self._line

    @property
    def position(self) -> int:
        return self._pos

    def peek(self) -> str:
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def advance(self) -> bool:
        if self._pos < self._source_len:
            if self._source[self._pos] == "\n":
                self._line += 1
            self._pos += 1
        return self._pos < self._source_len

    def at_end(self) -> bool:
        return self._pos >= self._source_len

    def rewind(self) -> None:
        self._pos = 0
        self._line = 1


class FileCursor:
    """Cursor reading a file one character at a time.

    Holds a single open handle from construction until close(). Use it as
    a context manager so the handle is released even when lexing fails:

        >>> with FileCursor("refs.bib") as cursor:
        ...     tokens = Lexer(cursor).tokenize()

    Raises:
        SourceError: If the file cannot be opened, read, or decoded.

    """

    __slots__ = ("_path", "_handle", "_current", "_pos", "_line")

    def __init__(self, path: str, encoding: str = "utf-8") -> None:
        self._path = str(path)
        try:
            # newline="" keeps \r\n intact so file and string sources lex alike
            self._handle: IO[str] | None = open(  # noqa: SIM115
                self._path, encoding=encoding, newline=""
            )
        except OSError as exc:
            raise SourceError(self._path, exc.strerror or str(exc)) from exc
        logger.debug("Opened %s (encoding=%s)", self._path, encoding)
        self._current = ""
        self._pos = 0
        self._line = 1
        try:
            self.rewind()
        except SourceError:
            self.close()
            raise

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def path(self) -> str:
        return self._path

    @property
    def line(self) -> int:
        return self._line

    @property
    def position(self) -> int:
        return self._pos

    @property
    def closed(self) -> bool:
        return self._handle is None

    def peek(self) -> str:
        return self._current

    def advance(self) -> bool:
        if self._current == "":
            return False
        if self._current == "\n":
            self._line += 1
        self._pos += 1
        self._current = self._read_char()
        return self._current != ""

    def at_end(self) -> bool:
        return self._current == ""

    def rewind(self) -> None:
        handle = self._require_handle()
        try:
            handle.seek(0)
        except OSError as exc:
            raise SourceError(self._path, str(exc)) from exc
        self._pos = 0
        self._line = 1
        self._current = self._read_char()

    def close(self) -> None:
        """Release the file handle. Safe to call more than once."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            self._current = ""

    def _require_handle(self) -> IO[str]:
        if self._handle is None:
            raise SourceError(self._path, "cursor is closed")
        return self._handle

    def _read_char(self) -> str:
        handle = self._require_handle()
        try:
            return handle.read(1)
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceError(self._path, str(exc)) from exc

"""Error construction and formatting tests."""

from bibparse.errors import (
    BibparseError,
    ParseError,
    SourceError,
    UnexpectedEndError,
    UnexpectedTokenError,
    UnknownMacroError,
)
from bibparse.tokens import TokenType


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected token")
        assert str(err) == "unexpected token"
        assert err.lineno is None

    def test_with_line_number(self) -> None:
        assert str(ParseError("bad syntax", lineno=42)) == "42: bad syntax"

    def test_with_source_file(self) -> None:
        err = ParseError("error", lineno=3, source_file="refs.bib")
        assert str(err) == "refs.bib:3: error"

    def test_is_bibparse_error(self) -> None:
        assert isinstance(ParseError("x"), BibparseError)


class TestParseErrorKinds:
    """The three parse failure kinds."""

    def test_unexpected_token(self) -> None:
        err = UnexpectedTokenError(TokenType.EQUALS, TokenType.STRING, lineno=5)
        assert str(err) == "5: Expected a token of type 'EQUALS', but got 'STRING'"
        assert isinstance(err, ParseError)

    def test_unexpected_token_without_expected_kind(self) -> None:
        err = UnexpectedTokenError(None, TokenType.COMMA, lineno=1)
        assert "Expected a value, but got 'COMMA'" in str(err)

    def test_unexpected_end(self) -> None:
        err = UnexpectedEndError(TokenType.ENTRY_CLOSE, lineno=9)
        assert str(err) == "9: Reached end of input, but expected 'ENTRY_CLOSE'"

    def test_unexpected_end_without_expected_kind(self) -> None:
        assert str(UnexpectedEndError(None, lineno=2)) == "2: Reached end of input"

    def test_unknown_macro(self) -> None:
        err = UnknownMacroError("ieee", lineno=4, source_file="a.bib")
        assert err.name == "ieee"
        assert str(err) == "a.bib:4: Unknown macro 'ieee'"


class TestSourceError:
    """File failures stay separate from parse failures."""

    def test_not_a_parse_error(self) -> None:
        err = SourceError("refs.bib", "No such file or directory")
        assert isinstance(err, BibparseError)
        assert not isinstance(err, ParseError)
        assert str(err) == "Cannot read 'refs.bib': No such file or directory"

"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from bibparse.lexer import Lexer
from bibparse.tokens import VALUE_TOKEN_TYPES, TokenType

# Characters with special meaning somewhere in the grammar
GRAMMAR_CHARS = '@{}()"\\%=#,\n \tab1'


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_terminates_on_any_input(self, source: str) -> None:
        """Tokenizing always finishes and yields a list."""
        tokens = Lexer(source).tokenize()
        assert isinstance(tokens, list)

    @given(st.text(alphabet=GRAMMAR_CHARS, max_size=300))
    @settings(max_examples=300)
    def test_payload_only_on_value_tokens(self, source: str) -> None:
        for token in Lexer(source).tokenize():
            assert isinstance(token.type, TokenType)
            if token.type in VALUE_TOKEN_TYPES:
                assert token.value is not None
            else:
                assert token.value is None

    @given(st.text(alphabet=GRAMMAR_CHARS, max_size=300))
    @settings(max_examples=300)
    def test_every_newline_is_accounted_for(self, source: str) -> None:
        """Each ``\\n`` yields exactly one NEWLINE token, wherever it appears."""
        tokens = Lexer(source).tokenize()
        newline_tokens = sum(1 for t in tokens if t.type == TokenType.NEWLINE)
        assert newline_tokens == source.count("\n")

    @given(st.text(alphabet=GRAMMAR_CHARS, max_size=300))
    @settings(max_examples=200)
    def test_entry_open_always_follows_at_and_name(self, source: str) -> None:
        tokens = [t for t in Lexer(source).tokenize() if t.type != TokenType.NEWLINE]
        for i, token in enumerate(tokens):
            if token.type == TokenType.ENTRY_OPEN:
                assert i >= 1
                assert tokens[i - 1].type in (TokenType.AT, TokenType.NAME, TokenType.NUMBER)

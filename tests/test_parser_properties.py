"""Property-based tests for the entry parser using Hypothesis."""

import string

from hypothesis import given, settings
from hypothesis import strategies as st

from bibparse import parse
from bibparse.errors import ParseError

identifiers = st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=10)
entry_types = identifiers.filter(lambda t: t not in {"string", "comment", "preamble"})
# Brace-free text; braces would need balancing
values = st.text(alphabet=string.ascii_letters + string.digits + " .,:;-'\"\n", max_size=30)


@given(
    entry_type=entry_types,
    key=st.text(alphabet=string.ascii_letters, min_size=1, max_size=10),
    fields=st.dictionaries(identifiers, values, max_size=6),
    closer_style=st.sampled_from(["{}", "()"]),
)
@settings(max_examples=200)
def test_single_entry_round_trip(
    entry_type: str, key: str, fields: dict[str, str], closer_style: str
) -> None:
    """One well-formed entry yields one Entry with the same type, key and fields."""
    opener, closer = closer_style
    body = ", ".join(f"{name} = {{{value}}}" for name, value in fields.items())
    source = f"@{entry_type}{opener}{key}, {body}{closer}"

    entries = parse(source)

    assert len(entries) == 1
    entry = entries[0]
    assert entry.type == entry_type
    assert entry.key == key
    assert entry.fields == fields


@given(st.text(alphabet='@{}()"\\%=#,\n abK1', max_size=200))
@settings(max_examples=300)
def test_only_parse_errors_escape(source: str) -> None:
    """Arbitrary input either parses or fails with a ParseError."""
    try:
        entries = parse(source)
    except ParseError:
        return
    assert isinstance(entries, list)

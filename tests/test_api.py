"""Tests for the high-level bibparse API."""


class TestPackageExports:
    """The documented names are importable from the package root."""

    def test_core_functions(self) -> None:
        import bibparse

        for name in ("parse", "parse_file", "parse_person", "parse_persons", "BibtexParser"):
            assert callable(getattr(bibparse, name))

    def test_all_names_resolve(self) -> None:
        import bibparse

        for name in bibparse.__all__:
            assert hasattr(bibparse, name), name


class TestParseFunction:
    """Tests for the parse() function."""

    def test_parse_returns_entries(self) -> None:
        from bibparse import Entry, parse

        entries = parse("@book{k, title = {T}}")
        assert entries == [Entry("book", "k", {"title": "T"})]

    def test_parse_with_macros(self) -> None:
        from bibparse import parse

        entries = parse("@book{k, publisher = aw}", {"aw": "Addison-Wesley"})
        assert entries[0].fields["publisher"] == "Addison-Wesley"

    def test_calls_do_not_share_macros(self) -> None:
        import pytest

        from bibparse import UnknownMacroError, parse

        parse('@string{p = "Press"}')
        with pytest.raises(UnknownMacroError):
            parse("@misc{k, t = p}")


class TestAuthorsWorkflow:
    """Parsing entries, then splitting their author field."""

    def test_authors_from_entry(self) -> None:
        from bibparse import parse, parse_persons

        source = """
        @inproceedings{lamport78,
          author = {Leslie Lamport and de Bruijn, Nicolaas Govert},
          title  = "Time, Clocks",
        }
        """
        entry = parse(source)[0]
        names = parse_persons(entry.fields["author"])
        assert [(n.forename, n.von, n.surname) for n in names] == [
            ("Leslie", "", "Lamport"),
            ("Nicolaas Govert", "de", "Bruijn"),
        ]

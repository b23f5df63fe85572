"""Tests for ContextVar-based parse configuration.

Validates defaults, context manager behavior, thread isolation and how
BibtexParser picks the active config up.
"""

from pathlib import Path
from threading import Thread

import pytest

from bibparse import (
    MONTH_MACROS,
    BibtexParser,
    ParseConfig,
    get_parse_config,
    parse,
    parse_config_context,
    parse_file,
    reset_parse_config,
    set_parse_config,
)
from bibparse.errors import UnknownMacroError


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ParseConfig()
        assert dict(config.macros) == {}
        assert config.encoding == "utf-8"

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.encoding = "ascii"  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"encoding": "latin-1", "unknown_key": 1})
        assert config.encoding == "latin-1"
        assert dict(config.macros) == {}


class TestContextVar:
    """get/set/reset and the context manager."""

    def test_default_config(self) -> None:
        reset_parse_config()
        config = get_parse_config()
        assert config.encoding == "utf-8"
        assert dict(config.macros) == {}

    def test_set_and_reset(self) -> None:
        config = ParseConfig(encoding="latin-1")
        set_parse_config(config)
        try:
            assert get_parse_config() is config
        finally:
            reset_parse_config()
        assert get_parse_config().encoding == "utf-8"

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with parse_config_context(ParseConfig(encoding="ascii")):
                assert get_parse_config().encoding == "ascii"
                raise RuntimeError("boom")
        assert get_parse_config().encoding == "utf-8"

    def test_thread_isolation(self) -> None:
        """Each thread sees its own config."""
        results: dict[int, str] = {}

        def worker(thread_id: int, config: ParseConfig) -> None:
            set_parse_config(config)
            results[thread_id] = BibtexParser().parse_string("@misc{k, t = m}")[0].fields["t"]

        configs = [ParseConfig(macros={"m": f"thread-{i}"}) for i in range(4)]
        threads = [Thread(target=worker, args=(i, c)) for i, c in enumerate(configs)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {i: f"thread-{i}" for i in range(4)}


class TestParserUsesConfig:
    """BibtexParser snapshots the active config at construction."""

    def test_config_macros_seed_parser(self) -> None:
        with parse_config_context(ParseConfig(macros=MONTH_MACROS)):
            parser = BibtexParser()
        entries = parser.parse_string("@misc{k, month = feb}")
        assert entries[0].fields["month"] == "February"

    def test_module_parse_uses_config(self) -> None:
        with parse_config_context(ParseConfig(macros=MONTH_MACROS)):
            assert parse("@misc{k, month = dec}")[0].fields["month"] == "December"
        with pytest.raises(UnknownMacroError):
            parse("@misc{k, month = dec}")

    def test_explicit_macros_override_config(self) -> None:
        with parse_config_context(ParseConfig(macros={"m": "config"})):
            parser = BibtexParser({"m": "explicit"})
        assert parser.parse_string("@misc{k, t = m}")[0].fields["t"] == "explicit"

    def test_explicit_config_argument(self) -> None:
        parser = BibtexParser(config=ParseConfig(macros={"m": "given"}))
        assert parser.parse_string("@misc{k, t = m}")[0].fields["t"] == "given"

    def test_encoding_applies_to_files(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.bib"
        path.write_bytes(b"@misc{k, t = {caf\xe9}}")
        with parse_config_context(ParseConfig(encoding="latin-1")):
            entries = BibtexParser().parse_file(path)
        assert entries[0].fields["t"] == "café"

    def test_parse_file_encoding_argument(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.bib"
        path.write_bytes(b"@misc{k, t = {caf\xe9}}")
        assert parse_file(path, encoding="latin-1")[0].fields["t"] == "café"

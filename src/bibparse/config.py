"""ContextVar-based parse configuration for bibparse.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A BibtexParser created without explicit configuration reads the active
config once, at construction.

Usage:
    from bibparse.config import ParseConfig, parse_config_context
    from bibparse.macros import MONTH_MACROS

    with parse_config_context(ParseConfig(macros=MONTH_MACROS)):
        parser = BibtexParser()
        entries = parser.parse_string(source)

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import MappingProxyType


def _empty_macros() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is intentionally excluded; it's per-call state,
    not configuration.

    Attributes:
        macros: Macros seeded into every new parser's macro table
        encoding: Text encoding used for file-backed sources

    """

    macros: Mapping[str, str] = field(default_factory=_empty_macros)
    encoding: str = "utf-8"

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "encoding": "latin-1",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.encoding
            'latin-1'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "bibparse_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(encoding="latin-1")):
        ...     get_parse_config().encoding
        'latin-1'

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]

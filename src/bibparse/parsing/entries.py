"""Recursive-descent rules for BibTeX entries.

Grammar:
    entry       := '@' NAME ENTRY_OPEN body ENTRY_CLOSE
    body        := field                        (@string)
                 | STRING?                      (@preamble, @comment)
                 | NAME (',' fields)?           (everything else)
    fields      := (field ','?)*                stops after a field with no comma
    field       := NAME '=' value
    value       := simple_value ('#' simple_value)*
    simple_value := STRING | NUMBER | NAME      NAME is a macro reference

Each rule takes the ParseContext explicitly. Any failure raises and
aborts the parse.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bibparse.errors import UnexpectedTokenError
from bibparse.nodes import Entry
from bibparse.tokens import TokenType
from bibparse.utils.logger import get_logger

if TYPE_CHECKING:
    from bibparse.parsing.context import ParseContext

logger = get_logger(__name__)

# Entry types that never produce an Entry (compared lower-cased)
STRING_ENTRY = "string"
SUPPRESSED_ENTRIES = frozenset({"preamble", "comment"})


def parse_entry(ctx: ParseContext) -> Entry | None:
    """Parse one entry.

    Returns:
        The Entry, or None for ``@string``, ``@preamble`` and ``@comment``.
    """
    ctx.require(TokenType.AT)
    entry_type = ctx.require(TokenType.NAME).value or ""
    ctx.require(TokenType.ENTRY_OPEN)

    kind = entry_type.lower()
    entry: Entry | None = None
    if kind == STRING_ENTRY:
        name, value = parse_field(ctx)
        ctx.macros[name] = value
        logger.debug("Defined macro %r", name)
    elif kind in SUPPRESSED_ENTRIES:
        ctx.try_read(TokenType.STRING)
        logger.debug("Skipped @%s on line %d", entry_type, ctx.cursor.line)
    else:
        key = ctx.require(TokenType.NAME).value or ""
        fields = parse_fields(ctx) if ctx.try_read(TokenType.COMMA) else {}
        entry = Entry(type=entry_type, key=key, fields=fields)

    ctx.require(TokenType.ENTRY_CLOSE)
    return entry


def parse_fields(ctx: ParseContext) -> dict[str, str]:
    """Parse comma-separated fields; a repeated name keeps the later value."""
    fields: dict[str, str] = {}
    while ctx.current_is(TokenType.NAME):
        name, value = parse_field(ctx)
        fields[name] = value
        if ctx.try_read(TokenType.COMMA) is None:
            break
    return fields


def parse_field(ctx: ParseContext) -> tuple[str, str]:
    """Parse ``name = value``.

    Returns:
        (lower-cased name, expanded value)
    """
    name = ctx.require(TokenType.NAME).value or ""
    ctx.require(TokenType.EQUALS)
    return name.lower(), parse_value(ctx)


def parse_value(ctx: ParseContext) -> str:
    """Parse simple values joined by ``#`` and concatenate them."""
    parts = [parse_simple_value(ctx)]
    while ctx.try_read(TokenType.HASH) is not None:
        parts.append(parse_simple_value(ctx))
    return "".join(parts)


def parse_simple_value(ctx: ParseContext) -> str:
    """Parse a string, a number, or a macro reference."""
    lineno = ctx.cursor.line
    token = ctx.require()
    if token.type in (TokenType.STRING, TokenType.NUMBER):
        return token.value or ""
    if token.type == TokenType.NAME:
        return ctx.lookup_macro(token.value or "", lineno)
    raise UnexpectedTokenError(None, token.type, lineno, ctx.source_file)

"""Macro tables for ``@string`` substitution.

A macro table maps a macro name to its replacement text. ``@string``
definitions are stored under their lower-cased name, while references are
looked up exactly as written.
"""

from __future__ import annotations

from typing import TypeAlias

MacroTable: TypeAlias = dict[str, str]

# Standard BibTeX month abbreviations. Not installed unless passed in.
MONTH_MACROS: dict[str, str] = {
    "jan": "January",
    "feb": "February",
    "mar": "March",
    "apr": "April",
    "may": "May",
    "jun": "June",
    "jul": "July",
    "aug": "August",
    "sep": "September",
    "oct": "October",
    "nov": "November",
    "dec": "December",
}

"""BibTeX person-name splitting.

Splits a name into forename, von particle, surname and suffix following
BibTeX's three accepted forms:

- ``Forename von Surname``
- ``von Surname, Forename``
- ``von Surname, Suffix, Forename``

Case tests look only at the first character of a word and are ASCII-only:
a word starting with anything other than ``A-Z``/``a-z`` is neither
upper- nor lower-case.

These functions are total; unusual input degrades rather than raising.

Example:
    >>> parse_person("Ludwig van Beethoven")
    PersonName(forename='Ludwig', von='van', surname='Beethoven', suffix='')

"""

from __future__ import annotations

import string
from dataclasses import dataclass

# Separator between names in an author/editor list (literal, case-sensitive)
NAME_SEPARATOR = " and "

_UPPER = frozenset(string.ascii_uppercase)
_LOWER = frozenset(string.ascii_lowercase)


@dataclass(frozen=True, slots=True)
class PersonName:
    """A person's name split into its BibTeX parts. Any part may be empty."""

    forename: str = ""
    von: str = ""
    surname: str = ""
    suffix: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "forename": self.forename,
            "von": self.von,
            "surname": self.surname,
            "suffix": self.suffix,
        }


def _is_upper_initial(word: str) -> bool:
    return word[:1] in _UPPER


def _is_lower_initial(word: str) -> bool:
    return word[:1] in _LOWER


def _extract_forename(words: list[str]) -> str:
    """Take leading upper-case words off ``words`` as the forename.

    Mutates ``words``. If every word was taken, the last one is handed
    back so a surname always remains.
    """
    forenames: list[str] = []
    while words and _is_upper_initial(words[0]):
        forenames.append(words.pop(0))

    if not words and forenames:
        words.append(forenames.pop())

    return " ".join(forenames)


def _extract_von_and_surname(words: list[str]) -> tuple[str, str]:
    """Split words into the von part and the surname.

    The von part runs up to the last lower-case word, so capitalized words
    between two lower-case words belong to it. If every word is lower-case,
    the last one is the surname.

    Returns:
        (von, surname)
    """
    vons: list[str] = []
    surnames: list[str] = []
    for word in words:
        if _is_lower_initial(word):
            vons.extend(surnames)
            vons.append(word)
            surnames = []
        else:
            surnames.append(word)

    if not surnames and vons:
        surnames.append(vons.pop())

    return " ".join(vons), " ".join(surnames)


def parse_person(text: str) -> PersonName:
    """Split one name into its parts.

    Only the first three comma-separated segments are used.

    Examples:
        >>> parse_person(" AA  bb  CC  dd  EE ")
        PersonName(forename='AA', von='bb CC dd', surname='EE', suffix='')
        >>> parse_person("  bb   CC  ,  XX  ,  AA ")
        PersonName(forename='AA', von='bb', surname='CC', suffix='XX')
    """
    segments = text.split(",", 2)

    if len(segments) == 1:
        words = segments[0].split()
        forename = _extract_forename(words)
        von, surname = _extract_von_and_surname(words)
        return PersonName(forename=forename, von=von, surname=surname)

    von, surname = _extract_von_and_surname(segments[0].split())
    if len(segments) == 2:
        return PersonName(forename=segments[1].strip(), von=von, surname=surname)

    return PersonName(
        forename=segments[2].strip(),
        von=von,
        surname=surname,
        suffix=segments[1].strip(),
    )


def parse_persons(text: str) -> list[PersonName]:
    """Split an ``and``-separated list of names.

    Returns:
        One PersonName per name, in order; empty for blank input.
    """
    if not text.strip():
        return []
    return [parse_person(piece) for piece in text.split(NAME_SEPARATOR)]

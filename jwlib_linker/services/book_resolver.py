"""Book resolver: maps a book fragment ("1 Cor.", "Gen", "Zeph") to a canonical book.

A fragment matches a book when one of the words in the book's abbreviation
string *starts with* it. Matching only at word starts keeps "eph" from
landing inside "zephaniah", and prefix matching lets "Gene" or "Rev" find
their book even when the exact spelling is not listed. Books are tried in
canonical order and the first hit wins.
"""

from __future__ import annotations

import unicodedata
from functools import lru_cache
from typing import Optional

from jwlib_linker.core.books import get_language_table
from jwlib_linker.core.language import Language
from jwlib_linker.core.models import CanonicalBook


def normalize_fragment(ordinal: Optional[str], fragment: str) -> str:
    """Return the lookup token: ordinal glued to the dot-free, lowercased name.

    >>> normalize_fragment("1 ", "Cor.")
    '1cor'
    """
    name = unicodedata.normalize("NFC", fragment).replace(".", "").lower().strip()
    return (ordinal or "").strip() + name


@lru_cache(maxsize=512)
def word_starts(abbreviations: str) -> tuple[str, ...]:
    """Return the tail of ``abbreviations`` beginning at each word start.

    "song of solomon ca" -> ("song of solomon ca", "of solomon ca", "solomon ca", "ca")
    """
    tails = [abbreviations]
    position = abbreviations.find(" ")
    while position != -1:
        tails.append(abbreviations[position + 1 :])
        position = abbreviations.find(" ", position + 1)
    return tuple(tails)


def matches_book(book: CanonicalBook, token: str) -> bool:
    """True when some word of the book's abbreviation string begins with ``token``."""
    if not token:
        return False
    return any(tail.startswith(token) for tail in word_starts(book.abbreviations))


def resolve_book(
    language: Language, ordinal: Optional[str], fragment: str
) -> Optional[CanonicalBook]:
    """Return the first book (canonical order) matching the fragment, or None."""
    token = normalize_fragment(ordinal, fragment)
    for book in get_language_table(language).books:
        if matches_book(book, token):
            return book
    return None


__all__ = ["matches_book", "normalize_fragment", "resolve_book", "word_starts"]

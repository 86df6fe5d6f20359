"""Citation scanner: finds "Book chapter:verse" candidates in free text.

A book fragment is one word, except the English "song of solomon". Other
multi-word names only match on their last word, so French "Chant de Salomon 2:1"
is found as "Salomon 2:1" and the words before it stay outside the link.
"""

from __future__ import annotations

from typing import Iterator

import regex

from jwlib_linker.core.models import RawMatch

# Any 2+ letters, marks or dots form a book fragment; the book resolver
# decides whether the fragment names a book.
CITATION_PATTERN = regex.compile(
    r"""
    (?P<reference>
        (?P<ordinal>[123]\ ?)?                          # 1 / 2 / 3 book prefix
        (?P<book>[\p{L}\p{M}.]{2,}|song\ of\ solomon)   # book name or abbreviation
        \ ?(?P<chapter>[0-9]{1,3})
        :(?P<verse>[0-9]{1,3})
        (?P<extra>[-,]\ ?[0-9]{1,3})?                   # -7 or ,15
    )
    (?P<trailing>\.|\]|</a>)?                           # ] or </a>: already a link; ".": no link
    """,
    regex.IGNORECASE | regex.MULTILINE | regex.VERBOSE,
)


def _to_raw_match(match: regex.Match) -> RawMatch:
    return RawMatch(
        reference=match.group("reference"),
        ordinal=match.group("ordinal"),
        book=match.group("book"),
        chapter=match.group("chapter"),
        verse=match.group("verse"),
        extra_verses=match.group("extra"),
        trailing=match.group("trailing"),
        start=match.start("reference"),
        end=match.end("reference"),
    )


def scan(text: str) -> Iterator[RawMatch]:
    """Yield every citation candidate in ``text``, left to right, non-overlapping."""
    for match in CITATION_PATTERN.finditer(text):
        yield _to_raw_match(match)


__all__ = ["CITATION_PATTERN", "scan"]

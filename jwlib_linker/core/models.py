"""Core data transfer objects shared across layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from jwlib_linker.core.language import Language

BOOK_COUNT = 66


class OutputMode(str, Enum):
    """How a resolved reference is serialized."""

    RENDERED_LINK = "html"  # <a href=... title=...>...</a>
    SOURCE_MARKUP_LINK = "markdown"  # [display](locator)
    PLAIN_TEXT = "text"  # display only, abbreviations expanded


@dataclass(frozen=True, slots=True)
class CanonicalBook:
    """One of the 66 books in a language table.

    ``abbreviations`` is the space separated alias list, lowercase, starting
    with the full name written without spaces (e.g. ``"1kings 1ki 1kg"``).
    """

    ordinal: int
    display_name: str
    abbreviations: str


@dataclass(frozen=True, slots=True)
class LanguageTable:
    """The 66 canonical books of one language, in reading order."""

    language: Language
    books: tuple[CanonicalBook, ...]

    def book(self, ordinal: int) -> CanonicalBook:
        """Return the book at canonical position ``ordinal`` (1-based)."""
        return self.books[ordinal - 1]


@dataclass(frozen=True, slots=True)
class RawMatch:
    """A single citation candidate found by the scanner."""

    reference: str
    ordinal: Optional[str]
    book: str
    chapter: str
    verse: str
    extra_verses: Optional[str]
    trailing: Optional[str]
    start: int
    end: int

    @property
    def already_linked(self) -> bool:
        """True when followed by "]" or "</a>", i.e. already inside a link."""
        return self.trailing is not None and self.trailing != "."

    @property
    def suppressed(self) -> bool:
        """True when a period follows the verse: expand the text, but do not link."""
        return self.trailing == "."


@dataclass(frozen=True, slots=True)
class ResolvedReference:
    """A citation resolved to a canonical book, ready for encoding."""

    book: CanonicalBook
    chapter: int
    verse: int
    last_verse: int
    display: str

    @property
    def has_range(self) -> bool:
        return self.last_verse > 0


class FormattedReference(NamedTuple):
    """Display text plus its serialized form for one output mode."""

    display: str
    markup: str


class LinkResult(NamedTuple):
    """Outcome of a rewrite pass: the new text and whether anything changed."""

    result: str
    changed: bool


__all__ = [
    "BOOK_COUNT",
    "CanonicalBook",
    "FormattedReference",
    "LanguageTable",
    "LinkResult",
    "OutputMode",
    "RawMatch",
    "ResolvedReference",
]

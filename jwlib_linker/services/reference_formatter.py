"""Reference formatter: builds display text and JW Library finder locators.

Locator codes are ``BBCCCVVV``: two-digit book, three-digit chapter and
three-digit verse, so Genesis 2:6 is ``01002006``. A verse range appends
``-BBCCCVVV`` for the last verse (``46013004-46013007``).
"""

from __future__ import annotations

from typing import Optional

from jwlib_linker.core.models import (
    CanonicalBook,
    FormattedReference,
    OutputMode,
    RawMatch,
    ResolvedReference,
)

JWL_FINDER = "jwlibrary:///finder?"
BIBLE_PARAM = "bible="


def display_text(book: CanonicalBook, chapter: str, verse: str, extra_verses: Optional[str]) -> str:
    """Canonical display form, e.g. "1 Corinthians 13:4-7" (numbers as written)."""
    return f"{book.display_name} {chapter}:{verse}{extra_verses or ''}"


def last_verse(verse: int, extra_verses: Optional[str]) -> int:
    """Return the range end encoded by ``extra_verses``, or 0 when there is none.

    A hyphen always gives a range. A comma only does when it names the very
    next verse ("14,15"); "6,15" cites two separate verses, which the locator
    cannot express, so only the first verse is linked.
    """
    if not extra_verses:
        return 0
    candidate = int(extra_verses[1:].strip())
    if extra_verses.startswith(",") and candidate != verse + 1:
        return 0
    return candidate


def reference_code(ordinal: int, chapter: int, verse: int, last: int = 0) -> str:
    """Return ``BBCCCVVV`` with an optional ``-BBCCCVVV`` range end."""
    book_chapter = f"{ordinal:02d}{chapter:03d}"
    code = f"{book_chapter}{verse:03d}"
    if last > 0:
        code += f"-{book_chapter}{last:03d}"
    return code


def build_locator(code: str) -> str:
    """Return the JW Library deep link for a reference code."""
    return f"{JWL_FINDER}{BIBLE_PARAM}{code}"


def build_reference(
    book: CanonicalBook, chapter: str, verse: str, extra_verses: Optional[str]
) -> ResolvedReference:
    """Combine a resolved book with chapter and verse text as captured."""
    verse_no = int(verse)
    return ResolvedReference(
        book=book,
        chapter=int(chapter),
        verse=verse_no,
        last_verse=last_verse(verse_no, extra_verses),
        display=display_text(book, chapter, verse, extra_verses),
    )


def resolve_reference(book: CanonicalBook, raw: RawMatch) -> ResolvedReference:
    """Build the reference for a scanner match whose book has been resolved."""
    return build_reference(book, raw.chapter, raw.verse, raw.extra_verses)


def render(reference: ResolvedReference, mode: OutputMode) -> str:
    """Serialize a resolved reference for ``mode``."""
    if mode is OutputMode.PLAIN_TEXT:
        return reference.display
    href = build_locator(
        reference_code(
            reference.book.ordinal, reference.chapter, reference.verse, reference.last_verse
        )
    )
    if mode is OutputMode.RENDERED_LINK:
        # title makes the target visible on hover
        return f'<a href="{href}" title="{href}">{reference.display}</a>'
    return f"[{reference.display}]({href})"


def format_reference(
    book: CanonicalBook,
    chapter: str,
    verse: str,
    extra_verses: Optional[str],
    mode: OutputMode,
) -> FormattedReference:
    """Return the display text and its serialized form for ``mode``."""
    reference = build_reference(book, chapter, verse, extra_verses)
    return FormattedReference(display=reference.display, markup=render(reference, mode))


__all__ = [
    "BIBLE_PARAM",
    "JWL_FINDER",
    "build_locator",
    "build_reference",
    "display_text",
    "format_reference",
    "last_verse",
    "reference_code",
    "render",
    "resolve_reference",
]

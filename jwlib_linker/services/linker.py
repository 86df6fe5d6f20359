"""Bible reference linking pipeline.

Two entry points mirror how text reaches the linker:

* :func:`render_links` for rendered HTML blocks: every citation becomes an
  ``<a>`` anchor to JW Library.
* :func:`convert_to_jwl_links` for editable Markdown (a line or a
  selection): jw.org finder links are swapped first, then citations become
  ``[display](jwlibrary:///finder?bible=...)`` links.

Both run :func:`add_bible_links`, which scans, resolves and replaces each
citation in one left-to-right pass. A citation directly followed by ``]``
or ``</a>`` is already a link and is left alone; one followed by a period
is only expanded to its canonical name ("Gen 2:6." -> "Genesis 2:6.").
"""

from __future__ import annotations

from typing import Sequence

from jwlib_linker.core.language import Language
from jwlib_linker.core.logging import get_logger
from jwlib_linker.core.models import LinkResult, OutputMode, RawMatch
from jwlib_linker.services.book_resolver import resolve_book
from jwlib_linker.services.finder_links import swap_finder_links
from jwlib_linker.services.reference_formatter import render, resolve_reference
from jwlib_linker.services.scanner import scan

logger = get_logger(__name__)

# Headings and callout blocks are skipped for now
_STRUCTURAL_PREFIXES = ("<h", "<div data")


def is_structural_block(text: str) -> bool:
    """True for rendered headings and data-attribute blocks, which are never rewritten."""
    return text.startswith(_STRUCTURAL_PREFIXES)


def _replacement(raw: RawMatch, mode: OutputMode, language: Language) -> str | None:
    """Return the text that replaces ``raw``, or None to leave it untouched."""
    if raw.already_linked:
        return None
    book = resolve_book(language, raw.ordinal, raw.book)
    if book is None:
        logger.debug("[bible-links] no book for fragment=%r", raw.book)
        return None
    if raw.suppressed:
        mode = OutputMode.PLAIN_TEXT
    return render(resolve_reference(book, raw), mode)


def add_bible_links(
    text: str,
    mode: OutputMode,
    language: Language,
    changed: bool = False,
) -> LinkResult:
    """Replace every resolvable citation in ``text`` according to ``mode``.

    ``changed`` is carried through so passes can be chained; it turns True
    only when a replacement actually alters the text.
    """
    if is_structural_block(text):
        return LinkResult(text, changed)

    pieces: list[str] = []
    cursor = 0
    for raw in scan(text):
        replacement = _replacement(raw, mode, language)
        if replacement is None or replacement == raw.reference:
            continue
        pieces.append(text[cursor : raw.start])
        pieces.append(replacement)
        cursor = raw.end
        changed = True
        logger.debug("[bible-links] %r -> %r", raw.reference, replacement)

    if not pieces:
        return LinkResult(text, changed)
    pieces.append(text[cursor:])
    return LinkResult("".join(pieces), changed)


def render_links(html: str, language: Language) -> LinkResult:
    """Link citations in a rendered HTML fragment with ``<a>`` anchors."""
    return add_bible_links(html, OutputMode.RENDERED_LINK, language)


def convert_to_jwl_links(text: str, language: Language) -> LinkResult:
    """Swap finder links, then turn citations into Markdown JW Library links."""
    result, changed = swap_finder_links(text)
    return add_bible_links(result, OutputMode.SOURCE_MARKUP_LINK, language, changed)


def convert_line(lines: Sequence[str], line_index: int, language: Language) -> LinkResult:
    """Convert the single line at ``line_index`` (0-based); other lines are untouched.

    Raises IndexError when the line does not exist.
    """
    if not 0 <= line_index < len(lines):
        raise IndexError(f"line {line_index + 1} out of range (1-{len(lines)})")
    return convert_to_jwl_links(lines[line_index], language)


__all__ = [
    "add_bible_links",
    "convert_line",
    "convert_to_jwl_links",
    "is_structural_block",
    "render_links",
]

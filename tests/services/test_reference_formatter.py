"""Unit tests for display text, reference codes and output encodings."""

from __future__ import annotations

import pytest

from jwlib_linker.core.books import get_language_table
from jwlib_linker.core.language import Language
from jwlib_linker.core.models import OutputMode
from jwlib_linker.services.reference_formatter import (
    build_locator,
    build_reference,
    format_reference,
    last_verse,
    reference_code,
)

# pylint: disable=missing-function-docstring

ENGLISH = get_language_table(Language.ENGLISH)
GENESIS = ENGLISH.book(1)
FIRST_CORINTHIANS = ENGLISH.book(46)


def test_reference_code_pads_book_chapter_and_verse() -> None:
    assert reference_code(1, 2, 6) == "01002006"
    assert reference_code(19, 119, 105) == "19119105"


def test_reference_code_appends_range_end() -> None:
    assert reference_code(46, 13, 4, 7) == "46013004-46013007"


@pytest.mark.parametrize(
    ("verse", "extra", "expected"),
    [
        (6, None, 0),
        (6, "", 0),
        (4, "-7", 7),
        (4, "- 7", 7),
        (6, ",7", 7),
        (16, ", 17", 17),
        (6, ",15", 0),
        (6, ",5", 0),
    ],
)
def test_last_verse_range_policy(verse, extra, expected) -> None:
    assert last_verse(verse, extra) == expected


def test_comma_range_only_for_the_next_verse() -> None:
    adjacent = build_reference(GENESIS, "2", "6", ",7")
    separate = build_reference(GENESIS, "2", "6", ",15")
    assert adjacent.has_range
    assert reference_code(1, adjacent.chapter, adjacent.verse, adjacent.last_verse) == (
        "01002006-01002007"
    )
    assert not separate.has_range
    assert reference_code(1, separate.chapter, separate.verse, separate.last_verse) == (
        "01002006"
    )
    # the display keeps what the author wrote
    assert separate.display == "Genesis 2:6,15"


def test_build_locator() -> None:
    assert build_locator("01002006") == "jwlibrary:///finder?bible=01002006"


def test_format_source_markup_link() -> None:
    formatted = format_reference(GENESIS, "2", "6", None, OutputMode.SOURCE_MARKUP_LINK)
    assert formatted.display == "Genesis 2:6"
    assert formatted.markup == "[Genesis 2:6](jwlibrary:///finder?bible=01002006)"


def test_format_rendered_link_carries_href_and_title() -> None:
    formatted = format_reference(
        FIRST_CORINTHIANS, "13", "4", "-7", OutputMode.RENDERED_LINK
    )
    href = "jwlibrary:///finder?bible=46013004-46013007"
    assert formatted.display == "1 Corinthians 13:4-7"
    assert formatted.markup == (
        f'<a href="{href}" title="{href}">1 Corinthians 13:4-7</a>'
    )


def test_format_plain_text_is_display_only() -> None:
    formatted = format_reference(GENESIS, "2", "6", None, OutputMode.PLAIN_TEXT)
    assert formatted.markup == formatted.display == "Genesis 2:6"


def test_display_keeps_numbers_as_written() -> None:
    reference = build_reference(GENESIS, "02", "006", None)
    assert reference.display == "Genesis 02:006"
    assert (reference.chapter, reference.verse) == (2, 6)


def test_french_display_uses_french_name() -> None:
    ephesians = get_language_table(Language.FRENCH).book(49)
    formatted = format_reference(ephesians, "4", "32", None, OutputMode.SOURCE_MARKUP_LINK)
    assert formatted.markup == "[Éphésiens 4:32](jwlibrary:///finder?bible=49004032)"

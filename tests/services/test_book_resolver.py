"""Unit tests for book fragment resolution."""

from __future__ import annotations

import pytest

from jwlib_linker.core.books import get_language_table
from jwlib_linker.core.language import Language
from jwlib_linker.services.book_resolver import (
    matches_book,
    normalize_fragment,
    resolve_book,
    word_starts,
)

# pylint: disable=missing-function-docstring

EN = Language.ENGLISH
FR = Language.FRENCH


def test_normalize_fragment_glues_ordinal_and_drops_periods() -> None:
    assert normalize_fragment("1 ", "Kings") == "1kings"
    assert normalize_fragment(None, "Gen.") == "gen"
    assert normalize_fragment("2", "Co.r.") == "2cor"
    assert normalize_fragment(None, "ÉPHÉSIENS") == "éphésiens"


def test_word_starts_splits_at_each_space() -> None:
    assert word_starts("song of solomon ca") == (
        "song of solomon ca",
        "of solomon ca",
        "solomon ca",
        "ca",
    )
    assert word_starts("job") == ("job",)


@pytest.mark.parametrize(
    ("ordinal", "fragment", "expected"),
    [
        (None, "Gen", 1),
        (None, "Genesis", 1),
        (None, "Gene", 1),  # prefix of an alias
        (None, "ex", 2),
        ("1 ", "Sam", 9),
        ("2", "Kings", 12),
        (None, "Ps", 19),
        (None, "Psalm", 19),
        (None, "song of solomon", 22),
        (None, "Zeph", 36),
        (None, "Mt", 40),
        (None, "John", 43),
        ("1 ", "Corinthians", 46),
        ("1 ", "Cor.", 46),
        (None, "Eph", 49),
        (None, "Phil", 50),
        ("3 ", "John", 64),
        (None, "Rev", 66),
    ],
)
def test_resolve_english_fragments(ordinal, fragment, expected) -> None:
    book = resolve_book(EN, ordinal, fragment)
    assert book is not None
    assert book.ordinal == expected


@pytest.mark.parametrize(
    ("ordinal", "fragment", "expected"),
    [
        (None, "Genèse", 1),
        (None, "Gen", 1),
        (None, "Éphésiens", 49),
        (None, "Eph", 49),
        ("1 ", "Rois", 11),
        (None, "Psaumes", 19),
        (None, "chant", 22),
        (None, "Jean", 43),
        ("1 ", "Jean", 62),
        (None, "Révélation", 66),
    ],
)
def test_resolve_french_fragments(ordinal, fragment, expected) -> None:
    book = resolve_book(FR, ordinal, fragment)
    assert book is not None
    assert book.ordinal == expected


def test_eph_never_matches_inside_zephaniah() -> None:
    zephaniah = get_language_table(EN).book(36)
    assert not matches_book(zephaniah, "eph")
    book = resolve_book(EN, None, "eph")
    assert book is not None
    assert book.display_name == "Ephesians"


@pytest.mark.parametrize("fragment", ["at", "time", "verse", "xyz", "..", "Chapter"])
def test_unknown_fragments_resolve_to_none(fragment) -> None:
    assert resolve_book(EN, None, fragment) is None


def test_same_position_across_languages() -> None:
    english = resolve_book(EN, "1 ", "Corinthians")
    french = resolve_book(FR, "1 ", "Corinthiens")
    assert english is not None and french is not None
    assert english.ordinal == french.ordinal == 46


def test_decomposed_accents_resolve() -> None:
    decomposed = "E\u0301phe\u0301siens"
    book = resolve_book(FR, None, decomposed)
    assert book is not None
    assert book.ordinal == 49

"""Unit tests for the citation scanner."""

from __future__ import annotations

from jwlib_linker.services.scanner import scan

# pylint: disable=missing-function-docstring


def test_scan_captures_all_parts_of_a_citation() -> None:
    (match,) = list(scan("Read 1 Cor. 13:4-7 tonight"))
    assert match.reference == "1 Cor. 13:4-7"
    assert match.ordinal == "1 "
    assert match.book == "Cor."
    assert match.chapter == "13"
    assert match.verse == "4"
    assert match.extra_verses == "-7"
    assert match.trailing is None
    assert "Read 1 Cor. 13:4-7 tonight"[match.start : match.end] == match.reference


def test_scan_yields_successive_matches_left_to_right() -> None:
    matches = list(scan("Gen 2:6, then Ps 23:1 and Rev 21:4"))
    assert [m.reference for m in matches] == ["Gen 2:6", "Ps 23:1", "Rev 21:4"]
    assert [m.start for m in matches] == sorted(m.start for m in matches)


def test_scan_extra_verses_comma_with_space() -> None:
    (match,) = list(scan("John 3:16, 17"))
    assert match.extra_verses == ", 17"
    assert match.reference == "John 3:16, 17"


def test_scan_trailing_markers() -> None:
    linked = list(scan("[Psalm 23:1](somewhere)"))
    anchored = list(scan('<a href="x">John 3:16</a>'))
    stopped = list(scan("See Gen 2:6."))
    assert linked[0].trailing == "]"
    assert linked[0].already_linked
    assert anchored[0].trailing == "</a>"
    assert anchored[0].already_linked
    assert stopped[0].trailing == "."
    assert stopped[0].suppressed
    assert not stopped[0].already_linked
    # the trailing marker is not part of the reference span
    assert stopped[0].reference == "Gen 2:6"


def test_scan_song_of_solomon_and_accented_names() -> None:
    (song,) = list(scan("song of solomon 2:1"))
    assert song.book == "song of solomon"
    (french,) = list(scan("Lire Éphésiens 4:32 et"))
    assert french.book == "Éphésiens"
    assert french.ordinal is None


def test_scan_is_case_insensitive_for_song_of_solomon() -> None:
    (song,) = list(scan("Song Of Solomon 8:6"))
    assert song.book == "Song Of Solomon"
    assert song.chapter == "8"


def test_scan_optional_space_between_book_and_chapter() -> None:
    (match,) = list(scan("Gen2:6"))
    assert match.book == "Gen"
    assert match.chapter == "2"


def test_scan_ignores_text_without_chapter_and_verse() -> None:
    assert not list(scan("Genesis 2, verse six"))
    assert not list(scan(""))


def test_scan_leaves_book_validation_to_the_resolver() -> None:
    # any word works as a fragment here; "at" is rejected later by the resolver
    assert [m.book for m in scan("meet at 10:30")] == ["at"]


def test_scan_is_lazy_and_restartable() -> None:
    text = "Gen 1:1 Exo 2:2"
    first = scan(text)
    assert next(first).reference == "Gen 1:1"
    assert [m.reference for m in scan(text)] == ["Gen 1:1", "Exo 2:2"]

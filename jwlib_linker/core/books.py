"""Per-language bible book tables.

Each table lists the 66 books in canonical reading order as
``(display name, abbreviations)`` pairs. The abbreviation string is
lowercase and space separated; the first alias is the full name written
without spaces ("1corinthians"). A book's position in the table is its
language independent ordinal, so ``Genesis`` and ``Genèse`` are both book 1.

To add a language, add a ``Language`` member and a 66-entry table here.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from jwlib_linker.core.exceptions import InvalidLanguageTableError
from jwlib_linker.core.language import Language
from jwlib_linker.core.models import BOOK_COUNT, CanonicalBook, LanguageTable

_ENGLISH: Sequence[Tuple[str, str]] = (
    # Pentateuch
    ("Genesis", "genesis ge gen"),
    ("Exodus", "exodus ex exod"),
    ("Leviticus", "leviticus le lev"),
    ("Numbers", "numbers nu num"),
    ("Deuteronomy", "deuteronomy de deut"),
    # History
    ("Joshua", "joshua jos josh"),
    ("Judges", "judges jg judg"),
    ("Ruth", "ruth ru"),
    ("1 Samuel", "1samuel 1sa 1sam"),
    ("2 Samuel", "2samuel 2sa 2sam"),
    ("1 Kings", "1kings 1ki 1kg"),
    ("2 Kings", "2kings 2ki 2kg"),
    ("1 Chronicles", "1chronicles 1ch 1chr"),
    ("2 Chronicles", "2chronicles 2ch 2chr"),
    ("Ezra", "ezra ezr"),
    ("Nehemiah", "nehemiah ne nem"),
    ("Esther", "esther es est"),
    # Poetry/Wisdom
    ("Job", "job jb"),
    ("Psalms", "psalms ps psa"),
    ("Proverbs", "proverbs pr pro prov"),
    ("Ecclesiastes", "ecclesiastes ec ecc eccl"),
    ("Song of Solomon", "song of solomon canticles ca sos sng song"),
    # Major Prophets
    ("Isaiah", "isaiah isa"),
    ("Jeremiah", "jeremiah jer"),
    ("Lamentations", "lamentations la lam"),
    ("Ezekiel", "ezekiel eze"),
    ("Daniel", "daniel da dan"),
    # Minor Prophets
    ("Hosea", "hosea ho hos"),
    ("Joel", "joel joe joel"),
    ("Amos", "amos am amo amos"),
    ("Obadiah", "obadiah ob oba"),
    ("Jonah", "jonah jon"),
    ("Micah", "micah mic"),
    ("Nahum", "nahum na nah"),
    ("Habakkuk", "habakkuk hab"),
    ("Zephaniah", "zephaniah zep zeph"),
    ("Haggai", "haggai hag"),
    ("Zechariah", "zechariah zec zech"),
    ("Malachi", "malachi mal"),
    # Gospels/Acts
    ("Matthew", "matthew mt mat matt"),
    ("Mark", "mark mr mk mark"),
    ("Luke", "luke lu luke"),
    ("John", "john joh john"),
    ("Acts", "acts ac act"),
    # Paul's Epistles
    ("Romans", "romans ro rom"),
    ("1 Corinthians", "1corinthians 1co 1cor"),
    ("2 Corinthians", "2corinthians 2co 2cor"),
    ("Galatians", "galatians ga gal"),
    ("Ephesians", "ephesians eph"),
    ("Philippians", "philippians php"),
    ("Colossians", "colossians col"),
    ("1 Thessalonians", "1thessalonians 1th"),
    ("2 Thessalonians", "2thessalonians 2th"),
    ("1 Timothy", "1timothy 1ti 1tim"),
    ("2 Timothy", "2timothy 2ti 2tim"),
    ("Titus", "titus ti tit"),
    ("Philemon", "philemon phm"),
    # General Epistles + Revelation
    ("Hebrews", "hebrews heb"),
    ("James", "james jas"),
    ("1 Peter", "1peter 1pe 1pet"),
    ("2 Peter", "2peter 2pe 2pet"),
    ("1 John", "1john 1jo 1joh"),
    ("2 John", "2john 2jo 2joh"),
    ("3 John", "3john 3jo 3joh"),
    ("Jude", "jude jud jude"),
    ("Revelation", "revelation re rev"),
)

_FRENCH: Sequence[Tuple[str, str]] = (
    # Pentateuque
    ("Genèse", "genèse gen ge"),
    ("Exode", "exode exo ex"),
    ("Lévitique", "lévitique lev le"),
    ("Nombres", "nombres nom"),
    ("Deutéronome", "deutéronome de deu deut"),
    # Livres historiques
    ("Josué", "josué jos"),
    ("Juges", "juges jug"),
    ("Ruth", "ruth ru"),
    ("1 Samuel", "1samuel 1sam 1sa"),
    ("2 Samuel", "2samuel 2sam 2sa"),
    ("1 Rois", "1rois 1ro"),
    ("2 Rois", "2rois 2ro"),
    ("1 Chroniques", "1chroniques 1chr 1ch"),
    ("2 Chroniques", "2chroniques 2chr 2ch"),
    ("Esdras", "esdras esd"),
    ("Néhémie", "néhémie neh"),
    ("Esther", "esther est"),
    # Livres poétiques
    ("Job", "job"),
    ("Psaumes", "psaumes psa ps"),
    ("Proverbes", "proverbes pr pro prov"),
    ("Ecclésiaste", "ecclésiaste ec ecc eccl"),
    ("Chant de Salomon", "chant de salomon chant"),
    # Grands prophètes
    ("Isaïe", "isaïe isa is"),
    ("Jérémie", "jérémie jer"),
    ("Lamentations", "lamentations lam la"),
    ("Ézéchiel", "ézéchiel eze ez"),
    ("Daniel", "daniel dan da"),
    # Petits prophètes
    ("Osée", "osée os"),
    ("Joël", "joël"),
    ("Amos", "amos"),
    ("Abdias", "abdias abd ab"),
    ("Jonas", "jonas"),
    ("Michée", "michée mic"),
    ("Nahum", "nahum"),
    ("Habacuc", "habacuc hab"),
    ("Sophonie", "sophonie sph sop"),
    ("Aggée", "aggée agg ag"),
    ("Zacharie", "zacharie zac"),
    ("Malachie", "malachie mal"),
    # Évangiles et Actes
    ("Matthieu", "matthieu mt mat matt"),
    ("Marc", "marc"),
    ("Luc", "luc"),
    ("Jean", "jean"),
    ("Actes", "actes ac"),
    # Lettres de Paul
    ("Romains", "romains rom ro"),
    ("1 Corinthiens", "1corinthiens 1cor 1co"),
    ("2 Corinthiens", "2corinthiens 2cor 2co"),
    ("Galates", "galates gal ga"),
    ("Éphésiens", "éphésiens eph"),
    ("Philippiens", "philippiens phil"),
    ("Colossiens", "colossiens col"),
    ("1 Thessaloniciens", "1thessaloniciens 1th"),
    ("2 Thessaloniciens", "2thessaloniciens 2th"),
    ("1 Timothée", "1timothée 1tim 1ti"),
    ("2 Timothée", "2timothée 2tim 2ti"),
    ("Tite", "tite"),
    ("Philémon", "philémon phm"),
    # Autres lettres et Révélation
    ("Hébreux", "hébreux heb he"),
    ("Jacques", "jacques jac"),
    ("1 Pierre", "1pierre 1pi"),
    ("2 Pierre", "2pierre 2pi"),
    ("1 Jean", "1jean 1je"),
    ("2 Jean", "2jean 2je"),
    ("3 Jean", "3jean 3je"),
    ("Jude", "jude"),
    ("Révélation", "révélation rev re"),
)


def build_language_table(
    language: Language, entries: Sequence[Tuple[str, str]]
) -> LanguageTable:
    """Build an immutable table, numbering books by their position in ``entries``."""
    if len(entries) != BOOK_COUNT:
        raise InvalidLanguageTableError(
            f"{language.value} table has {len(entries)} books; expected {BOOK_COUNT}"
        )
    books = tuple(
        CanonicalBook(ordinal=position, display_name=name, abbreviations=abbreviations)
        for position, (name, abbreviations) in enumerate(entries, start=1)
    )
    return LanguageTable(language=language, books=books)


LANGUAGE_TABLES: Mapping[Language, LanguageTable] = MappingProxyType(
    {
        Language.ENGLISH: build_language_table(Language.ENGLISH, _ENGLISH),
        Language.FRENCH: build_language_table(Language.FRENCH, _FRENCH),
    }
)


def get_language_table(language: Language) -> LanguageTable:
    """Return the book table for ``language``."""
    return LANGUAGE_TABLES[language]


__all__ = ["LANGUAGE_TABLES", "build_language_table", "get_language_table"]

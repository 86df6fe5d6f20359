"""Language selectors for the per-language bible tables."""

from enum import Enum
from typing import Union

from jwlib_linker.core.exceptions import UnsupportedLanguageError

# Display names for the languages with a bible table.
SUPPORTED_LANGUAGE_MAP = {
    "EN": "English",
    "FR": "French",
}

_LANGUAGE_NAME_LOOKUP = {name.lower(): code for code, name in SUPPORTED_LANGUAGE_MAP.items()}


class Language(str, Enum):
    """Supported bible table languages."""

    ENGLISH = "EN"
    FRENCH = "FR"


def normalize_language_code(value: Union[str, "Language", None]) -> str | None:
    """Return the upper-case table code for a code or language name, if known."""
    if value is None:
        return None
    if isinstance(value, Language):
        return value.value
    candidate = str(value).strip()
    if not candidate:
        return None
    if candidate.upper() in SUPPORTED_LANGUAGE_MAP:
        return candidate.upper()
    return _LANGUAGE_NAME_LOOKUP.get(candidate.lower())


def parse_language(value: Union[str, "Language", None]) -> Language:
    """Coerce a selector ("EN", "fr", "English") into a :class:`Language`.

    Raises UnsupportedLanguageError when no table exists for the selector.
    """
    code = normalize_language_code(value)
    if code is None:
        supported = ", ".join(SUPPORTED_LANGUAGE_MAP)
        raise UnsupportedLanguageError(
            f"unsupported language {value!r}; expected one of: {supported}"
        )
    return Language(code)


def friendly_language_name(language: Union[str, "Language"]) -> str:
    """Return a printable name for the given selector."""
    return SUPPORTED_LANGUAGE_MAP[parse_language(language).value]


__all__ = [
    "SUPPORTED_LANGUAGE_MAP",
    "Language",
    "friendly_language_name",
    "normalize_language_code",
    "parse_language",
]

"""Core exception types shared across layers."""


class UnsupportedLanguageError(ValueError):
    """Raised when a language selector names no available bible table."""


class InvalidLanguageTableError(ValueError):
    """Raised when a bible table breaks the 66-book canonical layout."""


__all__ = [
    "InvalidLanguageTableError",
    "UnsupportedLanguageError",
]

"""Shared FastAPI dependencies."""

from fastapi import Request

from jwlib_linker.core.config import settings
from jwlib_linker.core.language import Language


def get_default_language(request: Request) -> Language:
    """Return the app's default bible language, falling back to settings."""
    language = getattr(request.app.state, "default_language", None)
    if isinstance(language, Language):
        return language
    return settings.JWLIB_LINKER_LANGUAGE


__all__ = ["get_default_language"]

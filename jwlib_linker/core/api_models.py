"""API request/response models for the linking REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from jwlib_linker.core.language import Language, parse_language
from jwlib_linker.core.models import OutputMode


class _LanguageRequest(BaseModel):
    """Shared optional language selector; None means the configured default."""

    language: Language | None = Field(
        default=None, description="Bible table: 'EN', 'FR' or a language name"
    )

    @field_validator("language", mode="before")
    @classmethod
    def _coerce_language(cls, value: str | Language | None) -> Language | None:
        if value is None:
            return None
        return parse_language(value)


class LinkRequest(_LanguageRequest):
    """Request model for POST /api/v1/links."""

    text: str = Field(..., description="Text, HTML fragment or Markdown to rewrite")
    mode: OutputMode = Field(
        default=OutputMode.SOURCE_MARKUP_LINK,
        description="Output form: 'html', 'markdown' or 'text'",
    )


class TextRequest(_LanguageRequest):
    """Request model for the convert and render endpoints."""

    text: str = Field(..., description="Text to rewrite")


class FinderRequest(BaseModel):
    """Request model for POST /api/v1/finder."""

    text: str = Field(..., description="Text containing jw.org finder links")


class LinkResponse(BaseModel):
    """Rewritten text and whether anything changed."""

    result: str
    changed: bool


class BookEntry(BaseModel):
    """One canonical book of a language table."""

    ordinal: int = Field(..., ge=1, le=66)
    name: str
    abbreviations: str = Field(..., description="Space separated lowercase aliases")


class BooksResponse(BaseModel):
    """Response model for GET /api/v1/books/{language}."""

    language: Language
    books: list[BookEntry]


__all__ = [
    "BookEntry",
    "BooksResponse",
    "FinderRequest",
    "LinkRequest",
    "LinkResponse",
    "TextRequest",
]

"""Bible reference linking endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from jwlib_linker.apps.api.dependencies import get_default_language
from jwlib_linker.core.api_models import (
    BookEntry,
    BooksResponse,
    FinderRequest,
    LinkRequest,
    LinkResponse,
    TextRequest,
)
from jwlib_linker.core.books import get_language_table
from jwlib_linker.core.exceptions import UnsupportedLanguageError
from jwlib_linker.core.language import Language, parse_language
from jwlib_linker.core.logging import get_logger
from jwlib_linker.services import (
    add_bible_links,
    convert_to_jwl_links,
    render_links,
    swap_finder_links,
)

router = APIRouter(prefix="/api/v1", tags=["links"])
logger = get_logger(__name__)

DefaultLanguage = Annotated[Language, Depends(get_default_language)]


@router.post("/links", response_model=LinkResponse)
async def link_references(payload: LinkRequest, default_language: DefaultLanguage) -> LinkResponse:
    """Rewrite citations in ``text`` using the requested output mode."""
    language = payload.language or default_language
    result, changed = add_bible_links(payload.text, payload.mode, language)
    logger.info(
        "[links] mode=%s language=%s changed=%s", payload.mode.value, language.value, changed
    )
    return LinkResponse(result=result, changed=changed)


@router.post("/links/convert", response_model=LinkResponse)
async def convert_references(payload: TextRequest, default_language: DefaultLanguage) -> LinkResponse:
    """Editor flow: swap finder links, then add Markdown JW Library links."""
    result, changed = convert_to_jwl_links(payload.text, payload.language or default_language)
    return LinkResponse(result=result, changed=changed)


@router.post("/links/render", response_model=LinkResponse)
async def render_references(payload: TextRequest, default_language: DefaultLanguage) -> LinkResponse:
    """Reading-view flow: add HTML anchors to a rendered fragment."""
    result, changed = render_links(payload.text, payload.language or default_language)
    return LinkResponse(result=result, changed=changed)


@router.post("/finder", response_model=LinkResponse)
async def swap_finder(payload: FinderRequest) -> LinkResponse:
    """Swap jw.org finder links for JW Library finder links."""
    result, changed = swap_finder_links(payload.text)
    return LinkResponse(result=result, changed=changed)


@router.get("/books/{language}", response_model=BooksResponse)
async def list_books(language: str) -> BooksResponse:
    """List the 66 books, with their aliases, for one language."""
    try:
        selected = parse_language(language)
    except UnsupportedLanguageError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    table = get_language_table(selected)
    return BooksResponse(
        language=selected,
        books=[
            BookEntry(
                ordinal=book.ordinal,
                name=book.display_name,
                abbreviations=book.abbreviations,
            )
            for book in table.books
        ],
    )


__all__ = ["router"]

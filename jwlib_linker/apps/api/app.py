"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from jwlib_linker.apps.api.middleware import CorrelationIdMiddleware
from jwlib_linker.core.books import LANGUAGE_TABLES
from jwlib_linker.core.config import settings
from jwlib_linker.core.language import Language
from jwlib_linker.core.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup details; the bible tables are already built at import."""
    logger.info(
        "JWLib Linker started: default language=%s, tables=%s",
        app.state.default_language.value,
        ",".join(language.value for language in LANGUAGE_TABLES),
    )
    yield


def create_app(language: Language | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    app = FastAPI(title="JWLib Linker", lifespan=lifespan)
    app.state.default_language = language or settings.JWLIB_LINKER_LANGUAGE
    app.add_middleware(CorrelationIdMiddleware)

    # Import lazily to avoid potential circular imports when routers grow.
    from .routes import health, links  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(links.router)
    return app


__all__ = ["create_app", "lifespan"]

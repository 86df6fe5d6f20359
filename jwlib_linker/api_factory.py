"""API factory entrypoint, e.g. ``uvicorn jwlib_linker.api_factory:create_app --factory``."""

from __future__ import annotations

from jwlib_linker.apps.api.app import create_app as _create_app


def create_app():  # noqa: D401 - FastAPI factory signature
    """Return a FastAPI app using the configured default language."""

    return _create_app()


__all__ = ["create_app"]

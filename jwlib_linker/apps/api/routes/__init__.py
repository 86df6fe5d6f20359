"""Router namespace exports for FastAPI include hooks."""

from . import health, links

__all__ = ["health", "links"]

"""CLI commands for jwlib-linker."""

from jwlib_linker.cli.links import app as main_app


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]

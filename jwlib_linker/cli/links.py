"""CLI commands for linking bible references."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from jwlib_linker.core.books import get_language_table
from jwlib_linker.core.config import settings
from jwlib_linker.core.exceptions import UnsupportedLanguageError
from jwlib_linker.core.language import Language, friendly_language_name, parse_language
from jwlib_linker.core.models import LinkResult
from jwlib_linker.services import (
    convert_line,
    convert_to_jwl_links,
    render_links,
    swap_finder_links,
)

app = typer.Typer(
    name="jwlib-linker",
    help="Turn bible references and jw.org finder links into JW Library links",
    no_args_is_help=True,
)
console = Console()

LANG_OPTION = typer.Option(None, "--lang", "-L", help="Bible language: EN or FR (default: config)")


def _language(lang: Optional[str]) -> Language:
    """Resolve the --lang option, exiting with an error when unsupported."""
    if lang is None:
        return settings.JWLIB_LINKER_LANGUAGE
    try:
        return parse_language(lang)
    except UnsupportedLanguageError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def _print_result(outcome: LinkResult) -> None:
    if not outcome.changed:
        console.print("[dim]No references found.[/dim]")
        return
    console.print(outcome.result, markup=False, emoji=False, highlight=False, soft_wrap=True)


def _convert_file(path: Path, line: Optional[int], language: Language) -> None:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Error:[/red] cannot read {path}: {e}")
        raise typer.Exit(1) from e

    if line is None:
        # whole file, like converting an editor selection
        outcome = convert_to_jwl_links(content, language)
        updated = outcome.result
        target = str(path)
    else:
        lines = content.splitlines(keepends=True)
        bodies = [entry.rstrip("\r\n") for entry in lines]
        try:
            outcome = convert_line(bodies, line - 1, language)
        except IndexError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1) from e
        ending = lines[line - 1][len(bodies[line - 1]) :]
        lines[line - 1] = outcome.result + ending
        updated = "".join(lines)
        target = f"line {line} of {path}"

    if not outcome.changed:
        console.print("[dim]No references found.[/dim]")
        return
    path.write_text(updated, encoding="utf-8")
    console.print(f"[green]Updated {target}[/green]")


@app.command("convert")
def convert(
    text: Optional[str] = typer.Argument(None, help="Text to convert"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Markdown file to rewrite in place"
    ),
    line: Optional[int] = typer.Option(
        None, "--line", "-l", min=1, help="Only convert this line of --file (1-based)"
    ),
    lang: Optional[str] = LANG_OPTION,
) -> None:
    """Convert references and jw.org finder links to Markdown JW Library links."""
    language = _language(lang)
    if file is not None:
        _convert_file(file, line, language)
        return
    if text is None:
        console.print("[red]Error:[/red] provide TEXT or --file")
        raise typer.Exit(1)
    _print_result(convert_to_jwl_links(text, language))


@app.command("render")
def render(
    text: str = typer.Argument(..., help="HTML fragment to link"),
    lang: Optional[str] = LANG_OPTION,
) -> None:
    """Add JW Library <a> anchors to a rendered HTML fragment."""
    _print_result(render_links(text, _language(lang)))


@app.command("finder")
def finder(text: str = typer.Argument(..., help="Text containing jw.org finder links")) -> None:
    """Swap jw.org finder links for JW Library finder links."""
    _print_result(swap_finder_links(text))


@app.command("books")
def books(lang: Optional[str] = LANG_OPTION) -> None:
    """List the 66 books and their abbreviations."""
    language = _language(lang)
    table = Table(title=f"Bible books ({friendly_language_name(language)})")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Book")
    table.add_column("Abbreviations", style="dim")
    for book in get_language_table(language).books:
        table.add_row(str(book.ordinal), book.display_name, book.abbreviations)
    console.print(table)


__all__ = ["app"]

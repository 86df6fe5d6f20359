"""Reference resolution engine: scanner, book resolver, formatter and pipeline."""

from .finder_links import swap_finder_links
from .linker import add_bible_links, convert_line, convert_to_jwl_links, render_links

__all__ = [
    "add_bible_links",
    "convert_line",
    "convert_to_jwl_links",
    "render_links",
    "swap_finder_links",
]

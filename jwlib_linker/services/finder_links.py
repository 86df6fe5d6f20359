"""Swap jw.org web "finder" links for JW Library finder links."""

from __future__ import annotations

from jwlib_linker.core.models import LinkResult
from jwlib_linker.services.reference_formatter import JWL_FINDER

WEB_FINDER = "https://www.jw.org/finder?"


def swap_finder_links(text: str, changed: bool = False) -> LinkResult:
    """Replace every jw.org finder URL prefix with the JW Library prefix.

    The query string (``bible=...``, ``wtlocale=...``) is left as is.
    """
    if WEB_FINDER not in text:
        return LinkResult(text, changed)
    return LinkResult(text.replace(WEB_FINDER, JWL_FINDER), True)


__all__ = ["WEB_FINDER", "swap_finder_links"]

"""Shared BeautifulSoup entry point for listing-page parsing."""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from wpfetch.utils.errors import ParseError

_PARSER = "html.parser"


def parse_html(html: str | bytes) -> BeautifulSoup:
    """Parse *html* into a soup, raising :class:`ParseError` if it is not markup.

    ``html.parser`` is lenient: empty or tag-less text still parses to an
    (empty) tree.  Only non-text input or markup the parser rejects
    outright is an error.
    """
    if not isinstance(html, (str, bytes)):
        raise ParseError(
            f"Expected HTML text, got {type(html).__name__}", source="bs4"
        )
    try:
        return BeautifulSoup(html, _PARSER)
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Markup rejected by parser: {exc}", source="bs4") from exc

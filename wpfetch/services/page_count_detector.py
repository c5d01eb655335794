"""Infers how many listing pages a blog has from its pagination controls.

WordPress renders pagination as ``.page-numbers`` elements: numbered
links plus "next"/"prev" glyphs.  The highest number wins.
"""

from __future__ import annotations

import re

import structlog

from wpfetch.services.html_parser import parse_html

logger = structlog.get_logger(logger_name=__name__)

_PAGINATION_SELECTOR = ".page-numbers"

# Leading ASCII base-10 integer, anything after it ignored ("2.7" -> 2, "3rd" -> 3).
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_page_number(token: str) -> int | None:
    """Parse the leading integer of *token*, or ``None`` if there is none."""
    match = _LEADING_INT.match(token)
    if match is None:
        return None
    return int(match.group(1))


def detect_max_page(html: str) -> int | None:
    """Return the highest page number in the pagination controls of *html*.

    Non-numeric controls are skipped.  ``None`` means no numeric control
    was found; callers treat that as a single-page listing.

    Raises:
        ParseError: If *html* cannot be parsed as markup at all.
    """
    soup = parse_html(html)
    numbers = [
        num
        for num in (parse_page_number(el.get_text()) for el in soup.select(_PAGINATION_SELECTOR))
        if num is not None
    ]
    if not numbers:
        logger.debug("pagination_not_found")
        return None
    return max(numbers)

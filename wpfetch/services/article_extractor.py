"""Extracts article summaries from a blog listing page.

Every ``<article>`` element is one summary.  Inside it the heading
anchors (``h1 a, h2 a``) give the title and link, and the first
``<time>`` element gives the publish timestamp::

    <article>
      <h2><a href="https://blog.example/1837/noodles">Noodle shop</a></h2>
      <time datetime="2015-05-08T18:24:23+00:00">May 8</time>
    </article>

    -> ArticleRecord(title="Noodle shop",
                     href="https://blog.example/1837/noodles",
                     datetime="2015-05-08T18:24:23+00:00")
"""

from __future__ import annotations

from bs4 import Tag

from wpfetch.models.article import ArticleRecord
from wpfetch.services.html_parser import parse_html

_ARTICLE_SELECTOR = "article"
_HEADING_LINK_SELECTOR = "h1 a, h2 a"
_TIME_SELECTOR = "time"


def extract_articles(html: str) -> list[ArticleRecord]:
    """Return the article records on one listing page, in document order.

    Missing sub-nodes never fail extraction: no heading anchor yields an
    empty title and href, no ``<time>`` (or no ``datetime`` attribute)
    yields ``datetime=None``.

    Raises:
        ParseError: If *html* cannot be parsed as markup at all.
    """
    soup = parse_html(html)
    return [_to_record(block) for block in soup.select(_ARTICLE_SELECTOR)]


def _to_record(block: Tag) -> ArticleRecord:
    anchors = block.select(_HEADING_LINK_SELECTOR)
    # Text of every heading anchor, link of the first one.
    title = "".join(a.get_text() for a in anchors)
    href = _attr(anchors[0], "href") if anchors else None

    time_el = block.select_one(_TIME_SELECTOR)
    datetime = _attr(time_el, "datetime") if time_el is not None else None

    return ArticleRecord(title=title, href=href or "", datetime=datetime)


def _attr(tag: Tag, name: str) -> str | None:
    value = tag.get(name)
    if isinstance(value, list):  # multi-valued attributes come back as lists
        return " ".join(value)
    return value

"""Shared pytest fixtures for the wpfetch test suite."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path

import pytest

from wpfetch.interfaces.page_provider import IPageProvider
from wpfetch.models.crawl import CrawlOptions
from wpfetch.utils.errors import FetchError

# ---------------------------------------------------------------------------
# Listing-page HTML
# ---------------------------------------------------------------------------

ArticleSpec = tuple[str, str, "str | None"]


def _article_html(title: str, href: str, datetime: str | None) -> str:
    time_el = f'<time class="entry-date" datetime="{datetime}">{datetime[:10]}</time>' if datetime else ""
    return (
        '<article class="post">'
        f'<header><h2 class="entry-title"><a href="{href}">{title}</a></h2>{time_el}</header>'
        "<div class=\"entry-summary\"><p>Summary text.</p></div>"
        "</article>"
    )


def build_listing(
    articles: list[ArticleSpec],
    pagination: list[str] | None = None,
) -> str:
    """Return a WordPress-style listing page with *articles* and pagination controls."""
    controls = "".join(
        f'<a class="page-numbers" href="/page/{label}">{label}</a>' for label in (pagination or [])
    )
    nav = f'<nav class="navigation pagination"><div class="nav-links">{controls}</div></nav>' if controls else ""
    body = "".join(_article_html(*a) for a in articles)
    return (
        "<!DOCTYPE html><html lang=\"zh-hant\"><head><title>Blog</title></head>"
        f"<body><main id=\"main\">{body}</main>{nav}</body></html>"
    )


@pytest.fixture
def make_listing() -> Callable[..., str]:
    """Factory fixture for listing-page HTML."""
    return build_listing


# ---------------------------------------------------------------------------
# Fake page provider
# ---------------------------------------------------------------------------


class FakePageProvider(IPageProvider):
    """In-memory page provider that records every request.

    URLs missing from *pages* fail like a 404; URLs in *errors* raise the
    given exception.  ``max_in_flight`` tracks overlapping requests.
    """

    def __init__(
        self,
        pages: dict[str, str],
        errors: dict[str, Exception] | None = None,
    ) -> None:
        self.pages = pages
        self.errors = errors or {}
        self.requested: list[str] = []
        self.max_in_flight = 0
        self._in_flight = 0

    async def get(self, url: str) -> str:
        self.requested.append(url)
        self._in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self._in_flight)
        try:
            await asyncio.sleep(0)
            if url in self.errors:
                raise self.errors[url]
            if url not in self.pages:
                raise FetchError(f"HTTP 404 for {url}", source="fake", url=url, status_code=404)
            return self.pages[url]
        finally:
            self._in_flight -= 1

    async def __aenter__(self) -> FakePageProvider:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None

    def get_provider_name(self) -> str:
        return "fake"


@pytest.fixture
def fake_provider() -> Callable[..., FakePageProvider]:
    """Factory fixture for :class:`FakePageProvider`."""
    return FakePageProvider


@pytest.fixture
def crawl_options(tmp_path: Path) -> CrawlOptions:
    """Options for a full (non-dev) crawl into a temporary directory, no pacing."""
    return CrawlOptions(
        dev_mode=False,
        page_delay=0.0,
        output_dir=str(tmp_path / "dist"),
        site_identifier="gwan.tw",
    )

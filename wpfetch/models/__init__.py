"""wpfetch domain models — re-exports all public model classes.

    - article.py -- ArticleRecord extracted from listing pages
    - crawl.py   -- CrawlOptions, SiteOutcome and SiteStatus
    - target.py  -- Target, one configured site
"""

from __future__ import annotations

from wpfetch.models.article import ArticleRecord
from wpfetch.models.crawl import CrawlOptions, SiteOutcome, SiteStatus
from wpfetch.models.target import Target

__all__ = [
    "ArticleRecord",
    "CrawlOptions",
    "SiteOutcome",
    "SiteStatus",
    "Target",
]

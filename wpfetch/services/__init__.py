"""Crawl services, leaf-first.

- **article_extractor** -- listing page HTML to ArticleRecord list.
- **page_count_detector** -- highest page number in pagination controls.
- **paginated_fetcher** -- ordered, paced fetch of a page range.
- **site_pipeline** -- all stages for one target, failures contained.
- **run_coordinator** -- every target in order, output area reset first.
"""

from wpfetch.services.article_extractor import extract_articles
from wpfetch.services.page_count_detector import detect_max_page
from wpfetch.services.paginated_fetcher import PaginatedFetcher
from wpfetch.services.run_coordinator import RunCoordinator
from wpfetch.services.site_pipeline import SitePipeline

__all__ = [
    "PaginatedFetcher",
    "RunCoordinator",
    "SitePipeline",
    "detect_max_page",
    "extract_articles",
]

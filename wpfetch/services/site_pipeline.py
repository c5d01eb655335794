"""Per-target crawl pipeline.

Chains the stages for one configured site:

    probe page 1 -> detect page count -> (dev cap) -> fetch pages
    -> extract articles -> flatten -> write JSON artifact

Each stage depends on the previous one succeeding.  Any
:class:`FetchError`, :class:`ParseError` or :class:`PersistenceError`
stops the target and is returned as a ``FAILED`` outcome; nothing is
written for a failed target, and the error never reaches the run
coordinator.
"""

from __future__ import annotations

import json
import time
from pathlib import Path

import structlog

from wpfetch.interfaces.page_provider import IPageProvider
from wpfetch.interfaces.storage_provider import IStorageProvider
from wpfetch.models.article import ArticleRecord
from wpfetch.models.crawl import CrawlOptions, SiteOutcome, SiteStatus
from wpfetch.models.target import Target
from wpfetch.services.article_extractor import extract_articles
from wpfetch.services.page_count_detector import detect_max_page
from wpfetch.services.paginated_fetcher import PaginatedFetcher
from wpfetch.utils.errors import FetchError, ParseError, PersistenceError

logger = structlog.get_logger(logger_name=__name__)

_DATA_SUBDIR = "data"


def artifact_path(options: CrawlOptions, target: Target) -> Path:
    """Return ``{output_dir}/data/{site_identifier}-{name}.json`` for *target*."""
    return Path(options.output_dir) / _DATA_SUBDIR / f"{options.site_identifier}-{target.name}.json"


class SitePipeline:
    """Runs the full crawl for one target at a time.

    Parameters
    ----------
    provider:
        Page provider shared by the page-count probe and the fetcher.
    storage:
        Sink for the JSON artifact.
    options:
        Explicit run options (dev cap, pacing, output layout).
    fetcher:
        Optional pre-built fetcher; defaults to one over *provider*
        paced by ``options.page_delay``.
    """

    def __init__(
        self,
        provider: IPageProvider,
        storage: IStorageProvider,
        options: CrawlOptions,
        fetcher: PaginatedFetcher | None = None,
    ) -> None:
        self._provider = provider
        self._storage = storage
        self._options = options
        self._fetcher = fetcher or PaginatedFetcher(provider, page_delay=options.page_delay)
        self._logger = logger

    @property
    def options(self) -> CrawlOptions:
        return self._options

    async def run_target(self, target: Target) -> SiteOutcome:
        """Crawl *target* and persist its articles; never raises crawl errors."""
        log = self._logger.bind(target=target.name, url=target.url)
        started = time.monotonic()
        log.info("site_crawl_started")

        try:
            records, pages = await self._collect(target, log)
            path = await self._persist(target, records)
        except (FetchError, ParseError, PersistenceError) as exc:
            elapsed = time.monotonic() - started
            log.error("site_crawl_failed", error=str(exc), error_type=type(exc).__name__)
            return SiteOutcome(
                target_name=target.name,
                status=SiteStatus.FAILED,
                error=str(exc),
                elapsed_seconds=round(elapsed, 3),
            )

        elapsed = time.monotonic() - started
        status = SiteStatus.SUCCEEDED if records else SiteStatus.EMPTY
        if status is SiteStatus.EMPTY:
            log.warning("site_crawl_empty", pages=pages, path=str(path))
        else:
            log.info("site_crawl_succeeded", records=len(records), pages=pages, path=str(path))

        return SiteOutcome(
            target_name=target.name,
            status=status,
            record_count=len(records),
            pages_fetched=pages,
            output_path=str(path),
            elapsed_seconds=round(elapsed, 3),
        )

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    async def _collect(
        self, target: Target, log: structlog.BoundLogger
    ) -> tuple[list[ArticleRecord], int]:
        """Fetch and extract every page; returns ``(records, pages_fetched)``."""
        first_page = await self._provider.get(target.url)
        detected = detect_max_page(first_page)
        max_page = self.effective_max_page(detected)
        log.info("site_pages_detected", detected=detected, max_page=max_page)

        if self._options.reuse_first_page:
            bodies = [first_page] + await self._fetcher.fetch_range(target.url, 2, max_page)
        else:
            bodies = await self._fetcher.fetch_range(target.url, 1, max_page)

        # Flatten in page-then-document order.
        records: list[ArticleRecord] = []
        for body in bodies:
            records.extend(extract_articles(body))
        return records, len(bodies)

    def effective_max_page(self, detected: int | None) -> int:
        """Apply the single-page default and the development cap."""
        max_page = detected if detected is not None and detected > 0 else 1
        if self._options.dev_mode and max_page > self._options.dev_page_cap:
            self._logger.debug("dev_page_cap_applied", detected=max_page, cap=self._options.dev_page_cap)
            max_page = self._options.dev_page_cap
        return max_page

    async def _persist(self, target: Target, records: list[ArticleRecord]) -> Path:
        path = artifact_path(self._options, target)
        payload = json.dumps(
            [record.to_json_dict() for record in records],
            ensure_ascii=False,
        )
        await self._storage.ensure_dir(path.parent)
        await self._storage.write_text(path, payload)
        return path

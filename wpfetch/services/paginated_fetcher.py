"""Sequential, paced fetching of a blog's listing pages.

Pages are requested strictly one after another: page ``n + 1`` is only
requested once page ``n`` has resolved, and a fixed politeness delay is
awaited between consecutive requests.  The first failure aborts the
range; bodies collected so far are dropped.
"""

from __future__ import annotations

import asyncio

import structlog

from wpfetch.interfaces.page_provider import IPageProvider
from wpfetch.utils.errors import FetchError

logger = structlog.get_logger(logger_name=__name__)

_DEFAULT_PAGE_DELAY = 0.2


def page_url(base_url: str, page: int) -> str:
    """Return the listing URL for *page*: ``{base_url}/page/{page}``."""
    return f"{base_url.rstrip('/')}/page/{page}"


class PaginatedFetcher:
    """Fetches an inclusive range of listing pages in order.

    Parameters
    ----------
    provider:
        The page provider performing each GET.
    page_delay:
        Seconds awaited after a successful fetch before the next request.
    """

    def __init__(
        self,
        provider: IPageProvider,
        page_delay: float = _DEFAULT_PAGE_DELAY,
    ) -> None:
        self._provider = provider
        self._page_delay = page_delay
        self._logger = logger

    async def fetch_range(self, base_url: str, start: int, end: int) -> list[str]:
        """Fetch pages ``start..end`` (inclusive) of *base_url*.

        Returns the HTML bodies in page order; an empty list when
        ``start > end``, without issuing any request.

        Raises
        ------
        FetchError
            For the first page that fails, with ``page`` and ``url`` set.
            Later pages are never requested.
        """
        bodies: list[str] = []

        for n in range(start, end + 1):
            url = page_url(base_url, n)
            self._logger.info("site_page_fetching", url=url, page=n, last_page=end)

            try:
                body = await self._provider.get(url)
            except FetchError as exc:
                self._logger.warning("site_page_failed", url=url, page=n, error=str(exc))
                raise FetchError(
                    message=f"Page {n} failed: {exc.message}",
                    source=exc.source,
                    url=url,
                    page=n,
                    status_code=exc.status_code,
                ) from exc

            bodies.append(body)

            if n < end and self._page_delay > 0:
                await asyncio.sleep(self._page_delay)

        return bodies

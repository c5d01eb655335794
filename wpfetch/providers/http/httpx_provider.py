"""Page provider backed by ``httpx.AsyncClient``.

Issues plain GET requests with the crawler's default headers and maps
every httpx failure onto :class:`FetchError`, so nothing above this
layer needs to know about httpx.
"""

from __future__ import annotations

import httpx
import structlog

from wpfetch.interfaces.page_provider import IPageProvider
from wpfetch.utils.errors import FetchError

logger = structlog.get_logger(logger_name=__name__)

_DEFAULT_TIMEOUT = 30.0
_DEFAULT_USER_AGENT = "wpfetch/0.1 (+https://github.com/wpfetch/wpfetch)"


class HttpxPageProvider(IPageProvider):
    """Fetches listing pages over HTTP(S).

    An ``httpx.AsyncClient`` may be injected for testability; otherwise
    one is created and owned by the provider, and :meth:`aclose` (or
    ``async with``) releases it.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = _DEFAULT_TIMEOUT,
        user_agent: str = _DEFAULT_USER_AGENT,
    ) -> None:
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={
                "User-Agent": user_agent,
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            },
            follow_redirects=True,
        )

    async def __aenter__(self) -> HttpxPageProvider:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client if this provider created it."""
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # IPageProvider implementation
    # ------------------------------------------------------------------

    async def get(self, url: str) -> str:
        """GET *url* and return the decoded body."""
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise FetchError(
                message=f"Timeout fetching {url}: {exc}",
                source=self.get_provider_name(),
                url=url,
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                message=f"HTTP {exc.response.status_code} for {url}",
                source=self.get_provider_name(),
                url=url,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(
                message=f"HTTP error fetching {url}: {exc}",
                source=self.get_provider_name(),
                url=url,
            ) from exc
        except httpx.InvalidURL as exc:
            raise FetchError(
                message=f"Invalid URL {url}: {exc}",
                source=self.get_provider_name(),
                url=url,
            ) from exc

        logger.debug("page_fetched", url=url, status=response.status_code, size=len(response.content))
        return response.text

    def get_provider_name(self) -> str:
        return "httpx"

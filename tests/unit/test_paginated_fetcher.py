"""Unit tests for wpfetch.services.paginated_fetcher."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from wpfetch.services.paginated_fetcher import PaginatedFetcher, page_url
from wpfetch.utils.errors import FetchError

_BASE = "https://blog.example"


def _pages(*numbers: int) -> dict[str, str]:
    return {f"{_BASE}/page/{n}": f"<html>page {n}</html>" for n in numbers}


def _pacing_waits(mock_sleep: AsyncMock) -> int:
    return sum(1 for c in mock_sleep.await_args_list if c.args == (0.2,))


class TestPageUrl:
    def test_builds_page_path(self) -> None:
        assert page_url(_BASE, 4) == "https://blog.example/page/4"

    def test_trailing_slash_not_doubled(self) -> None:
        assert page_url(_BASE + "/", 2) == "https://blog.example/page/2"


class TestFetchRange:
    @pytest.mark.asyncio
    async def test_fetches_every_page_in_order(self, fake_provider) -> None:
        provider = fake_provider(_pages(1, 2, 3, 4))
        fetcher = PaginatedFetcher(provider, page_delay=0)

        bodies = await fetcher.fetch_range(_BASE, 1, 4)

        assert bodies == [f"<html>page {n}</html>" for n in range(1, 5)]
        assert provider.requested == [f"{_BASE}/page/{n}" for n in range(1, 5)]
        assert provider.max_in_flight == 1

    @pytest.mark.asyncio
    async def test_sub_range(self, fake_provider) -> None:
        provider = fake_provider(_pages(1, 2, 3, 4, 5))
        fetcher = PaginatedFetcher(provider, page_delay=0)

        bodies = await fetcher.fetch_range(_BASE, 2, 4)

        assert len(bodies) == 3
        assert provider.requested == [f"{_BASE}/page/{n}" for n in (2, 3, 4)]

    @pytest.mark.asyncio
    async def test_start_after_end_issues_no_requests(self, fake_provider) -> None:
        provider = fake_provider(_pages(1))
        fetcher = PaginatedFetcher(provider, page_delay=0)

        assert await fetcher.fetch_range(_BASE, 2, 1) == []
        assert provider.requested == []

    @pytest.mark.asyncio
    async def test_failure_stops_the_range(self, fake_provider) -> None:
        provider = fake_provider(_pages(1, 2, 4, 5))  # page 3 missing -> 404
        fetcher = PaginatedFetcher(provider, page_delay=0)

        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch_range(_BASE, 1, 5)

        assert exc_info.value.page == 3
        assert exc_info.value.url == f"{_BASE}/page/3"
        assert exc_info.value.status_code == 404
        assert provider.requested == [f"{_BASE}/page/{n}" for n in (1, 2, 3)]

    @pytest.mark.asyncio
    async def test_network_error_is_identified_by_page(self, fake_provider) -> None:
        url = f"{_BASE}/page/2"
        provider = fake_provider(
            _pages(1, 2, 3),
            errors={url: FetchError("Timeout fetching page", source="httpx", url=url)},
        )
        fetcher = PaginatedFetcher(provider, page_delay=0)

        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch_range(_BASE, 1, 3)

        assert exc_info.value.page == 2
        assert "Timeout" in str(exc_info.value)
        assert exc_info.value.source == "httpx"
        assert f"{_BASE}/page/3" not in provider.requested

    @pytest.mark.asyncio
    async def test_pacing_delay_between_pages(self, fake_provider) -> None:
        provider = fake_provider(_pages(1, 2, 3))
        fetcher = PaginatedFetcher(provider, page_delay=0.2)

        with patch(
            "wpfetch.services.paginated_fetcher.asyncio.sleep", new_callable=AsyncMock
        ) as mock_sleep:
            await fetcher.fetch_range(_BASE, 1, 3)

        # Between pages 1-2 and 2-3, not after the last page.
        assert _pacing_waits(mock_sleep) == 2

    @pytest.mark.asyncio
    async def test_no_delay_after_failure(self, fake_provider) -> None:
        provider = fake_provider(_pages(1))
        fetcher = PaginatedFetcher(provider, page_delay=0.2)

        with patch(
            "wpfetch.services.paginated_fetcher.asyncio.sleep", new_callable=AsyncMock
        ) as mock_sleep:
            with pytest.raises(FetchError):
                await fetcher.fetch_range(_BASE, 1, 3)

        assert _pacing_waits(mock_sleep) == 1

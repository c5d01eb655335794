"""Abstract base class for page-fetching providers.

Defines the HTTP capability the crawler consumes: a single GET that
returns the response body as text.  The adapter pattern keeps the
pipeline independent of the HTTP library and lets tests inject fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IPageProvider(ABC):
    """Contract for services that fetch listing-page HTML."""

    @abstractmethod
    async def get(self, url: str) -> str:
        """Fetch *url* with a GET request and return the body as text.

        Raises
        ------
        wpfetch.utils.errors.FetchError
            On network errors, timeouts, and non-2xx responses.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a human-readable identifier, e.g. ``"httpx"``."""

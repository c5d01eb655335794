"""HTTP page providers."""

from wpfetch.providers.http.httpx_provider import HttpxPageProvider

__all__ = ["HttpxPageProvider"]

"""Interfaces for the external collaborators of the crawler.

Concrete adapters live in ``wpfetch/providers/`` and are injected by the
CLI when it assembles a run:

    IPageProvider     ->  HttpxPageProvider
    IStorageProvider  ->  LocalStorageProvider
"""

from wpfetch.interfaces.page_provider import IPageProvider
from wpfetch.interfaces.storage_provider import IStorageProvider

__all__ = ["IPageProvider", "IStorageProvider"]

"""Persistence sinks."""

from wpfetch.providers.storage.local_storage_provider import LocalStorageProvider

__all__ = ["LocalStorageProvider"]

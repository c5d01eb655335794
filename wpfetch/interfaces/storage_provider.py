"""Abstract base class for the persistence sink.

The crawler writes exactly one JSON artifact per successful target and
clears its output area before each run.  Implementations must raise
:class:`~wpfetch.utils.errors.PersistenceError` for any failure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class IStorageProvider(ABC):
    """Contract for the output-directory sink."""

    @abstractmethod
    async def reset_dir(self, path: Path) -> None:
        """Remove *path* (if present) with everything below it, then recreate it."""

    @abstractmethod
    async def ensure_dir(self, path: Path) -> None:
        """Create *path* and any missing parents; no-op when it exists."""

    @abstractmethod
    async def write_text(self, path: Path, content: str) -> None:
        """Write *content* to *path* as UTF-8 in a single call."""

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a human-readable identifier, e.g. ``"local_storage"``."""

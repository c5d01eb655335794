"""Local-filesystem persistence sink.

Blocking pathlib/shutil calls run through ``asyncio.to_thread`` so the
event loop stays responsive while directories are created or files are
written.  All ``OSError``s surface as :class:`PersistenceError`.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

import structlog

from wpfetch.interfaces.storage_provider import IStorageProvider
from wpfetch.utils.errors import PersistenceError

logger = structlog.get_logger(logger_name=__name__)


class LocalStorageProvider(IStorageProvider):
    """Writes crawl artifacts to the local disk."""

    # -- Sync helpers (executed via asyncio.to_thread) -------------------------

    @staticmethod
    def _reset_dir_sync(path: Path) -> None:
        if path.exists():
            shutil.rmtree(path)
        path.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _ensure_dir_sync(path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _write_text_sync(path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")

    # -- IStorageProvider implementation ---------------------------------------

    async def reset_dir(self, path: Path) -> None:
        try:
            await asyncio.to_thread(self._reset_dir_sync, Path(path))
        except OSError as exc:
            raise PersistenceError(
                message=f"Cannot reset output directory {path}: {exc}",
                source=self.get_provider_name(),
                path=str(path),
            ) from exc
        logger.debug("output_dir_reset", path=str(path))

    async def ensure_dir(self, path: Path) -> None:
        try:
            await asyncio.to_thread(self._ensure_dir_sync, Path(path))
        except OSError as exc:
            raise PersistenceError(
                message=f"Cannot create directory {path}: {exc}",
                source=self.get_provider_name(),
                path=str(path),
            ) from exc

    async def write_text(self, path: Path, content: str) -> None:
        try:
            await asyncio.to_thread(self._write_text_sync, Path(path), content)
        except OSError as exc:
            raise PersistenceError(
                message=f"Cannot write {path}: {exc}",
                source=self.get_provider_name(),
                path=str(path),
            ) from exc

    def get_provider_name(self) -> str:
        return "local_storage"

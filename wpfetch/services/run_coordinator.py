"""Runs the site pipeline over every configured target, one at a time.

The output directory is cleared before the first target.  Each target's
outcome is reported as soon as it is known; a failed target never stops
the run, and a final ``crawl_run_completed`` event is always emitted.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import structlog

from wpfetch.interfaces.storage_provider import IStorageProvider
from wpfetch.models.crawl import SiteOutcome
from wpfetch.models.target import Target
from wpfetch.services.site_pipeline import SitePipeline

logger = structlog.get_logger(logger_name=__name__)


class RunCoordinator:
    """Sequentially crawls a list of targets.

    Parameters
    ----------
    pipeline:
        The per-target pipeline.
    storage:
        Sink used to reset the output directory before the run.
    """

    def __init__(self, pipeline: SitePipeline, storage: IStorageProvider) -> None:
        self._pipeline = pipeline
        self._storage = storage
        self._logger = logger

    async def run_all(
        self,
        targets: Sequence[Target],
        on_outcome: Callable[[SiteOutcome], None] | None = None,
    ) -> list[SiteOutcome]:
        """Crawl *targets* in order and return their outcomes in the same order.

        Parameters
        ----------
        targets:
            Targets in configuration order.
        on_outcome:
            Callback invoked with each outcome right after its target finishes.

        Raises
        ------
        PersistenceError
            Only if the output directory cannot be reset, before any
            target is crawled.
        """
        options = self._pipeline.options
        output_dir = Path(options.output_dir)
        await self._storage.reset_dir(output_dir)

        self._logger.info(
            "crawl_run_started",
            targets=len(targets),
            dev_mode=options.dev_mode,
            output_dir=str(output_dir),
        )

        outcomes: list[SiteOutcome] = []
        for target in targets:
            outcome = await self._pipeline.run_target(target)
            outcomes.append(outcome)
            if on_outcome:
                on_outcome(outcome)

        self._logger.info("crawl_run_completed", output_dir=str(output_dir))
        return outcomes

"""Crawl run models: explicit run options and per-target outcomes.

``CrawlOptions`` is built once from :class:`~wpfetch.config.settings.Settings`
at startup and threaded into the pipeline, so no stage inspects the
environment on its own.  ``SiteOutcome`` is the typed result of one
target's pipeline run; failures are data, not exceptions, past the
pipeline boundary.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CrawlOptions(BaseModel):
    """Options shared by every target in a run."""

    model_config = ConfigDict(frozen=True)

    dev_mode: bool = Field(
        default=False,
        description="Cap every target at dev_page_cap pages.",
    )
    dev_page_cap: int = Field(default=3, ge=1)
    page_delay: float = Field(
        default=0.2,
        ge=0.0,
        description="Seconds awaited between consecutive page fetches.",
    )
    output_dir: str = Field(default="dist")
    site_identifier: str = Field(
        default="gwan.tw",
        description="Prefix of every artifact file name.",
    )
    reuse_first_page: bool = Field(
        default=False,
        description="Reuse the page-count probe body instead of fetching page 1 again.",
    )


class SiteStatus(str, Enum):  # noqa: UP042
    """Terminal status of one target's pipeline run."""

    SUCCEEDED = "SUCCEEDED"  # Artifact written with at least one record
    EMPTY = "EMPTY"          # Artifact written, but no articles were found
    FAILED = "FAILED"        # A stage failed; nothing was written


class SiteOutcome(BaseModel):
    """Result of running the pipeline for one target."""

    model_config = ConfigDict(frozen=True)

    target_name: str
    status: SiteStatus
    record_count: int = 0
    pages_fetched: int = 0
    output_path: str | None = None
    error: str | None = None
    elapsed_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status is not SiteStatus.FAILED

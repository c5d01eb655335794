"""Pydantic v2 model for an article extracted from a listing page."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ArticleRecord(BaseModel):
    """A single article summary found on a listing page.

    Empty ``title``/``href`` and a missing ``datetime`` are valid: the
    extractor records whatever the markup provides.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="", description="Heading anchor text.")
    href: str = Field(default="", description="Heading anchor link, absolute or relative.")
    datetime: str | None = Field(
        default=None,
        description="Machine-readable timestamp from the <time> element, usually ISO-8601.",
    )

    def to_json_dict(self) -> dict[str, str]:
        """Serialise for the JSON artifact, omitting an absent ``datetime``."""
        return self.model_dump(mode="json", exclude_none=True)

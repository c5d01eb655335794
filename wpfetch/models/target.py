"""Pydantic v2 model for a configured crawl target."""

from __future__ import annotations

from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

_ALLOWED_SCHEMES = frozenset({"http", "https"})


class Target(BaseModel):
    """One configured blog site to crawl.

    ``url`` is the base listing URL; listing pages live under
    ``{url}/page/{n}``.  ``name`` becomes part of the output file name,
    so it must be unique within a target list.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Short identifier for the site.")
    url: str = Field(min_length=1, description="Base listing URL of the site.")

    @field_validator("name", "url")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("url")
    @classmethod
    def _http_url(cls, value: str) -> str:
        parts = urlsplit(value)
        if parts.scheme.lower() not in _ALLOWED_SCHEMES or not parts.netloc:
            raise ValueError(f"must be an absolute http(s) URL, got {value!r}")
        return value

"""Utility modules for wpfetch.

- **errors** -- Domain exception hierarchy rooted at WPFetchError; each
  pipeline stage raises its own subclass so the site pipeline can turn
  them into per-target failures without a broad ``except Exception``.
- **logging** -- structlog setup; console or JSON rendering, chosen by
  the caller from Settings.
"""

from wpfetch.utils.errors import (
    ConfigurationError,
    FetchError,
    ParseError,
    PersistenceError,
    WPFetchError,
)
from wpfetch.utils.logging import configure_logging

__all__ = [
    "ConfigurationError",
    "FetchError",
    "ParseError",
    "PersistenceError",
    "WPFetchError",
    "configure_logging",
]

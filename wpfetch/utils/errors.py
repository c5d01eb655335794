"""Custom exception hierarchy for wpfetch.

All application exceptions inherit from :class:`WPFetchError`, which
carries an optional ``source`` naming the collaborator that failed
(e.g. "httpx", "local_storage", "bs4").

The hierarchy is organized by pipeline stage:

    WPFetchError  (base -- catch-all for any wpfetch error)
    +-- FetchError          (HTTP failure for one listing page)
    +-- ParseError          (body could not be parsed as markup)
    +-- PersistenceError    (directory creation or file write failure)
    +-- ConfigurationError  (startup / missing or invalid target list)

The site pipeline catches the first three at its boundary and converts
them into a failed per-target outcome.  ConfigurationError is raised
before any crawling starts and is handled by the CLI.
"""


class WPFetchError(Exception):
    """Base exception for all wpfetch errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``source``.  ``__str__`` prefixes the source in brackets for log
    output, e.g. ``[httpx] HTTP 404 for https://example.com/page/2``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        source: str | None = None,
    ) -> None:
        self._message = message
        self._source = source
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def source(self) -> str | None:
        return self._source

    def __str__(self) -> str:
        if self._source:
            return f"[{self._source}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Crawl errors
# ---------------------------------------------------------------------------

class FetchError(WPFetchError):
    """Raised when a listing page cannot be fetched.

    ``page`` is set by the paginated fetcher so callers can tell which
    page of the range broke the crawl.  ``status_code`` is only present
    for non-2xx responses.
    """

    def __init__(
        self,
        message: str = "Page fetch failed",
        source: str | None = None,
        url: str | None = None,
        page: int | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message=message, source=source)
        self._url = url
        self._page = page
        self._status_code = status_code

    @property
    def url(self) -> str | None:
        return self._url

    @property
    def page(self) -> int | None:
        return self._page

    @property
    def status_code(self) -> int | None:
        return self._status_code


class ParseError(WPFetchError):
    """Raised when an HTML body cannot be parsed as markup at all."""

    def __init__(
        self,
        message: str = "HTML parsing failed",
        source: str | None = None,
    ) -> None:
        super().__init__(message=message, source=source)


class PersistenceError(WPFetchError):
    """Raised when the output directory or a JSON artifact cannot be written."""

    def __init__(
        self,
        message: str = "Persistence failed",
        source: str | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(message=message, source=source)
        self._path = path

    @property
    def path(self) -> str | None:
        return self._path


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class ConfigurationError(WPFetchError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        source: str | None = None,
    ) -> None:
        super().__init__(message=message, source=source)

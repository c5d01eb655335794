"""Application settings loaded from environment variables via pydantic-settings.

Values are read from two sources (in priority order):

  1. Environment variables, e.g. ``PAGE_DELAY=0.5``
  2. A ``.env`` file in the working directory

Field names map to upper-cased environment variables automatically.

``APP_ENV`` is read once here.  Any value containing ``"dev"`` (the
default is ``"development"``) enables the development page cap, and
``"production"`` selects JSON logs.  Both decisions are handed on
explicitly; nothing downstream re-reads the environment.
"""

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from wpfetch.models.crawl import CrawlOptions
from wpfetch.utils.errors import ConfigurationError


class Settings(BaseSettings):
    """wpfetch settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Targets ===
    targets_file: str = "config/targets.yaml"

    # === Output ===
    output_dir: str = "dist"
    # Every artifact is named "<site_identifier>-<target name>.json".
    site_identifier: str = "gwan.tw"

    # === Crawl ===
    page_delay: float = 0.2
    request_timeout: float = 30.0
    user_agent: str = "wpfetch/0.1 (+https://github.com/wpfetch/wpfetch)"
    dev_page_cap: int = 3
    reuse_first_page: bool = False

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"

    @property
    def dev_mode(self) -> bool:
        """True when APP_ENV names a development environment."""
        return "dev" in self.app_env.lower()

    @property
    def json_logs(self) -> bool:
        """True when APP_ENV is production; logs are then rendered as JSON."""
        return self.app_env.lower() == "production"

    def crawl_options(self, **overrides) -> CrawlOptions:
        """Build the explicit options for a crawl run.

        Keyword overrides (e.g. from CLI flags) win over settings values;
        ``None`` overrides are ignored.

        Raises:
            ConfigurationError: If the combined values are out of range
                (e.g. a negative delay or a zero page cap).
        """
        values = {
            "dev_mode": self.dev_mode,
            "dev_page_cap": self.dev_page_cap,
            "page_delay": self.page_delay,
            "output_dir": self.output_dir,
            "site_identifier": self.site_identifier,
            "reuse_first_page": self.reuse_first_page,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return CrawlOptions(**values)
        except ValidationError as exc:
            error = exc.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise ConfigurationError(
                f"Invalid crawl option {field}: {error['msg']}", source="settings"
            ) from exc

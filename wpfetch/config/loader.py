"""YAML target-list loader.

The target list is static configuration: an ordered ``targets`` sequence
of ``{name, url}`` mappings.  Order is preserved because the run
coordinator crawls targets in configuration order.

Example ``config/targets.yaml``::

    targets:
      - name: alberthsieh
        url: http://www.alberthsieh.com
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from wpfetch.models.target import Target
from wpfetch.utils.errors import ConfigurationError


def load_targets(path: str = "config/targets.yaml") -> list[Target]:
    """Load and validate the configured targets from *path*.

    Raises:
        ConfigurationError: If the file is missing or unreadable, is not
            valid YAML, lacks a ``targets`` list, holds an invalid entry,
            or repeats a target name.
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigurationError(f"Targets file not found: {config_path}", source="yaml")

    try:
        with open(config_path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(
            f"Cannot read targets file {config_path}: {exc}", source="yaml"
        ) from exc

    entries = raw.get("targets") if isinstance(raw, dict) else None
    if not isinstance(entries, list):
        raise ConfigurationError(
            f"{config_path} must contain a 'targets' list", source="yaml"
        )

    targets: list[Target] = []
    seen: set[str] = set()
    for index, entry in enumerate(entries):
        try:
            target = Target.model_validate(entry)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid target #{index} in {config_path}: {exc.errors()[0]['msg']}",
                source="yaml",
            ) from exc
        # Two targets with one name would write the same artifact.
        if target.name in seen:
            raise ConfigurationError(
                f"Duplicate target name {target.name!r} in {config_path}", source="yaml"
            )
        seen.add(target.name)
        targets.append(target)

    return targets

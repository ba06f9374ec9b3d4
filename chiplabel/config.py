"""
Engine configuration model and YAML I/O for chiplabel.

Key model:
- EngineConfig: the manufacturing year window used to reject suspicious
  resolved years, the dispatcher ambiguity warning toggle, an optional
  override directory for the category catalog, and the default worker
  count for batch parsing.

Key functions:
- load_config(path) -> EngineConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

Why Pydantic + YAML:
- Pydantic gives strict validation and readable errors for hand-edited files.
- YAML matches the format of the shipped category catalog.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from chiplabel.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class EngineConfig(BaseModel):
    """Top-level configuration for the parsing engine.

    The defaults reproduce the behavior of the shipped catalog; most
    callers never need to build one explicitly.
    """

    earliest_year: int = Field(
        1988, description="Earliest plausible manufacturing year (inclusive)"
    )
    latest_year: int = Field(
        2009, description="Latest plausible manufacturing year (inclusive)"
    )
    warn_on_ambiguity: bool = Field(
        True,
        description="If True, log a warning when more than one family accepts a label",
    )
    categories_dir: str | None = Field(
        None, description="Directory of category YAML files; defaults to the built-in catalog"
    )
    max_workers: int | None = Field(
        None, description="Default thread count for batch parsing; None parses serially"
    )

    @model_validator(mode="after")
    def _check_year_window(self) -> EngineConfig:
        """Validate that the manufacturing window is not empty."""
        if self.earliest_year > self.latest_year:
            raise ValueError(
                f"earliest_year ({self.earliest_year}) is after "
                f"latest_year ({self.latest_year})"
            )
        return self

    def year_in_window(self, year: int) -> bool:
        return self.earliest_year <= year <= self.latest_year


DEFAULT_CONFIG = EngineConfig()


def load_config(path: str | Path) -> EngineConfig:
    """Read an engine config YAML file.

    Keys left out of the file keep their defaults, so a file holding only
    ``latest_year: 2005`` is valid.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigurationError: If the file is empty or is not a YAML mapping.
        pydantic.ValidationError: If a value fails validation (for example
            an inverted year window).
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        raise ConfigurationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"Config file must hold a mapping of settings, got {type(raw).__name__}: {path}"
        )
    config = EngineConfig.model_validate(raw)
    logger.info(
        "Loaded config from %s (years %d-%d)", path, config.earliest_year, config.latest_year
    )
    return config


def _header(config: EngineConfig) -> str:
    catalog = config.categories_dir or "built-in"
    return (
        "# chiplabel engine configuration\n"
        f"# Resolved years outside {config.earliest_year}-{config.latest_year} "
        "are rejected as suspicious.\n"
        f"# Category catalog: {catalog}\n\n"
    )


def save_config(config: EngineConfig, path: str | Path) -> None:
    """Write *config* as YAML, preceded by a comment summarizing the window."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    body = yaml.safe_dump(
        config.model_dump(mode="json"),
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
    )
    path.write_text(_header(config) + body, encoding="utf-8")
    logger.info("Saved config to %s", path)

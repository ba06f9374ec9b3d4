"""
Category catalog loader for chiplabel.

Loads category YAML files from chiplabel/categories/ and provides
structured access via Pydantic models. Each category defines:
- id: unique identifier used by callers (e.g., "mgb_soc_qfp_80")
- name: human-readable name for reports
- part: the record type its families produce (GenericPart, Crystal, ...)
- families: family parser constant names, in dispatcher order

Why YAML instead of hardcoded:
- The category -> family binding is data that changes whenever a new label
  variant is catalogued, and it reads better as a list than as code.
- Dispatcher order is significant; a YAML list makes the order explicit
  and easy to review.
- Separation of catalog knowledge (YAML) from grammar logic (Python).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from chiplabel.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Directory containing category YAML files (sibling package)
_CATEGORIES_DIR = Path(__file__).parent / "categories"

PartType = Literal["GenericPart", "Crystal", "GameMaskRom", "MaskRom", "Mapper", "DateOnly", "mixed"]


class Category(BaseModel):
    """A component category bound to an ordered list of label families."""
    id: str
    name: str
    part: PartType
    families: list[str] = Field(min_length=1)
    group: str = ""


class CategoryFile(BaseModel):
    """One catalog file: a group heading and the categories under it."""
    group: str
    categories: list[Category] = Field(default_factory=list)


def load_category_file(path: Path) -> list[Category]:
    """Load a single category YAML file.

    Raises:
        ConfigurationError: If the file is empty or fails validation.
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if not raw:
        raise ConfigurationError(f"Category file is empty: {path}")

    try:
        parsed = CategoryFile(**raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid category file {path}: {e}") from e

    return [c.model_copy(update={"group": parsed.group}) for c in parsed.categories]


def load_all_categories(categories_dir: Path | str | None = None) -> dict[str, Category]:
    """Load all category YAML files into an id -> Category mapping.

    Args:
        categories_dir: Directory to scan for .yaml files. Defaults to
            the built-in categories/ directory.

    Returns:
        Dict of categories keyed by id, in file then declaration order.

    Raises:
        ConfigurationError: If two entries share the same category id.
    """
    categories_dir = Path(categories_dir) if categories_dir else _CATEGORIES_DIR
    categories: dict[str, Category] = {}
    for yaml_path in sorted(categories_dir.glob("*.yaml")):
        try:
            loaded = load_category_file(yaml_path)
        except (OSError, yaml.YAMLError, ConfigurationError) as e:
            logger.warning("Failed to load categories from %s: %s", yaml_path, e)
            continue
        for category in loaded:
            if category.id in categories:
                raise ConfigurationError(
                    f"Duplicate category id '{category.id}' in {yaml_path}"
                )
            categories[category.id] = category
        logger.debug("Loaded %d categories from %s", len(loaded), yaml_path)
    logger.info("Loaded %d categories", len(categories))
    return categories

"""
Parser registry for chiplabel.

Binds category ids to dispatchers. The registry is the only process-wide
state in the library and everything in it is built lazily, exactly once:

1. The family index: every UPPERCASE FamilyParser constant of the modules
   listed in chiplabel.parsers.MAKER_MODULES, keyed by constant name.
2. The category catalog (category_registry.load_all_categories), checked
   against the family index so a typo fails on first use instead of on
   the first label of that category.
3. One MultiParser per category, built on the first ``get`` for it.

After initialization nothing is mutated, so lookups from many threads need
no locking beyond the one-time Lazy initializers.
"""

from __future__ import annotations

import importlib
import logging
from functools import partial
from pathlib import Path

from chiplabel.category_registry import Category, load_all_categories
from chiplabel.config import DEFAULT_CONFIG, EngineConfig
from chiplabel.exceptions import ConfigurationError
from chiplabel.parsers import MAKER_MODULES
from chiplabel.parsers.base import FamilyParser, Lazy, MultiParser

logger = logging.getLogger(__name__)


def index_families(modules: tuple[str, ...] = MAKER_MODULES) -> dict[str, FamilyParser]:
    """Collect the family constants of the given chiplabel.parsers modules.

    Raises:
        ConfigurationError: If two modules define a family with the same name.
    """
    families: dict[str, FamilyParser] = {}
    defined_in: dict[str, str] = {}
    for module_name in modules:
        module = importlib.import_module(f"chiplabel.parsers.{module_name}")
        for attr, value in vars(module).items():
            if not (attr.isupper() and isinstance(value, FamilyParser)):
                continue
            if attr in families:
                raise ConfigurationError(
                    f"Family '{attr}' defined in both chiplabel.parsers.{defined_in[attr]} "
                    f"and chiplabel.parsers.{module_name}"
                )
            families[attr] = value
            defined_in[attr] = module_name
    logger.debug("Indexed %d label families from %d modules", len(families), len(modules))
    return families


class ParserRegistry:
    """Category id -> dispatcher lookup backed by the YAML catalog.

    Args:
        config: Engine configuration; supplies the ambiguity warning toggle
            and an optional catalog directory override.
        categories_dir: Catalog directory; overrides ``config.categories_dir``.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        categories_dir: str | Path | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.categories_dir = categories_dir or self.config.categories_dir
        self._families: Lazy[dict[str, FamilyParser]] = Lazy(index_families)
        self._catalog: Lazy[dict[str, Category]] = Lazy(self._load_catalog)
        self._dispatchers: Lazy[dict[str, Lazy[MultiParser]]] = Lazy(self._prepare_dispatchers)

    # ------------------------------------------------------------------
    # Lazy builders
    # ------------------------------------------------------------------

    def _load_catalog(self) -> dict[str, Category]:
        catalog = load_all_categories(self.categories_dir)
        families = self._families.get()
        for category in catalog.values():
            missing = [name for name in category.families if name not in families]
            if missing:
                raise ConfigurationError(
                    f"Category '{category.id}' references unknown families: {missing}"
                )
        return catalog

    def _prepare_dispatchers(self) -> dict[str, Lazy[MultiParser]]:
        return {
            category_id: Lazy(partial(self._build_dispatcher, category))
            for category_id, category in self._catalog.get().items()
        }

    def _build_dispatcher(self, category: Category) -> MultiParser:
        families = self._families.get()
        logger.debug(
            "Building dispatcher %s with %d families", category.id, len(category.families)
        )
        return MultiParser(
            category.id,
            [families[name] for name in category.families],
            warn_on_ambiguity=self.config.warn_on_ambiguity,
        )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get(self, category_id: str) -> MultiParser:
        """Return the dispatcher for *category_id*.

        Raises:
            ConfigurationError: If the category is not in the catalog.
        """
        dispatcher = self._dispatchers.get().get(category_id)
        if dispatcher is None:
            raise ConfigurationError(f"No parser registered for category '{category_id}'")
        return dispatcher.get()

    def family(self, name: str) -> FamilyParser:
        """Return a single family parser by its constant name.

        Raises:
            ConfigurationError: If no such family exists.
        """
        try:
            return self._families.get()[name]
        except KeyError:
            raise ConfigurationError(f"Unknown label family '{name}'") from None

    def families(self) -> dict[str, FamilyParser]:
        return dict(self._families.get())

    def category(self, category_id: str) -> Category:
        try:
            return self._catalog.get()[category_id]
        except KeyError:
            raise ConfigurationError(f"Unknown category '{category_id}'") from None

    def categories(self) -> list[Category]:
        return list(self._catalog.get().values())


_DEFAULT = Lazy(ParserRegistry)


def default_registry() -> ParserRegistry:
    """The shared registry built from the default config and built-in catalog."""
    return _DEFAULT.get()

"""
Processing: turn a category + label into a report-ready ProcessedPart.

Steps:
1. Look up the category dispatcher in the registry.
2. Parse the label into a typed part record.
3. Resolve the part's date code against the caller's year hint (and jun,
   when the caller knows it) into a DateCode.

Errors propagate to the caller unchanged (NoFamilyMatchedError,
InvalidFieldError, ConfigurationError); batch callers that need to keep
going catch them per label, see batch.py.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chiplabel.config import EngineConfig
from chiplabel.datecode import DateCode, Jun
from chiplabel.manufacturer import Manufacturer
from chiplabel.parts import ParsedPart
from chiplabel.registry import ParserRegistry, default_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessedPart:
    """A parsed label with its date resolved to calendar values."""
    kind: str | None = None
    label: str | None = None
    manufacturer: Manufacturer | None = None
    date_code: DateCode = field(default_factory=DateCode)
    rom_id: str | None = None


def process_part(
    part: ParsedPart,
    label: str,
    year_hint: int | None = None,
    *,
    jun: Jun | None = None,
    config: EngineConfig | None = None,
) -> ProcessedPart:
    """Convert an already-parsed record into a ProcessedPart.

    Raises:
        InvalidFieldError: If the resolved year is outside the manufacturing
            window.
    """
    return ProcessedPart(
        kind=part.kind,
        label=label,
        manufacturer=part.manufacturer,
        date_code=DateCode.from_part(year_hint, part.date_code, jun=jun, config=config),
        rom_id=part.rom_id,
    )


def process_label(
    category: str,
    label: str | None,
    year_hint: int | None = None,
    *,
    jun: Jun | None = None,
    registry: ParserRegistry | None = None,
    config: EngineConfig | None = None,
) -> ProcessedPart | None:
    """Parse *label* as a part of *category* and resolve its date.

    Args:
        category: Category id from the catalog (e.g. "mgb_soc_qfp_80").
        label: The transcribed label. Empty or None means the slot is
            unpopulated or unreadable.
        year_hint: Context year for resolving one-digit years.
        jun: Ten-day period of the month, when known from elsewhere.
        registry: Registry to look the category up in; defaults to the
            shared one.
        config: Supplies the manufacturing window; defaults to the
            registry's config.

    Returns:
        The processed part, or None for an empty label.

    Raises:
        ConfigurationError: If the category is unknown, even for an empty label.
        NoFamilyMatchedError: If no family of the category accepts the label.
        InvalidFieldError: If a field or the resolved year is invalid.
    """
    registry = registry or default_registry()
    config = config or registry.config
    dispatcher = registry.get(category)
    if not label:
        return None
    part = dispatcher.parse(label)
    logger.debug("Parsed %r in %s as %r", label, category, part)
    return process_part(part, label, year_hint, jun=jun, config=config)

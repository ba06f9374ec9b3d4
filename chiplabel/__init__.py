"""
chiplabel: parse and date-normalize labels printed on Game Boy family
electronic components.

Public API surface:

- ``parse(category, label)`` -- parse one label with the dispatcher of a
  catalog category and return the typed part record.

- ``get_parser(category)`` -- the dispatcher itself (a ``MultiParser``),
  for callers that parse many labels of one category.

- ``process_label(category, label, year_hint, ...)`` -- parse and resolve
  the date code into calendar values, returning a ``ProcessedPart``.

- ``parse_labels(rows, ...)`` -- batch version returning a pandas
  DataFrame, one row per label, failures recorded per row.
"""

from __future__ import annotations

from chiplabel.batch import parse_labels
from chiplabel.config import EngineConfig, load_config, save_config
from chiplabel.datecode import (
    DateCode,
    Jun,
    Month,
    PartDateCode,
    Year,
    YearMonth,
    YearOnly,
    YearWeek,
    guess_full_year,
    to_full_year,
)
from chiplabel.exceptions import (
    ChipLabelError,
    ConfigurationError,
    InvalidFieldError,
    NoFamilyMatchedError,
)
from chiplabel.hashes import Crc32, Md5, Sha1, Sha256
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, LabelParser, MultiParser
from chiplabel.parts import (
    Crystal,
    DateOnly,
    GameMaskRom,
    GameRomType,
    GenericPart,
    Mapper,
    MapperChip,
    MapperType,
    MaskCode,
    MaskRom,
    ParsedPart,
)
from chiplabel.process import ProcessedPart, process_label, process_part
from chiplabel.registry import ParserRegistry, default_registry

__all__ = [
    "parse",
    "get_parser",
    "process_label",
    "process_part",
    "parse_labels",
    "guess_full_year",
    "to_full_year",
    "ParserRegistry",
    "default_registry",
    "EngineConfig",
    "load_config",
    "save_config",
    "LabelParser",
    "FamilyParser",
    "MultiParser",
    "ProcessedPart",
    "DateCode",
    "Jun",
    "Month",
    "PartDateCode",
    "Year",
    "YearMonth",
    "YearOnly",
    "YearWeek",
    "Manufacturer",
    "ParsedPart",
    "GenericPart",
    "Crystal",
    "GameMaskRom",
    "GameRomType",
    "MaskCode",
    "MaskRom",
    "Mapper",
    "MapperChip",
    "MapperType",
    "DateOnly",
    "Crc32",
    "Md5",
    "Sha1",
    "Sha256",
    "ChipLabelError",
    "ConfigurationError",
    "InvalidFieldError",
    "NoFamilyMatchedError",
]


def get_parser(category: str) -> MultiParser:
    """Return the shared dispatcher for *category*.

    Raises:
        ConfigurationError: If the category is not in the catalog.
    """
    return default_registry().get(category)


def parse(category: str, label: str) -> ParsedPart:
    """Parse *label* with the dispatcher of *category*.

    Returns:
        The typed part record of the first family that accepts the label.

    Raises:
        ConfigurationError: If the category is not in the catalog.
        NoFamilyMatchedError: If no family accepts the label.
        InvalidFieldError: If a family matched but a field is invalid.
    """
    return get_parser(category).parse(label)

"""
Panasonic (Matsushita) label families.

Two date layouts are used:

- SOP mappers: year digit, apostrophe, 1-9/O/N/D month code, then a lot
  digit, e.g. "0'D7" = December of a year ending in 0.
- QFP mappers: year1 + week2 followed by "U", a digit and a letter.
"""

from __future__ import annotations

from chiplabel.grammar import (
    YEAR1_WEEK2,
    YEAR2_WEEK2,
    alnum_uppers,
    digits,
    group,
    lines,
    one_of,
    uppers,
    year_month,
)
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic, mapper
from chiplabel.parts import MapperChip

PANASONIC = Manufacturer.PANASONIC

_SOP_MONTH = year_month("1", "123ond", between="'")
_DATE_SOP = f"{_SOP_MONTH}{digits(1)}"
_DATE_QFP = f"{YEAR1_WEEK2}U{digits(1)}{uppers(1)}"


def _sop(printed: str, chip: MapperChip, examples: tuple[str, ...]) -> FamilyParser:
    return FamilyParser(
        f"Panasonic {chip.display_name}",
        lines("DMG", printed, "Nintendo", f"P {_DATE_SOP}"),
        mapper(chip, PANASONIC),
        examples,
    )


def _qfp(printed: str, lot: str, chip: MapperChip, examples: tuple[str, ...]) -> FamilyParser:
    return FamilyParser(
        f"Panasonic {chip.display_name}",
        lines(printed, lot, _DATE_QFP),
        mapper(chip, PANASONIC),
        examples,
    )


PANASONIC_MBC1B = _sop("MBC1-B", MapperChip.MBC1B, ("DMG MBC1-B Nintendo P 0'D7",))
PANASONIC_MBC2A = _sop("MBC2-A", MapperChip.MBC2A, ("DMG MBC2-A Nintendo P 8'73",))
PANASONIC_MBC3A = _qfp("MBC3 A", "P-2", MapperChip.MBC3A, ("MBC3 A P-2 834U4E",))
PANASONIC_MBC3B = _qfp("MBC3 B", "P-2", MapperChip.MBC3B, ("MBC3 B P-2 134U2D",))
PANASONIC_MBC30 = _qfp("MBC30", "P", MapperChip.MBC30, ("MBC30 P 047U2M",))
PANASONIC_MBC5 = _qfp(
    "MBC5",
    one_of("P-2", "P-1", "P"),
    MapperChip.MBC5,
    ("MBC5 P 041U7M", "MBC5 P-1 850U3L", "MBC5 P-2 104U4M"),
)

PANASONIC_MN4464 = FamilyParser(
    "Panasonic MN4464",
    lines("Panasonic JAPAN", group("kind", "MN4464S-08LL"), f"{YEAR2_WEEK2}{digits(1)}{alnum_uppers(1)}{digits(3)}"),
    generic("{kind}", PANASONIC),
    ("Panasonic JAPAN MN4464S-08LL 93205B035",),
)

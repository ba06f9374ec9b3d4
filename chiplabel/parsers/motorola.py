"""Motorola label families."""

from __future__ import annotations

from chiplabel.grammar import YEAR2_WEEK2, lines
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, mapper
from chiplabel.parts import MapperChip

MOTOROLA_MBC1B = FamilyParser(
    "Motorola MBC1B",
    lines("DMG", "MBC1B", "Nintendo", f"J{YEAR2_WEEK2}BR"),
    mapper(MapperChip.MBC1B, Manufacturer.MOTOROLA),
    ("DMG MBC1B Nintendo J9130BR",),
)

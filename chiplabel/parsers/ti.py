"""Texas Instruments label families."""

from __future__ import annotations

from chiplabel.grammar import YEAR1_MONTH1_123ABC, alnum_uppers, lines, uppers
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic, mapper
from chiplabel.parts import MapperChip

TI = Manufacturer.TEXAS_INSTRUMENTS


TI_SN74LV2416 = FamilyParser(
    "TI SN74LV2416",
    lines("LV2416", f"{YEAR1_MONTH1_123ABC}M", f"A{alnum_uppers(3)}"),
    generic("SN74LV2416", TI),
    ("LV2416 17M A23D", "LV2416 13M A8R3", "LV2416 0CM A73E"),
)
TI_MBC5 = FamilyParser(
    "TI MBC5",
    lines(f"{YEAR1_MONTH1_123ABC}{uppers(1)}{alnum_uppers(3)}T", "MBC5", "2417"),
    mapper(MapperChip.MBC5, TI),
    ("11CH8VT MBC5 2417",),
)

"""
SRAM families from makers with a single part in the catalog (Victronix,
AMIC, STMicro).
"""

from __future__ import annotations

from chiplabel.grammar import YEAR1_WEEK2, YEAR2_WEEK2, alnum_uppers, digits, group, lines, uppers
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic

VICTRONIX_VN4464 = FamilyParser(
    "Victronix VN4464",
    lines("Victronix", group("kind", "VN4464S-08LL"), f"{YEAR2_WEEK2}{digits(1)}{alnum_uppers(1)}{digits(3)}"),
    generic("{kind}", Manufacturer.VICTRONIX),
    ("Victronix VN4464S-08LL 95103B029",),
)

AMIC_LP62S16128 = FamilyParser(
    "AMIC LP62S16128",
    # revision, package W (TSOP-I-48), speed 70, power LL
    f"AMIC {group('kind', 'LP62S16128[ABC]?W-70LLTF')} {alnum_uppers(10)} {YEAR2_WEEK2}{uppers(1)}",
    generic("{kind}", Manufacturer.AMIC),
    ("AMIC LP62S16128BW-70LLTF P4060473FB 0540A",),
)

ST_MICRO_M68AS128 = FamilyParser(
    "STMicro M68AS128",
    "(?:E )?" + lines(
        group("kind", "M68AS128"),
        # speed 70, package N, temperature range 6
        group("attrs", "DL70N6"),
        f"{uppers(5)} F6",
        f"TWN {alnum_uppers(2)} {YEAR1_WEEK2}",
    ),
    generic("{kind}{attrs}", Manufacturer.ST_MICRO),
    ("M68AS128 DL70N6 AANFG F6 TWN 8B 414",),
)

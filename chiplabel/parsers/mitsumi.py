"""
Mitsumi label families: supervisors, regulators, charge controllers and
power management ICs.

The tiny SOT packages only carry the tail of the part number after a date
code, e.g. "939 134A" = MM1134A made in week 39 of a year ending in 9.
"""

from __future__ import annotations

from chiplabel.grammar import YEAR1, YEAR1_WEEK2, alnum_uppers, group, uppers
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic

MITSUMI = Manufacturer.MITSUMI


MITSUMI_MM1026A = FamilyParser(
    "Mitsumi MM1026A",
    f"{YEAR1}{alnum_uppers(2, 3)} 26A",
    generic("MM1026A", MITSUMI),
    ("843 26A", "1L51 26A"),
)
MITSUMI_MM1134A = FamilyParser(
    "Mitsumi MM1134A",
    f"{YEAR1_WEEK2} 134A",
    generic("MM1134A", MITSUMI),
    ("939 134A",),
)
MITSUMI_MM1514X = FamilyParser(
    "Mitsumi MM1514X",
    f"{YEAR1}{alnum_uppers(2)} 514X",
    generic("MM1514X", MITSUMI),
    ("105 514X", "081 514X"),
)
MITSUMI_MM1581A = FamilyParser(
    "Mitsumi MM1581A",
    f"{YEAR1_WEEK2} 1581A",
    generic("MM1581A", MITSUMI),
    ("422 1581A",),
)
MITSUMI_MM1592F = FamilyParser(
    "Mitsumi MM1592F",
    f"{YEAR1_WEEK2} 592F",
    generic("MM1592F", MITSUMI),
    ("548 592F",),
)
MITSUMI_PM = FamilyParser(
    "Mitsumi PM",
    f"MITSUMI JAPAN {YEAR1_WEEK2} ?{uppers(1)} {group('kind', 'PM B3|PM B4|PM C')}",
    generic("{kind}", MITSUMI),
    ("MITSUMI JAPAN 528A PM C",),
)
MITSUMI_MGL_TRANSFORMER = FamilyParser(
    "Mitsumi MGL transformer",
    group("kind", "82Y7|84Z7"),
    generic("{kind}", MITSUMI),
    ("82Y7", "84Z7"),
)

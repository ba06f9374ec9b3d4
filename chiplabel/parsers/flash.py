"""
Flash families from makers with a single part in the catalog (SST, Atmel).

The printed attribute block (speed, grade, package) is part of the
normalized kind.
"""

from __future__ import annotations

from chiplabel.grammar import YEAR2_WEEK2, digits, group, lines
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic

SST_SST39VF512 = FamilyParser(
    "SST SST39VF512",
    # speed, durability, grade, package
    lines(group("kind", "39VF512"), group("attrs", "70-4C-WH"), f"{YEAR2_WEEK2}{digits(3)}-D"),
    generic("SST{kind}-{attrs}", Manufacturer.SST),
    ("39VF512 70-4C-WH 0216049-D", "39VF512 70-4C-WH 0350077-D"),
)

ATMEL_AT29LV512 = FamilyParser(
    "Atmel AT29LV512",
    # speed 15, package T, grade C/I
    lines(group("kind", "AT29LV512"), group("attrs", "15T[CI]"), YEAR2_WEEK2),
    generic("{kind}-{attrs}", Manufacturer.ATMEL),
    ("AT29LV512 15TC 0114",),
)

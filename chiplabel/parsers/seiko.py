"""
Seiko Instruments label families: RTCs and power management ICs.

Seiko prints the year digit either as a digit or, on some lots, as a letter
(A = 1 ... J = 9, no I), followed by a 1-9/X/Y/Z month code.
"""

from __future__ import annotations

from chiplabel.grammar import alnum_uppers, digits, group, lines, year_month, year_only
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic

SEIKO = Manufacturer.SEIKO

_DATE = year_month("seiko", "123xyz")
_LOT = f"{alnum_uppers(1)}{digits(3)}"


SEIKO_S3511A = FamilyParser(
    "Seiko S-3511A",
    lines("S3511", f"AV{_DATE}", _LOT),
    generic("S-3511A", SEIKO),
    ("S3511 AV31 9812", "S3511 AVEX 2753"),
)
SEIKO_S3516AE = FamilyParser(
    "Seiko S-3516AE",
    lines("S3516", f"AEV{_DATE}", _LOT),
    generic("S-3516AE", SEIKO),
    ("S3516 AEV42 7505",),
)
SEIKO_S6403 = FamilyParser(
    "Seiko S-6403",
    lines("S6403", f"{group('rev', '[AC]')}U{year_only('seiko')}{alnum_uppers(1)}{digits(1)}", _LOT),
    generic("S-6403{rev}", SEIKO),
    ("S6403 CU4E0 9723",),
)
SEIKO_S6960E = FamilyParser(
    "Seiko S-6960E",
    lines("S6960", f"E-U{_DATE}", _LOT),
    generic("S-6960E", SEIKO),
    ("S6960 E-U2Z C700", "S6960 E-U2X C410"),
)

"""Mitsubishi label families."""

from __future__ import annotations

from chiplabel.grammar import YEAR1, alnum_uppers, digits
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic

# Only the tail of the part number and a year digit are printed
MITSUBISHI_M62021P = FamilyParser(
    "Mitsubishi M62021P",
    f"2021 {YEAR1}{alnum_uppers(1)}{digits(1)}",
    generic("M62021P", Manufacturer.MITSUBISHI),
    ("2021 7Z2",),
)

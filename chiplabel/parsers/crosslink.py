"""Crosslink (Xlink) SRAM families, Sharp designs made under license."""

from __future__ import annotations

from chiplabel.grammar import group, lines, year_week
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic

CROSSLINK = Manufacturer.CROSSLINK

# "H" + year, sometimes a space, + week
_DATE = f"H{year_week('1', between=' ?')}"


def _xlink(name: str, kind: str, tail: str, examples: tuple[str, ...]) -> FamilyParser:
    return FamilyParser(
        name,
        lines(group("kind", kind), "Xlink", "JAPAN", f"{_DATE} [0-9][A-Z0-9] {tail}"),
        generic("{kind}", CROSSLINK),
        examples,
    )


CROSSLINK_LH52A64N = _xlink(
    "Crosslink LH52A64N", "LH52A64N-YL", "[A-Z]",
    ("LH52A64N-YL Xlink JAPAN H432 0U C",),
)
CROSSLINK_LH5268AN = _xlink(
    "Crosslink LH5268AN", "LH5268ANF-10YLL", "[A-Z]{2}",
    ("LH5268ANF-10YLL Xlink JAPAN H429 0Y BB",),
)

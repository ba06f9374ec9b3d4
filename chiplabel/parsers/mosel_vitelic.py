"""Mosel-Vitelic SRAM families, Sharp designs made under license."""

from __future__ import annotations

from chiplabel.grammar import YEAR1_WEEK2, group, lines, year_week
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic

MOSEL_VITELIC = Manufacturer.MOSEL_VITELIC


def _mosel(name: str, kind: str, date: object, tail: str, examples: tuple[str, ...]) -> FamilyParser:
    return FamilyParser(
        name,
        lines(group("kind", kind), "MOSEL-VITELIC", "JAPAN", f"N{date} [0-9][A-Z0-9] {tail}"),
        generic("{kind}", MOSEL_VITELIC),
        examples,
    )


MOSEL_VITELIC_LH52B256N = _mosel(
    "Mosel-Vitelic LH52B256N", "LH52B256N[AZ]-10PLL", YEAR1_WEEK2, "[A-Z]{2}",
    (
        "LH52B256NA-10PLL MOSEL-VITELIC JAPAN N643 0T BB",
        "LH52B256NZ-10PLL MOSEL-VITELIC JAPAN N636 06 CB",
    ),
)
MOSEL_VITELIC_LH5168N = _mosel(
    "Mosel-Vitelic LH5168N", "LH5168N-10PL", year_week("1", between=" ?"), "[A-Z]{2}",
    (
        "LH5168N-10PL MOSEL-VITELIC JAPAN N745 1G BH",
        "LH5168N-10PL MOSEL-VITELIC JAPAN N7 34 22 BH",
    ),
)
MOSEL_VITELIC_LH5268AN = _mosel(
    "Mosel-Vitelic LH5268AN", "LH5268AN[AF]-10PLL", YEAR1_WEEK2, "[A-Z]{2}",
    (
        "LH5268ANF-10PLL MOSEL-VITELIC JAPAN N526 0H BC",
        "LH5268ANA-10PLL MOSEL-VITELIC JAPAN N527 02 BC",
    ),
)
MOSEL_VITELIC_LH52A64N = _mosel(
    "Mosel-Vitelic LH52A64N", "LH52A64N-PL", YEAR1_WEEK2, "[A-Z]",
    ("LH52A64N-PL MOSEL-VITELIC JAPAN N651 0F C",),
)

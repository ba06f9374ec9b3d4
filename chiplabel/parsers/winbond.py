"""Winbond SRAM families (SOP-28)."""

from __future__ import annotations

from chiplabel.grammar import YEAR1_WEEK2, alnum_uppers, digits, group, lines, uppers
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic

WINBOND = Manufacturer.WINBOND

SOP_28 = "S"

_LOT = f"{YEAR1_WEEK2}{uppers(2)}{digits(9)}{uppers(2)}"


def _winbond(chip: str, grade: str, lot: str, examples: tuple[str, ...]) -> FamilyParser:
    return FamilyParser(
        f"Winbond {chip}{SOP_28}",
        # speed 70, then power and temperature rating
        lines("Winbond", group("kind", f"{chip}{SOP_28}-70{grade}"), lot),
        generic("{kind}", WINBOND),
        examples,
    )


WINBOND_W24257S = _winbond("W24257", "LL", _LOT, ("Winbond W24257S-70LL 046QB202858301AC",))
WINBOND_W24258S = _winbond("W24258", "LE", _LOT, ("Winbond W24258S-70LE 011MH200254401AA",))
WINBOND_W2465S = _winbond(
    "W2465",
    "LL",
    f"{YEAR1_WEEK2}{uppers(2)}{digits(8)}-{alnum_uppers(2)}1RA",
    ("Winbond W2465S-70LL 140SD21331480-II1RA", "Winbond W2465S-70LL 127AD21212050-811RA"),
)

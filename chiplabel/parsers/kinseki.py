"""Kinseki crystal families; all date codes are year1 + letter month."""

from __future__ import annotations

from chiplabel.grammar import YEAR1_MONTH1_ABC, lines, uppers
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, crystal
from chiplabel.parts import Crystal

KINSEKI = Manufacturer.KINSEKI


def _can(frequency_code: str) -> list[str]:
    # date either directly after the logo or spaced with a trailing letter
    return [
        lines(frequency_code, f"KSS {YEAR1_MONTH1_ABC}{uppers(1)}"),
        lines(frequency_code, f"KSS{YEAR1_MONTH1_ABC}"),
    ]


KINSEKI_4_MIHZ = FamilyParser(
    "Kinseki 4 MiHz",
    _can("4194"),
    crystal(Crystal.FREQ_4_MIHZ, KINSEKI),
    ("4194 KSS 0KF", "4194 KSS1A"),
)
KINSEKI_8_MIHZ = FamilyParser(
    "Kinseki 8 MiHz",
    _can("8388"),
    crystal(Crystal.FREQ_8_MIHZ, KINSEKI),
    ("8388 KSS9J",),
)
KINSEKI_20_MIHZ = FamilyParser(
    "Kinseki 20 MiHz",
    f"KSS20V {YEAR1_MONTH1_ABC}",
    crystal(Crystal.FREQ_20_MIHZ, KINSEKI),
    ("KSS20V 8A",),
)
KINSEKI_32_MIHZ = FamilyParser(
    "Kinseki 32 MiHz",
    f"33WKSS{YEAR1_MONTH1_ABC}T",
    crystal(Crystal.FREQ_32_MIHZ, KINSEKI),
    ("33WKSS6DT",),
)

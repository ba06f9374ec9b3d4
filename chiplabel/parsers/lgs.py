"""
LG Semicon (LGS) SRAM families.

The GM76 line was sold under both the LGS and the Hyundai brand after the
two merged; the label layout is identical.
"""

from __future__ import annotations

from chiplabel.grammar import YEAR2_WEEK2, group, lit
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic

# package code in the part number
SOP = "FW"


def _gm76(name: str, brand: str, manufacturer: Manufacturer, chip: str, speeds: str, examples: tuple[str, ...]) -> FamilyParser:
    # revision, power, package, speed
    kind = f"{chip}[ABC]?(?:LL|L){SOP}(?:{speeds})"
    return FamilyParser(
        name,
        f"{lit(brand)} {group('kind', kind)} {YEAR2_WEEK2} KOREA",
        generic("{kind}", manufacturer),
        examples,
    )


LGS_GM76C256 = _gm76(
    "LGS GM76C256", "LGS", Manufacturer.LGS, "GM76C256", "70|85|10",
    ("LGS GM76C256CLLFW70 0047 KOREA",),
)
HYUNDAI_GM76C256 = _gm76(
    "Hyundai GM76C256", "HYUNDAI", Manufacturer.HYUNDAI, "GM76C256", "70|85|10",
    ("HYUNDAI GM76C256CLLFW70 0047 KOREA",),
)
HYUNDAI_GM76V256 = _gm76(
    "Hyundai GM76V256", "HYUNDAI", Manufacturer.HYUNDAI, "GM76V256", "10",
    ("HYUNDAI GM76V256CLLFW10 0115 KOREA",),
)

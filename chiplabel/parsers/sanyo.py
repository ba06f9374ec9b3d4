"""Sanyo flash and SRAM families; dates are year1 + letter month."""

from __future__ import annotations

from chiplabel.grammar import (
    YEAR1_MONTH1_ABC,
    alnum_uppers,
    digits,
    group,
    lines,
    uppers,
)
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic

SANYO = Manufacturer.SANYO


SANYO_LE26FV10 = FamilyParser(
    "Sanyo LE26FV10",
    lines(
        group("kind", "LE26FV10N1TS"),
        f"-10 {YEAR1_MONTH1_ABC}{uppers(1)}{digits(1)}{alnum_uppers(1)}",
    ),
    generic("{kind}-10", SANYO),
    ("LE26FV10N1TS -10 3MU50", "LE26FV10N1TS -10 4DU2A"),
)
SANYO_LC35256 = FamilyParser(
    "Sanyo LC35256",
    lines(
        "SANYO",
        f"{group('kind', 'LC35256[A-F]?')}M-70{alnum_uppers(1)}",
        f"JAPAN {YEAR1_MONTH1_ABC}{alnum_uppers(3)}",
    ),
    generic("{kind}M-70", SANYO),
    ("SANYO LC35256DM-70W JAPAN 0EUPG", "SANYO LC35256FM-70U JAPAN 0LK5G"),
)
SANYO_LC3564 = FamilyParser(
    "Sanyo LC3564",
    lines(
        "SANYO",
        f"{group('kind', 'LC3564[AB]?')}M-70",
        f"JAPAN {YEAR1_MONTH1_ABC}{alnum_uppers(3)}",
    ),
    generic("{kind}M-70", SANYO),
    ("SANYO LC3564BM-70 JAPAN 9MUBG",),
)

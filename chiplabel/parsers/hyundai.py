"""Hyundai SRAM families (pre-Hynix branding)."""

from __future__ import annotations

from chiplabel.grammar import YEAR2_WEEK2, group, lines, uppers
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic

HYUNDAI = Manufacturer.HYUNDAI

# package letter in the part number
SOP_28 = "J"
SOP_32 = "G"

_DATE = f"{YEAR2_WEEK2}{uppers(1)}"


HYUNDAI_HY628100 = FamilyParser(
    "Hyundai HY628100",
    lines(
        "HYUNDAI KOREA",
        group("kind", "HY628100[AB]?"),
        _DATE,
        # power, package, speed
        group("grade", f"(?:LL|L){SOP_32}-(?:50|55|70|85)"),
    ),
    generic("{kind}{grade}", HYUNDAI),
    ("HYUNDAI KOREA HY628100B 0041A LLG-70",),
)

_HY6264_GRADE = group("grade", f"(?:LL|L){SOP_28}-(?:70|85|10|12|15)")

HYUNDAI_HY6264 = FamilyParser(
    "Hyundai HY6264",
    [
        # 1994 onwards
        lines(group("kind", "HY6264A?"), _HY6264_GRADE, _DATE, "KOREA"),
        # 1992-1994
        lines("HYUNDAI", group("kind", "HY6264A?") + _HY6264_GRADE, _DATE, "KOREA"),
    ],
    generic("{kind}{grade}", HYUNDAI),
    ("HY6264A LLJ-10 9902B KOREA", "HYUNDAI HY6264ALLJ-10 9327B KOREA"),
)

"""
KDS (Daishinku) crystal families.

Small KDS crystals print a part code followed by a letter month and a year
digit ("D419A2" = January of a year ending in 2); larger cans use the KDS
logo, a date code and the frequency.
"""

from __future__ import annotations

from chiplabel.grammar import YEAR1_MONTH1_ABC, YEAR2_WEEK2, lines, month_year, uppers
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, crystal
from chiplabel.parts import Crystal

KDS = Manufacturer.KDS

MONTH1_ABC_YEAR1 = month_year("abc", "1")


KDS_32_KIHZ = FamilyParser(
    "KDS 32 KiHz",
    f"KDS{YEAR1_MONTH1_ABC}",
    crystal(Crystal.FREQ_32_KIHZ, KDS),
    ("KDS1H",),
)
KDS_4_MIHZ_OLD = FamilyParser(
    "KDS 4 MiHz",
    [
        lines(f"KDS ?{YEAR1_MONTH1_ABC}", "4.194"),
        lines(f"KDS ?{YEAR2_WEEK2}", "4.194"),
    ],
    crystal(Crystal.FREQ_4_MIHZ, KDS),
    ("KDS 6F 4.194", "KDS 9803 4.194", "KDS9807 4.194"),
)
KDS_4_MIHZ_NEW = FamilyParser(
    "KDS 4 MiHz",
    lines(f"KDS {YEAR2_WEEK2}", "4.194"),
    crystal(Crystal.FREQ_4_MIHZ, KDS),
    ("KDS 0102 4.194",),
)
KDS_4_MIHZ_AGS = FamilyParser(
    "KDS 4 MiHz",
    lines(f"KDSI {YEAR2_WEEK2}", "4.194"),
    crystal(Crystal.FREQ_4_MIHZ, KDS),
    ("KDSI 0549 4.194",),
)
KDS_8_MIHZ = FamilyParser(
    "KDS 8 MiHz",
    lines(f"KDS {YEAR2_WEEK2}", "8.388"),
    crystal(Crystal.FREQ_8_MIHZ, KDS),
    ("KDS 9841 8.388",),
)
KDS_D419_OLD = FamilyParser(
    "KDS D419",
    f"D419{MONTH1_ABC_YEAR1}",
    crystal(Crystal.FREQ_4_MIHZ, KDS),
    ("D419A2",),
)
KDS_D419_NEW = FamilyParser(
    "KDS D419",
    f"D419{MONTH1_ABC_YEAR1}{uppers(1)}",
    crystal(Crystal.FREQ_4_MIHZ, KDS),
    ("D419J3I",),
)
KDS_D838 = FamilyParser(
    "KDS D838",
    f"D838{MONTH1_ABC_YEAR1}{uppers(1)}",
    crystal(Crystal.FREQ_8_MIHZ, KDS),
    ("D838K0I",),
)
KDS_D209 = FamilyParser(
    "KDS D209",
    f"D209{MONTH1_ABC_YEAR1}",
    crystal(Crystal.FREQ_20_MIHZ, KDS),
    ("D209A8",),
)

"""
Date-only marks: mainboard stamps and coin cell batteries.

Mainboard stamps are free-form ink marks, so the grammars only pin down
the leading date digits and accept a short run of serial characters after
them.
"""

from __future__ import annotations

from chiplabel.grammar import YEAR1, YEAR1_MONTH2, group, year_month
from chiplabel.parsers.base import FamilyParser, date_only

DMG_STAMP = FamilyParser(
    "DMG stamp",
    f"{YEAR1_MONTH2}[- .]?[0-9-]{{2,4}}Y?",
    date_only,
    ("010 23", "903-22", "709.3901", "202-0007", "008.270-"),
)

# week first, then the year digit
CGB_STAMP = FamilyParser(
    "CGB stamp",
    f"{group('w2', '[0-9]{2}')}{YEAR1}[- .X]?[0-9]{{2,4}}Y?",
    date_only,
    ("218-2221",),
)

BATTERY = FamilyParser(
    "CRxxxx battery",
    str(year_month("2", "2", between="-")),
    date_only,
    ("01-05", "98-11"),
)

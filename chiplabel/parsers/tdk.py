"""TDK common mode chokes; these carry a lot letter but no date."""

from __future__ import annotations

from chiplabel.grammar import alphas, group, lines, uppers
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic

TDK = Manufacturer.TDK


TDK_ZJY_M4A = FamilyParser(
    "TDK ZJY-M4A",
    lines("TDK", group("kind", "ZJY-M4A"), uppers(1)),
    generic("{kind}", TDK),
    ("TDK ZJY-M4A N",),
)
TDK_ZJY_M4PA = FamilyParser(
    "TDK ZJY-M4PA",
    lines("TDK", group("kind", "ZJY-M4PA"), alphas(1)),
    generic("{kind}", TDK),
    ("TDK ZJY-M4PA n",),
)

"""Brilliance Semiconductor (BSI) SRAM families."""

from __future__ import annotations

from chiplabel.grammar import YEAR2_WEEK2, group, lines
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic

BSI = Manufacturer.BSI

# assembly letter + date, sometimes followed by a digit
_DATE = f"[A-Z]{YEAR2_WEEK2}[0-9]?"


def _bsi(name: str, kind: str, lot: str, examples: tuple[str, ...]) -> FamilyParser:
    return FamilyParser(
        name,
        lines("BSI", group("kind", kind), lot, _DATE, "TAIWAN"),
        generic("{kind}", BSI),
        examples,
    )


# package S (SOP) or T (TSOP), grade C/I, "-" or G/P for lead-free
BSI_BS62LV256 = _bsi(
    "BSI BS62LV256",
    "BS62LV256S[CI][-GP](?:55|70)",
    r"S282[78](?:CA|[A-Z])?[0-9]{5}(?:\.[A-Z0-9][A-Z]?)?",
    (
        "BSI BS62LV256SC-70 S2827V52155 A0106 TAIWAN",
        "BSI BS62LV256SCG70 S2828CA30125.A D05502 TAIWAN",
    ),
)
BSI_BS616LV2018 = _bsi(
    "BSI BS616LV2018",
    "BS616LV2018T[CI][-GP]70",
    r"S31686-2FY[0-9]{5}\.1",
    ("BSI BS616LV2018TC-70 S31686-2FY10121.1 L0230 TAIWAN",),
)
BSI_BS616LV2019 = _bsi(
    "BSI BS616LV2019",
    "BS616LV2019T[CI][-GP](?:55|70)",
    r"S31687FZ[0-9]{5}\.1",
    ("BSI BS616LV2019TC-70 S31687FZ26013.1 L0335 TAIWAN",),
)

"""
LSI Logic SRAM families.

These are Sharp LH51/LH52 SRAMs made under license; only the brand line
and the "D" prefix of the date code differ from the Sharp labels.
"""

from __future__ import annotations

from chiplabel.grammar import group, lines, year_week
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic

LSI_LOGIC = Manufacturer.LSI_LOGIC

_DATE = f"D{year_week('1', between=' ?')}"


def _lsi(chip: str, kind: str, tail: str, examples: tuple[str, ...]) -> FamilyParser:
    return FamilyParser(
        f"LSI Logic {chip}",
        lines(group("kind", kind), "LSI LOGIC", "JAPAN", f"{_DATE} {tail}"),
        generic("{kind}", LSI_LOGIC),
        examples,
    )


def _lh52(chip: str, kind: str, examples: tuple[str, ...]) -> FamilyParser:
    return _lsi(chip, kind, "[0-9][A-Z0-9] [A-Z]", examples)


LSI_LOGIC_LH5264N4T = _lh52("LH5264N4T", "LH5264N4T", ("LH5264N4T LSI LOGIC JAPAN D222 24 C",))
LSI_LOGIC_LH5264TN = _lh52("LH5264TN", "LH5264TN-TL", ("LH5264TN-TL LSI LOGIC JAPAN D220 53 C",))
LSI_LOGIC_LH52A64N = _lh52(
    "LH52A64N",
    "LH52A64N-TL",
    ("LH52A64N-TL LSI LOGIC JAPAN D404 0U C", "LH52A64N-TL LSI LOGIC JAPAN D4 06 05 C"),
)
LSI_LOGIC_LH52B256N = _lh52(
    "LH52B256N", "LH52B256NA-10TLL", ("LH52B256NA-10TLL LSI LOGIC JAPAN D344 03 B",),
)
LSI_LOGIC_LH5168N = _lsi(
    "LH5168N", "LH5168NFB-10TL", "[0-9] [A-Z]{2}",
    ("LH5168NFB-10TL LSI LOGIC JAPAN D242 7 BC",),
)

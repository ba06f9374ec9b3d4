"""Hudson Soft HuC mappers (made for Nintendo, marked with both names)."""

from __future__ import annotations

from chiplabel.grammar import YEAR2_WEEK2, lines, lit, uppers
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, mapper
from chiplabel.parts import MapperChip


def _huc(printed: str, chip: MapperChip, examples: tuple[str, ...]) -> FamilyParser:
    return FamilyParser(
        f"Hudson {chip.display_name}",
        lines(lit(printed), "© HUDSON", "Nintendo", f"{YEAR2_WEEK2} {uppers(1)}"),
        mapper(chip, Manufacturer.HUDSON),
        examples,
    )


HUDSON_HUC1 = _huc("HuC-1", MapperChip.HUC1, ("HuC-1 © HUDSON Nintendo 9752 A",))
HUDSON_HUC1A = _huc("HuC1A", MapperChip.HUC1A, ("HuC1A © HUDSON Nintendo 9845 A",))
HUDSON_HUC3 = _huc("HuC-3", MapperChip.HUC3, ("HuC-3 © HUDSON Nintendo 9943 A",))

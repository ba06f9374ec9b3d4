"""
Hynix and Magnachip label families.

Magnachip took over Hynix's mask ROM business, so the AC23V ROM labels of
both makers share one layout and only the maker line and lot code differ.
"""

from __future__ import annotations

from chiplabel.grammar import (
    AGB_ROM_CODE,
    YEAR2_WEEK2,
    digits,
    group,
    lines,
    lit,
    one_of,
    uppers,
)
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, game_mask_rom, generic
from chiplabel.parts import GameRomType

HYNIX = Manufacturer.HYNIX

# year2+week2 followed by a process letter
_DATE = f"{YEAR2_WEEK2}{uppers(1)}"


# ---------------------------------------------------------------------------
# SRAM
# ---------------------------------------------------------------------------

HYNIX_HY62LF16206 = FamilyParser(
    "Hynix HY62LF16206",
    lines(
        "Hynix KOREA",
        group("kind", "HY62LF16206[AB]?"),
        # power, package, speed, temperature
        f"{_DATE} {group('grade', 'LT12C')}",
    ),
    generic("{kind}-{grade}", HYNIX),
    ("Hynix KOREA HY62LF16206A 0223A LT12C",),
)
HYNIX_HY62WT08081 = FamilyParser(
    "Hynix HY62WT08081",
    lines(
        f"hynix {_DATE}",
        "HY62WT081" + group("rev", "[A-E]?") + group("grade", "[LD](?:50|70)[CEI]"),
        "KOREA",
    ),
    generic("HY62WT08081{rev}{grade}", HYNIX),
    ("hynix 0231A HY62WT081ED70C KOREA",),
)


# ---------------------------------------------------------------------------
# AGB mask ROMs
# ---------------------------------------------------------------------------

def _ac23v(
    maker: str,
    manufacturer: Manufacturer,
    chip: str,
    rom_type: GameRomType,
    lot: str,
    examples: tuple[str, ...],
) -> FamilyParser:
    return FamilyParser(
        f"{manufacturer.display_name} {chip}",
        lines(
            lit(maker),
            group("kind", lit(chip)),
            f"{group('rom_id', AGB_ROM_CODE)} {lit(rom_type.value)}",
            lot,
        ),
        game_mask_rom(rom_type, manufacturer, "{kind}"),
        examples,
    )


_HYNIX_LOT = f"{one_of('NL', 'ZBR')}{digits(4)}"

HYNIX_AC23V32101 = _ac23v(
    "HYNIX", HYNIX, "AC23V32101", GameRomType.H2, _HYNIX_LOT,
    ("HYNIX AC23V32101 AGB-BAUE-0 H2 ZBR4079",),
)
HYNIX_AC23V64101 = _ac23v(
    "HYNIX", HYNIX, "AC23V64101", GameRomType.I2, _HYNIX_LOT,
    ("HYNIX AC23V64101 AGB-AZLP-0 I2 ZBR1467",),
)
HYNIX_AC23V128111 = _ac23v(
    "HYNIX", HYNIX, "AC23V128111", GameRomType.J2, _HYNIX_LOT,
    ("HYNIX AC23V128111 AGB-AY7E-0 J2 NL0013",),
)

_MAGNACHIP = Manufacturer.MAGNACHIP
_MAGNACHIP_LOT = lines(f"{one_of('GB', 'SP')}{digits(4)}", "PS")

MAGNACHIP_AC23V32101 = _ac23v(
    "MAGNACHIP", _MAGNACHIP, "AC23V32101", GameRomType.H2, _MAGNACHIP_LOT,
    ("MAGNACHIP AC23V32101 AGB-BCRP-0 H2 GB1191 PS",),
)
MAGNACHIP_AC23V64101 = _ac23v(
    "MAGNACHIP", _MAGNACHIP, "AC23V64101", GameRomType.I2, _MAGNACHIP_LOT,
    ("MAGNACHIP AC23V64101 AGB-BQQX-0 I2 GB0249 PS",),
)
MAGNACHIP_AC23V128111 = _ac23v(
    "MAGNACHIP", _MAGNACHIP, "AC23V128111", GameRomType.J2, _MAGNACHIP_LOT,
    ("MAGNACHIP AC23V128111 AGB-BPRE-1 J2 SP0730 PS",),
)

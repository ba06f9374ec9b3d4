"""
Samsung (SEC) mask ROM families.

Samsung ROM labels carry no readable date code, only a lot number.
"""

from __future__ import annotations

from chiplabel.grammar import GB_ROM_CODE, alnum_uppers, digits, group, lit, uppers
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, game_mask_rom
from chiplabel.parts import GameRomType

SAMSUNG = Manufacturer.SAMSUNG

# package letter in the part number
SOP = "G"
TSOP = "T"


def _km23c(chip: str, package: str, rom_type: GameRomType, lot: str) -> str:
    return (
        f"SEC {group('kind', 'KM23C' + chip + '[ABCD]?' + package)} "
        f"{group('rom_id', GB_ROM_CODE)} {lit(rom_type.value)} {lot}"
    )


def _old_lot(prefix: str) -> str:
    return f"{prefix}{digits(1)}{alnum_uppers(2)}{uppers(1)}"


def _new_lot(prefix: str) -> str:
    return f"{prefix}{digits(3)}{uppers(2)}"


SAMSUNG_KM23C4000 = FamilyParser(
    "Samsung KM23C4000",
    _km23c("4000", SOP, GameRomType.E1, _old_lot("KF5")),
    game_mask_rom(GameRomType.E1, SAMSUNG, "{kind}"),
    ("SEC KM23C4000DG DMG-ATEA-0 E1 KF5304U",),
)
SAMSUNG_KM23C8000 = FamilyParser(
    "Samsung KM23C8000",
    _km23c("8000", SOP, GameRomType.F1, _old_lot("KFX")),
    game_mask_rom(GameRomType.F1, SAMSUNG, "{kind}"),
    ("SEC KM23C8000DG DMG-APSJ-0 F1 KFX3ALY", "SEC KM23C8000DG DMG-AAUJ-1 F1 KFX331U"),
)
SAMSUNG_KM23C16120 = FamilyParser(
    "Samsung KM23C16120",
    [
        _km23c("16120", TSOP, GameRomType.G2, _old_lot("KF6")),
        _km23c("16120", TSOP, GameRomType.G2, _new_lot("K3N5C")),
    ],
    game_mask_rom(GameRomType.G2, SAMSUNG, "{kind}"),
    (
        "SEC KM23C16120T DMG-ADQJ-0 G2 KF6402G",
        "SEC KM23C16120DT DMG-AWLP-0 G2 KF6409G",
        "SEC KM23C16120DT CGB-BHMJ-0 G2 K3N5C317GD",
    ),
)

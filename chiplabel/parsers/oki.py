"""
OKI mask ROM families.

The printed chip designation drops OKI's "MS"/"M" product prefix; the full
chip type is rebuilt from the family and the whole printed designation is
kept as OKI's mask code.
"""

from __future__ import annotations

from chiplabel.grammar import (
    AGB_ROM_CODE,
    DMG_ROM_CODE,
    GB_ROM_CODE,
    YEAR1_WEEK2,
    alnum_uppers,
    digits,
    group,
    lit,
)
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, game_mask_rom, mask_rom
from chiplabel.parts import GameRomType, MaskCodeVendor

OKI = Manufacturer.OKI


OKI_MASK_ROM_QFP_44_512_KIBIT = FamilyParser(
    "OKI mask ROM",
    f"{group('rom_id', DMG_ROM_CODE)} OKI JAPAN B0 {digits(2)} {alnum_uppers(2)} {digits(2)}",
    game_mask_rom(GameRomType.B0, OKI),
    ("DMG-QXA-0 OKI JAPAN B0 03 X0 02",),
)


def _gb(prefix: str, chip: str, rom_type: GameRomType, examples: tuple[str, ...]) -> FamilyParser:
    return FamilyParser(
        f"OKI {prefix}{chip[:-1]}",
        f"{group('rom_id', GB_ROM_CODE)} {lit(rom_type.value)} "
        f"{group('mask', lit(chip) + '-' + str(alnum_uppers(2)))} "
        f"{YEAR1_WEEK2}{alnum_uppers(1)}{digits(2)}{alnum_uppers(1)}",
        game_mask_rom(rom_type, OKI, prefix + chip, (MaskCodeVendor.OKI, "{mask}")),
        examples,
    )


def _gba(chip: str, rom_type: GameRomType, examples: tuple[str, ...]) -> FamilyParser:
    return FamilyParser(
        f"OKI M{chip[:-1]}",
        f"{group('rom_id', AGB_ROM_CODE)} {lit(rom_type.value)} "
        f"{group('mask', lit(chip) + '-0' + str(alnum_uppers(2)))} "
        f"{YEAR1_WEEK2}{alnum_uppers(4, 5)}",
        game_mask_rom(rom_type, OKI, "M" + chip, (MaskCodeVendor.OKI, "{mask}")),
        examples,
    )


OKI_MSM534011 = _gb("MS", "M534011E", GameRomType.E1, ("CGB-ADME-0 E1 M534011E-09 841232A",))
OKI_MSM538011 = _gb(
    "MS", "M538011E", GameRomType.F1,
    ("DMG-AM6J-0 F1 M538011E-36 9085401", "CGB-BJWP-0 F1 M538011E-4D 0475408"),
)
OKI_MR531614 = _gb("M", "R531614G", GameRomType.G2, ("CGB-BPTE-0 G2 R531614G-44 044232E",))

OKI_MR26V3210 = _gba("R26V3210F", GameRomType.H2, ("AGB-TCHK-1 H2 R26V3210F-087 244A239",))
OKI_MR26V3211 = _gba("R26V3211F", GameRomType.H2, ("AGB-BR3P-0 H2 R26V3211F-0T6 442ABAJJ",))
OKI_MR26V6413 = _gba("R26V6413G", GameRomType.I2, ("AGB-A7HJ-0 I2 R26V6413G-0A9 242A273",))
OKI_MR26V6414 = _gba("R26V6414G", GameRomType.I2, ("AGB-AXVJ-0 I2 R26V6414G-0A7 243A262",))
OKI_MR26V6415 = _gba("R26V6415G", GameRomType.I2, ("AGB-BR4J-0 I2 R26V6415G-02L 427ABA3",))
OKI_MR27V810 = _gba("R27V810F", GameRomType.F2, ("AGB-FADP-0 F2 R27V810F-059 4475BB4J",))
OKI_MR27V6416 = _gba("R27V6416M", GameRomType.I2, ("AGB-B2LP-0 I2 R27V6416M-0TB 6445BJ9J",))
OKI_MR27V12813 = _gba("R27V12813M", GameRomType.J2, ("AGB-AXPS-1 J2 R27V12813M-0C7 6145BARJ",))


# SGB2 system ROM, an MSM534011E with a fixed mask
OKI_SGB2_ROM = FamilyParser(
    "OKI SGB2 ROM",
    f"{group('rom_id', 'SYS-SGB2-10')} © 1998 Nintendo {group('mask', 'M534011E-05')} "
    f"{YEAR1_WEEK2}{alnum_uppers(1)}{digits(2)}{alnum_uppers(1)}",
    mask_rom("MSM534011E", OKI, (MaskCodeVendor.OKI, "{mask}")),
    ("SYS-SGB2-10 © 1998 Nintendo M534011E-05 8012354",),
)

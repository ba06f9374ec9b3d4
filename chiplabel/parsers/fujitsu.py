"""Fujitsu label families: FRAM, pseudo-SRAM and mask ROMs."""

from __future__ import annotations

from chiplabel.grammar import (
    GB_ROM_CODE,
    YEAR2_WEEK2,
    alnum_uppers,
    digits,
    group,
    lit,
    uppers,
)
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, game_mask_rom, generic, mask_rom
from chiplabel.parts import GameRomType

FUJITSU = Manufacturer.FUJITSU


FUJITSU_MB85R256 = FamilyParser(
    "Fujitsu MB85R256",
    f"JAPAN {group('kind', 'MB85R256[AS]?')} {YEAR2_WEEK2} {uppers(1)}{digits(2)}(?: E1)?",
    generic("{kind}", FUJITSU),
    ("JAPAN MB85R256A 0412 M88", "JAPAN MB85R256S 0511 M22 E1"),
)
FUJITSU_MB82D12160 = FamilyParser(
    "Fujitsu MB82D12160",
    f"JAPAN {group('kind', lit('82D12160-10FN'))} {YEAR2_WEEK2} {uppers(1)}{digits(2)}{uppers(1)}",
    generic("MB{kind}", FUJITSU),
    ("JAPAN 82D12160-10FN 0238 M88N",),
)


def _mask_rom(rom_type: GameRomType, examples: tuple[str, ...]) -> FamilyParser:
    return FamilyParser(
        "Fujitsu mask ROM",
        f"JAPAN {group('rom_id', GB_ROM_CODE)} {lit(rom_type.value)} "
        f"{digits(1)}{uppers(1)}{alnum_uppers(1)} AK {YEAR2_WEEK2} {uppers(1)}{digits(2)}",
        game_mask_rom(rom_type, FUJITSU),
        examples,
    )


FUJITSU_MASK_ROM_SOP_32_2_MIBIT = _mask_rom(GameRomType.D1, ("JAPAN DMG-GKX-0 D1 1P0 AK 9328 R09",))
FUJITSU_MASK_ROM_SOP_32_4_MIBIT = _mask_rom(GameRomType.E1, ("JAPAN DMG-WJA-0 E1 3NH AK 9401 R17",))

FUJITSU_SGB_ROM = FamilyParser(
    "Fujitsu SGB ROM",
    f"{group('rom_id', 'SYS-SGB-2')} © 1994 Nintendo {YEAR2_WEEK2} {uppers(1)}{digits(2)}",
    mask_rom(None, FUJITSU),
    ("SYS-SGB-2 © 1994 Nintendo 9429 R77",),
)

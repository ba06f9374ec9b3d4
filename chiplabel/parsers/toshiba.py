"""Toshiba label families: RTC, logic, mask ROMs, SRAM and TAMA chips."""

from __future__ import annotations

import re

from chiplabel.grammar import (
    GB_ROM_CODE,
    YEAR1,
    YEAR2_WEEK2,
    date_from_groups,
    digits,
    group,
    lines,
    lit,
    uppers,
    year_week,
)
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, game_mask_rom, generic, mapper, mask_rom
from chiplabel.parts import GameRomType, GenericPart, MapperChip

TOSHIBA = Manufacturer.TOSHIBA

# package letter in the part number
SOP_20 = "M"
SOP_32 = "F"


TOSHIBA_TC8521AM = FamilyParser(
    "Toshiba TC8521AM",
    lines(f"T {YEAR2_WEEK2}HB", group("kind", "8521A" + SOP_20)),
    generic("TC{kind}", TOSHIBA),
    ("T 9722HB 8521AM",),
)


def _tc7w139(m: re.Match) -> GenericPart:
    # the SSOP (FU) variant drops the package suffix from the marking
    kind = "TC7W139F" if m.group("kind").endswith("F") else "TC7W139FU"
    return GenericPart(kind, TOSHIBA, date_from_groups(m.groupdict()))


TOSHIBA_TC7W139F = FamilyParser(
    "Toshiba TC7W139F",
    lines(group("kind", "7W139F?"), f"{YEAR1}{uppers(1)}"),
    _tc7w139,
    ("7W139 0J",),
)
TOSHIBA_TC74LVX04FT = FamilyParser(
    "Toshiba TC74LVX04FT",
    lines("LVX", "04", year_week("1", between=" ")),
    generic("TC74LVX04FT", TOSHIBA),
    ("LVX 04 8 45",),
)


# ---------------------------------------------------------------------------
# Mask ROMs
# ---------------------------------------------------------------------------

def _tc53(name: str, chips: str, rom_type: GameRomType, examples: tuple[str, ...]) -> FamilyParser:
    return FamilyParser(
        name,
        lines(
            f"TOSHIBA {YEAR2_WEEK2}EAI",
            group("kind", chips + SOP_32),
            f"{group('rom_id', GB_ROM_CODE)} {lit(rom_type.value)}",
            f"{uppers(1)}{digits(3)} JAPAN",
        ),
        game_mask_rom(rom_type, TOSHIBA, "{kind}"),
        examples,
    )


TOSHIBA_TC531001 = _tc53(
    "Toshiba TC531001", "TC531001C", GameRomType.C1,
    ("TOSHIBA 9144EAI TC531001CF DMG-FAE-0 C1 J619 JAPAN",),
)
TOSHIBA_TC532000 = _tc53(
    "Toshiba TC532000", "TC532000B", GameRomType.D1,
    ("TOSHIBA 9114EAI TC532000BF DMG-GWJ-0 D1 J542 JAPAN",),
)
TOSHIBA_TC534000 = _tc53(
    "Toshiba TC534000", "TC534000[BD]", GameRomType.E1,
    (
        "TOSHIBA 9301EAI TC534000BF DMG-MQE-2 E1 N516 JAPAN",
        "TOSHIBA 9614EAI TC534000DF DMG-WJA-0 E1 N750 JAPAN",
    ),
)

TOSHIBA_SGB_ROM = FamilyParser(
    "Toshiba SGB ROM",
    lines(
        group("rom_id", "SYS-SGB-2"),
        "© 1994 Nintendo",
        group("kind", "TC532000B" + SOP_32) + f"-{uppers(1)}{digits(3)}",
        f"JAPAN {YEAR2_WEEK2}EAI",
    ),
    mask_rom("{kind}", TOSHIBA),
    ("SYS-SGB-2 © 1994 Nintendo TC532000BF-N807 JAPAN 9431EAI",),
)


# ---------------------------------------------------------------------------
# SRAM
# ---------------------------------------------------------------------------

TOSHIBA_TC55V200 = FamilyParser(
    "Toshiba TC55V200",
    lines(
        f"{uppers(1)}{digits(5)}",
        f"JAPAN {YEAR2_WEEK2} MAD",
        "TC55V200",
        "FT-" + group("speed", "70|85|10"),
    ),
    generic("TC55V200FT-{speed}", TOSHIBA),
    ("K13529 JAPAN 0106 MAD TC55V200 FT-70",),
)


# ---------------------------------------------------------------------------
# TAMA chips (Tamagotchi cartridges)
# ---------------------------------------------------------------------------

TOSHIBA_TAMA5 = FamilyParser(
    "Toshiba TAMA5",
    lines("TAMA5", f"{YEAR2_WEEK2} EA{uppers(1)}1"),
    mapper(MapperChip.TAMA5, TOSHIBA),
    ("TAMA5 9726 EAD1",),
)
TOSHIBA_TAMA6 = FamilyParser(
    "Toshiba TAMA6",
    lines("TAMA6 JAPAN", f"47C243M FV61 {YEAR2_WEEK2}H"),
    generic("TAMA6", TOSHIBA),
    ("TAMA6 JAPAN 47C243M FV61 9751H",),
)

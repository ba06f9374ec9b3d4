"""
Label families whose manufacturer is not known.

Most of these carry no maker logo at all; a few are Nintendo-branded parts
sourced from a maker that cannot be identified from the marking.
"""

from __future__ import annotations

import re

from chiplabel.grammar import (
    YEAR1,
    YEAR1_MONTH2,
    YEAR1_WEEK2,
    YEAR2_WEEK2,
    alnum_uppers,
    date_from_groups,
    digits,
    group,
    lines,
    uppers,
)
from chiplabel.parsers.base import FamilyParser, crystal, date_only, generic, mapper, mask_rom
from chiplabel.parts import Crystal, GameMaskRom, GameRomType, MapperChip

UNKNOWN_SGB_ROM = FamilyParser(
    "Unknown SGB ROM",
    [
        lines(
            group("rom_id", "SYS-SGB-2"),
            "JAPAN",
            "© 1994 Nintendo",
            f"{alnum_uppers(5)} {alnum_uppers(3)} {uppers(3)}",
        ),
        lines(group("rom_id", "SYS-SGB-2"), "© 1994 Nintendo", f"{YEAR2_WEEK2} {uppers(1)}"),
    ],
    mask_rom(None, None),
    ("SYS-SGB-2 JAPAN © 1994 Nintendo 427A2 A04 NND", "SYS-SGB-2 © 1994 Nintendo 9423 E"),
)

# ---------------------------------------------------------------------------
# EEPROMs and small ICs
# ---------------------------------------------------------------------------

# LCS5 is the same part as the LC56 below
UNKNOWN_LCS5_EEPROM = FamilyParser(
    "Unknown LCS5 EEPROM",
    f"LCS5 {YEAR1_WEEK2}(?: {digits(2)})?",
    generic("LC56", None),
    ("LCS5 040", "LCS5 435 09"),
)
UNKNOWN_LC56_EEPROM = FamilyParser(
    "Unknown LC56 EEPROM",
    lines("LC56", f"{uppers(1)}{digits(3)}", digits(2)),
    generic("LC56", None),
    ("LC56 W617 08",),
)
UNKNOWN_AGS_CHARGE_CONTROLLER = FamilyParser(
    "Unknown AGS charge controller",
    lines("2253B", f"{digits(1)}{alnum_uppers(1)}{digits(2)}"),
    generic("2253B", None),
    ("2253B 3129",),
)
UNKNOWN_OXY_U4 = FamilyParser(
    "Unknown OXY U4",
    lines("AKV", YEAR1_WEEK2),
    generic("AKV", None),
    ("AKV 522",),
)
UNKNOWN_OXY_U5 = FamilyParser(
    "Unknown OXY U5",
    lines("CP6465", f"B 0{digits(1)}", f"KOR{YEAR2_WEEK2}", digits(6)),
    generic("CP6465", None),
    ("CP6465 B 02 KOR0531 635963",),
)

# ---------------------------------------------------------------------------
# Crystals
# ---------------------------------------------------------------------------

UNKNOWN_CRYSTAL_32_KIHZ = FamilyParser(
    "Unknown crystal, 32 KiHz",
    f"32K{YEAR1}{alnum_uppers(1)}",
    crystal(Crystal.FREQ_32_KIHZ, None),
    ("32K09", "32K0Z"),
)
UNKNOWN_DMG_CRYSTAL_4_MIHZ = FamilyParser(
    "Unknown DMG crystal, 4 MiHz",
    f"4\\.19C{YEAR1}{alnum_uppers(1)}",
    crystal(Crystal.FREQ_4_MIHZ, None),
    ("4.19C59",),
)
UNKNOWN_MGB_CRYSTAL_4_MIHZ = FamilyParser(
    "Unknown MGB crystal, 4 MiHz",
    [lines(r"4\.1943", f"RVR {YEAR1_WEEK2}"), lines(r"4\.1943", YEAR2_WEEK2)],
    crystal(Crystal.FREQ_4_MIHZ, None),
    ("4.1943 RVR 841", "4.1943 9752"),
)

# ---------------------------------------------------------------------------
# Mappers
# ---------------------------------------------------------------------------

UNKNOWN_MBC1B = FamilyParser(
    "Unknown MBC1B",
    lines("Nintendo", "DMG MBC1B", f"{YEAR2_WEEK2}AJ"),
    mapper(MapperChip.MBC1B, None),
    ("Nintendo DMG MBC1B 8940AJ",),
)
UNKNOWN_MMM01 = FamilyParser(
    "Unknown MMM01",
    lines("MMM01", f"{YEAR1_WEEK2} {digits(3)}"),
    mapper(MapperChip.MMM01, None),
    ("MMM01 645 113",),
)


def _tama7(m: re.Match) -> GameMaskRom:
    # TAMA7 is the ROM of a single game, so the ROM id is implied
    return GameMaskRom(
        rom_id="DMG-AOMJ-0",
        rom_type=GameRomType.E1,
        date_code=date_from_groups(m.groupdict()),
    )


UNKNOWN_TAMA7 = FamilyParser(
    "Unknown TAMA7",
    lines("TAMA7", f"{uppers(1)}{YEAR2_WEEK2}", f"{digits(5)}{uppers(1)}", "TAIWAN"),
    _tama7,
    ("TAMA7 B9748 43913A TAIWAN",),
)

# ---------------------------------------------------------------------------
# Screens
# ---------------------------------------------------------------------------

UNKNOWN_LCD_SCREEN = FamilyParser(
    "Unknown LCD screen",
    f"T61102S T{YEAR1_MONTH2}{digits(2)}",
    date_only,
    ("T61102S T61104",),
)

"""
NEC label families: μPD23C mask ROMs (including second-source licensees),
pseudo-SRAM, console ICs and mappers.

Most NEC labels end in a year2+week2 date code fused with a lot code, e.g.
"9010E9702" = 1990 week 10, lot E9702.
"""

from __future__ import annotations

from chiplabel.grammar import (
    GB_ROM_CODE,
    YEAR2_WEEK2,
    alnum_uppers,
    digits,
    group,
    lines,
    lit,
    one_of,
    uppers,
)
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, game_mask_rom, generic, mapper, mask_rom
from chiplabel.parts import GameRomType, MapperChip, MaskCodeVendor

NEC = Manufacturer.NEC

_DATE_AND_LOT = f"{YEAR2_WEEK2}{uppers(1)}{alnum_uppers(1)}{digits(3)}"

# package code in the part number
SOP_32 = "GW"
TSOP_II_44 = "G5"


# ---------------------------------------------------------------------------
# Pseudo-SRAM
# ---------------------------------------------------------------------------

# package GY, voltage, speed 85, temperature X
NEC_UPD442012A_X = FamilyParser(
    "NEC μPD442012A-X",
    f"NEC JAPAN {group('kind', 'D442012AGY-B[BC]85X-MJH')} {_DATE_AND_LOT}",
    generic("{kind}", NEC),
    ("NEC JAPAN D442012AGY-BB85X-MJH 0037K7027", "NEC JAPAN D442012AGY-BC85X-MJH 0330K7043"),
)
NEC_UPD442012L_X = FamilyParser(
    "NEC μPD442012L-X",
    f"NEC JAPAN {group('kind', 'D442012LGY-[BC]85X-MJH')} {_DATE_AND_LOT}",
    generic("{kind}", NEC),
    ("NEC JAPAN D442012LGY-B85X-MJH 0138K7037",),
)


# ---------------------------------------------------------------------------
# Mask ROMs
# ---------------------------------------------------------------------------

def _upd23c(prefix: str, chips: tuple[str, ...], package: str, rom_type: GameRomType | None) -> str:
    """Pattern for a μPD23C ROM whose part number is printed as *prefix* + chip."""
    rom_type_part = f" {lit(rom_type.value)}" if rom_type is not None else ""
    mask = lit(prefix) + group("chip", one_of(*chips)) + lit(package) + f"-{uppers(1)}{digits(2)}"
    return (
        f"{group('rom_id', GB_ROM_CODE)}{rom_type_part} "
        f"{group('mask', mask)} {_DATE_AND_LOT}"
    )


def _nec_rom(
    name: str,
    chips: tuple[str, ...],
    package: str,
    rom_type: GameRomType,
    examples: tuple[str, ...],
    old_chips: tuple[str, ...] = (),
) -> FamilyParser:
    patterns = [_upd23c("N-", chips, package, rom_type)]
    if old_chips:
        # early labels spell out the part number after the maker line
        patterns.insert(0, "NEC JAPAN " + _upd23c("UPD23C", old_chips, package, rom_type))
    return FamilyParser(
        name,
        patterns,
        game_mask_rom(rom_type, NEC, "μPD23C{chip}" + package, (MaskCodeVendor.NEC, "{mask}")),
        examples,
    )


NEC_UPD23C1001E = _nec_rom(
    "NEC μPD23C1001E", ("1001EA", "1001EU", "1001E"), SOP_32, GameRomType.C1,
    (
        "NEC JAPAN DMG-SAJ-0 C1 UPD23C1001EGW-J01 9010E9702",
        "DMG-HQE-0 C1 N-1001EGW-J23 9110E9001",
    ),
    old_chips=("1001E",),
)
NEC_UPD23C2001E = _nec_rom(
    "NEC μPD23C2001E", ("2001EU", "2001E"), SOP_32, GameRomType.D1,
    ("DMG-AVLP-0 D1 N-2001EUGW-J38 9840E7004",),
)
NEC_UPD23C4001E = _nec_rom(
    "NEC μPD23C4001E", ("4001EA", "4001EJ", "4001EU"), SOP_32, GameRomType.E1,
    ("DMG-AYWJ-1 E1 N-4001EJGW-J82 9804E7012", "DMG-ZLE-0 E1 N-4001EAGW-J14 9325X9700"),
)
NEC_UPD23C8001E = _nec_rom(
    "NEC μPD23C8001E", ("8001EJ",), SOP_32, GameRomType.F1,
    ("DMG-AGQE-0 F1 N-8001EJGW-K14 0033K7036",),
)
NEC_UPD23C16019W = _nec_rom(
    "NEC μPD23C16019W", ("16019W",), TSOP_II_44, GameRomType.G2,
    ("DMG-VPHP-0 G2 N-16019WG5-M51 0029K7039",),
)


def _licensed(
    name: str,
    maker: str,
    manufacturer: Manufacturer,
    chips: tuple[str, ...],
    rom_type: GameRomType,
    examples: tuple[str, ...],
    has_rom_type: bool = True,
) -> FamilyParser:
    """μPD23C ROMs second-sourced by other makers under NEC's license."""
    return FamilyParser(
        name,
        f"{lit(maker)} " + _upd23c("23C", chips, SOP_32, rom_type if has_rom_type else None),
        game_mask_rom(rom_type, manufacturer, "μPD23C{chip}" + SOP_32, (MaskCodeVendor.NEC, "{mask}")),
        examples,
    )


AT_T_UPD23C1001E = _licensed(
    "AT&T μPD23C1001E", "Ⓜ AT&T JAPAN", Manufacturer.AT_T, ("1001EA",), GameRomType.C1,
    ("Ⓜ AT&T JAPAN DMG-Q6E-0 C1 23C1001EAGW-K37 9351E9005",),
)
SMSC_UPD23C1001E = _licensed(
    "SMSC μPD23C1001E", "STANDARD MICRO", Manufacturer.SMSC, ("1001EA", "1001E"), GameRomType.C1,
    ("STANDARD MICRO DMG-BIA-0 C1 23C1001EGW-J61 9140E9017",),
)
MANI_UPD23C4001E = _licensed(
    "MANI μPD23C4001E", "MANI", Manufacturer.MANI, ("4001EA",), GameRomType.E1,
    ("MANI DMG-MQE-2 23C4001EAGW-J22 9447X9200",),
    has_rom_type=False,
)

NEC_SGB_ROM = FamilyParser(
    "NEC SGB ROM",
    f"© 1994 Nintendo {group('rom_id', 'SYS-SGB-NT')} N-2001E{SOP_32}-{group('mask', 'J56')} {_DATE_AND_LOT}",
    mask_rom("μPD23C2001E" + SOP_32, NEC, (MaskCodeVendor.NEC, "{mask}")),
    ("© 1994 Nintendo SYS-SGB-NT N-2001EGW-J56 9414X9013",),
)


# ---------------------------------------------------------------------------
# Console ICs
# ---------------------------------------------------------------------------

NEC_GBS_DOL = FamilyParser(
    "NEC GBS-DOL",
    f"Nintendo {group('kind', 'GBS-DOL')} 011 {_DATE_AND_LOT}",
    generic("{kind}", NEC),
    ("Nintendo GBS-DOL 011 0623L3001",),
)
NEC_ICD2_N = FamilyParser(
    "NEC ICD2-N",
    f"Nintendo {group('kind', 'ICD2-N')} {_DATE_AND_LOT} D93115",
    generic("{kind}", NEC),
    ("Nintendo ICD2-N 9415KX226 D93115",),
)
NEC_ICD2_R = FamilyParser(
    "NEC ICD2-R",
    f"Nintendo {group('kind', 'ICD2-R')} {_DATE_AND_LOT} D93128",
    generic("{kind}", NEC),
    ("Nintendo ICD2-R 9802EX006 D93128",),
)


# ---------------------------------------------------------------------------
# Mappers
# ---------------------------------------------------------------------------

NEC_MBC1B = FamilyParser(
    "NEC MBC1B",
    lines("Nintendo", "DMG MBC1B", f"N {YEAR2_WEEK2}BA{digits(3)}"),
    mapper(MapperChip.MBC1B, NEC),
    ("Nintendo DMG MBC1B N 9019BA012",),
)
NEC_MBC2A = FamilyParser(
    "NEC MBC2A",
    lines("Nintendo", "DMG MBC2A", f"N {YEAR2_WEEK2}CA{digits(3)}"),
    mapper(MapperChip.MBC2A, NEC),
    ("Nintendo DMG MBC2A N 9011CA005",),
)
# NEC-style label, but the maker is not printed
NEC_MBC6 = FamilyParser(
    "NEC-like MBC6",
    lines("Nintendo", "MBC6", f"{YEAR2_WEEK2}XP0{digits(2)}"),
    mapper(MapperChip.MBC6, None),
    ("Nintendo MBC6 0103XP014",),
)

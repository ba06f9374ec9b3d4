"""
Macronix label families: flash memory and mask ROMs.

The first token of a Macronix label packs an assembly vendor letter, a
year2+week2 date code and (on newer parts) two digits of the product body,
e.g. "M042021-M" = vendor M, 2004 week 20, body 21.
"""

from __future__ import annotations

from chiplabel.grammar import (
    AGB_ROM_CODE,
    DMG_ROM_CODE,
    GB_ROM_CODE,
    YEAR2_WEEK2,
    alnum_uppers,
    digits,
    group,
    lit,
    uppers,
)
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, game_mask_rom, generic
from chiplabel.parts import GameRomType

MACRONIX = Manufacturer.MACRONIX

# a = ChipMOS, B = OSE, J = ASEJ, K = ASEKS, L = LINGSEN, S = SPIL, T = STS, X = ASECL
_ASSEMBLY_VENDOR = "[aBCEJKLMNSTX]"

_LOT_OLD = str(digits(5))
_LOT_NEW = (
    f"{digits(1)}{alnum_uppers(1)}{digits(3)}{alnum_uppers(1)}"
    f"(?:{alnum_uppers(2)})?(?:{alnum_uppers(1)}{digits(1)})?"
)


def _header(body: str) -> str:
    return f"{_ASSEMBLY_VENDOR}{YEAR2_WEEK2}{lit(body)}"


# ---------------------------------------------------------------------------
# Flash
# ---------------------------------------------------------------------------

MACRONIX_MX29F008 = FamilyParser(
    "Macronix MX29F008",
    f"{_header('12')} {group('kind', '29F008TC-14')} {_LOT_OLD} TAIWAN",
    generic("MX{kind}", MACRONIX),
    ("E991012 29F008TC-14 21534 TAIWAN",),
)
MACRONIX_MX29L010 = FamilyParser(
    "Macronix MX29L010",
    f"{_header('57')}G? {group('kind', 'MX29L010TC-15(?:A1)?')} {_LOT_NEW}",
    generic("{kind}", MACRONIX),
    (
        "B063857G MX29L010TC-15A1 1H4751",
        "E032457 MX29L010TC-15A1 1E8980",
        "E023057 MX29L010TC-15 1E0290",
        "E040257 MX29L010TC-15A1 1F468900A0",
    ),
)


# ---------------------------------------------------------------------------
# Mask ROMs
# ---------------------------------------------------------------------------

def _mx23(
    rom_code: str,
    chip: str,
    body: str,
    rom_type: GameRomType,
    extra: str = "",
) -> str:
    return (
        f"{_header(body)}-MG? {group('kind', lit(chip))} "
        f"{group('rom_id', rom_code)}{extra} {lit(rom_type.value)} {_LOT_NEW}"
    )


def _mx23_old(chip: str, rom_type: GameRomType) -> str:
    # no product body, five-digit lot
    return (
        f"{_ASSEMBLY_VENDOR}{YEAR2_WEEK2}-M {group('kind', lit(chip))} "
        f"{group('rom_id', DMG_ROM_CODE)} {lit(rom_type.value)} {_LOT_OLD}{uppers(1)}"
    )


def _family(
    name: str,
    rom_type: GameRomType,
    patterns: list[str],
    examples: tuple[str, ...],
) -> FamilyParser:
    return FamilyParser(name, patterns, game_mask_rom(rom_type, MACRONIX, "{kind}"), examples)


def _agb(name: str, rom_type: GameRomType, variants: list[tuple[str, str]], examples: tuple[str, ...]) -> FamilyParser:
    return _family(
        name,
        rom_type,
        [_mx23(AGB_ROM_CODE, chip, body, rom_type) for chip, body in variants],
        examples,
    )


def _gb(name: str, rom_type: GameRomType, variants: list[tuple[str, str]], examples: tuple[str, ...]) -> FamilyParser:
    # some labels print a two-digit revision after the ROM code
    return _family(
        name,
        rom_type,
        [_mx23(GB_ROM_CODE, chip, body, rom_type, f"(?: {digits(2)})?") for chip, body in variants],
        examples,
    )


MACRONIX_MX23L8006 = _agb(
    "Macronix MX23L8006", GameRomType.F2, [("MX23L8006-12B", "21")],
    ("M042021-M MX23L8006-12B AGB-FBMP-0 F2 2K151900",),
)
MACRONIX_MX23L3206 = _agb(
    "Macronix MX23L3206", GameRomType.H2, [("MX23L3206-12B", "21")],
    ("M043821-M MX23L3206-12B AGB-BP9E-0 H2 2K194300", "S064421-MG MX23L3206-12B AGB-BG7E-0 H2 2T341304"),
)
MACRONIX_MX23L3406 = _agb(
    "Macronix MX23L3406", GameRomType.I2, [("MX23L3406-12C", "46")],
    ("S035046-M MX23L3406-12C AGB-BBRX-0 I2 2I904402",),
)
MACRONIX_MX23L6406 = _agb(
    "Macronix MX23L6406", GameRomType.I2,
    [("MX23L6406-12B", "07"), ("MX23L6406-12B1", "07"), ("MX23L6406-12C", "46")],
    ("M022807-M MX23L6406-12B1 AGB-AGSF-0 I2 2E825103", "S051746-MG MX23L6406-12C AGB-BRKP-0 I2 2L261801"),
)
MACRONIX_MX23L6407 = _agb(
    "Macronix MX23L6407", GameRomType.I2,
    [("MX23L6407-12C", "58"), ("MX23L6407-12C1", "57")],
    ("S024358-M MX23L6407-12C AGB-AXPJ-0 I2 2G447800", "M053257-MG MX23L6407-12C1 AGB-KYGP-0 I2 2M219701A1"),
)
MACRONIX_MX23L12806 = _agb(
    "Macronix MX23L12806", GameRomType.J2, [("MX23L12806-12C", "38")],
    ("E033938-M MX23L12806-12C AGB-BPPP-0 J2 2F478700", "S052638-MG MX23L12806-12C AGB-BPRS-0 J2 2M396503A1"),
)
MACRONIX_MX23L12807 = _agb(
    "Macronix MX23L12807", GameRomType.J2, [("MX23L12807-12C", "58")],
    ("E055058-MG MX23L12807-12C AGB-BPES-0 J2 2N422000A1", "N032358-M MX23L12807-12C AGB-AXVS-0 J2 2H552600"),
)
MACRONIX_MX23L25607 = _agb(
    "Macronix MX23L25607", GameRomType.K2,
    [("MX23L25607-12D1", "53"), ("MX23L25607-12D2", "53")],
    ("E053953-MG MX23L25607-12D1 AGB-BE8P-0 K2 2N007800", "M064053-MG MX23L25607-12D2 AGB-BH3E-0 K2 2T151000"),
)

MACRONIX_MX23C4002 = _family(
    "Macronix MX23C4002",
    GameRomType.E1,
    [
        _mx23_old("MX23C4002-20", GameRomType.E1),
        _mx23(GB_ROM_CODE, "MX23C4002-20", "38", GameRomType.E1, f"(?: {digits(2)})?"),
    ],
    ("J9720-M MX23C4002-20 DMG-ATAJ-0 E1 43282F", "C983938-M MX23C4002-20 DMG-AD3E-1 E1 1P0221Y3"),
)
MACRONIX_MX23C8003 = _gb(
    "Macronix MX23C8003", GameRomType.F1, [("MX23C8003-20", "49")],
    ("S010649-M MX23C8003-20 DMG-BMAP-0 F1 1C3876A1",),
)
MACRONIX_MX23C8005 = _gb(
    "Macronix MX23C8005", GameRomType.F1, [("MX23C8005-12", "49")],
    ("C010649-M MX23C8005-12 CGB-BHFE-0 F1 1C5450LB",),
)
MACRONIX_MX23C8006 = _gb(
    "Macronix MX23C8006", GameRomType.F, [("MX23C8006-12", "49")],
    ("T991349-M MX23C8006-12 DMG-VPHJ-0 F 1A4891A2",),
)
MACRONIX_MX23C1603 = _gb(
    "Macronix MX23C1603", GameRomType.G2,
    [("MX23C1603-12 1", "95"), ("MX23C1603-12A", "04"), ("MX23C1603-12A", "19")],
    ("E052804-MG MX23C1603-12A CGB-AAUK-0 G2 1D4499A2A1", "M994395-M MX23C1603-12 1 CGB-VYHE-0 G2 1Q6065A1"),
)
MACRONIX_MX23C1605 = _gb(
    "Macronix MX23C1605", GameRomType.G1, [("MX23C1605-12A", "19")],
    ("C004219-M MX23C1605-12A CGB-BTKP-0 G1 2D246301",),
)
MACRONIX_MX23C3203 = _gb(
    "Macronix MX23C3203", GameRomType.H2,
    [
        ("MX23C3203-12 1", "95"),
        ("MX23C3203-12A2", "95"),
        ("MX23C3203-11A2", "23"),
        ("MX23C3203-12A2", "23"),
    ],
    (
        "E034623-M MX23C3203-12A2 CGB-BY3D-0 H2 2G513304",
        "M004523-M MX23C3203-11A2 CGB-B82J-0 02 H2 2D224301",
        "M002595-M MX23C3203-12 1 CGB-BY3J-0 H2 1R0833A1",
    ),
)

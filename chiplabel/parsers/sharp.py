"""
Sharp label families: regulators, amplifiers, SoCs, CICs, mask ROMs,
mappers, SRAM and LCD parts.

Sharp date codes are year2+week2 with one quirk: a couple of early-2000s
parts print a two-letter year ("AL", "AA"), handled by SHARP_YEAR2_WEEK2.
"""

from __future__ import annotations

import dataclasses
import re

from chiplabel.grammar import (
    CGB_ROM_CODE,
    DMG_ROM_CODE,
    SHARP_YEAR2_WEEK2,
    YEAR1_MONTH2,
    YEAR1_WEEK2,
    YEAR2_MONTH2,
    alnum_uppers,
    alphas,
    digits,
    group,
    lines,
    lit,
    one_of,
    uppers,
    year_week,
)
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import (
    Builder,
    FamilyParser,
    date_only,
    game_mask_rom,
    generic,
    mapper,
    mask_rom,
)
from chiplabel.parts import GameRomType, MapperChip, MaskCodeVendor

SHARP = Manufacturer.SHARP


# ---------------------------------------------------------------------------
# Regulators and amplifiers
# ---------------------------------------------------------------------------

def _ir3(name: str, prefix: str, kind: str, examples: tuple[str, ...]) -> FamilyParser:
    # N = SSOP-18 package
    return FamilyParser(
        name,
        lines(lit(prefix), group("kind", lit(kind + "N")), f"{SHARP_YEAR2_WEEK2} {alphas(1)}"),
        generic("{kind}", SHARP),
        examples,
    )


def _ir3_old(name: str, prefix: str, kind: str, examples: tuple[str, ...]) -> FamilyParser:
    return FamilyParser(
        name,
        lines(lit(prefix), lit(kind), f"{SHARP_YEAR2_WEEK2} {alphas(1)}{uppers(0, 1)}"),
        generic(kind, SHARP),
        examples,
    )


SHARP_IR3E02 = _ir3_old(
    "Sharp IR3E02", "DMG-REG", "IR3E02",
    ("DMG-REG IR3E02 9527 CB", "DMG-REG IR3E02 9820 n", "DMG-REG IR3E02 9024 J"),
)
SHARP_IR3E06 = _ir3(
    "Sharp IR3E06", "CGB-REG", "IR3E06",
    ("CGB-REG IR3E06N 9839 C", "CGB-REG IR3E06N 0046 A"),
)
SHARP_IR3E09 = _ir3(
    "Sharp IR3E09", "AGB-REG", "IR3E09",
    (
        "AGB-REG IR3E09N 0104 C",
        "AGB-REG IR3E09N 0141 K",
        "AGB-REG IR3E09N 0204 d",
        "AGB-REG IR3E09N AA24 A",
        "AGB-REG IR3E09N 0223 B",
    ),
)
SHARP_IR3R40 = _ir3_old(
    "Sharp IR3R40", "DMG-AMP", "IR3R40",
    ("DMG-AMP IR3R40 9222 AA", "DMG-AMP IR3R40 8909 A"),
)
SHARP_IR3R53 = _ir3(
    "Sharp IR3R53", "AMP MGB", "IR3R53",
    ("AMP MGB IR3R53N 9806 a", "AMP MGB IR3R53N 9724 C"),
)
SHARP_IR3R56 = _ir3(
    "Sharp IR3R56", "AMP MGB", "IR3R56",
    ("AMP MGB IR3R56N 0046 A", "AMP MGB IR3R56N 0040 C"),
)
SHARP_IR3R60 = _ir3(
    "Sharp IR3R60", "AMP AGB", "IR3R60",
    ("AMP AGB IR3R60N 0103 a", "AMP AGB IR3R60N 0240 N"),
)


# ---------------------------------------------------------------------------
# Game mask ROMs
# ---------------------------------------------------------------------------

SHARP_MASK_ROM_GLOP_TOP_28_256_KIBIT = FamilyParser(
    "Sharp mask ROM (glop top)",
    f"LR0G150 {group('rom_id', DMG_ROM_CODE)} {SHARP_YEAR2_WEEK2}{digits(1)}",
    game_mask_rom(GameRomType.GLOP_TOP, SHARP),
    ("LR0G150 DMG-TRA-1 97141",),
)


def _chip_by_model(build: Builder, chip_types: dict[str, str | None], key: str = "model") -> Builder:
    """Wrap a builder so the chip type is looked up from a captured model code."""
    def wrapped(m: re.Match):
        return dataclasses.replace(build(m), chip_type=chip_types[m.group(key)])
    return wrapped


def _lh53_ancient(marker: str) -> str:
    return lines(
        group("rom_id", DMG_ROM_CODE),
        "SHARP",
        "JAPAN",
        f"{SHARP_YEAR2_WEEK2} {alphas(1)} {lit(marker)}",
    )


def _lh53_old(rom_type: GameRomType) -> str:
    return lines(
        group("rom_id", DMG_ROM_CODE),
        "SHARP",
        f"JAPAN {lit(rom_type.value)}",
        f"{SHARP_YEAR2_WEEK2} {alphas(1)}",
    )


def _lh53_new(models: tuple[str, ...], rom_type: GameRomType) -> str:
    return lines(
        group("rom_id", f"(?:{DMG_ROM_CODE}|{CGB_ROM_CODE})"),
        "S " + group("mask", group("model", one_of(*models)) + str(alnum_uppers(2))),
        f"JAPAN {lit(rom_type.value)}",
        f"{SHARP_YEAR2_WEEK2} {alphas(1)}",
    )


def _lh53(
    name: str,
    patterns: str | list[str],
    rom_type: GameRomType,
    chip_type: str | None,
    examples: tuple[str, ...],
    with_mask: bool = True,
) -> FamilyParser:
    return FamilyParser(
        name,
        patterns,
        game_mask_rom(
            rom_type,
            SHARP,
            chip_type,
            (MaskCodeVendor.SHARP, "{mask}") if with_mask else None,
        ),
        examples,
    )


SHARP_LH53259M = FamilyParser(
    "Sharp LH53259",
    [
        _lh53_ancient("A"),
        _lh53_old(GameRomType.A0),
        # LH5359 per the Sharp Memory Data Book 1992
        _lh53_new(("LH5359",), GameRomType.A0),
    ],
    game_mask_rom(GameRomType.A0, SHARP, "LH53259", (MaskCodeVendor.SHARP, "{mask}")),
    (
        "DMG-AWA-0 SHARP JAPAN 8909 D A",
        "DMG-AWA-0 SHARP JAPAN A0 8938 D",
        "DMG-OPX-0 S LH5359UZ JAPAN A0 9722 D",
    ),
)
SHARP_LH53515M = _lh53(
    "Sharp LH53515", _lh53_old(GameRomType.B0), GameRomType.B0, "LH53515",
    ("DMG-CVJ-0 SHARP JAPAN B0 8941 D",),
    with_mask=False,
)
SHARP_LH53514Z = _lh53(
    "Sharp LH53514", _lh53_new(("LH5314",), GameRomType.B1), GameRomType.B1, "LH53514",
    ("DMG-AYJ-0 S LH5314H1 JAPAN B1 9014 E",),
)
SHARP_LH53517Z = _lh53(
    "Sharp LH53517", _lh53_new(("LH5317",), GameRomType.B1), GameRomType.B1, "LH53517",
    ("DMG-AYNP-0 S LH5317VR JAPAN B1 9850 E",),
)
SHARP_LH530800N = FamilyParser(
    "Sharp LH530800",
    _lh53_new(("LH5308", "LH531H"), GameRomType.C1),
    _chip_by_model(
        game_mask_rom(GameRomType.C1, SHARP, None, (MaskCodeVendor.SHARP, "{mask}")),
        # LH531H per the Sharp Memory Data Book 1992
        {"LH5308": "LH530800", "LH531H": "LH530800A"},
    ),
    ("DMG-A6W-0 S LH531HF8 JAPAN C1 9709 E",),
)
SHARP_MASK_ROM_SOP_32_1_MIBIT = _lh53(
    "Sharp mask ROM (SOP-32, 1 Mibit)", _lh53_old(GameRomType.C1), GameRomType.C1, None,
    ("DMG-NME-0 SHARP JAPAN C1 9009 E",),
    with_mask=False,
)
SHARP_LH532100N = _lh53(
    "Sharp LH532100N", _lh53_new(("LH5321",), GameRomType.D1), GameRomType.D1, "LH532100",
    ("DMG-DFJ-0 S LH5321FL JAPAN D1 9249 D",),
)
SHARP_LH532XXXN = _lh53(
    "Sharp LH532???",
    _lh53_new(("LH532D", "LH532K", "LH532M", "LH532W", "LHMN2E"), GameRomType.D1),
    GameRomType.D1, None,
    ("DMG-DIJ-0 S LH532D17 JAPAN D1 9223 D",),
)
SHARP_LH534XXXN = _lh53(
    "Sharp LH534??? (SOP-32)",
    _lh53_new(("LH534M", "LH5S4M", "LHMN4M"), GameRomType.E1),
    GameRomType.E1, None,
    ("DMG-A3ME-0 S LH534MW1 JAPAN E1 9547 E",),
)
SHARP_LH538XXXN = _lh53(
    "Sharp LH538??? (SOP-32)",
    _lh53_new(("LH538M", "LH538W", "LH5S8M", "LHMN8J", "LHMN8M"), GameRomType.F1),
    GameRomType.F1, None,
    ("CGB-AHYE-0 S LH538WV9 JAPAN F1 9916 D",),
)
SHARP_LH534XXXS = _lh53(
    "Sharp LH534??? (TSOP-I-32)", _lh53_new(("LHMN4M",), GameRomType.E), GameRomType.E, None,
    ("DMG-HFAJ-0 S LHMN4MTI JAPAN E 9838 E",),
)
SHARP_LH538XXXS = _lh53(
    "Sharp LH538??? (TSOP-I-32)", _lh53_new(("LH5S8M",), GameRomType.F), GameRomType.F, None,
    ("DMG-HRCJ-0 S LH5S8MTI JAPAN F 9846 E",),
)
SHARP_LH5316XXX = _lh53(
    "Sharp LH5316???", _lh53_new(("LH537M",), GameRomType.G2), GameRomType.G2, None,
    ("CGB-AFIP-0 S LH537MTJ JAPAN G2 9929 D",),
)
SHARP_LH5332XXX = _lh53(
    "Sharp LH5332???", _lh53_new(("LHMN5M",), GameRomType.H2), GameRomType.H2, None,
    ("CGB-AYQE-0 S LHMN5MTF JAPAN H2 0010 D",),
)


# ---------------------------------------------------------------------------
# Super Game Boy system ROMs
# ---------------------------------------------------------------------------

def _sgb_rom(rom_id: str, mask: str) -> str:
    return lines(
        group("rom_id", lit(rom_id)),
        lit("© 1994 Nintendo"),
        group("mask", lit(mask)),
        f"{SHARP_YEAR2_WEEK2} {uppers(1)}",
    )


SHARP_SGB_ROM = FamilyParser(
    "Sharp SGB ROM",
    [
        _sgb_rom("SYS-SGB-NT", "LH532KN8"),
        _sgb_rom("SYS-SGB-2", "LH532KND"),
        _sgb_rom("SYS-SGB-2", "LH532M0M"),
    ],
    _chip_by_model(
        mask_rom(None, SHARP, (MaskCodeVendor.SHARP, "{mask}")),
        {"LH532KN8": "LH532100B", "LH532KND": "LH532100B", "LH532M0M": None},
        key="mask",
    ),
    (
        "SYS-SGB-2 © 1994 Nintendo LH532M0M 9432 E",
        "SYS-SGB-2 © 1994 Nintendo LH532KND 9432 E",
        "SYS-SGB-NT © 1994 Nintendo LH532KN8 9416 D",
    ),
)
SHARP_SGB2_ROM = FamilyParser(
    "Sharp SGB2 ROM",
    lines(
        lit("© 1998 Nintendo"),
        group("rom_id", "SYS-SGB2-10"),
        group("mask", "LH5S4RY4"),
        f"{SHARP_YEAR2_WEEK2} {uppers(1)}",
    ),
    mask_rom("LH534R00B", SHARP, (MaskCodeVendor.SHARP, "{mask}")),
    ("© 1998 Nintendo SYS-SGB2-10 LH5S4RY4 0003 D",),
)


# ---------------------------------------------------------------------------
# CIC lockout chips
# ---------------------------------------------------------------------------

def _cic(model: str, copyright: str, examples: tuple[str, ...]) -> FamilyParser:
    return FamilyParser(
        f"Sharp {model}",
        lines(
            group("kind", lit(model) + "[AB]?"),
            lit(copyright),
            "Nintendo",
            f"{SHARP_YEAR2_WEEK2} {alphas(1)}",
        ),
        generic("{kind}", SHARP),
        examples,
    )


SHARP_F411 = _cic("F411", "© 1990", ("F411A © 1990 Nintendo 9428 a",))
SHARP_F413 = _cic("F413", "© 1992", ("F413A © 1992 Nintendo 9425 a",))


# ---------------------------------------------------------------------------
# SoCs
# ---------------------------------------------------------------------------

def _soc(
    name: str,
    kinds: tuple[str, ...],
    middle: tuple[str, ...],
    suffix: str,
    examples: tuple[str, ...],
) -> FamilyParser:
    return FamilyParser(
        name,
        lines(
            group("kind", one_of(*kinds)),
            *(lit(line) for line in middle),
            f"{SHARP_YEAR2_WEEK2} {suffix}",
        ),
        generic("{kind}", SHARP),
        examples,
    )


SHARP_LR35902 = FamilyParser(
    "Sharp LR35902",
    lines(group("kind", "DMG-CPU"), "LR35902", f"{SHARP_YEAR2_WEEK2} {uppers(1)}"),
    generic("{kind}", SHARP),
    ("DMG-CPU LR35902 8907 D",),
)
SHARP_DMG_CPU = _soc(
    "Sharp DMG-CPU",
    ("DMG-CPU A", "DMG-CPU B", "DMG-CPU C", "DMG-CPU"),
    ("© 1989 Nintendo", "JAPAN"),
    str(uppers(1, 2)),
    (
        "DMG-CPU © 1989 Nintendo JAPAN 8913 D",
        "DMG-CPU A © 1989 Nintendo JAPAN 8937 D",
        "DMG-CPU B © 1989 Nintendo JAPAN 9207 D",
        "DMG-CPU C © 1989 Nintendo JAPAN 9835 D",
    ),
)
SHARP_DMG_CPU_GLOP_TOP = FamilyParser(
    "Sharp DMG-CPU glop top",
    group("rev", "[BC]"),
    generic("DMG-CPU {rev} (blob)", SHARP),
    ("B", "C"),
)
SHARP_SGB_CPU = _soc(
    "Sharp SGB-CPU",
    ("SGB-CPU 01",),
    ("© 1994 Nintendo", "Ⓜ 1989 Nintendo", "JAPAN"),
    f"{digits(1)} ?{uppers(1)}",
    ("SGB-CPU 01 © 1994 Nintendo Ⓜ 1989 Nintendo JAPAN 9434 7 D",),
)
SHARP_CPU_MGB = _soc(
    "Sharp CPU MGB",
    ("CPU MGB",),
    ("Ⓜ © 1996 Nintendo", "JAPAN"),
    str(uppers(1, 2)),
    ("CPU MGB Ⓜ © 1996 Nintendo JAPAN 9629 D", "CPU MGB Ⓜ © 1996 Nintendo JAPAN 9808 D"),
)
SHARP_CPU_SGB2 = _soc(
    "Sharp CPU SGB2",
    ("CPU SGB2",),
    ("Ⓜ 1996 Nintendo", "© 1997 Nintendo", "JAPAN"),
    f"{digits(1)} ?{uppers(1)}",
    ("CPU SGB2 Ⓜ 1996 Nintendo © 1997 Nintendo JAPAN 9810 7E",),
)
SHARP_CPU_CGB = _soc(
    "Sharp CPU CGB",
    ("CPU CGB A", "CPU CGB B", "CPU CGB C", "CPU CGB D", "CPU CGB"),
    ("Ⓜ © 1998 Nintendo", "JAPAN"),
    str(uppers(1, 2)),
    (
        "CPU CGB Ⓜ © 1998 Nintendo JAPAN 9832 I",
        "CPU CGB A Ⓜ © 1998 Nintendo JAPAN 9837 I",
        "CPU CGB B Ⓜ © 1998 Nintendo JAPAN 9840 I",
        "CPU CGB C Ⓜ © 1998 Nintendo JAPAN 9927 IA",
        "CPU CGB D Ⓜ © 1998 Nintendo JAPAN 0026 I",
    ),
)
SHARP_CPU_CGB_E = _soc(
    "Sharp CPU CGB E",
    ("CPU CGB E",),
    ("Ⓜ © 2000 Nintendo", "JAPAN"),
    str(uppers(1, 2)),
    ("CPU CGB E Ⓜ © 2000 Nintendo JAPAN 0052 I",),
)
SHARP_CPU_AGB = _soc(
    "Sharp CPU AGB",
    ("CPU AGB A E", "CPU AGB A", "CPU AGB"),
    ("Ⓜ © 2000 Nintendo", "JAPAN ARM"),
    str(alphas(1, 2)),
    (
        "CPU AGB Ⓜ © 2000 Nintendo JAPAN ARM 0104 I",
        "CPU AGB A Ⓜ © 2000 Nintendo JAPAN ARM 0228 mE",
        "CPU AGB A E Ⓜ © 2000 Nintendo JAPAN ARM 0503 O",
    ),
)
SHARP_CPU_AGB_B = _soc(
    "Sharp CPU AGB B",
    ("CPU AGB B E", "CPU AGB B"),
    ("Ⓜ © 2002 Nintendo", "JAPAN ARM"),
    str(alphas(1, 2)),
    (
        "CPU AGB B Ⓜ © 2002 Nintendo JAPAN ARM 0311 mB",
        "CPU AGB B E Ⓜ © 2002 Nintendo JAPAN ARM 0602 UB",
    ),
)
SHARP_CPU_AGB_E = FamilyParser(
    "Sharp CPU AGB E",
    lines(
        f"{SHARP_YEAR2_WEEK2} 2m",
        group("kind", "CPU AGB E"),
        lit("Ⓜ © 2004"),
        "Nintendo",
        "JAPAN ARM",
    ),
    generic("{kind}", SHARP),
    ("0529 2m CPU AGB E Ⓜ © 2004 Nintendo JAPAN ARM",),
)


# ---------------------------------------------------------------------------
# Mappers
# ---------------------------------------------------------------------------

def _dmg_mapper(chip: MapperChip, suffix: str, example: str) -> FamilyParser:
    return FamilyParser(
        f"Sharp {chip.display_name}",
        lines("DMG", lit(chip.display_name), "Nintendo", f"S {SHARP_YEAR2_WEEK2} {suffix}"),
        mapper(chip, SHARP),
        (example,),
    )


def _qfp_mapper(chip: MapperChip, printed: str, model: str, example: str) -> FamilyParser:
    return FamilyParser(
        f"Sharp {chip.display_name}",
        lines(lit(printed), lit(model), f"{SHARP_YEAR2_WEEK2} {uppers(1)}"),
        mapper(chip, SHARP),
        (example,),
    )


SHARP_MBC1 = _dmg_mapper(MapperChip.MBC1, str(uppers(1)), "DMG MBC1 Nintendo S 8914 T")
SHARP_MBC1A = _dmg_mapper(
    MapperChip.MBC1A, f"{digits(1)} {uppers(1)}", "DMG MBC1A Nintendo S 9025 1 A"
)
SHARP_MBC1B = _dmg_mapper(
    MapperChip.MBC1B, f"{digits(1)} {uppers(1, 2)}", "DMG MBC1B Nintendo S 9107 5 A"
)
SHARP_MBC1B1 = _dmg_mapper(
    MapperChip.MBC1B1, f"{digits(1)} {uppers(1)}", "DMG MBC1B1 Nintendo S 9838 5 A"
)
SHARP_MBC2A = _dmg_mapper(
    MapperChip.MBC2A, f"{digits(1)} {uppers(1, 2)}", "DMG MBC2A Nintendo S 9730 5 AB"
)
SHARP_MBC3 = _qfp_mapper(MapperChip.MBC3, "MBC3", "LR385364", "MBC3 LR385364 9743 A")
SHARP_MBC3A = _qfp_mapper(MapperChip.MBC3A, "MBC3 A", "LR38536B", "MBC3 A LR38536B 9935 A")
SHARP_MBC5 = _qfp_mapper(MapperChip.MBC5, "MBC5", "LZ9GB31", "MBC5 LZ9GB31 AL23 A")


# ---------------------------------------------------------------------------
# LCD
# ---------------------------------------------------------------------------

SHARP_LCD_CHIP_OLD = FamilyParser(
    "Sharp LCD chip (old)", str(YEAR1_MONTH2), date_only, ("110",)
)
SHARP_LCD_CHIP_NEW = FamilyParser(
    "Sharp LCD chip (new)", f"{YEAR1_WEEK2}{digits(1)}", date_only, ("5341",)
)
SHARP_LCD_SCREEN = FamilyParser(
    "Sharp LCD screen",
    one_of("ST", "AH", "SY", "AE", "N AE", "N AH", "N1 AH", "N2AH", "N23S", "EP", "S", "A", "")
    + f" ?{YEAR2_MONTH2}{digits(2)}",
    date_only,
    (
        "S890220",
        "AH900327",
        "N AE900724",
        "AE900404",
        "A890407",
        "N1 AH910720",
        "890808",
    ),
)


# ---------------------------------------------------------------------------
# SRAM
# ---------------------------------------------------------------------------

SHARP_LH51D256T = FamilyParser(
    "Sharp LH51D256T",
    lines(
        group("kind", "LH51D256T-Z[57]"),
        "SHARP",
        f"A?Y{year_week('1', ' ?')} {digits(1)} J",
    ),
    generic("{kind}", SHARP),
    ("LH51D256T-Z5 SHARP Y007 5 J", "LH51D256T-Z7 SHARP Y0 50 3 J"),
)


def _lh51_52(kind: str, suffix: str, alt: bool = False) -> str:
    if alt:
        return lines(lit(kind), "SHARP", f"A{SHARP_YEAR2_WEEK2} {suffix}")
    return lines(lit(kind), "SHARP", "JAPAN", f"{SHARP_YEAR2_WEEK2} {suffix}")


_DIGIT_UPPER2 = f"{digits(1)} {uppers(2)}"
_DIGIT_UPPER1 = f"{digits(1)} {uppers(1)}"


def _sram(
    name: str,
    kind: str,
    patterns: str | list[str],
    examples: tuple[str, ...],
) -> FamilyParser:
    return FamilyParser(name, patterns, generic(kind, SHARP), examples)


SHARP_LH52CV256JT = _sram(
    "Sharp LH52CV256JT", "LH52CV256JT-10LL",
    _lh51_52("LH52CV256JT-10LL", _DIGIT_UPPER2),
    ("LH52CV256JT-10LL SHARP JAPAN 9814 7 SA",),
)
SHARP_LH52256CVT = _sram(
    "Sharp LH52256CVT", "LH52256CVT",
    _lh51_52("LH52256CVT", _DIGIT_UPPER2),
    ("LH52256CVT SHARP JAPAN 9933 3 SO",),
)
SHARP_LH52256CVN = _sram(
    "Sharp LH52256CVN", "LH52256CVN",
    _lh51_52("LH52256CVN", _DIGIT_UPPER2),
    ("LH52256CVN SHARP JAPAN 9944 5 SO",),
)
SHARP_LH52256CT = _sram(
    "Sharp LH52256CT", "LH52256CT-10LL",
    _lh51_52("LH52256CT-10LL", _DIGIT_UPPER2),
    ("LH52256CT-10LL SHARP JAPAN 9842 7 SS",),
)
SHARP_LH52256CN = _sram(
    "Sharp LH52256CN", "LH52256CN-10LL",
    [
        _lh51_52("LH52256CN-10LL", _DIGIT_UPPER2),
        _lh51_52("LH52256CN-10LL", _DIGIT_UPPER2, alt=True),
    ],
    ("LH52256CN-10LL SHARP JAPAN 0036 5 SO", "LH52256CN-10LL SHARP A9802 3 EC"),
)
SHARP_LH52A64N = _sram(
    "Sharp LH52A64N", "LH52A64N-L",
    _lh51_52("LH52A64N-L", _DIGIT_UPPER1),
    ("LH52A64N-L SHARP JAPAN 9817 1 Y",),
)
SHARP_LH5264TN = _sram(
    "Sharp LH5264TN", "LH5264TN-L",
    _lh51_52("LH5264TN-L", _DIGIT_UPPER1),
    ("LH5264TN-L SHARP JAPAN 8937 3 Y",),
)
SHARP_LH5264N4 = _sram(
    "Sharp LH5264N4", "LH5264N4",
    _lh51_52("LH5264N4", _DIGIT_UPPER1),
    ("LH5264N4 SHARP JAPAN 8922 1 Y",),
)
SHARP_LH5164N = FamilyParser(
    "Sharp LH5164N",
    [
        lines(group("kind", "LH5164N-10L"), "SHARP", "JAPAN", f"{SHARP_YEAR2_WEEK2} {_DIGIT_UPPER2}"),
        lines(group("kind", "LH5164LN-10"), "SHARP", "JAPAN", f"{SHARP_YEAR2_WEEK2} {_DIGIT_UPPER1}"),
    ],
    generic("{kind}", SHARP),
    ("LH5164N-10L SHARP JAPAN 9043 1 DA", "LH5164LN-10 SHARP JAPAN 8848 3 D"),
)
SHARP_LH5168N = _sram(
    "Sharp LH5168N", "LH5168N-10L",
    _lh51_52("LH5168N-10L", _DIGIT_UPPER2),
    ("LH5168N-10L SHARP JAPAN 9818 1 CG",),
)
SHARP_LH5168NF = FamilyParser(
    "Sharp LH5168NF",
    [
        lines(group("kind", "LH5168NFA-10L"), "SHARP", "JAPAN", f"{SHARP_YEAR2_WEEK2} {_DIGIT_UPPER2}"),
        lines(group("kind", "LH5168NFB-10L"), "SHARP", "JAPAN", f"{SHARP_YEAR2_WEEK2} {uppers(2)}"),
    ],
    generic("{kind}", SHARP),
    ("LH5168NFA-10L SHARP JAPAN 9103 3 SA", "LH5168NFB-10L SHARP JAPAN 9147 DC"),
)
SHARP_LH5160N = _sram(
    "Sharp LH5160N", "LH5160N-10L",
    _lh51_52("LH5160N-10L", _DIGIT_UPPER2),
    ("LH5160N-10L SHARP JAPAN 9007 5 DA",),
)
SHARP_LH5164AN = _sram(
    "Sharp LH5164AN", "LH5164AN-10L",
    [
        _lh51_52("LH5164AN-10L", _DIGIT_UPPER2),
        _lh51_52("LH5164AN-10L", _DIGIT_UPPER2, alt=True),
    ],
    ("LH5164AN-10L SHARP JAPAN 9933 3 EB", "LH5164AN-10L SHARP A9846 7 CB"),
)

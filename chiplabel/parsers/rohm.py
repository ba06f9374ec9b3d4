"""
ROHM label families.

Small ROHM packages only print a year digit followed by a month code or a
lot letter; QFP mappers and SRAM use year1+week2.
"""

from __future__ import annotations

from chiplabel.grammar import (
    YEAR1,
    YEAR1_MONTH1_123ABC,
    YEAR1_WEEK2,
    alnum_uppers,
    digits,
    group,
    lines,
    lit,
    one_of,
)
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, generic, mapper
from chiplabel.parts import MapperChip

ROHM = Manufacturer.ROHM

_LOT = f"{alnum_uppers(1)}{digits(2)}"


ROHM_9853 = FamilyParser(
    "ROHM 9853",
    lines(group("kind", "9853"), f"{YEAR1_MONTH1_123ABC}{digits(2)}"),
    generic("{kind}", ROHM),
    ("9853 2A46", "9853 6912"),
)
ROHM_9854 = FamilyParser(
    "ROHM 9854",
    lines(group("kind", "9854"), f"{YEAR1}{_LOT}W"),
    generic("{kind}", ROHM),
    ("9854 5S95W",),
)
ROHM_BA6129 = FamilyParser(
    "ROHM BA6129",
    f"{group('kind', '6129A?')} {YEAR1}{_LOT}",
    generic("BA{kind}", ROHM),
    ("6129 4803", "6129A 6194"),
)
ROHM_BA6735 = FamilyParser(
    "ROHM BA6735",
    f"6735 {YEAR1_MONTH1_123ABC}{digits(2)}",
    generic("BA6735", ROHM),
    ("6735 8C19",),
)
ROHM_9750 = FamilyParser(
    "ROHM 9750",
    f"{group('kind', '9750[AB]')} {YEAR1_MONTH1_123ABC}{digits(2)}",
    generic("{kind}", ROHM),
    ("9750A 1581", "9750B 2A69"),
)
ROHM_9753 = FamilyParser(
    "ROHM 9753",
    f"{group('kind', '9753')} {YEAR1_MONTH1_123ABC}{digits(2)}",
    generic("{kind}", ROHM),
    ("9753 4862",),
)
ROHM_BH7835AFS = FamilyParser(
    "ROHM BH7835AFS",
    f"{group('kind', 'BH7835AFS')} {YEAR1_WEEK2} {_LOT}",
    generic("{kind}", ROHM),
    ("BH7835AFS 337 T22",),
)
ROHM_ICD2_R = FamilyParser(
    "ROHM ICD2-R",
    f"Nintendo {group('kind', 'ICD2-R')} {YEAR1_WEEK2} {_LOT}",
    generic("{kind}", ROHM),
    ("Nintendo ICD2-R 435 179",),
)


# ---------------------------------------------------------------------------
# Mappers
# ---------------------------------------------------------------------------

def _mapper(chip: MapperChip, printed: tuple[str, ...], model: str, examples: tuple[str, ...]) -> FamilyParser:

    return FamilyParser(
        f"ROHM {chip.display_name}",
        lines(one_of(*printed), lit(model), f"{YEAR1_WEEK2} {_LOT}"),
        mapper(chip, ROHM),
        examples,
    )


ROHM_MBC3 = _mapper(MapperChip.MBC3, ("MBC3",), "BU3631K", ("MBC3 BU3631K 802 127",))
ROHM_MBC3A = _mapper(MapperChip.MBC3A, ("MBC-3 A",), "BU3632K", ("MBC-3 A BU3632K 004 H64",))
ROHM_MBC3B = _mapper(MapperChip.MBC3B, ("MBC-3 B",), "BU3634K", ("MBC-3 B BU3634K 135 H48",))
ROHM_MBC30 = _mapper(MapperChip.MBC30, ("MBC-30",), "BU3633AK", ("MBC-30 BU3633AK 046 175",))
ROHM_MBC5 = _mapper(
    MapperChip.MBC5, ("MBC5", "MBC-5"), "BU3650K",
    ("MBC5 BU3650K 229 H51", "MBC-5 BU3650K 049 186"),
)
ROHM_MBC7 = _mapper(MapperChip.MBC7, ("MBC-7",), "BU3667KS", ("MBC-7 BU3667KS 041 170",))


# ---------------------------------------------------------------------------
# SRAM
# ---------------------------------------------------------------------------

def _sram(kind: str, suffix: str, examples: tuple[str, ...]) -> FamilyParser:
    return FamilyParser(
        f"ROHM {kind.split('-')[0]}",
        lines(lit(kind), f"{YEAR1_WEEK2} {digits(3)}{suffix}"),
        generic(kind, ROHM),
        examples,
    )


ROHM_BR62256F = _sram(
    "BR62256F-70LL", "(?:NA|A)?",
    ("BR62256F-70LL 817 126", "BR62256F-70LL 845 131A", "BR62256F-70LL 031 150NA"),
)
ROHM_BR6265BF = _sram("BR6265BF-10SL", "N", ("BR6265BF-10SL 737 189N",))
ROHM_XLJ6265AF = _sram("XLJ6265AF-10SL", "", ("XLJ6265AF-10SL 437 159",))
ROHM_XLJ6265BF = _sram("XLJ6265BF-10SL", "N", ("XLJ6265BF-10SL 640 171N",))

"""
Unit tests for the label family grammars (chiplabel.parsers.*).

Every family carries literal example labels; each one must parse. A
sample of families is additionally checked field by field, and malformed
variants of real labels must be rejected with the right error type.
"""

import re

import pytest

from chiplabel.datecode import Month, Year, YearMonth, YearOnly, YearWeek
from chiplabel.exceptions import ChipLabelError, InvalidFieldError, NoFamilyMatchedError
from chiplabel.grammar import SEP
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers import flash, kds, kinseki, nec, sharp, stamp, unknown
from chiplabel.parsers.base import FamilyParser
from chiplabel.parts import (
    Crystal,
    DateOnly,
    GameMaskRom,
    GameRomType,
    GenericPart,
    Mapper,
    MapperChip,
    MaskCode,
    MaskCodeVendor,
    MaskRom,
)
from chiplabel.registry import index_families

_FAMILIES = index_families()

_EXAMPLES = [
    pytest.param(family, label, id=f"{name}:{label}")
    for name, family in sorted(_FAMILIES.items())
    for label in family.examples
]


def _line_breaks(family: FamilyParser, label: str) -> list[int]:
    """Positions of spaces that may be written as newlines without changing the parse."""
    expected = family.parse(label)
    breaks = []
    for i, char in enumerate(label):
        if char != " ":
            continue
        try:
            if family.parse(f"{label[:i]}\n{label[i + 1:]}") == expected:
                breaks.append(i)
        except ChipLabelError:
            continue
    return breaks


# ---------------------------------------------------------------------------
# Example conformance
# ---------------------------------------------------------------------------

class TestExamples:
    """Every documented example label parses with its own family."""

    def test_every_family_has_examples(self):
        missing = [name for name, family in _FAMILIES.items() if not family.examples]
        assert missing == []

    @pytest.mark.parametrize("family, label", _EXAMPLES)
    def test_example_parses(self, family: FamilyParser, label: str):
        assert family.parse(label) is not None

    @pytest.mark.parametrize("family, label", _EXAMPLES)
    def test_newlines_equivalent_to_spaces(self, family: FamilyParser, label: str):
        """Transcriptions may break label lines with newlines instead of spaces."""
        layout = next(p for p in family.patterns if re.fullmatch(p, label))
        if SEP not in layout:
            pytest.skip("single-line layout")
        assert _line_breaks(family, label)


# ---------------------------------------------------------------------------
# Field-level checks
# ---------------------------------------------------------------------------

class TestGenericParts:
    """Tests for GenericPart-producing families."""

    def test_sharp_cpu_mgb(self):
        part = sharp.SHARP_CPU_MGB.parse("CPU MGB Ⓜ © 1996 Nintendo JAPAN 9808 D")
        assert part == GenericPart("CPU MGB", Manufacturer.SHARP, YearWeek(Year.full(1998), 8))

    def test_sst_kind_is_normalized(self):
        part = flash.SST_SST39VF512.parse("39VF512 70-4C-WH 0216049-D")
        assert part.kind == "SST39VF512-70-4C-WH"
        assert part.manufacturer is Manufacturer.SST
        assert part.date_code == YearWeek(Year.full(2002), 16)

    def test_one_digit_year_stays_partial(self):
        from chiplabel.parsers import mitsumi

        part = mitsumi.MITSUMI_MM1134A.parse("939 134A")
        assert part == GenericPart("MM1134A", Manufacturer.MITSUMI, YearWeek(Year.partial(9), 39))

    def test_letter_month(self):
        from chiplabel.parsers import sanyo

        part = sanyo.SANYO_LE26FV10.parse("LE26FV10N1TS -10 3MU50")
        assert part.kind == "LE26FV10N1TS-10"
        assert part.date_code == YearMonth(Year.partial(3), Month.DECEMBER)

    def test_unknown_maker(self):
        part = unknown.UNKNOWN_OXY_U5.parse("CP6465 B 02 KOR0531 635963")
        assert part == GenericPart("CP6465", None, YearWeek(Year.full(2005), 31))

    def test_no_date(self):
        from chiplabel.parsers import tdk

        part = tdk.TDK_ZJY_M4A.parse("TDK ZJY-M4A N")
        assert part == GenericPart("ZJY-M4A", Manufacturer.TDK, None)


class TestCrystals:
    """Tests for crystal families."""

    def test_kds_month_then_year(self):
        part = kds.KDS_D419_OLD.parse("D419A2")
        assert part == Crystal(Crystal.FREQ_4_MIHZ, Manufacturer.KDS, YearMonth(Year.partial(2), Month.JANUARY))

    def test_kinseki_alternative_layouts(self):
        spaced = kinseki.KINSEKI_4_MIHZ.parse("4194 KSS 0KF")
        fused = kinseki.KINSEKI_4_MIHZ.parse("4194 KSS1A")
        assert spaced.date_code == YearMonth(Year.partial(0), Month.OCTOBER)
        assert fused.date_code == YearMonth(Year.partial(1), Month.JANUARY)

    def test_year_only_crystal(self):
        part = unknown.UNKNOWN_CRYSTAL_32_KIHZ.parse("32K09")
        assert part == Crystal(Crystal.FREQ_32_KIHZ, None, YearOnly(Year.partial(0)))


class TestMaskRoms:
    """Tests for game and console mask ROM families."""

    def test_nec_mask_rom(self):
        rom = nec.NEC_UPD23C1001E.parse("DMG-HQE-0 C1 N-1001EGW-J23 9110E9001")
        assert isinstance(rom, GameMaskRom)
        assert rom.rom_id == "DMG-HQE-0"
        assert rom.rom_type is GameRomType.C1
        assert rom.chip_type == "μPD23C1001EGW"
        assert rom.mask_code == MaskCode(MaskCodeVendor.NEC, "N-1001EGW-J23")
        assert rom.date_code == YearWeek(Year.full(1991), 10)

    def test_implied_rom_id(self):
        rom = unknown.UNKNOWN_TAMA7.parse("TAMA7 B9748 43913A TAIWAN")
        assert rom.rom_id == "DMG-AOMJ-0"
        assert rom.rom_type is GameRomType.E1
        assert rom.manufacturer is None
        assert rom.date_code == YearWeek(Year.full(1997), 48)

    def test_sgb_rom_without_date(self):
        rom = unknown.UNKNOWN_SGB_ROM.parse("SYS-SGB-2 JAPAN © 1994 Nintendo 427A2 A04 NND")
        assert rom == MaskRom(rom_id="SYS-SGB-2")


class TestMappers:
    """Tests for mapper families."""

    def test_sharp_mapper_irregular_year(self):
        part = sharp.SHARP_MBC5.parse("MBC5 LZ9GB31 AL23 A")
        assert part == Mapper(MapperChip.MBC5, Manufacturer.SHARP, YearWeek(Year.full(2000), 23))

    def test_panasonic_sop_month_code(self):
        from chiplabel.parsers import panasonic

        part = panasonic.PANASONIC_MBC1B.parse("DMG MBC1-B Nintendo P 0'D7")
        assert part.chip is MapperChip.MBC1B
        assert part.date_code == YearMonth(Year.partial(0), Month.DECEMBER)

    def test_hudson(self):
        from chiplabel.parsers import hudson

        part = hudson.HUDSON_HUC1A.parse("HuC1A © HUDSON Nintendo 9845 A")
        assert part.kind == "HuC-1A"
        assert part.manufacturer is Manufacturer.HUDSON


class TestDateOnly:
    """Tests for stamps and other date-only marks."""

    def test_dmg_stamp(self):
        assert stamp.DMG_STAMP.parse("903-22") == DateOnly(YearMonth(Year.partial(9), Month.MARCH))

    def test_cgb_stamp_week_first(self):
        assert stamp.CGB_STAMP.parse("218-2221") == DateOnly(YearWeek(Year.partial(8), 21))

    def test_battery(self):
        assert stamp.BATTERY.parse("01-05") == DateOnly(YearMonth(Year.full(2001), Month.MAY))


# ---------------------------------------------------------------------------
# Rejection
# ---------------------------------------------------------------------------

class TestRejection:
    """Malformed labels fail with typed errors, never partial results."""

    def test_no_substring_match(self):
        with pytest.raises(NoFamilyMatchedError):
            flash.SST_SST39VF512.parse("39VF512 70-4C-WH 0216049-D EXTRA")

    def test_garbage(self):
        with pytest.raises(NoFamilyMatchedError, match="Sharp CPU MGB"):
            sharp.SHARP_CPU_MGB.parse("hello")

    def test_week_out_of_range(self):
        with pytest.raises(InvalidFieldError, match="week"):
            sharp.SHARP_CPU_MGB.parse("CPU MGB Ⓜ © 1996 Nintendo JAPAN 9860 D")

    def test_month_out_of_range(self):
        with pytest.raises(InvalidFieldError, match="month"):
            stamp.BATTERY.parse("01-13")

    def test_accepts(self):
        assert stamp.BATTERY.accepts("98-11")
        assert not stamp.BATTERY.accepts("98-13")
        assert not stamp.BATTERY.accepts("")

"""
Unit tests for the manufacturer and part taxonomy (chiplabel.manufacturer,
chiplabel.parts).
"""

import pytest

from chiplabel.datecode import Year, YearWeek
from chiplabel.manufacturer import Manufacturer
from chiplabel.parts import (
    Crystal,
    DateOnly,
    GameMaskRom,
    GameRomType,
    GenericPart,
    Mapper,
    MapperChip,
    MapperType,
    MaskCode,
    MaskCodeVendor,
    MaskRom,
)


class TestManufacturer:
    """Tests for the closed manufacturer catalog."""

    def test_display_name_is_total(self):
        for manufacturer in Manufacturer:
            assert manufacturer.display_name, manufacturer

    def test_display_names(self):
        assert Manufacturer.KDS.display_name == "Daishinku"
        assert str(Manufacturer.SHARP) == "Sharp"


class TestCrystal:
    """Tests for frequency formatting."""

    @pytest.mark.parametrize(
        "frequency, expected",
        [
            (Crystal.FREQ_32_KIHZ, "32.768 kHz"),
            (Crystal.FREQ_4_MIHZ, "4.194304 MHz"),
            (Crystal.FREQ_8_MIHZ, "8.388608 MHz"),
            (Crystal.FREQ_20_MIHZ, "20.971520 MHz"),
            (Crystal.FREQ_32_MIHZ, "33.554432 MHz"),
            (512, "512 Hz"),
        ],
    )
    def test_format_frequency(self, frequency, expected):
        assert Crystal(frequency).format_frequency() == expected

    def test_kind_is_frequency(self):
        assert Crystal(Crystal.FREQ_4_MIHZ).kind == "4.194304 MHz"


class TestMapper:
    """Tests for mapper chip display names and types."""

    def test_every_chip_has_a_type(self):
        for chip in MapperChip:
            assert isinstance(chip.mapper_type, MapperType)

    def test_revisions_share_type(self):
        assert MapperChip.MBC1B1.mapper_type is MapperType.MBC1
        assert MapperChip.HUC1A.mapper_type is MapperType.HUC1
        assert MapperChip.MBC30.mapper_type is MapperType.MBC30

    def test_kind_is_display_name(self):
        assert Mapper(MapperChip.HUC3, Manufacturer.HUDSON).kind == "HuC-3"


class TestRecords:
    """Tests for the uniform kind/manufacturer/rom_id surface."""

    def test_generic_part(self):
        part = GenericPart("MM1134A", Manufacturer.MITSUMI, YearWeek(Year.partial(9), 39))
        assert part.kind == "MM1134A"
        assert part.rom_id is None

    def test_game_mask_rom_kind_is_chip_type(self):
        rom = GameMaskRom(
            rom_id="DMG-AOMJ-0",
            rom_type=GameRomType.E1,
            chip_type="TC532000",
            mask_code=MaskCode(MaskCodeVendor.NEC, "J56"),
        )
        assert rom.kind == "TC532000"
        assert rom.rom_id == "DMG-AOMJ-0"
        assert str(rom.rom_type) == "E1"
        assert str(rom.mask_code) == "J56"

    def test_mask_rom(self):
        rom = MaskRom(rom_id="SYS-SGB-2", chip_type=None)
        assert rom.kind is None

    def test_date_only(self):
        mark = DateOnly(YearWeek(Year.full(1998), 8))
        assert mark.kind is None
        assert mark.manufacturer is None
        assert mark.rom_id is None

"""
Unit tests for label processing (chiplabel.process).

Tests parse + date resolution into ProcessedPart, the empty-label path,
the year hint and jun inputs, and window enforcement.
"""

import pytest

from chiplabel import parse
from chiplabel.config import EngineConfig
from chiplabel.datecode import DateCode, Jun, Month
from chiplabel.exceptions import ConfigurationError, InvalidFieldError, NoFamilyMatchedError
from chiplabel.manufacturer import Manufacturer
from chiplabel.process import ProcessedPart, process_label, process_part
from tests.conftest import (
    DMG_STAMP_LABEL,
    KDS_DMG_CRYSTAL_LABEL,
    MGB_CPU_LABEL,
    MGB_CRYSTAL_LABEL,
    SST_FLASH_LABEL,
)


class TestProcessLabel:
    """Tests for process_label."""

    def test_full_year(self, registry):
        part = process_label("mgb_soc_qfp_80", MGB_CPU_LABEL, registry=registry)
        assert part == ProcessedPart(
            kind="CPU MGB",
            label=MGB_CPU_LABEL,
            manufacturer=Manufacturer.SHARP,
            date_code=DateCode(year=1998, week=8),
        )
        assert part.date_code.calendar() == "Week 8/1998"

    def test_partial_year_needs_hint(self, registry):
        part = process_label("mgb_crystal", MGB_CRYSTAL_LABEL, registry=registry)
        assert part.kind == "4.194304 MHz"
        assert part.date_code == DateCode(week=41)
        assert part.date_code.calendar() is None

    def test_partial_year_with_hint(self, registry):
        part = process_label("mgb_crystal", MGB_CRYSTAL_LABEL, 1998, registry=registry)
        assert part.date_code.calendar() == "Week 41/1998"

    def test_month_with_hint(self, registry):
        part = process_label("dmg_crystal", KDS_DMG_CRYSTAL_LABEL, 1992, registry=registry)
        assert part.manufacturer is Manufacturer.KDS
        assert part.date_code == DateCode(year=1992, month=Month.JANUARY)

    def test_jun(self, registry):
        part = process_label("dmg_stamp", DMG_STAMP_LABEL, 1990, jun=Jun.THIRD, registry=registry)
        assert part.date_code.calendar() == "Oct 21-31/1990"

    @pytest.mark.parametrize("label", ["", None])
    def test_empty_label(self, registry, label):
        assert process_label("mgb_soc_qfp_80", label, registry=registry) is None

    def test_unknown_category(self, registry):
        with pytest.raises(ConfigurationError):
            process_label("toaster", MGB_CPU_LABEL, registry=registry)

    @pytest.mark.parametrize("label", ["", None])
    def test_unknown_category_with_empty_label(self, registry, label):
        with pytest.raises(ConfigurationError, match="toaster"):
            process_label("toaster", label, registry=registry)

    def test_no_match(self, registry):
        with pytest.raises(NoFamilyMatchedError, match="mgb_soc_qfp_80"):
            process_label("mgb_soc_qfp_80", SST_FLASH_LABEL, registry=registry)

    def test_window_from_config(self, registry):
        narrow = EngineConfig(earliest_year=1988, latest_year=2000)
        with pytest.raises(InvalidFieldError, match="suspicious year"):
            process_label("flash_tsop_i_32_3v3", SST_FLASH_LABEL, registry=registry, config=narrow)


class TestProcessPart:
    """Tests for process_part on already-parsed records."""

    def test_rom_id_carried(self):
        rom = parse("gb_mask_rom_sop_32_5v", "DMG-HQE-0 C1 N-1001EGW-J23 9110E9001")
        part = process_part(rom, "DMG-HQE-0 C1 N-1001EGW-J23 9110E9001")
        assert part.rom_id == "DMG-HQE-0"
        assert part.kind == "μPD23C1001EGW"
        assert part.date_code.calendar() == "Week 10/1991"

    def test_no_date(self):
        tdk = parse("sgb2_coil", "TDK ZJY-M4A N")
        part = process_part(tdk, "TDK ZJY-M4A N", 1999)
        assert part.date_code == DateCode()
        assert part.manufacturer is Manufacturer.TDK

"""
Typed records produced by label family parsers.

Every record exposes ``kind``, ``manufacturer``, ``date_code`` and
``rom_id`` so processing code can treat them uniformly:

- GenericPart: most ICs; ``kind`` is the normalized part number.
- Crystal: oscillators; ``kind`` is the formatted frequency.
- GameMaskRom: cartridge ROMs; carries the game's ROM id, the Nintendo
  ROM type code and an optional manufacturer mask code.
- MaskRom: non-game mask ROMs (console boot ROMs and similar).
- Mapper: cartridge memory bank controllers.
- DateOnly: marks that carry nothing but a date (board stamps, batteries).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chiplabel.datecode import PartDateCode
from chiplabel.manufacturer import Manufacturer


@dataclass(frozen=True)
class GenericPart:
    kind: str
    manufacturer: Manufacturer | None = None
    date_code: PartDateCode | None = None

    @property
    def rom_id(self) -> str | None:
        return None


# ---------------------------------------------------------------------------
# Crystals
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Crystal:
    frequency: int
    manufacturer: Manufacturer | None = None
    date_code: PartDateCode | None = None

    FREQ_32_KIHZ = 32_768
    FREQ_4_MIHZ = 4_194_304
    FREQ_8_MIHZ = 8_388_608
    FREQ_20_MIHZ = 20_971_520
    FREQ_32_MIHZ = 33_554_432

    def format_frequency(self) -> str:
        """Render the frequency as printed in reports, e.g. "4.194304 MHz"."""
        if self.frequency > 1_000_000:
            return f"{self.frequency // 1_000_000}.{self.frequency % 1_000_000} MHz"
        if self.frequency > 1_000:
            return f"{self.frequency // 1_000}.{self.frequency % 1_000} kHz"
        return f"{self.frequency} Hz"

    @property
    def kind(self) -> str:
        return self.format_frequency()

    @property
    def rom_id(self) -> str | None:
        return None


# ---------------------------------------------------------------------------
# Mask ROMs
# ---------------------------------------------------------------------------

class GameRomType(Enum):
    """Nintendo ROM type code printed next to the game's ROM id."""
    GLOP_TOP = ""
    A0 = "A0"
    B0 = "B0"
    B1 = "B1"
    C1 = "C1"
    D1 = "D1"
    E = "E"
    E1 = "E1"
    F = "F"
    F1 = "F1"
    F2 = "F2"
    G1 = "G1"
    G2 = "G2"
    H2 = "H2"
    I2 = "I2"
    J2 = "J2"
    K2 = "K2"

    def __str__(self) -> str:
        return self.value


class MaskCodeVendor(Enum):
    NEC = "nec"
    OKI = "oki"
    SHARP = "sharp"


@dataclass(frozen=True)
class MaskCode:
    """Manufacturer-internal code identifying the mask a ROM was made from."""
    vendor: MaskCodeVendor
    code: str

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class GameMaskRom:
    rom_id: str | None
    rom_type: GameRomType
    manufacturer: Manufacturer | None = None
    chip_type: str | None = None
    mask_code: MaskCode | None = None
    date_code: PartDateCode | None = None

    @property
    def kind(self) -> str | None:
        return self.chip_type


@dataclass(frozen=True)
class MaskRom:
    """A mask ROM that is part of a console (SGB system ROMs)."""
    rom_id: str | None
    chip_type: str | None = None
    manufacturer: Manufacturer | None = None
    mask_code: MaskCode | None = None
    date_code: PartDateCode | None = None

    @property
    def kind(self) -> str | None:
        return self.chip_type


# ---------------------------------------------------------------------------
# Mappers
# ---------------------------------------------------------------------------

class MapperType(Enum):
    MBC1 = "MBC1"
    MBC2 = "MBC2"
    MBC3 = "MBC3"
    MBC30 = "MBC30"
    MBC5 = "MBC5"
    MBC6 = "MBC6"
    MBC7 = "MBC7"
    MMM01 = "MMM01"
    HUC3 = "HuC-3"
    HUC1 = "HuC-1"
    TAMA5 = "TAMA5"


class MapperChip(Enum):
    """A specific mapper chip revision; the value is its display name."""
    MBC1 = "MBC1"
    MBC1A = "MBC1A"
    MBC1B = "MBC1B"
    MBC1B1 = "MBC1B1"
    MBC2 = "MBC2"
    MBC2A = "MBC2A"
    MBC3 = "MBC3"
    MBC3A = "MBC3A"
    MBC3B = "MBC3B"
    MBC30 = "MBC30"
    MBC5 = "MBC5"
    MBC6 = "MBC6"
    MBC7 = "MBC7"
    MMM01 = "MMM01"
    HUC3 = "HuC-3"
    HUC1 = "HuC-1"
    HUC1A = "HuC-1A"
    TAMA5 = "TAMA5"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def mapper_type(self) -> MapperType:
        return _MAPPER_TYPES[self]


_MAPPER_TYPES = {
    MapperChip.MBC1: MapperType.MBC1,
    MapperChip.MBC1A: MapperType.MBC1,
    MapperChip.MBC1B: MapperType.MBC1,
    MapperChip.MBC1B1: MapperType.MBC1,
    MapperChip.MBC2: MapperType.MBC2,
    MapperChip.MBC2A: MapperType.MBC2,
    MapperChip.MBC3: MapperType.MBC3,
    MapperChip.MBC3A: MapperType.MBC3,
    MapperChip.MBC3B: MapperType.MBC3,
    MapperChip.MBC30: MapperType.MBC30,
    MapperChip.MBC5: MapperType.MBC5,
    MapperChip.MBC6: MapperType.MBC6,
    MapperChip.MBC7: MapperType.MBC7,
    MapperChip.MMM01: MapperType.MMM01,
    MapperChip.HUC3: MapperType.HUC3,
    MapperChip.HUC1: MapperType.HUC1,
    MapperChip.HUC1A: MapperType.HUC1,
    MapperChip.TAMA5: MapperType.TAMA5,
}


@dataclass(frozen=True)
class Mapper:
    chip: MapperChip
    manufacturer: Manufacturer | None = None
    date_code: PartDateCode | None = None

    @property
    def kind(self) -> str:
        return self.chip.display_name

    @property
    def rom_id(self) -> str | None:
        return None


# ---------------------------------------------------------------------------
# Date-only marks
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DateOnly:
    date_code: PartDateCode | None = None

    @property
    def kind(self) -> str | None:
        return None

    @property
    def manufacturer(self) -> Manufacturer | None:
        return None

    @property
    def rom_id(self) -> str | None:
        return None


ParsedPart = GenericPart | Crystal | GameMaskRom | MaskRom | Mapper | DateOnly

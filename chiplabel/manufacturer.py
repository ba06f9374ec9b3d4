"""
Closed catalog of component manufacturers.

Every member must have an entry in _DISPLAY_NAMES; the unit tests check
the mapping is total so a newly added maker cannot silently render blank.
"""

from __future__ import annotations

from enum import Enum


class Manufacturer(Enum):
    AMIC = "amic"
    ANALOG = "analog"
    ATMEL = "atmel"
    AT_T = "at-t"
    BSI = "bsi"
    CROSSLINK = "crosslink"
    FUJITSU = "fujitsu"
    HUDSON = "hudson"
    HYNIX = "hynix"
    HYUNDAI = "hyundai"
    KDS = "kds"
    KINSEKI = "kinseki"
    LGS = "lgs"
    LSI_LOGIC = "lsi-logic"
    MACRONIX = "macronix"
    MAGNACHIP = "magnachip"
    MANI = "mani"
    MAXELL = "maxell"
    MITSUBISHI = "mitsubishi"
    MITSUMI = "mitsumi"
    MOSEL_VITELIC = "mosel-vitelic"
    MOTOROLA = "motorola"
    NEC = "nec"
    OKI = "oki"
    PANASONIC = "panasonic"
    ROHM = "rohm"
    SAMSUNG = "samsung"
    SANYO = "sanyo"
    SEIKO = "seiko"
    SHARP = "sharp"
    SMSC = "smsc"
    SONY = "sony"
    SST = "sst"
    ST_MICRO = "st-micro"
    TDK = "tdk"
    TEXAS_INSTRUMENTS = "texas-instruments"
    TOSHIBA = "toshiba"
    VICTRONIX = "victronix"
    WINBOND = "winbond"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES: dict[Manufacturer, str] = {
    Manufacturer.AMIC: "AMIC Technology",
    Manufacturer.ANALOG: "Analog Devices",
    Manufacturer.ATMEL: "Atmel",
    Manufacturer.AT_T: "AT&T Technologies",
    Manufacturer.BSI: "BSI",
    Manufacturer.CROSSLINK: "Crosslink Semiconductor",
    Manufacturer.FUJITSU: "Fujitsu",
    Manufacturer.HUDSON: "Hudson",
    Manufacturer.HYNIX: "Hynix",
    Manufacturer.HYUNDAI: "Hyundai",
    Manufacturer.KDS: "Daishinku",
    Manufacturer.KINSEKI: "Kinseki",
    Manufacturer.LGS: "Lucky GoldStar",
    Manufacturer.LSI_LOGIC: "LSI Logic",
    Manufacturer.MACRONIX: "Macronix",
    Manufacturer.MAGNACHIP: "Magnachip",
    Manufacturer.MANI: "Mani Ltd.",
    Manufacturer.MAXELL: "Maxell",
    Manufacturer.MITSUBISHI: "Mitsubishi",
    Manufacturer.MITSUMI: "Mitsumi",
    Manufacturer.MOSEL_VITELIC: "Mosel-Vitelic",
    Manufacturer.MOTOROLA: "Motorola",
    Manufacturer.NEC: "NEC",
    Manufacturer.OKI: "OKI",
    Manufacturer.PANASONIC: "Panasonic",
    Manufacturer.ROHM: "ROHM",
    Manufacturer.SAMSUNG: "Samsung",
    Manufacturer.SANYO: "Sanyo",
    Manufacturer.SEIKO: "Seiko Instruments Inc.",
    Manufacturer.SHARP: "Sharp",
    Manufacturer.SMSC: "Standard Microsystems Corporation",
    Manufacturer.SONY: "Sony",
    Manufacturer.SST: "SST",
    Manufacturer.ST_MICRO: "STMicroelectronics",
    Manufacturer.TDK: "TDK",
    Manufacturer.TEXAS_INSTRUMENTS: "Texas Instruments",
    Manufacturer.TOSHIBA: "Toshiba",
    Manufacturer.VICTRONIX: "Victronix",
    Manufacturer.WINBOND: "Winbond",
}

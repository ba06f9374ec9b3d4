"""
Parsers sub-package for chiplabel.

Contains the label family grammars, one module per manufacturer, plus the
shared parser protocol.

Design: Strategy Pattern
- base.py defines the LabelParser ABC, FamilyParser (one printed label
  format) and MultiParser (an ordered category dispatcher).
- <maker>.py modules declare families as module-level UPPERCASE constants.
  The registry indexes every FamilyParser constant of the modules listed in
  MAKER_MODULES by its constant name, and the category catalog
  (categories/*.yaml) refers to families by that name.
- Families of parts whose maker is not known live in unknown.py; date-only
  marks (mainboard stamps, batteries) live in stamp.py.
"""

MAKER_MODULES = (
    "bsi",
    "crosslink",
    "flash",
    "fujitsu",
    "hudson",
    "hynix",
    "hyundai",
    "kds",
    "kinseki",
    "lgs",
    "lsi_logic",
    "macronix",
    "mitsubishi",
    "mitsumi",
    "mosel_vitelic",
    "motorola",
    "nec",
    "oki",
    "panasonic",
    "rohm",
    "samsung",
    "sanyo",
    "seiko",
    "sharp",
    "sram",
    "stamp",
    "tdk",
    "ti",
    "toshiba",
    "unknown",
    "winbond",
)

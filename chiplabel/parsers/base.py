"""
Base parser protocol / ABC for chiplabel.

Two implementations share the LabelParser contract:

1. FamilyParser: one physical label format. A fully anchored grammar
   (``re.fullmatch``, never a substring search) bound to a builder that
   turns the match into a typed part record.
2. MultiParser: an ordered list of families for one logical category.
   The first family that accepts the label wins.

Both raise typed errors instead of returning sentinels:
- NoFamilyMatchedError when no grammar accepts the label.
- InvalidFieldError when a grammar accepted it but a captured field (week,
  month, letter code) failed conversion.

Why an ABC:
- Category dispatchers and single families are interchangeable for callers
  (the registry hands out either).
- Builders stay tiny: most families only differ in their regex and a
  kind/manufacturer pair, see the ``generic``/``crystal``/... factories.
"""

from __future__ import annotations

import logging
import re
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

from chiplabel.exceptions import InvalidFieldError, NoFamilyMatchedError
from chiplabel.grammar import date_from_groups
from chiplabel.manufacturer import Manufacturer
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

logger = logging.getLogger(__name__)

T = TypeVar("T")

Builder = Callable[[re.Match], object]


# ---------------------------------------------------------------------------
# Exactly-once lazy value
# ---------------------------------------------------------------------------

class Lazy(Generic[T]):
    """Compute a value on first access, then return the cached value.

    Safe under concurrent first access: the factory runs exactly once, other
    threads wait on the lock and then read the finished value. After
    initialization ``get`` does not touch the lock.
    """

    _UNSET = object()

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._value: object = Lazy._UNSET
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._value is not Lazy._UNSET

    def get(self) -> T:
        value = self._value
        if value is Lazy._UNSET:
            with self._lock:
                value = self._value
                if value is Lazy._UNSET:
                    value = self._factory()
                    self._value = value
        return value  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# Parser protocol
# ---------------------------------------------------------------------------

class LabelParser(ABC):
    """Abstract base class for anything that turns a label into a part."""

    name: str

    @abstractmethod
    def parse(self, label: str) -> object:
        """Parse a transcribed component label.

        Args:
            label: The label text, lines separated by spaces or newlines.

        Returns:
            A typed part record (GenericPart, Crystal, GameMaskRom, ...).

        Raises:
            NoFamilyMatchedError: If no grammar accepts the label.
            InvalidFieldError: If a grammar accepts it but a field is invalid.
        """

    def accepts(self, label: str) -> bool:
        try:
            self.parse(label)
        except (NoFamilyMatchedError, InvalidFieldError):
            return False
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class FamilyParser(LabelParser):
    """A single label family: alternative anchored patterns plus a builder.

    Patterns are alternatives of the same printed format (Python regexes
    cannot reuse group names across ``|``, so layouts with different date
    fields are listed separately). They are tried in order.
    """

    def __init__(
        self,
        name: str,
        patterns: str | Sequence[str],
        build: Builder,
        examples: Sequence[str] = (),
    ) -> None:
        self.name = name
        self.patterns = (patterns,) if isinstance(patterns, str) else tuple(patterns)
        self.build = build
        self.examples = tuple(examples)
        self._compiled = Lazy(self._compile)

    def _compile(self) -> tuple[re.Pattern, ...]:
        logger.debug("Compiling family %s (%d patterns)", self.name, len(self.patterns))
        return tuple(re.compile(p) for p in self.patterns)

    def parse(self, label: str) -> object:
        error: InvalidFieldError | None = None
        for regex in self._compiled.get():
            m = regex.fullmatch(label)
            if m is None:
                continue
            try:
                return self.build(m)
            except InvalidFieldError as e:
                if error is None:
                    error = e
        if error is not None:
            raise error
        raise NoFamilyMatchedError(label, self.name)


class MultiParser(LabelParser):
    """Ordered alternation over the families of one category.

    Registration order is significant: when two families accept the same
    label the earlier one wins. With ``warn_on_ambiguity`` the remaining
    families are still tried so such overlaps get logged.
    """

    def __init__(
        self,
        name: str,
        parsers: Sequence[LabelParser],
        warn_on_ambiguity: bool = True,
    ) -> None:
        self.name = name
        self.parsers = tuple(parsers)
        self.warn_on_ambiguity = warn_on_ambiguity

    def parse(self, label: str) -> object:
        first_error: InvalidFieldError | None = None
        for index, parser in enumerate(self.parsers):
            try:
                result = parser.parse(label)
            except NoFamilyMatchedError:
                continue
            except InvalidFieldError as e:
                if first_error is None:
                    first_error = e
                continue
            if self.warn_on_ambiguity:
                others = [p.name for p in self.parsers[index + 1:] if p.accepts(label)]
                if others:
                    logger.warning(
                        "multiple matches for %r in %s: %s wins over %s",
                        label, self.name, parser.name, ", ".join(others),
                    )
            return result
        if first_error is not None:
            raise first_error
        raise NoFamilyMatchedError(label, self.name)

    def matching_families(self, label: str) -> list[str]:
        """Names of every family that accepts *label*, in registration order."""
        return [p.name for p in self.parsers if p.accepts(label)]


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

class _Groups(dict):
    """Match groups for str.format_map; absent or unmatched groups are ""."""

    def __missing__(self, key: str) -> str:
        return ""


def _fill(template: str | None, m: re.Match) -> str | None:
    """Format *template* with the match's named groups."""
    if template is None:
        return None
    return template.format_map(_Groups({k: v for k, v in m.groupdict().items() if v is not None}))


def _mask_code(mask_code: tuple[MaskCodeVendor, str] | None, m: re.Match) -> MaskCode | None:
    if mask_code is None:
        return None
    vendor, template = mask_code
    code = _fill(template, m)
    return MaskCode(vendor, code) if code else None


def generic(kind: str, manufacturer: Manufacturer | None) -> Builder:
    """Builder for GenericPart; *kind* may reference named groups, e.g. "{kind}-10"."""
    def build(m: re.Match) -> GenericPart:
        return GenericPart(_fill(kind, m), manufacturer, date_from_groups(m.groupdict()))
    return build


def crystal(frequency: int, manufacturer: Manufacturer | None) -> Builder:
    def build(m: re.Match) -> Crystal:
        return Crystal(frequency, manufacturer, date_from_groups(m.groupdict()))
    return build


def game_mask_rom(
    rom_type: GameRomType,
    manufacturer: Manufacturer | None,
    chip_type: str | None = None,
    mask_code: tuple[MaskCodeVendor, str] | None = None,
) -> Builder:
    """Builder for GameMaskRom; the ROM id comes from the ``rom_id`` group."""
    def build(m: re.Match) -> GameMaskRom:
        return GameMaskRom(
            rom_id=m.groupdict().get("rom_id"),
            rom_type=rom_type,
            manufacturer=manufacturer,
            chip_type=_fill(chip_type, m),
            mask_code=_mask_code(mask_code, m),
            date_code=date_from_groups(m.groupdict()),
        )
    return build


def mask_rom(
    chip_type: str | None,
    manufacturer: Manufacturer | None,
    mask_code: tuple[MaskCodeVendor, str] | None = None,
) -> Builder:
    """Builder for console MaskRom records; the ROM id comes from ``rom_id``."""
    def build(m: re.Match) -> MaskRom:
        return MaskRom(
            rom_id=m.groupdict().get("rom_id"),
            chip_type=_fill(chip_type, m),
            manufacturer=manufacturer,
            mask_code=_mask_code(mask_code, m),
            date_code=date_from_groups(m.groupdict()),
        )
    return build


def mapper(chip: MapperChip, manufacturer: Manufacturer | None) -> Builder:
    def build(m: re.Match) -> Mapper:
        return Mapper(chip, manufacturer, date_from_groups(m.groupdict()))
    return build


def date_only(m: re.Match) -> DateOnly:
    return DateOnly(date_from_groups(m.groupdict()))

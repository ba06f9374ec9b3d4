"""
Date code model for chiplabel.

Labels print manufacture dates in a handful of granularities. This module
holds both halves of the date story:

- The *parsed* form (PartDateCode): what the label literally says. A
  one-digit year is kept as Year.partial because nothing on the label tells
  which decade it belongs to.
- The *resolved* form (DateCode): a concrete calendar year plus month, week
  or jun, produced once the caller supplies a year hint (typically the
  console's assembly year). DateCode.calendar() renders the strings shown in
  reports ("Week 23/1994", "June/2000", "Jun 11-20/1998").

Why keep the two apart:
- Parsers stay pure functions of the label; only processing needs context.
- Resolution is where implausible years surface, so it is the one place
  that validates against the configured manufacturing window.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum

from chiplabel.config import DEFAULT_CONFIG, EngineConfig
from chiplabel.exceptions import InvalidFieldError

logger = logging.getLogger(__name__)

# Decades a partial year may belong to, in tie-break order
_DECADES = (1980, 1990, 2000)


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Year:
    """A year as printed on a label: either a full calendar year or a
    single decade digit (0-9)."""
    value: int
    is_partial: bool = False

    @classmethod
    def full(cls, year: int) -> Year:
        return cls(year, False)

    @classmethod
    def partial(cls, digit: int) -> Year:
        if not 0 <= digit <= 9:
            raise InvalidFieldError(
                f"partial year must be a single digit, got {digit}", "year", digit
            )
        return cls(digit, True)

    def __str__(self) -> str:
        return f"?{self.value}" if self.is_partial else str(self.value)


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def short_name(self) -> str:
        return self.display_name[:3]

    @property
    def days(self) -> int:
        """Day count outside of leap-year February."""
        if self in (Month.APRIL, Month.JUNE, Month.SEPTEMBER, Month.NOVEMBER):
            return 30
        if self is Month.FEBRUARY:
            return 28
        return 31


MIN_WEEK = 1
MAX_WEEK = 53


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


class Jun(Enum):
    """Japanese "jun": one of three ~10-day periods of a month."""
    FIRST = 1
    SECOND = 2
    THIRD = 3

    def range(self, year: int, month: Month) -> tuple[int, int]:
        """Return the inclusive (first_day, last_day) covered in the given month."""
        if self is Jun.FIRST:
            return 1, 10
        if self is Jun.SECOND:
            return 11, 20
        if month is Month.FEBRUARY and is_leap_year(year):
            return 21, 29
        return 21, month.days


# ---------------------------------------------------------------------------
# Parsed date codes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PartDateCode:
    """Base class of the date shapes a label can carry."""
    year: Year


@dataclass(frozen=True)
class YearOnly(PartDateCode):
    pass


@dataclass(frozen=True)
class YearMonth(PartDateCode):
    month: Month


@dataclass(frozen=True)
class YearWeek(PartDateCode):
    week: int

    def __post_init__(self) -> None:
        if not MIN_WEEK <= self.week <= MAX_WEEK:
            raise InvalidFieldError(
                f"week {self.week} outside {MIN_WEEK}..{MAX_WEEK}", "week", self.week
            )


# ---------------------------------------------------------------------------
# Year resolution
# ---------------------------------------------------------------------------

def guess_full_year(hint: int, partial_year: int) -> int:
    """Pick the decade for a one-digit year that lands closest to *hint*.

    Candidates are 1980+d, 1990+d and 2000+d. On an exact tie the earlier
    decade wins.

    >>> guess_full_year(1998, 9)
    1999
    """
    return min((decade + partial_year for decade in _DECADES), key=lambda y: abs(hint - y))


def to_full_year(
    year_hint: int | None,
    year: Year | None,
    config: EngineConfig | None = None,
) -> int | None:
    """Resolve a label year into a calendar year.

    Args:
        year_hint: Context year used to pick the decade of a partial year.
        year: The year from the label, if any.
        config: Supplies the plausible manufacturing window.

    Returns:
        The calendar year, or None if the label has no year or the year is
        partial and no hint is available.

    Raises:
        InvalidFieldError: If the resolved year is outside the window.
    """
    config = config or DEFAULT_CONFIG
    if year is None:
        return None
    if not year.is_partial:
        full = year.value
    elif year_hint is not None:
        full = guess_full_year(year_hint, year.value)
    else:
        logger.debug("Partial year %s left unresolved: no year hint", year)
        return None
    if not config.year_in_window(full):
        raise InvalidFieldError(
            f"suspicious year {full} calculated from {year_hint}:{year}",
            "year",
            full,
        )
    return full


# ---------------------------------------------------------------------------
# Resolved date codes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DateCode:
    year: int | None = None
    month: Month | None = None
    jun: Jun | None = None
    week: int | None = None

    @classmethod
    def loose_year_month(
        cls,
        year_hint: int | None,
        year: Year | None,
        month: Month | None,
        config: EngineConfig | None = None,
    ) -> DateCode:
        return cls(year=to_full_year(year_hint, year, config), month=month)

    @classmethod
    def loose_year_week(
        cls,
        year_hint: int | None,
        year: Year | None,
        week: int | None,
        config: EngineConfig | None = None,
    ) -> DateCode:
        return cls(year=to_full_year(year_hint, year, config), week=week)

    @classmethod
    def from_part(
        cls,
        year_hint: int | None,
        date_code: PartDateCode | None,
        jun: Jun | None = None,
        config: EngineConfig | None = None,
    ) -> DateCode:
        """Resolve a parsed date code; *jun* only applies to year+month dates."""
        if isinstance(date_code, YearMonth):
            resolved = cls.loose_year_month(year_hint, date_code.year, date_code.month, config)
            return cls(year=resolved.year, month=resolved.month, jun=jun)
        if isinstance(date_code, YearWeek):
            return cls.loose_year_week(year_hint, date_code.year, date_code.week, config)
        if date_code is not None:
            return cls.loose_year_week(year_hint, date_code.year, None, config)
        return cls()

    def calendar(self) -> str | None:
        if self.year is None:
            return None
        if self.month is not None:
            if self.jun is not None:
                first, last = self.jun.range(self.year, self.month)
                return f"{self.month.short_name} {first}-{last}/{self.year}"
            return f"{self.month.display_name}/{self.year}"
        if self.week is not None:
            return f"Week {self.week}/{self.year}"
        return str(self.year)

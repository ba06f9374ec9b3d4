"""
Token grammar primitives for label families.

Family grammars are written as regular expressions assembled from the small
vocabulary in this module:

- Tokens: bounded-width charset runs (digits, uppercase, alphanumeric
  uppercase, letters). ``str(token)`` is the regex fragment; ``take`` is the
  standalone matcher used when a caller wants the primitive on its own.
- Literals and line joining: ``lit`` escapes printed text, ``lines`` joins
  the physical lines of a label with the ``[ \\n]`` separator transcriptions
  use.
- Semantic leaf converters: ``year1``, ``year2``, ``week2``, ``month2`` and
  the manufacturer-specific month and year letter codes. They turn a captured
  substring into a date value or raise InvalidFieldError.
- Date fields: regex fragments whose named groups record *which* converter
  applies to each capture. ``date_from_groups`` turns any match built from
  them into a PartDateCode, so family builders never repeat the date logic.

Why named-group tagging instead of per-family date callbacks:
- One label family often accepts two date layouts (e.g. an old one-digit
  year/letter-month form and a newer year/week form); the matched group
  names say which one fired.
- Range validation lives in one place and fails the same way everywhere.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from chiplabel.datecode import (
    MAX_WEEK,
    MIN_WEEK,
    Month,
    PartDateCode,
    Year,
    YearMonth,
    YearOnly,
    YearWeek,
)
from chiplabel.exceptions import InvalidFieldError

# Physical line break in a transcribed label: either a space or a newline
SEP = "[ \n]"


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------

class Token:
    """A run of ``min_len``..``max_len`` characters from one charset."""

    def __init__(self, charset: str, min_len: int, max_len: int | None = None) -> None:
        self.charset = charset
        self.min_len = min_len
        self.max_len = min_len if max_len is None else max_len
        self._regex = re.compile(str(self))

    def __str__(self) -> str:
        if self.min_len == self.max_len:
            return f"[{self.charset}]{{{self.min_len}}}"
        return f"[{self.charset}]{{{self.min_len},{self.max_len}}}"

    def __repr__(self) -> str:
        return f"Token({str(self)!r})"

    def take(self, text: str) -> tuple[str, str] | None:
        """Consume a matching prefix of *text*.

        Returns:
            ``(matched, rest)``, or None without consuming anything when the
            prefix is too short or starts with a character outside the charset.
        """
        m = self._regex.match(text)
        if m is None:
            return None
        return m.group(0), text[m.end():]


def digits(n: int, m: int | None = None) -> Token:
    return Token("0-9", n, m)


def uppers(n: int, m: int | None = None) -> Token:
    return Token("A-Z", n, m)


def alnum_uppers(n: int, m: int | None = None) -> Token:
    return Token("A-Z0-9", n, m)


def alphas(n: int, m: int | None = None) -> Token:
    return Token("A-Za-z", n, m)


def lit(text: str) -> str:
    """Regex fragment matching *text* exactly."""
    return re.escape(text)


def one_of(*options: str) -> str:
    """Non-capturing alternation of literal options, tried in the given order."""
    return "(?:" + "|".join(lit(o) for o in options) + ")"


def lines(*parts: object) -> str:
    """Join label lines with the space-or-newline separator."""
    return SEP.join(str(p) for p in parts)


def group(name: str, fragment: object) -> str:
    return f"(?P<{name}>{fragment})"


DMG_ROM_CODE = "DMG-[A-Z0-9]{3,4}-[0-9]"
CGB_ROM_CODE = "CGB-[A-Z0-9]{4}-[0-9]"
AGB_ROM_CODE = "AGB-[A-Z0-9]{4}-[0-9]"
GB_ROM_CODE = f"(?:{DMG_ROM_CODE}|{CGB_ROM_CODE})"


# ---------------------------------------------------------------------------
# Semantic leaf converters
# ---------------------------------------------------------------------------

# Sharp marks a few early-2000s parts with letters instead of the year digits
IRREGULAR_YEARS: dict[str, int] = {
    "AL": 2000,
    "AA": 2001,
}


def _number(text: str, width: int, field: str) -> int:
    if len(text) != width or not text.isascii() or not text.isdigit():
        raise InvalidFieldError(f"invalid {field} {text!r}", field, text)
    return int(text)


def year1(text: str) -> Year:
    return Year.partial(_number(text, 1, "year"))


def year2(text: str) -> Year:
    if text in IRREGULAR_YEARS:
        return Year.full(IRREGULAR_YEARS[text])
    value = _number(text, 2, "year")
    return Year.full(2000 + value if value < 88 else 1900 + value)


def week2(text: str) -> int:
    value = _number(text, 2, "week")
    if not MIN_WEEK <= value <= MAX_WEEK:
        raise InvalidFieldError(f"invalid week {text!r}", "week", text)
    return value


def month2(text: str) -> Month:
    value = _number(text, 2, "month")
    if not 1 <= value <= 12:
        raise InvalidFieldError(f"invalid month {text!r}", "month", text)
    return Month(value)


def _letter_code(table: Mapping[str, Month], field: str):
    def convert(text: str) -> Month:
        try:
            return table[text]
        except KeyError:
            raise InvalidFieldError(f"invalid {field} {text!r}", field, text) from None
    return convert


_FIRST_NINE = {str(i): Month(i) for i in range(1, 10)}

# A-M without I
month1_abc = _letter_code(
    {letter: Month(i) for i, letter in enumerate("ABCDEFGHJKLM", start=1)},
    "month",
)
month1_123abc = _letter_code(
    {**_FIRST_NINE, "A": Month.OCTOBER, "B": Month.NOVEMBER, "C": Month.DECEMBER},
    "month",
)
month1_123xyz = _letter_code(
    {**_FIRST_NINE, "X": Month.OCTOBER, "Y": Month.NOVEMBER, "Z": Month.DECEMBER},
    "month",
)
month1_123ond = _letter_code(
    {
        **_FIRST_NINE,
        "O": Month.OCTOBER,
        "0": Month.OCTOBER,
        "N": Month.NOVEMBER,
        "D": Month.DECEMBER,
    },
    "month",
)

_SEIKO_YEARS = {"0": 0, **{str(i): i for i in range(1, 10)}}
_SEIKO_YEARS.update({letter: i for i, letter in enumerate("ABCDEFGHJ", start=1)})


def seiko_year1(text: str) -> Year:
    if text not in _SEIKO_YEARS:
        raise InvalidFieldError(f"invalid year {text!r}", "year", text)
    return Year.partial(_SEIKO_YEARS[text])


# ---------------------------------------------------------------------------
# Date fields
# ---------------------------------------------------------------------------

# group name -> (fragment, converter); dict order is lookup order
_YEAR_FORMS = {
    "y1": ("[0-9]", year1),
    "y2": ("[0-9]{2}", year2),
    "ysharp": ("(?:[0-9]{2}|AL|AA)", year2),
    "yseiko": ("[0-9A-HJ]", seiko_year1),
}
_MONTH_FORMS = {
    "m2": ("[0-9]{2}", month2),
    "mabc": ("[A-HJ-M]", month1_abc),
    "m123abc": ("[1-9ABC]", month1_123abc),
    "m123xyz": ("[1-9XYZ]", month1_123xyz),
    "m123ond": ("[1-9O0ND]", month1_123ond),
}
_YEAR_KINDS = {"1": "y1", "2": "y2", "sharp": "ysharp", "seiko": "yseiko"}
_MONTH_KINDS = {"2": "m2", "abc": "mabc", "123abc": "m123abc", "123xyz": "m123xyz", "123ond": "m123ond"}


@dataclass(frozen=True)
class DateField:
    """A regex fragment carrying tagged date groups."""
    fragment: str

    def __str__(self) -> str:
        return self.fragment

    def convert(self, match: re.Match) -> PartDateCode | None:
        return date_from_groups(match.groupdict())


def _year_group(kind: str) -> str:
    name = _YEAR_KINDS[kind]
    return group(name, _YEAR_FORMS[name][0])


def _month_group(kind: str) -> str:
    name = _MONTH_KINDS[kind]
    return group(name, _MONTH_FORMS[name][0])


def year_week(year: str = "2", between: str = "") -> DateField:
    return DateField(_year_group(year) + between + group("w2", "[0-9]{2}"))


def year_month(year: str = "1", month: str = "2", between: str = "") -> DateField:
    return DateField(_year_group(year) + between + _month_group(month))


def month_year(month: str = "abc", year: str = "1") -> DateField:
    return DateField(_month_group(month) + _year_group(year))


def year_only(year: str = "1") -> DateField:
    return DateField(_year_group(year))


YEAR1 = year_only("1")
YEAR1_WEEK2 = year_week("1")
YEAR2_WEEK2 = year_week("2")
SHARP_YEAR2_WEEK2 = year_week("sharp")
YEAR1_MONTH2 = year_month("1", "2")
YEAR2_MONTH2 = year_month("2", "2")
YEAR1_MONTH1_ABC = year_month("1", "abc")
YEAR1_MONTH1_123ABC = year_month("1", "123abc")
YEAR1_MONTH1_123XYZ = year_month("1", "123xyz")


def date_from_groups(groups: Mapping[str, str | None]) -> PartDateCode | None:
    """Build a PartDateCode from the tagged groups of a match.

    Returns None when no year group participated in the match.

    Raises:
        InvalidFieldError: If a captured value fails conversion.
    """
    year = None
    for name, (_, convert) in _YEAR_FORMS.items():
        text = groups.get(name)
        if text is not None:
            year = convert(text)
            break
    if year is None:
        return None
    week = groups.get("w2")
    if week is not None:
        return YearWeek(year, week2(week))
    for name, (_, convert) in _MONTH_FORMS.items():
        text = groups.get(name)
        if text is not None:
            return YearMonth(year, convert(text))
    return YearOnly(year)

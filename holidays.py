"""Easter computation and the sample holiday list."""

from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, date, timedelta

from calendar_logic import MONTH_NAMES

HolidayTuple = tuple[int, int, str]


def easter_sunday(year: int) -> tuple[int, int]:
    """Return (month, day) of Easter Sunday (Anonymous Gregorian algorithm)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    el = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * el) // 451
    month, day = divmod(h + el - 7 * m + 114, 31)
    return month, day + 1


def _shift(year: int, month: int, day: int, offset: int) -> tuple[int, int, int]:
    """Add ``offset`` days to a date of any Gregorian year.

    ``date`` only covers years 1..9999, so other years are moved by whole
    400-year cycles, which repeat the Gregorian calendar exactly.
    """
    proxy = year
    if not MINYEAR <= year <= MAXYEAR:
        proxy = 2000 + year % 400
    shifted = date(proxy, month, day) + timedelta(days=offset)
    return year + (shifted.year - proxy), shifted.month, shifted.day


# --- date generators --------------------------------------------------------

def _fixed(m: int, d: int):
    return lambda year: (m, d)


def _easter_rel(offset: int):
    def fn(year):
        _y, m, d = _shift(year, *easter_sunday(year), offset)
        return m, d
    return fn


# --- Sample holidays in display order: (name, dates_fn) ----------------------

SAMPLE_HOLIDAYS: list[tuple] = [
    ("New Year",                _fixed(1, 1)),
    ("Valentine's Day [heart]", _fixed(2, 14)),
    ("St. Patrick's Day",       _fixed(3, 17)),
    ("April Fool's Day",        _fixed(4, 1)),
    ("Maundy Thursday",         _easter_rel(-3)),
    ("Good Friday",             _easter_rel(-2)),
    ("Halloween",               _fixed(10, 31)),
    ("Christmas Eve",           _fixed(12, 24)),
    ("Christmas*",              _fixed(12, 25)),
    ("New Year's Eve",          _fixed(12, 31)),
]

_HOLY_WEEK = {"Maundy Thursday", "Good Friday"}


def holidays_for_year(year: int) -> list[HolidayTuple]:
    """Return [(month, day, name), ...] in declaration order."""
    return [(*dates_fn(year), name) for name, dates_fn in SAMPLE_HOLIDAYS]


def holy_week(year: int) -> list[HolidayTuple]:
    """Return Maundy Thursday and Good Friday as (month, day, name)."""
    return [h for h in holidays_for_year(year) if h[2] in _HOLY_WEEK]


def format_holiday(month: int, day: int, name: str) -> str:
    return f"{MONTH_NAMES[month - 1][:3]} {day}: {name}"


def sample_holidays(year: int) -> str:
    """Return the sample holidays as ``Mmm d: Name`` lines."""
    return "\n".join(format_holiday(*h) for h in holidays_for_year(year))

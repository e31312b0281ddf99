"""Pure calendar calculations — month grids and event placement."""

from __future__ import annotations

import calendar
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

DAY_ABBR = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

GRID_WEEKS = 6
GRID_CELLS = GRID_WEEKS * 7
EVENT_SEPARATOR = "; "

EventSpec = Iterable[Mapping]


@dataclass(frozen=True)
class Day:
    """One cell of a month grid; padding cells belong to adjacent months."""

    date: int
    event: str
    day_of_week: int
    this_month: bool

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "event": self.event,
            "dayOfWeek": self.day_of_week,
            "thisMonth": self.this_month,
        }


Week = tuple[Day, ...]


@dataclass(frozen=True)
class Month:
    name: str
    number: int
    weeks: tuple[Week, ...]

    def days(self) -> list[Day]:
        """All 42 cells, row by row."""
        return [day for week in self.weeks for day in week]

    def in_month_days(self) -> list[Day]:
        return [day for day in self.days() if day.this_month]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "number": self.number,
            "weeks": [[day.to_dict() for day in week] for week in self.weeks],
        }


@dataclass(frozen=True)
class Calendar:
    year: int
    months: tuple[Month, ...]

    def to_dict(self) -> dict:
        return {"year": self.year, "months": [m.to_dict() for m in self.months]}


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a zero-based month of any Gregorian year."""
    return calendar.monthrange(year, month + 1)[1]


def first_weekday(year: int, month: int) -> int:
    """Return the weekday of day 1 of a zero-based month, Sunday=0."""
    # calendar counts Monday=0 and maps out-of-range years onto the 400-year cycle
    return (calendar.weekday(year, month + 1, 1) + 1) % 7


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier (zero-based months)."""
    if month == 0:
        return year - 1, 11
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later (zero-based months)."""
    if month == 11:
        return year + 1, 0
    return year, month + 1


def _matches(entry: Mapping, month: int, date: int) -> bool:
    # bool is an int subclass; True must not land on day 1
    m, d = entry.get("month"), entry.get("date")
    if isinstance(m, bool) or isinstance(d, bool):
        return False
    return m == month and d == date and isinstance(entry.get("event"), str)


def _events_for(events: list[Mapping], month: int, date: int) -> str:
    return EVENT_SEPARATOR.join(e["event"] for e in events if _matches(e, month, date))


def month_grid(year: int, month: int, events: EventSpec = ()) -> Month:
    """Return the 6×7 grid for a zero-based month.

    Days of the previous month pad the first row and days of the next month
    fill the rest. A month starting on Sunday is pushed down one row so it
    never touches the top edge of the grid.
    """
    # Out-of-range months roll into neighbouring years
    year, month = year + month // 12, month % 12
    events = [e for e in events if isinstance(e, Mapping)]

    first_day = first_weekday(year, month)
    last_date = days_in_month(year, month)

    leading = first_day
    trailing = GRID_CELLS - last_date - leading
    if leading == 0:
        leading += 7
        trailing -= 7

    prev_last = days_in_month(*prev_month(year, month))

    cells: list[Day] = [
        Day(prev_last - leading + 1 + i, "", i % 7, False)
        for i in range(leading)
    ]
    cells.extend(
        Day(offset + 1, _events_for(events, month, offset + 1),
            (first_day + offset) % 7, True)
        for offset in range(last_date)
    )
    cells.extend(
        Day(i + 1, "", (first_day + last_date + i) % 7, False)
        for i in range(max(trailing, 0))
    )

    weeks = tuple(tuple(cells[r * 7:(r + 1) * 7]) for r in range(GRID_WEEKS))
    return Month(MONTH_NAMES[month], month, weeks)


def build_calendar(year: int, events: EventSpec = ()) -> Calendar:
    """Return all twelve month grids of a year with events placed on them."""
    events = list(events)
    return Calendar(year, tuple(month_grid(year, m, events) for m in range(12)))

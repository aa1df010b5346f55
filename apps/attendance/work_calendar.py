"""
Working-calendar computation for attendance and payroll inputs.

Pure functions only: no ORM access here. Holiday data is supplied through a
``HolidayProvider`` so new years can be added without touching the iteration.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Mapping, Optional, Protocol, Sequence, Union


PREDEFINED = "predefined"
CUSTOM = "custom"

# date.weekday(): Monday=0 .. Sunday=6
WEEKEND_WEEKDAYS = frozenset({5, 6})


@dataclass(frozen=True)
class Holiday:
    date: str
    name: str


@dataclass(frozen=True)
class CustomHoliday:
    day: int
    name: str


@dataclass(frozen=True)
class CalendarHoliday:
    date: str
    name: str
    type: str


@dataclass(frozen=True)
class MonthDetails:
    year: int
    month_index: int
    total_days_in_month: int
    working_days: int
    weekend_days: int
    holidays: list[CalendarHoliday] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month_index + 1,
            "total_days_in_month": self.total_days_in_month,
            "working_days": self.working_days,
            "weekend_days": self.weekend_days,
            "holidays": [
                {"date": h.date, "name": h.name, "type": h.type}
                for h in self.holidays
            ],
        }


class HolidayProvider(Protocol):
    def holidays_for_year(self, year: int) -> list[Holiday]:
        ...


HolidayEntry = Union[Holiday, Sequence[str]]


class StaticHolidayProvider:
    """In-memory provider built from a ``{year: [(iso_date, name), ...]}`` mapping."""

    def __init__(self, table: Optional[Mapping[int, Iterable[HolidayEntry]]] = None):
        self._table: dict[int, list[Holiday]] = {}
        for year, entries in (table or {}).items():
            self._table[int(year)] = [self._coerce(entry) for entry in entries]

    @staticmethod
    def _coerce(entry: HolidayEntry) -> Holiday:
        if isinstance(entry, Holiday):
            return entry
        iso_date, name = entry
        return Holiday(date=str(iso_date), name=str(name))

    def holidays_for_year(self, year: int) -> list[Holiday]:
        return list(self._table.get(int(year), []))


def days_in_month(year: int, month_index: int) -> int:
    return calendar.monthrange(year, month_index + 1)[1]


def is_weekend(day: date) -> bool:
    return day.weekday() in WEEKEND_WEEKDAYS


def get_month_details(
    year: int,
    month_index: int,
    custom_holidays: Iterable[CustomHoliday] = (),
    *,
    provider: Optional[HolidayProvider] = None,
) -> MonthDetails:
    """
    Classify every day of the month.

    Rules, in order:
    - Saturday/Sunday is a weekend day; holiday rules are not evaluated
      (a holiday on a weekend is dropped).
    - a predefined holiday for that ISO date;
    - a custom holiday with the same day-of-month;
    - otherwise a working day.

    ``month_index`` is zero-based (0 = January).
    """
    if not 0 <= month_index <= 11:
        raise ValueError(f"month_index must be in 0..11, got {month_index}")

    predefined = {}
    if provider is not None:
        for holiday in provider.holidays_for_year(year):
            predefined.setdefault(holiday.date, holiday)
    custom = list(custom_holidays)

    working_days = 0
    weekend_days = 0
    holidays: list[CalendarHoliday] = []

    for day_number in range(1, days_in_month(year, month_index) + 1):
        current = date(year, month_index + 1, day_number)

        if is_weekend(current):
            weekend_days += 1
            continue

        iso = current.isoformat()
        match = predefined.get(iso)
        if match:
            holidays.append(CalendarHoliday(date=iso, name=match.name, type=PREDEFINED))
            continue

        custom_match = next((h for h in custom if h.day == day_number), None)
        if custom_match:
            holidays.append(CalendarHoliday(date=iso, name=custom_match.name, type=CUSTOM))
            continue

        working_days += 1

    return MonthDetails(
        year=year,
        month_index=month_index,
        total_days_in_month=days_in_month(year, month_index),
        working_days=working_days,
        weekend_days=weekend_days,
        holidays=holidays,
    )

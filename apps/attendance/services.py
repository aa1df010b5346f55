from __future__ import annotations

import calendar
from datetime import date

from .holidays import get_holiday_provider
from .models import OrganizationHoliday
from .work_calendar import CustomHoliday, HolidayProvider, MonthDetails, get_month_details


def month_bounds(year: int, month: int) -> tuple[date, date]:
    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])
    return first, last


def organization_holidays(year: int, month: int) -> list[CustomHoliday]:
    first, last = month_bounds(year, month)
    rows = OrganizationHoliday.objects.filter(is_active=True, date__range=(first, last)).order_by("date")
    return [CustomHoliday(day=row.date.day, name=row.name) for row in rows]


def month_details(year: int, month: int, *, provider: HolidayProvider | None = None) -> MonthDetails:
    """
    Calendar for a 1-based ``month`` with the configured public holidays and
    the organization holidays stored for that month.
    """
    return get_month_details(
        year,
        month - 1,
        organization_holidays(year, month),
        provider=provider or get_holiday_provider(),
    )


def default_total_days(year: int, month: int) -> int:
    return month_details(year, month).working_days

from __future__ import annotations

from django.conf import settings
from django.utils.module_loading import import_string

from .work_calendar import Holiday, StaticHolidayProvider
from .models import PublicHoliday


DEFAULT_PROVIDER = "apps.attendance.holidays.SettingsHolidayProvider"


class SettingsHolidayProvider(StaticHolidayProvider):
    """Holiday table from ``settings.PUBLIC_HOLIDAYS``."""

    def __init__(self):
        super().__init__(getattr(settings, "PUBLIC_HOLIDAYS", {}))


class DatabaseHolidayProvider:
    """Holiday table maintained as ``PublicHoliday`` rows."""

    def holidays_for_year(self, year: int) -> list[Holiday]:
        return [
            Holiday(date=row.date.isoformat(), name=row.name)
            for row in PublicHoliday.objects.filter(date__year=year).order_by("date")
        ]


def get_holiday_provider():
    path = getattr(settings, "WORK_CALENDAR_HOLIDAY_PROVIDER", DEFAULT_PROVIDER) or DEFAULT_PROVIDER
    return import_string(path)()

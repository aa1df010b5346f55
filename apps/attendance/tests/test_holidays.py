from datetime import date
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.attendance.holidays import DatabaseHolidayProvider, SettingsHolidayProvider, get_holiday_provider
from apps.attendance.models import OrganizationHoliday, PublicHoliday
from apps.attendance.services import default_total_days, month_details, organization_holidays
from apps.attendance.work_calendar import Holiday


TABLE = {
    2025: [("2025-08-15", "Independence Day"), ("2025-10-02", "Gandhi Jayanti")],
    2026: [("2026-01-26", "Republic Day")],
}


def test_settings_provider_reads_table(settings):
    settings.PUBLIC_HOLIDAYS = TABLE

    holidays = SettingsHolidayProvider().holidays_for_year(2025)

    assert holidays == [
        Holiday(date="2025-08-15", name="Independence Day"),
        Holiday(date="2025-10-02", name="Gandhi Jayanti"),
    ]
    assert SettingsHolidayProvider().holidays_for_year(2030) == []


def test_get_holiday_provider_uses_dotted_path(settings):
    settings.WORK_CALENDAR_HOLIDAY_PROVIDER = "apps.attendance.holidays.DatabaseHolidayProvider"
    assert isinstance(get_holiday_provider(), DatabaseHolidayProvider)

    settings.WORK_CALENDAR_HOLIDAY_PROVIDER = "apps.attendance.holidays.SettingsHolidayProvider"
    assert isinstance(get_holiday_provider(), SettingsHolidayProvider)


@pytest.mark.django_db
def test_database_provider_reads_rows_for_year():
    PublicHoliday.objects.create(date=date(2025, 10, 2), name="Gandhi Jayanti")
    PublicHoliday.objects.create(date=date(2025, 8, 15), name="Independence Day")
    PublicHoliday.objects.create(date=date(2026, 1, 26), name="Republic Day")

    holidays = DatabaseHolidayProvider().holidays_for_year(2025)

    assert [h.date for h in holidays] == ["2025-08-15", "2025-10-02"]


@pytest.mark.django_db
def test_organization_holidays_limited_to_active_rows_in_month():
    OrganizationHoliday.objects.create(date=date(2025, 8, 20), name="Founders Day")
    OrganizationHoliday.objects.create(date=date(2025, 8, 21), name="Cancelled", is_active=False)
    OrganizationHoliday.objects.create(date=date(2025, 9, 3), name="Offsite")

    assert [(h.day, h.name) for h in organization_holidays(2025, 8)] == [(20, "Founders Day")]


@pytest.mark.django_db
def test_month_details_combines_public_and_organization_holidays(settings):
    settings.PUBLIC_HOLIDAYS = TABLE
    settings.WORK_CALENDAR_HOLIDAY_PROVIDER = "apps.attendance.holidays.SettingsHolidayProvider"
    OrganizationHoliday.objects.create(date=date(2025, 8, 20), name="Founders Day")

    details = month_details(2025, 8)

    assert [h.type for h in details.holidays] == ["predefined", "custom"]
    assert details.working_days == 19
    assert default_total_days(2025, 8) == 19


@pytest.mark.django_db
def test_load_public_holidays_command(settings):
    settings.PUBLIC_HOLIDAYS = TABLE
    out = StringIO()

    call_command("load_public_holidays", "--year", "2025", stdout=out)

    assert sorted(PublicHoliday.objects.values_list("name", flat=True)) == ["Gandhi Jayanti", "Independence Day"]
    assert "created=2" in out.getvalue()


@pytest.mark.django_db
def test_load_public_holidays_overwrite_updates_names(settings):
    settings.PUBLIC_HOLIDAYS = TABLE
    PublicHoliday.objects.create(date=date(2025, 8, 15), name="Old name")

    call_command("load_public_holidays", stdout=StringIO())
    assert PublicHoliday.objects.get(date=date(2025, 8, 15)).name == "Old name"

    call_command("load_public_holidays", "--overwrite", stdout=StringIO())
    assert PublicHoliday.objects.get(date=date(2025, 8, 15)).name == "Independence Day"
    assert PublicHoliday.objects.count() == 3


@pytest.mark.django_db
def test_load_public_holidays_unknown_year(settings):
    settings.PUBLIC_HOLIDAYS = TABLE
    with pytest.raises(CommandError):
        call_command("load_public_holidays", "--year", "2040")

from datetime import date
from unittest import mock

from django.db import IntegrityError
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from accounts.models import Role, User
from apps.attendance.models import AttendanceRecord, OrganizationHoliday
from apps.attendance.policies import AttendancePolicy
from apps.attendance.serializers import AttendanceRecordSerializer
from apps.employees.models import Employee


PUBLIC_HOLIDAYS = {2025: [("2025-08-15", "Independence Day")]}


@override_settings(
    PUBLIC_HOLIDAYS=PUBLIC_HOLIDAYS,
    WORK_CALENDAR_HOLIDAY_PROVIDER="apps.attendance.holidays.SettingsHolidayProvider",
)
class AttendanceApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        employee_role = Role.objects.ensure(Role.Name.EMPLOYEE)
        hr_role = Role.objects.ensure(Role.Name.HR)
        self.employee_user = User.objects.create_user(username="att_employee", password="StrongPass123!", role=employee_role)
        self.hr = User.objects.create_user(username="att_hr", password="StrongPass123!", role=hr_role)
        self.employee = Employee.objects.create(employee_code="E100", name="Asha Rao", email="asha@example.com")

    def test_calendar_requires_authentication(self):
        response = self.client.get("/api/v1/attendance/calendar/?year=2025&month=8")
        self.assertEqual(response.status_code, 401)

    def test_calendar_lists_public_and_organization_holidays(self):
        OrganizationHoliday.objects.create(date=date(2025, 8, 20), name="Founders Day")
        self.client.force_authenticate(user=self.employee_user)

        response = self.client.get("/api/v1/attendance/calendar/?year=2025&month=8")

        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["month"], 8)
        self.assertEqual(payload["total_days_in_month"], 31)
        self.assertEqual(payload["weekend_days"], 10)
        self.assertEqual(payload["working_days"], 19)
        self.assertEqual(
            payload["holidays"],
            [
                {"date": "2025-08-15", "name": "Independence Day", "type": "predefined"},
                {"date": "2025-08-20", "name": "Founders Day", "type": "custom"},
            ],
        )

    def test_calendar_rejects_invalid_month(self):
        self.client.force_authenticate(user=self.employee_user)
        response = self.client.get("/api/v1/attendance/calendar/?year=2025&month=0")
        self.assertEqual(response.status_code, 400)

    def test_create_record_defaults_total_days_to_working_days(self):
        self.client.force_authenticate(user=self.hr)
        response = self.client.post(
            "/api/v1/attendance/records/",
            {"employee": self.employee.id, "month": 8, "year": 2025, "present_days": 18},
            format="json",
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["total_days"], 20)
        self.assertEqual(response.json()["employee_code"], "E100")

    def test_duplicate_period_conflicts(self):
        AttendanceRecord.objects.create(employee=self.employee, month=8, year=2025, present_days=10, total_days=20)
        self.client.force_authenticate(user=self.hr)

        response = self.client.post(
            "/api/v1/attendance/records/",
            {"employee": self.employee.id, "month": 8, "year": 2025, "present_days": 12, "total_days": 20},
            format="json",
        )

        self.assertEqual(response.status_code, 409)
        self.assertEqual(AttendanceRecord.objects.count(), 1)

    def test_present_days_cannot_exceed_total(self):
        self.client.force_authenticate(user=self.hr)
        response = self.client.post(
            "/api/v1/attendance/records/",
            {"employee": self.employee.id, "month": 8, "year": 2025, "present_days": 25, "total_days": 20},
            format="json",
        )
        self.assertEqual(response.status_code, 400)

    def test_employee_cannot_create_records(self):
        self.client.force_authenticate(user=self.employee_user)
        response = self.client.post(
            "/api/v1/attendance/records/",
            {"employee": self.employee.id, "month": 8, "year": 2025, "present_days": 18},
            format="json",
        )
        self.assertEqual(response.status_code, 403)

    def test_list_filters_by_period(self):
        AttendanceRecord.objects.create(employee=self.employee, month=8, year=2025, present_days=10, total_days=20)
        AttendanceRecord.objects.create(employee=self.employee, month=9, year=2025, present_days=11, total_days=22)
        self.client.force_authenticate(user=self.employee_user)

        response = self.client.get("/api/v1/attendance/records/?year=2025&month=9")

        self.assertEqual(response.status_code, 200)
        self.assertEqual([row["month"] for row in response.json()], [9])

    def test_update_and_delete_record(self):
        record = AttendanceRecord.objects.create(employee=self.employee, month=8, year=2025, present_days=10, total_days=20)
        self.client.force_authenticate(user=self.hr)

        response = self.client.patch(f"/api/v1/attendance/records/{record.id}/", {"present_days": 15}, format="json")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["present_days"], 15)

        response = self.client.delete(f"/api/v1/attendance/records/{record.id}/")
        self.assertEqual(response.status_code, 204)
        self.assertFalse(AttendanceRecord.objects.exists())

        response = self.client.get(f"/api/v1/attendance/records/{record.id}/")
        self.assertEqual(response.status_code, 404)

    def test_update_into_existing_period_conflicts(self):
        AttendanceRecord.objects.create(employee=self.employee, month=8, year=2025, present_days=10, total_days=20)
        other = AttendanceRecord.objects.create(employee=self.employee, month=9, year=2025, present_days=10, total_days=20)
        self.client.force_authenticate(user=self.hr)

        response = self.client.patch(f"/api/v1/attendance/records/{other.id}/", {"month": 8}, format="json")

        self.assertEqual(response.status_code, 409)

    def test_concurrent_duplicate_insert_conflicts(self):
        self.client.force_authenticate(user=self.hr)
        with mock.patch.object(AttendanceRecordSerializer, "save", side_effect=IntegrityError("duplicate")):
            response = self.client.post(
                "/api/v1/attendance/records/",
                {"employee": self.employee.id, "month": 8, "year": 2025, "present_days": 12, "total_days": 20},
                format="json",
            )

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["detail"], "Attendance record already exists for this employee and period.")

    def test_concurrent_duplicate_update_conflicts(self):
        record = AttendanceRecord.objects.create(employee=self.employee, month=8, year=2025, present_days=10, total_days=20)
        self.client.force_authenticate(user=self.hr)
        with mock.patch.object(AttendanceRecordSerializer, "save", side_effect=IntegrityError("duplicate")):
            response = self.client.patch(f"/api/v1/attendance/records/{record.id}/", {"month": 9}, format="json")

        self.assertEqual(response.status_code, 409)

    def test_calendar_open_to_any_signed_in_user(self):
        self.assertTrue(AttendancePolicy.can_view_calendar(self.employee_user))
        self.assertFalse(AttendancePolicy.can_manage_records(self.employee_user))
        self.assertTrue(AttendancePolicy.can_manage_records(self.hr))

        self.client.force_authenticate(user=self.employee_user)
        response = self.client.get("/api/v1/attendance/calendar/?year=2025&month=2")
        self.assertEqual(response.status_code, 200)

from datetime import date
from decimal import Decimal

import pytest
from django.test import TestCase
from rest_framework.test import APIClient

from accounts.models import Role
from apps.compliance.models import StatutoryReturn
from apps.compliance.services import ReturnGenerationError, due_date_for, generate_statutory_returns
from apps.payroll.models import PayrollRun
from apps.payroll.services import PayrollService
from apps.payroll.tests.factories import make_employee, make_user


def test_due_date_is_fifteenth_of_next_month():
    assert due_date_for(2025, 8) == date(2025, 9, 15)
    assert due_date_for(2025, 12) == date(2026, 1, 15)


@pytest.mark.django_db
def test_returns_sum_calculation_columns():
    hr = make_user("compliance_hr", Role.Name.HR)
    make_employee("E001", salary=20000, basic=15000)
    make_employee("E002", salary=50000, basic=20000)
    make_employee("E003", salary=12000, basic=8000, pf_opt_in=False)
    run = PayrollService.process_period(actor=hr, month=8, year=2025)

    returns = {r.return_type: r for r in generate_statutory_returns(run)}

    assert returns["pf"].amount == Decimal("3600.00")
    assert returns["pf"].employees == 2
    assert returns["esi"].amount == Decimal("240.00")
    assert returns["esi"].employees == 2
    assert returns["pt"].amount == Decimal("400.00")
    assert returns["tds"].amount == Decimal("833.30")
    assert returns["tds"].employees == 1
    assert returns["pf"].title == "PF Return - August 2025"
    assert all(r.status == StatutoryReturn.Status.GENERATED for r in returns.values())
    assert all(r.due_date == date(2025, 9, 15) for r in returns.values())


@pytest.mark.django_db
def test_regenerating_updates_existing_returns():
    hr = make_user("compliance_hr", Role.Name.HR)
    employee = make_employee("E001", salary=20000, basic=15000)
    run = PayrollService.process_period(actor=hr, month=8, year=2025)
    generate_statutory_returns(run)

    employee.basic_salary = Decimal("10000")
    employee.save(update_fields=["basic_salary"])
    run = PayrollService.process_period(actor=hr, month=8, year=2025)
    generate_statutory_returns(run)

    assert StatutoryReturn.objects.count() == 4
    assert StatutoryReturn.objects.get(return_type="pf").amount == Decimal("1200.00")


@pytest.mark.django_db
def test_pending_run_is_rejected():
    run = PayrollRun.objects.create(month=8, year=2025)

    with pytest.raises(ReturnGenerationError):
        generate_statutory_returns(run)

    assert not StatutoryReturn.objects.exists()


class ComplianceApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = make_user("compliance_admin", Role.Name.ADMIN)
        self.employee_user = make_user("compliance_employee", Role.Name.EMPLOYEE)
        make_employee("E001", salary=20000, basic=15000)

    def test_generate_requires_processed_run(self):
        self.client.force_authenticate(user=self.admin)

        response = self.client.post("/api/v1/compliance/returns/generate/", {"month": 8, "year": 2025}, format="json")
        self.assertEqual(response.status_code, 404)

        PayrollRun.objects.create(month=8, year=2025)
        response = self.client.post("/api/v1/compliance/returns/generate/", {"month": 8, "year": 2025}, format="json")
        self.assertEqual(response.status_code, 409)

    def test_generate_and_list_returns(self):
        PayrollService.process_period(actor=self.admin, month=8, year=2025)
        self.client.force_authenticate(user=self.admin)

        response = self.client.post("/api/v1/compliance/returns/generate/", {"month": 8, "year": 2025}, format="json")
        self.assertEqual(response.status_code, 201)
        self.assertEqual(sorted(row["return_type"] for row in response.json()), ["esi", "pf", "pt", "tds"])

        self.client.force_authenticate(user=self.employee_user)
        response = self.client.get("/api/v1/compliance/returns/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()), 4)

    def test_employee_cannot_generate(self):
        self.client.force_authenticate(user=self.employee_user)
        response = self.client.post("/api/v1/compliance/returns/generate/", {"month": 8, "year": 2025}, format="json")
        self.assertEqual(response.status_code, 403)

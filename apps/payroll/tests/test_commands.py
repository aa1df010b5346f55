from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from accounts.models import Role
from apps.payroll.models import PayrollRun

from .factories import make_employee, make_user


pytestmark = pytest.mark.django_db


def test_process_payroll_command():
    make_user("ops", Role.Name.ADMIN)
    make_employee("E001", salary=20000, basic=15000)
    out = StringIO()

    call_command("process_payroll", "--year", "2025", "--month", "8", "--username", "ops", stdout=out)

    assert "employees=1" in out.getvalue()
    assert PayrollRun.objects.get(month=8, year=2025).status == PayrollRun.Status.PROCESSED


def test_process_payroll_command_rejects_employee_role():
    make_user("worker", Role.Name.EMPLOYEE)

    with pytest.raises(CommandError):
        call_command("process_payroll", "--year", "2025", "--month", "8", "--username", "worker")

    assert not PayrollRun.objects.exists()


def test_process_payroll_command_unknown_user():
    with pytest.raises(CommandError):
        call_command("process_payroll", "--year", "2025", "--month", "8", "--username", "ghost")

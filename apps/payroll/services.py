from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.db import transaction
from django.utils import timezone
from django.utils.module_loading import import_string

from apps.employees.models import Employee

from .calculator import DEFAULT_RATES, StatutoryRates, calculate_deductions, evaluate_rules
from .models import PayrollCalculation, PayrollRun
from .policies import PayrollPolicy


logger = logging.getLogger(__name__)
ZERO = Decimal("0.00")


class PayrollAccessDenied(PermissionDenied):
    pass


MIN_YEAR = 2000
MAX_YEAR = 2100


def validate_period(month: int, year: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValueError(f"year must be in {MIN_YEAR}..{MAX_YEAR}, got {year}")


def load_validation_rules():
    return [import_string(path) for path in getattr(settings, "PAYROLL_VALIDATION_RULES", [])]


class PayrollService:
    @staticmethod
    def build_calculation(employee, *, rules=(), rates: StatutoryRates = DEFAULT_RATES) -> PayrollCalculation:
        """Unsaved calculation row for ``employee``; the run is attached later."""
        breakdown = calculate_deductions(
            employee.salary,
            employee.basic_salary,
            employee.pf_opt_in,
            employee.esi_applicable,
            rates=rates,
        )
        result = evaluate_rules(employee, breakdown, rules)
        return PayrollCalculation(
            employee=employee,
            gross_earnings=breakdown.gross_earnings,
            pf_employee=breakdown.pf_employee,
            esi_employee=breakdown.esi_employee,
            professional_tax=breakdown.professional_tax,
            tds=breakdown.tds,
            other_deductions=breakdown.other_deductions,
            total_deductions=breakdown.total_deductions,
            net_pay=breakdown.net_pay,
            is_valid=result.is_valid,
            validation_errors=[violation.as_dict() for violation in result.errors],
            validation_warnings=[violation.as_dict() for violation in result.warnings],
        )

    @staticmethod
    def _active_employees(employees: Iterable[Employee] | None) -> list[Employee]:
        if employees is None:
            return list(Employee.objects.active().order_by("id"))
        return [employee for employee in employees if employee.status == Employee.Status.ACTIVE]

    @classmethod
    def process_period(cls, *, actor, month: int, year: int, employees: Iterable[Employee] | None = None) -> PayrollRun:
        """
        Recompute every active employee's calculation for the period and
        replace the run's previous calculations in one transaction.

        Re-running a period keeps a single ``PayrollRun`` row and swaps its
        calculation set. Any failure rolls back to the last committed state.
        """
        if not PayrollPolicy.can_process_payroll(actor):
            raise PayrollAccessDenied("You do not have permission to process payroll.")
        validate_period(month, year)

        rules = load_validation_rules()
        calculations = [cls.build_calculation(employee, rules=rules) for employee in cls._active_employees(employees)]
        logger.info(
            "Processing payroll %04d-%02d for %s employees (actor=%s)",
            year,
            month,
            len(calculations),
            getattr(actor, "pk", None),
        )

        with transaction.atomic():
            run, _ = PayrollRun.objects.select_for_update().get_or_create(
                month=month,
                year=year,
                defaults={"status": PayrollRun.Status.PENDING},
            )
            run.calculations.all().delete()
            for calculation in calculations:
                calculation.payroll_run = run
            PayrollCalculation.objects.bulk_create(calculations)

            total_gross = sum((c.gross_earnings for c in calculations), ZERO)
            total_deductions = sum((c.total_deductions for c in calculations), ZERO)
            total_net = sum((c.net_pay for c in calculations), ZERO)

            run.status = PayrollRun.Status.PROCESSED
            run.processed_at = timezone.now()
            run.total_employees = len(calculations)
            run.processed_employees = len(calculations)
            run.total_gross_salary = total_gross
            run.total_deductions = total_deductions
            run.total_net_salary = total_net
            run.save()

        logger.info(
            "Payroll %s processed: gross=%s deductions=%s net=%s",
            run.period,
            total_gross,
            total_deductions,
            total_net,
        )
        return PayrollRun.objects.prefetch_related("calculations__employee").get(pk=run.pk)

    @staticmethod
    def get_run(*, month: int, year: int) -> PayrollRun | None:
        return (
            PayrollRun.objects.prefetch_related("calculations__employee")
            .filter(month=month, year=year)
            .first()
        )

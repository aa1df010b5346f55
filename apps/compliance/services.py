from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from django.db import transaction
from django.db.models import Count, Q, Sum
from django.db.models.functions import Coalesce
from django.utils import timezone
from django.utils.dates import MONTHS

from apps.payroll.models import PayrollRun

from .models import StatutoryReturn


logger = logging.getLogger(__name__)
ZERO = Decimal("0.00")

# Return type -> calculation column carrying its amount.
RETURN_FIELDS = {
    StatutoryReturn.ReturnType.PF: "pf_employee",
    StatutoryReturn.ReturnType.ESI: "esi_employee",
    StatutoryReturn.ReturnType.TDS: "tds",
    StatutoryReturn.ReturnType.PT: "professional_tax",
}
FILING_DAY = 15


class ReturnGenerationError(Exception):
    pass


def due_date_for(year: int, month: int) -> date:
    """Statutory dues are filed on the 15th of the month after the payroll period."""
    if month == 12:
        return date(year + 1, 1, FILING_DAY)
    return date(year, month + 1, FILING_DAY)


def return_title(return_type: str, year: int, month: int) -> str:
    return f"{return_type.upper()} Return - {MONTHS[month]} {year}"


@transaction.atomic
def generate_statutory_returns(run: PayrollRun) -> list[StatutoryReturn]:
    if run.status != PayrollRun.Status.PROCESSED:
        raise ReturnGenerationError(f"Payroll run {run.period} is not processed.")

    aggregates = {}
    for return_type, field_name in RETURN_FIELDS.items():
        aggregates[f"{return_type}_amount"] = Coalesce(Sum(field_name), ZERO)
        aggregates[f"{return_type}_employees"] = Count("id", filter=Q(**{f"{field_name}__gt": 0}))
    totals = run.calculations.aggregate(**aggregates)

    now = timezone.now()
    due_date = due_date_for(run.year, run.month)
    returns = []
    for return_type in RETURN_FIELDS:
        statutory_return, _ = StatutoryReturn.objects.update_or_create(
            return_type=return_type,
            month=run.month,
            year=run.year,
            defaults={
                "title": return_title(return_type, run.year, run.month),
                "due_date": due_date,
                "status": StatutoryReturn.Status.GENERATED,
                "amount": totals[f"{return_type}_amount"],
                "employees": totals[f"{return_type}_employees"],
                "payroll_run": run,
                "generated_at": now,
            },
        )
        returns.append(statutory_return)

    logger.info("Generated %s statutory returns for %s", len(returns), run.period)
    return returns

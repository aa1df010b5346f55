"""
Gross-to-net calculation for a single employee.

All amounts are ``Decimal`` rupees. Every component is rounded to paisa
before it is added to the total, so the stored breakdown always satisfies
``total == pf + esi + pt + tds + other`` and ``net == gross - total``.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Iterable


ZERO = Decimal("0.00")
PAISA = Decimal("0.01")


def money(value) -> Decimal:
    if not isinstance(value, Decimal):
        value = Decimal(str(value or 0))
    return value.quantize(PAISA, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class StatutoryRates:
    pf_rate: Decimal = Decimal("0.12")
    pf_ceiling: Decimal = Decimal("1800")
    esi_rate: Decimal = Decimal("0.0075")
    esi_gross_limit: Decimal = Decimal("21000")
    professional_tax: Decimal = Decimal("200")
    professional_tax_threshold: Decimal = Decimal("15000")
    tds_threshold: Decimal = Decimal("41667")
    tds_rate: Decimal = Decimal("0.10")


DEFAULT_RATES = StatutoryRates()


@dataclass(frozen=True)
class DeductionBreakdown:
    gross_earnings: Decimal
    pf_employee: Decimal
    esi_employee: Decimal
    professional_tax: Decimal
    tds: Decimal
    other_deductions: Decimal
    total_deductions: Decimal
    net_pay: Decimal


def calculate_deductions(
    gross,
    basic,
    pf_opt_in: bool,
    esi_applicable: bool,
    rates: StatutoryRates = DEFAULT_RATES,
) -> DeductionBreakdown:
    gross = money(gross)
    basic = money(basic)

    pf = money(min(basic * rates.pf_rate, rates.pf_ceiling)) if pf_opt_in else ZERO
    # All-or-nothing: above the limit there is no ESI at all.
    esi = money(gross * rates.esi_rate) if esi_applicable and gross <= rates.esi_gross_limit else ZERO
    professional_tax = money(rates.professional_tax) if gross > rates.professional_tax_threshold else ZERO
    tds = money((gross - rates.tds_threshold) * rates.tds_rate) if gross > rates.tds_threshold else ZERO
    other = ZERO

    total = pf + esi + professional_tax + tds + other
    return DeductionBreakdown(
        gross_earnings=gross,
        pf_employee=pf,
        esi_employee=esi,
        professional_tax=professional_tax,
        tds=tds,
        other_deductions=other,
        total_deductions=total,
        net_pay=gross - total,
    )


# ---------------------------------------------------------------------------
# Validation rules
# ---------------------------------------------------------------------------

ERROR = "error"
WARNING = "warning"


@dataclass(frozen=True)
class Violation:
    code: str
    message: str
    severity: str = ERROR

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


Rule = Callable[[Any, DeductionBreakdown], Iterable[Violation]]


@dataclass
class RuleResult:
    errors: list[Violation] = field(default_factory=list)
    warnings: list[Violation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def evaluate_rules(employee, breakdown: DeductionBreakdown, rules: Iterable[Rule]) -> RuleResult:
    result = RuleResult()
    for rule in rules:
        for violation in rule(employee, breakdown) or ():
            if violation.severity == WARNING:
                result.warnings.append(violation)
            else:
                result.errors.append(violation)
    return result


def net_pay_not_negative(employee, breakdown: DeductionBreakdown) -> list[Violation]:
    if breakdown.net_pay < ZERO:
        return [Violation(code="negative_net_pay", message="Deductions exceed gross earnings.")]
    return []


def basic_exceeds_gross(employee, breakdown: DeductionBreakdown) -> list[Violation]:
    basic = money(getattr(employee, "basic_salary", 0))
    if basic > breakdown.gross_earnings:
        return [
            Violation(
                code="basic_exceeds_gross",
                message="Basic salary is greater than gross salary.",
                severity=WARNING,
            )
        ]
    return []

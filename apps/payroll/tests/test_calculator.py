from decimal import Decimal

import pytest

from apps.payroll.calculator import (
    WARNING,
    Violation,
    basic_exceeds_gross,
    calculate_deductions,
    evaluate_rules,
    money,
    net_pay_not_negative,
)


D = Decimal


def test_scenario_below_esi_limit():
    result = calculate_deductions(20000, 15000, pf_opt_in=True, esi_applicable=True)

    assert result.pf_employee == D("1800.00")
    assert result.esi_employee == D("150.00")
    assert result.professional_tax == D("200.00")
    assert result.tds == D("0.00")
    assert result.total_deductions == D("2150.00")
    assert result.net_pay == D("17850.00")


def test_scenario_above_tds_threshold():
    result = calculate_deductions(50000, 20000, pf_opt_in=True, esi_applicable=True)

    assert result.pf_employee == D("1800.00")
    assert result.esi_employee == D("0.00")
    assert result.professional_tax == D("200.00")
    assert result.tds == D("833.30")
    assert result.total_deductions == D("2833.30")
    assert result.net_pay == D("47166.70")


@pytest.mark.parametrize(
    "basic, pf_opt_in, expected",
    [
        (D("10000"), True, D("1200.00")),
        (D("15000"), True, D("1800.00")),
        (D("40000"), True, D("1800.00")),
        (D("40000"), False, D("0.00")),
    ],
)
def test_pf_is_capped_and_optional(basic, pf_opt_in, expected):
    result = calculate_deductions(D("60000"), basic, pf_opt_in=pf_opt_in, esi_applicable=False)
    assert result.pf_employee == expected


@pytest.mark.parametrize(
    "gross, applicable, expected",
    [
        (D("21000"), True, D("157.50")),
        (D("21000.01"), True, D("0.00")),
        (D("12000"), False, D("0.00")),
        (D("12345"), True, D("92.59")),
    ],
)
def test_esi_threshold_is_all_or_nothing(gross, applicable, expected):
    result = calculate_deductions(gross, 0, pf_opt_in=False, esi_applicable=applicable)
    assert result.esi_employee == expected


@pytest.mark.parametrize(
    "gross, expected",
    [(D("15000"), D("0.00")), (D("15000.01"), D("200.00")), (D("9000"), D("0.00"))],
)
def test_professional_tax_single_threshold(gross, expected):
    assert calculate_deductions(gross, 0, False, False).professional_tax == expected


@pytest.mark.parametrize(
    "gross, expected",
    [(D("41667"), D("0.00")), (D("41668"), D("0.10")), (D("100000"), D("5833.30"))],
)
def test_tds_above_threshold(gross, expected):
    assert calculate_deductions(gross, 0, False, False).tds == expected


@pytest.mark.parametrize("gross", ["0", "999.99", "15000", "20999.99", "41667.5", "87654.32"])
def test_totals_are_consistent(gross):
    result = calculate_deductions(D(gross), D(gross) / 2, pf_opt_in=True, esi_applicable=True)

    assert result.total_deductions == (
        result.pf_employee
        + result.esi_employee
        + result.professional_tax
        + result.tds
        + result.other_deductions
    )
    assert result.net_pay == result.gross_earnings - result.total_deductions
    assert result.other_deductions == D("0.00")


def test_money_rounds_half_up_to_paisa():
    assert money("1.005") == D("1.01")
    assert money(None) == D("0.00")
    assert money(7) == D("7.00")


def test_zero_gross_has_no_deductions_without_pf():
    result = calculate_deductions(0, 0, pf_opt_in=False, esi_applicable=True)
    assert result.total_deductions == D("0.00")
    assert result.net_pay == D("0.00")


def test_evaluate_rules_splits_errors_and_warnings():
    breakdown = calculate_deductions(0, 20000, pf_opt_in=True, esi_applicable=False)

    class Staff:
        basic_salary = D("20000")

    result = evaluate_rules(Staff(), breakdown, [net_pay_not_negative, basic_exceeds_gross])

    assert not result.is_valid
    assert [v.code for v in result.errors] == ["negative_net_pay"]
    assert [v.code for v in result.warnings] == ["basic_exceeds_gross"]
    assert result.warnings[0].severity == WARNING


def test_evaluate_rules_without_rules_is_valid():
    breakdown = calculate_deductions(20000, 15000, True, True)
    result = evaluate_rules(object(), breakdown, [])
    assert result.is_valid
    assert result.errors == [] and result.warnings == []


def test_violation_as_dict():
    violation = Violation(code="x", message="y")
    assert violation.as_dict() == {"code": "x", "message": "y", "severity": "error"}

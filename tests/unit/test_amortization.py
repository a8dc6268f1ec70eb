"""Unit tests for SAC and PRICE schedule generation"""

import pytest
from decimal import Decimal
from loan_simulator.domain.amortization import (
    calculate_price_payment,
    calculate_price_schedule,
    calculate_sac_schedule,
    round_money,
    summarize_schedule,
)
from loan_simulator.domain.exceptions import DomainException, InvalidSimulationInputError
from loan_simulator.domain.models import AmortizationMethod

SCENARIOS = [
    (Decimal("10000.00"), 12, Decimal("0.025")),
    (Decimal("150000.00"), 240, Decimal("0.012")),
    (Decimal("5000.00"), 24, Decimal("0.018")),
]


def test_round_money_half_up():
    """Test half-up rounding at two decimals"""
    assert round_money(Decimal("229.16675")) == Decimal("229.17")
    assert round_money(Decimal("0.005")) == Decimal("0.01")
    assert round_money(Decimal("0.0049")) == Decimal("0.00")
    assert round_money(Decimal("833.3333")) == Decimal("833.33")


@pytest.mark.parametrize("principal,term,rate", SCENARIOS)
@pytest.mark.parametrize("calculate", [calculate_sac_schedule, calculate_price_schedule])
def test_schedule_numbering(calculate, principal, term, rate):
    """Test one installment per month, numbered 1..term with no gaps"""
    result = calculate(principal, term, rate)

    assert len(result.installments) == term
    assert [inst.number for inst in result.installments] == list(range(1, term + 1))


def test_sac_first_installments():
    """Test SAC amounts for 10000.00 over 12 months at 2.5%"""
    result = calculate_sac_schedule(Decimal("10000.00"), 12, Decimal("0.025"))

    assert result.method == AmortizationMethod.SAC
    first, second = result.installments[0], result.installments[1]

    assert first.amortization == Decimal("833.33")
    assert first.interest == Decimal("250.00")
    assert first.payment == Decimal("1083.33")

    # Interest on the 9166.67 balance left after the first period
    assert second.amortization == Decimal("833.33")
    assert second.interest == Decimal("229.17")
    assert second.payment == Decimal("1062.50")

    last = result.installments[-1]
    assert last.interest == Decimal("20.83")
    assert last.payment == Decimal("854.16")


@pytest.mark.parametrize("principal,term,rate", SCENARIOS)
def test_sac_constant_amortization_declining_interest(principal, term, rate):
    """Test SAC amortization is fixed and interest never grows"""
    result = calculate_sac_schedule(principal, term, rate)

    amortizations = {inst.amortization for inst in result.installments}
    assert len(amortizations) == 1

    interests = [inst.interest for inst in result.installments]
    assert all(a >= b for a, b in zip(interests, interests[1:]))

    assert all(inst.payment == inst.amortization + inst.interest for inst in result.installments)


def test_sac_residual_balance_not_corrected():
    """Test last installment keeps the rounded amortization (4 cents drift)"""
    principal = Decimal("10000.00")
    result = calculate_sac_schedule(principal, 12, Decimal("0.025"))

    amortization = result.installments[0].amortization
    assert result.installments[-1].amortization == amortization

    remaining = principal - sum(inst.amortization for inst in result.installments)
    assert remaining == principal - 12 * amortization
    assert remaining == Decimal("0.04")


def test_price_payment_annuity_formula():
    """Test PMT for 10000.00 over 12 months at 2.5%"""
    assert calculate_price_payment(Decimal("10000.00"), 12, Decimal("0.025")) == Decimal("974.87")


def test_price_first_installments():
    """Test PRICE amounts for 10000.00 over 12 months at 2.5%"""
    result = calculate_price_schedule(Decimal("10000.00"), 12, Decimal("0.025"))

    assert result.method == AmortizationMethod.PRICE
    assert all(inst.payment == Decimal("974.87") for inst in result.installments)

    first, second = result.installments[0], result.installments[1]
    assert first.interest == Decimal("250.00")
    assert first.amortization == Decimal("724.87")

    # Interest on the 9275.13 balance left after the first period
    assert second.interest == Decimal("231.88")
    assert second.amortization == Decimal("742.99")


@pytest.mark.parametrize("principal,term,rate", SCENARIOS)
def test_price_fixed_payment_growing_amortization(principal, term, rate):
    """Test PRICE payment is fixed, amortization grows, interest declines"""
    result = calculate_price_schedule(principal, term, rate)

    payments = {inst.payment for inst in result.installments}
    assert payments == {calculate_price_payment(principal, term, rate)}

    amortizations = [inst.amortization for inst in result.installments]
    assert all(a <= b for a, b in zip(amortizations, amortizations[1:]))

    interests = [inst.interest for inst in result.installments]
    assert all(a >= b for a, b in zip(interests, interests[1:]))

    assert all(inst.amortization + inst.interest == inst.payment for inst in result.installments)


def test_price_single_month():
    """Test one-period PRICE pays principal plus one month of interest"""
    result = calculate_price_schedule(Decimal("1000.00"), 1, Decimal("0.01"))

    (only,) = result.installments
    assert only.payment == Decimal("1010.00")
    assert only.interest == Decimal("10.00")
    assert only.amortization == Decimal("1000.00")


def test_price_zero_rate_degenerates_to_even_split():
    """Test zero rate: PMT = principal / term, no interest, no division error"""
    result = calculate_price_schedule(Decimal("1200.00"), 12, Decimal("0"))

    assert result.method == AmortizationMethod.PRICE
    for inst in result.installments:
        assert inst.payment == Decimal("100.00")
        assert inst.interest == Decimal("0.00")
        assert inst.amortization == Decimal("100.00")


def test_price_zero_rate_rounds_payment():
    """Test zero-rate PMT is rounded half-up like every stored amount"""
    assert calculate_price_payment(Decimal("1000.00"), 3, Decimal("0")) == Decimal("333.33")
    assert calculate_price_payment(Decimal("2.00"), 3, Decimal("0.000")) == Decimal("0.67")


def test_sac_zero_rate():
    """Test zero rate SAC charges no interest"""
    result = calculate_sac_schedule(Decimal("1200.00"), 12, Decimal("0"))
    assert all(inst.interest == Decimal("0.00") for inst in result.installments)
    assert all(inst.payment == Decimal("100.00") for inst in result.installments)


def test_integer_principal_accepted():
    """Test int principal is treated as an exact decimal"""
    result = calculate_sac_schedule(10000, 12, Decimal("0.025"))
    assert result.installments[0].payment == Decimal("1083.33")


@pytest.mark.parametrize(
    "principal,term,rate",
    [
        (Decimal("0"), 12, Decimal("0.01")),
        (Decimal("-100.00"), 12, Decimal("0.01")),
        (Decimal("1000.00"), 0, Decimal("0.01")),
        (Decimal("1000.00"), -3, Decimal("0.01")),
        (Decimal("1000.00"), 12, Decimal("-0.01")),
        (1000.0, 12, Decimal("0.01")),
        (Decimal("1000.00"), 12, 0.01),
        (Decimal("1000.00"), 12.0, Decimal("0.01")),
        (Decimal("1000.00"), True, Decimal("0.01")),
        (Decimal("NaN"), 12, Decimal("0.01")),
    ],
)
@pytest.mark.parametrize("calculate", [calculate_sac_schedule, calculate_price_schedule])
def test_precondition_violations(calculate, principal, term, rate):
    """Test invalid inputs fail fast instead of producing a schedule"""
    with pytest.raises(InvalidSimulationInputError):
        calculate(principal, term, rate)


def test_precondition_error_is_value_error():
    """Test precondition failures are programming errors (ValueError)"""
    with pytest.raises(ValueError):
        calculate_price_payment(Decimal("0"), 12, Decimal("0.01"))
    assert issubclass(InvalidSimulationInputError, DomainException)


@pytest.mark.parametrize("calculate", [calculate_sac_schedule, calculate_price_schedule])
def test_schedules_are_deterministic(calculate):
    """Test identical inputs give identical schedules"""
    first = calculate(Decimal("37500.50"), 48, Decimal("0.0175"))
    second = calculate(Decimal("37500.50"), 48, Decimal("0.0175"))

    assert first == second
    assert [str(i.payment) for i in first.installments] == [str(i.payment) for i in second.installments]


def test_summarize_sac_schedule():
    """Test totals over the 10000.00 / 12 / 2.5% SAC schedule"""
    totals = summarize_schedule(calculate_sac_schedule(Decimal("10000.00"), 12, Decimal("0.025")))

    assert totals.total_amortization == Decimal("9999.96")
    assert totals.total_interest == Decimal("1625.00")
    assert totals.total_payment == Decimal("11624.96")

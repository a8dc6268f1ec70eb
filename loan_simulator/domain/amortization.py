"""Amortization engine - SAC and PRICE schedules in exact decimal arithmetic"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Tuple
from loan_simulator.domain.models import AmortizationMethod, AmortizationResult, Installment, ScheduleTotals
from loan_simulator.domain.exceptions import InvalidSimulationInputError

TWO_PLACES = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    """Round a monetary value to cents, half-up"""
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def _as_decimal(value, name: str) -> Decimal:
    if isinstance(value, bool) or isinstance(value, float):
        raise InvalidSimulationInputError(f"{name} must be Decimal or int, got {type(value).__name__}")
    if isinstance(value, int):
        return Decimal(value)
    if not isinstance(value, Decimal):
        raise InvalidSimulationInputError(f"{name} must be Decimal or int, got {type(value).__name__}")
    if not value.is_finite():
        raise InvalidSimulationInputError(f"{name} must be finite")
    return value


def validate_inputs(principal, term, monthly_rate) -> Tuple[Decimal, int, Decimal]:
    """Fail fast on caller errors before any period is computed"""
    principal = _as_decimal(principal, "principal")
    monthly_rate = _as_decimal(monthly_rate, "monthly_rate")

    if isinstance(term, bool) or not isinstance(term, int):
        raise InvalidSimulationInputError(f"term must be an int, got {type(term).__name__}")
    if term < 1:
        raise InvalidSimulationInputError(f"term must be >= 1, got {term}")
    if principal <= 0:
        raise InvalidSimulationInputError(f"principal must be > 0, got {principal}")
    if monthly_rate < 0:
        raise InvalidSimulationInputError(f"monthly_rate must be >= 0, got {monthly_rate}")

    return principal, term, monthly_rate


def calculate_sac_schedule(principal: Decimal, term: int, monthly_rate: Decimal) -> AmortizationResult:
    """
    Build a constant-amortization (SAC) schedule.

    Requirements:
    - Amortization = principal / term, rounded once and reused for every period
    - Interest accrues on the balance before the period's amortization
    - Last period is not adjusted; residual balance drift is kept

    Example:
        10000.00 over 12 months at 2.5%
        → #1: 833.33 + 250.00 = 1083.33
        → #2: 833.33 + 229.17 = 1062.50  (interest on 9166.67)
    """
    principal, term, monthly_rate = validate_inputs(principal, term, monthly_rate)

    amortization = round_money(principal / term)
    balance = principal

    installments: List[Installment] = []
    for number in range(1, term + 1):
        interest = round_money(balance * monthly_rate)
        installments.append(
            Installment(
                number=number,
                amortization=amortization,
                interest=interest,
                payment=amortization + interest,
            )
        )
        balance -= amortization

    return AmortizationResult(method=AmortizationMethod.SAC, installments=tuple(installments))


def calculate_price_payment(principal: Decimal, term: int, monthly_rate: Decimal) -> Decimal:
    """
    Constant payment (PMT) of a PRICE schedule.

    PMT = PV × [i × (1+i)^n] / [(1+i)^n - 1]

    A zero rate degenerates to principal / term.
    """
    principal, term, monthly_rate = validate_inputs(principal, term, monthly_rate)

    if monthly_rate == 0:
        return round_money(principal / term)

    factor = (1 + monthly_rate) ** term
    return round_money(principal * (monthly_rate * factor) / (factor - 1))


def calculate_price_schedule(principal: Decimal, term: int, monthly_rate: Decimal) -> AmortizationResult:
    """
    Build a fixed-installment (PRICE / French system) schedule.

    Requirements:
    - Single PMT computed before the period loop, every payment equals it
    - Interest accrues on the balance before the period's amortization
    - Amortization = PMT - interest, never rounded on its own
    """
    principal, term, monthly_rate = validate_inputs(principal, term, monthly_rate)

    pmt = calculate_price_payment(principal, term, monthly_rate)
    balance = principal

    installments: List[Installment] = []
    for number in range(1, term + 1):
        interest = round_money(balance * monthly_rate)
        amortization = pmt - interest
        installments.append(
            Installment(
                number=number,
                amortization=amortization,
                interest=interest,
                payment=pmt,
            )
        )
        balance -= amortization

    return AmortizationResult(method=AmortizationMethod.PRICE, installments=tuple(installments))


def summarize_schedule(result: AmortizationResult) -> ScheduleTotals:
    """Sum payment, interest and amortization over a schedule"""
    zero = Decimal("0.00")
    return ScheduleTotals(
        total_payment=sum((i.payment for i in result.installments), zero),
        total_interest=sum((i.interest for i in result.installments), zero),
        total_amortization=sum((i.amortization for i in result.installments), zero),
    )

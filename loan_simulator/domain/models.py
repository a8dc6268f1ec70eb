"""Domain models - immutable dataclasses for products, requests and schedules"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Tuple


class AmortizationMethod(str, Enum):
    """Amortization system used to build a schedule"""

    SAC = "SAC"  # constant amortization
    PRICE = "PRICE"  # fixed installment (French system)


@dataclass(frozen=True)
class Product:
    """Lending product with its admissible ranges and monthly rate"""

    code: int
    name: str
    min_value: Decimal
    max_value: Decimal
    min_term: int  # months
    max_term: int  # months
    monthly_rate: Decimal  # 0.025 == 2.5% per month


@dataclass(frozen=True)
class SimulationRequest:
    """Desired principal and term in months"""

    principal: Decimal
    term: int


@dataclass(frozen=True)
class Installment:
    """Single period of an amortization schedule"""

    number: int
    amortization: Decimal
    interest: Decimal
    payment: Decimal


@dataclass(frozen=True)
class AmortizationResult:
    """Complete schedule produced by one amortization method"""

    method: AmortizationMethod
    installments: Tuple[Installment, ...]


@dataclass(frozen=True)
class ScheduleTotals:
    """Sums over every installment of one schedule"""

    total_payment: Decimal
    total_interest: Decimal
    total_amortization: Decimal


@dataclass(frozen=True)
class SimulationOutcome:
    """Selected product plus SAC and PRICE schedules, in that order"""

    product: Product
    results: Tuple[AmortizationResult, AmortizationResult]

    @property
    def product_name(self) -> str:
        return self.product.name

    @property
    def sac(self) -> AmortizationResult:
        return self.results[0]

    @property
    def price(self) -> AmortizationResult:
        return self.results[1]

"""Simulation entry point - product selection followed by both schedules"""

from typing import Iterable
from loan_simulator.domain.models import Product, SimulationOutcome, SimulationRequest
from loan_simulator.domain.matching import select_product
from loan_simulator.domain.amortization import calculate_sac_schedule, calculate_price_schedule, validate_inputs


def run_simulation(request: SimulationRequest, catalog: Iterable[Product]) -> SimulationOutcome:
    """
    Main entry point: select a product and quote SAC and PRICE schedules.

    Flow:
    1. Reject malformed requests before touching the catalog
    2. First eligible product in catalog order
    3. SAC and PRICE schedules at the product's monthly rate

    Raises:
        InvalidSimulationInputError: Principal or term violate preconditions
        NoCompatibleProductError: No product admits the request
    """
    validate_inputs(request.principal, request.term, 0)

    product = select_product(request, catalog)

    sac = calculate_sac_schedule(request.principal, request.term, product.monthly_rate)
    price = calculate_price_schedule(request.principal, request.term, product.monthly_rate)

    return SimulationOutcome(product=product, results=(sac, price))

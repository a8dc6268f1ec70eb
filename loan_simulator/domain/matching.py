"""Product matcher - picks the first catalog product that admits a request"""

from typing import Iterable, Optional
from loan_simulator.domain.models import Product, SimulationRequest
from loan_simulator.domain.exceptions import NoCompatibleProductError


def is_eligible(product: Product, request: SimulationRequest) -> bool:
    """Both value and term ranges admit the request (bounds inclusive)"""
    return (
        product.min_value <= request.principal <= product.max_value
        and product.min_term <= request.term <= product.max_term
    )


def find_compatible_product(request: SimulationRequest, catalog: Iterable[Product]) -> Optional[Product]:
    """
    Scan the catalog in its given order and return the first eligible product.

    First match, not best fit: with overlapping ranges the catalog order
    decides. Returns None when no product is eligible.
    """
    for product in catalog:
        if is_eligible(product, request):
            return product
    return None


def select_product(request: SimulationRequest, catalog: Iterable[Product]) -> Product:
    """
    Same as find_compatible_product, but absence is raised.

    Raises:
        NoCompatibleProductError: No product admits principal and term
    """
    product = find_compatible_product(request, catalog)
    if product is None:
        raise NoCompatibleProductError(
            f"No compatible product for principal={request.principal} term={request.term}"
        )
    return product

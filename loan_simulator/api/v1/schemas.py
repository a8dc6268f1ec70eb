"""Pydantic schemas for API request/response validation"""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import List


class SimulationRequestSchema(BaseModel):
    """Request body for POST /v1/simulations"""

    principal: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2, description="Desired principal")
    term: int = Field(..., ge=1, description="Term in months")


class InstallmentSchema(BaseModel):
    """Single installment in an amortization schedule"""

    number: int
    amortization: Decimal
    interest: Decimal
    payment: Decimal


class AmortizationResultSchema(BaseModel):
    """Schedule produced by one amortization method"""

    method: str  # "SAC" or "PRICE"
    installments: List[InstallmentSchema]


class SimulationResponse(BaseModel):
    """Response for POST /v1/simulations"""

    simulation_id: str
    product_code: int
    product_name: str
    results: List[AmortizationResultSchema]


class SimulationSummary(BaseModel):
    """Stored simulation totals in a history query"""

    simulation_id: str
    product_code: int
    product_description: str
    interest_rate: Decimal
    principal: Decimal
    term: int
    amortization_total: Decimal
    interest_total: Decimal
    grand_total: Decimal
    simulated_at: str


class SimulationsByProductResponse(BaseModel):
    """Response for GET /v1/simulations/product/{product_code}/date/{reference_date}"""

    reference_date: str
    simulations: List[SimulationSummary]


class EndpointTelemetrySchema(BaseModel):
    """Daily statistics for one API route"""

    api_name: str
    request_count: int
    avg_ms: int
    min_ms: int
    max_ms: int
    success_rate: float


class TelemetryResponse(BaseModel):
    """Response for GET /v1/telemetry/{reference_date}"""

    reference_date: str
    endpoints: List[EndpointTelemetrySchema]

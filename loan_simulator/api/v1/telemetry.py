"""GET /v1/telemetry/{reference_date} - Per-endpoint request statistics"""

from datetime import date
from fastapi import APIRouter, Depends

from loan_simulator.api.v1.schemas import EndpointTelemetrySchema, TelemetryResponse
from loan_simulator.api.dependencies import get_telemetry_registry
from loan_simulator.infrastructure.observability.telemetry import TelemetryRegistry
from loan_simulator.utils.date_utils import format_reference_date

router = APIRouter()


@router.get("/telemetry/{reference_date}", response_model=TelemetryResponse)
def get_telemetry(
    reference_date: date,
    registry: TelemetryRegistry = Depends(get_telemetry_registry),
):
    """Request volume, latency and success rate per API route for one day"""
    endpoints = [
        EndpointTelemetrySchema(
            api_name=t.api_name,
            request_count=t.request_count,
            avg_ms=t.avg_ms,
            min_ms=t.min_ms,
            max_ms=t.max_ms,
            success_rate=t.success_rate,
        )
        for t in registry.snapshot(reference_date)
    ]

    return TelemetryResponse(reference_date=format_reference_date(reference_date), endpoints=endpoints)

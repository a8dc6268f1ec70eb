"""POST /v1/simulations and simulation history by product and date"""

import time
import logging
from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from loan_simulator.api.v1.schemas import (
    AmortizationResultSchema,
    InstallmentSchema,
    SimulationRequestSchema,
    SimulationResponse,
    SimulationsByProductResponse,
    SimulationSummary,
)
from loan_simulator.api.dependencies import get_product_catalog, get_request_id
from loan_simulator.config import settings
from loan_simulator.domain.models import Product, SimulationRequest
from loan_simulator.domain.simulation import run_simulation
from loan_simulator.domain.exceptions import InvalidSimulationInputError, NoCompatibleProductError
from loan_simulator.infrastructure.database.session import get_db
from loan_simulator.infrastructure.database.repositories import SimulationRepository
from loan_simulator.infrastructure.observability.metrics import record_no_product, record_simulation
from loan_simulator.infrastructure.observability.logging import log_no_compatible_product, log_simulation
from loan_simulator.utils.date_utils import format_reference_date

router = APIRouter()


@router.post("/simulations", response_model=SimulationResponse)
def create_simulation(
    request_body: SimulationRequestSchema,
    request: Request,
    db: Session = Depends(get_db),
    catalog: List[Product] = Depends(get_product_catalog),
):
    """
    Quote SAC and PRICE schedules for the first compatible product.

    Flow:
    1. Match the request against the product catalog
    2. Compute both amortization schedules
    3. Persist simulation totals for history queries
    4. Return the schedules with the product name
    """
    start_time = time.time()
    request_id = get_request_id(request)
    simulation_request = SimulationRequest(principal=request_body.principal, term=request_body.term)

    try:
        outcome = run_simulation(simulation_request, catalog)

        simulation_repo = SimulationRepository(db)
        db_simulation = simulation_repo.create_simulation(simulation_request, outcome)
        db.commit()

        duration_ms = (time.time() - start_time) * 1000
        record_simulation(outcome.product.code)
        log_simulation(request_id, outcome.product.code, simulation_request.principal, simulation_request.term, duration_ms)

        return SimulationResponse(
            simulation_id=db_simulation.simulation_id,
            product_code=outcome.product.code,
            product_name=outcome.product_name,
            results=[
                AmortizationResultSchema(
                    method=result.method.value,
                    installments=[
                        InstallmentSchema(
                            number=inst.number,
                            amortization=inst.amortization,
                            interest=inst.interest,
                            payment=inst.payment,
                        )
                        for inst in result.installments
                    ],
                )
                for result in outcome.results
            ],
        )

    except NoCompatibleProductError as e:
        db.rollback()
        record_no_product()
        log_no_compatible_product(request_id, simulation_request.principal, simulation_request.term)
        raise HTTPException(status_code=404, detail=str(e))

    except InvalidSimulationInputError as e:
        db.rollback()
        logging.warning(f"Invalid simulation input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get(
    "/simulations/product/{product_code}/date/{reference_date}",
    response_model=SimulationsByProductResponse,
)
def get_simulations_by_product_and_date(
    product_code: int,
    reference_date: date,
    db: Session = Depends(get_db),
):
    """
    Retrieve simulations quoted for a product on a given day.

    Returns:
        Stored totals for each simulation, newest first
    """
    simulation_repo = SimulationRepository(db)
    simulations = simulation_repo.get_by_product_and_date(
        product_code, reference_date, limit=settings.history_query_limit
    )

    return SimulationsByProductResponse(
        reference_date=format_reference_date(reference_date),
        simulations=[
            SimulationSummary(
                simulation_id=s.simulation_id,
                product_code=s.product_code,
                product_description=s.product_description,
                interest_rate=s.interest_rate,
                principal=s.principal,
                term=s.term,
                amortization_total=s.amortization_total,
                interest_total=s.interest_total,
                grand_total=s.grand_total,
                simulated_at=s.simulated_at.isoformat(),
            )
            for s in simulations
        ],
    )

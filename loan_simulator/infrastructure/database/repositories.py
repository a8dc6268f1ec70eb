"""Data access layer for products and simulations"""

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from loan_simulator.infrastructure.database.models import ProductRecord, SimulationRecord
from loan_simulator.domain.models import Product, SimulationOutcome, SimulationRequest
from loan_simulator.domain.amortization import summarize_schedule
from loan_simulator.utils.date_utils import day_bounds


class ProductRepository:
    """Repository for the product catalog"""

    def __init__(self, db: Session):
        self.db = db

    def list_products(self) -> List[Product]:
        """Materialize the catalog in code order for the product matcher"""
        records = self.db.query(ProductRecord).order_by(ProductRecord.id).all()
        return [
            Product(
                code=r.id,
                name=r.name,
                min_value=Decimal(r.min_value),
                max_value=Decimal(r.max_value),
                min_term=r.min_term_months,
                max_term=r.max_term_months,
                monthly_rate=Decimal(r.monthly_rate),
            )
            for r in records
        ]


class SimulationRepository:
    """Repository for simulation history"""

    def __init__(self, db: Session):
        self.db = db

    def create_simulation(
        self,
        request: SimulationRequest,
        outcome: SimulationOutcome,
        simulated_at: Optional[datetime] = None,
    ) -> SimulationRecord:
        """Persist simulation totals (computed from the SAC schedule)"""
        totals = summarize_schedule(outcome.sac)
        product = outcome.product

        db_simulation = SimulationRecord(
            simulation_id=str(uuid.uuid4()),
            principal=request.principal,
            term=request.term,
            total_installments=totals.total_payment,
            simulated_at=simulated_at or datetime.now(),
            product_id=product.code,
            product_code=product.code,
            product_description=product.name,
            interest_rate=product.monthly_rate,
            amortization_total=totals.total_amortization,
            interest_total=totals.total_interest,
            grand_total=totals.total_payment,
        )
        self.db.add(db_simulation)
        self.db.flush()  # Get ID without committing
        return db_simulation

    def get_by_product_and_date(self, product_code: int, day: date, limit: int = 100) -> List[SimulationRecord]:
        """Fetch simulations for a product on one calendar day, newest first"""
        start, end = day_bounds(day)
        return (
            self.db.query(SimulationRecord)
            .filter(SimulationRecord.product_code == product_code)
            .filter(SimulationRecord.simulated_at >= start)
            .filter(SimulationRecord.simulated_at < end)
            .order_by(SimulationRecord.simulated_at.desc())
            .limit(limit)
            .all()
        )

    def count_simulations(self) -> int:
        return self.db.query(func.count(SimulationRecord.id)).scalar() or 0

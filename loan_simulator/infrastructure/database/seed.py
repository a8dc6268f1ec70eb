"""Default product catalog loaded into an empty database"""

from decimal import Decimal
from typing import List
from sqlalchemy.orm import Session
from loan_simulator.infrastructure.database.models import ProductRecord

# Rates are monthly fractions: 0.025 == 2.5% per month
DEFAULT_PRODUCTS: List[dict] = [
    {
        "id": 1,
        "name": "Personal Credit",
        "min_value": Decimal("1000.00"),
        "max_value": Decimal("50000.00"),
        "min_term_months": 6,
        "max_term_months": 60,
        "monthly_rate": Decimal("0.025"),
    },
    {
        "id": 2,
        "name": "Home Financing",
        "min_value": Decimal("50000.00"),
        "max_value": Decimal("500000.00"),
        "min_term_months": 120,
        "max_term_months": 360,
        "monthly_rate": Decimal("0.012"),
    },
    {
        "id": 3,
        "name": "Payroll-Deductible Credit",
        "min_value": Decimal("500.00"),
        "max_value": Decimal("30000.00"),
        "min_term_months": 12,
        "max_term_months": 84,
        "monthly_rate": Decimal("0.018"),
    },
    {
        "id": 4,
        "name": "Vehicle Financing",
        "min_value": Decimal("10000.00"),
        "max_value": Decimal("100000.00"),
        "min_term_months": 24,
        "max_term_months": 72,
        "monthly_rate": Decimal("0.020"),
    },
]


def seed_products(db: Session) -> int:
    """Insert default products whose id is not present yet; returns how many were added"""
    existing = {row[0] for row in db.query(ProductRecord.id).all()}
    added = 0
    for product in DEFAULT_PRODUCTS:
        if product["id"] in existing:
            continue
        db.add(ProductRecord(**product))
        added += 1
    db.flush()
    return added

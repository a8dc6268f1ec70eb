"""Dependency injection for FastAPI endpoints"""

from typing import List
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from loan_simulator.domain.models import Product
from loan_simulator.infrastructure.database.session import get_db
from loan_simulator.infrastructure.database.repositories import ProductRepository
from loan_simulator.infrastructure.observability.telemetry import TelemetryRegistry, telemetry_registry


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_product_catalog(db: Session = Depends(get_db)) -> List[Product]:
    """Load the product catalog fresh for each simulation"""
    return ProductRepository(db).list_products()


def get_telemetry_registry() -> TelemetryRegistry:
    """Provide the process-wide telemetry registry"""
    return telemetry_registry

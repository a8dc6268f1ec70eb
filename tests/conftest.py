"""Pytest fixtures for testing"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("SEED_CATALOG_ON_STARTUP", "false")

import pytest
from decimal import Decimal
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from loan_simulator.api.main import create_app
from loan_simulator.infrastructure.database.models import Base
from loan_simulator.infrastructure.database.seed import seed_products
from loan_simulator.infrastructure.database.session import get_db
from loan_simulator.infrastructure.observability.telemetry import telemetry_registry
from loan_simulator.domain.models import Product


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database with the default catalog and yield a session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    seed_products(db)
    db.commit()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def clean_telemetry():
    """Isolate tests from requests recorded by earlier tests"""
    telemetry_registry.reset()
    yield telemetry_registry
    telemetry_registry.reset()


def make_product(code, name, min_value, max_value, min_term, max_term, rate="0.02") -> Product:
    return Product(
        code=code,
        name=name,
        min_value=Decimal(str(min_value)),
        max_value=Decimal(str(max_value)),
        min_term=min_term,
        max_term=max_term,
        monthly_rate=Decimal(rate),
    )


@pytest.fixture
def overlapping_catalog() -> list[Product]:
    """Two products that both admit 20000 over 24 months"""
    return [
        make_product(10, "Broad Credit", 1000, 100000, 6, 60, "0.030"),
        make_product(20, "Narrow Credit", 10000, 30000, 12, 36, "0.015"),
    ]


@pytest.fixture
def reference_catalog() -> list[Product]:
    """Catalog with the value and term ranges used in pricing reviews"""
    return [
        make_product(1, "Personal", 1000, 100000, 6, 60, "0.025"),
        make_product(2, "Mid Ticket", 50000, 500000, 12, 84, "0.018"),
        make_product(3, "Real Estate", 100000, 2000000, 120, 420, "0.010"),
        make_product(4, "Payroll", 500, 50000, 6, 96, "0.020"),
    ]

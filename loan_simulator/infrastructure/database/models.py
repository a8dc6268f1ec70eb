"""SQLAlchemy ORM models for the product catalog and simulation history"""

from sqlalchemy import Column, String, Integer, Numeric, DateTime, ForeignKey, Text
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class ProductRecord(Base):
    """Lending product available for simulation"""

    __tablename__ = "product"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(Text, nullable=False)
    min_value = Column(Numeric(18, 2), nullable=False)
    max_value = Column(Numeric(18, 2), nullable=False)
    min_term_months = Column(Integer, nullable=False)
    max_term_months = Column(Integer, nullable=False)
    monthly_rate = Column(Numeric(10, 9), nullable=False)

    simulations = relationship("SimulationRecord", back_populates="product")


class SimulationRecord(Base):
    """Audit record of a completed simulation (totals taken from the SAC schedule)"""

    __tablename__ = "simulation"

    id = Column(Integer, primary_key=True, autoincrement=True)
    simulation_id = Column(String(36), nullable=False, unique=True)
    principal = Column(Numeric(15, 2), nullable=False)
    term = Column(Integer, nullable=False)
    total_installments = Column(Numeric(15, 2), nullable=False)
    simulated_at = Column(DateTime, nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("product.id"), nullable=False)
    product_code = Column(Integer, nullable=False, index=True)
    product_description = Column(Text, nullable=False)
    interest_rate = Column(Numeric(10, 9), nullable=False)
    amortization_total = Column(Numeric(15, 2), nullable=False)
    interest_total = Column(Numeric(15, 2), nullable=False)
    grand_total = Column(Numeric(15, 2), nullable=False)

    product = relationship("ProductRecord", back_populates="simulations")

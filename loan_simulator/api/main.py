"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from loan_simulator.api.middleware import RequestIDMiddleware, MetricsMiddleware
from loan_simulator.api.v1 import simulations, telemetry
from loan_simulator.infrastructure.database.session import init_db
from loan_simulator.infrastructure.observability.logging import setup_logging
from loan_simulator.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.seed_catalog_on_startup:
        init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Loan Simulator",
        description="Product matching and SAC/PRICE installment quotes",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(simulations.router, prefix="/v1", tags=["simulations"])
    app.include_router(telemetry.router, prefix="/v1", tags=["telemetry"])

    return app


app = create_app()

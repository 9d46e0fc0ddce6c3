"""FastAPI application factory"""

from datetime import date
from functools import partial
from typing import List

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from finrisk_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from finrisk_gateway.api.v1 import finance, reports
from finrisk_gateway.config import settings
from finrisk_gateway.domain.models import Transaction
from finrisk_gateway.infrastructure.observability.logging import setup_logging
from finrisk_gateway.infrastructure.store.repositories import InMemoryTransactionRepository
from finrisk_gateway.infrastructure.store.seed import generate_seed_transactions
from finrisk_gateway.services.finance import FinanceService

# Setup structured logging
setup_logging(settings.log_level)


def _seed_from_today(days: int, seed: int) -> List[Transaction]:
    # Evaluated on every reset so reseeded data always ends today
    return generate_seed_transactions(date.today(), days=days, seed=seed)


def build_finance_service() -> FinanceService:
    """Wire the in-memory store and finance service from settings"""
    seeder = None
    if settings.seed_on_startup:
        seeder = partial(
            _seed_from_today,
            days=settings.seed_days,
            seed=settings.seed_random_seed,
        )

    repository = InMemoryTransactionRepository(seeder=seeder)
    return FinanceService(
        repository,
        window_days=settings.analysis_window_days,
        currency_symbol=settings.currency_symbol,
    )


def create_app(service: FinanceService | None = None) -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="FinRisk Gateway",
        description="Financial health scoring and ledger analytics service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.finance_service = service or build_finance_service()

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
    app.include_router(finance.router, prefix="/v1/finance", tags=["finance"])
    app.include_router(reports.router, prefix="/v1/finance", tags=["reports"])

    return app


app = create_app()

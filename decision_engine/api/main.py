"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from decision_engine.api.dependencies import get_decision_engine
from decision_engine.api.middleware import RequestIDMiddleware, MetricsMiddleware
from decision_engine.api.v1 import decision, clients
from decision_engine.domain.decision import DecisionEngine
from decision_engine.infrastructure.observability.logging import setup_logging
from decision_engine.config import settings

# Setup structured logging
setup_logging(settings.log_level, settings.service_name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the client dataset once at startup instead of on the first request"""
    provider = app.dependency_overrides.get(get_decision_engine, get_decision_engine)
    engine = provider()
    if len(engine.registry) == 0:
        logging.warning("Client registry is empty, every loan request will be rejected")
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Loan Decision Engine",
        description="Maximum approvable loan amount and period per client",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check reports whether client data is available
    @app.get("/health")
    def health_check(engine: DecisionEngine = Depends(get_decision_engine)):
        client_count = len(engine.registry)
        return {
            "status": "ok" if client_count else "degraded",
            "service": settings.service_name,
            "clients_loaded": client_count,
            "loan_amount_range": [engine.constants.minimum_loan_amount, engine.constants.maximum_loan_amount],
            "loan_period_range": [engine.constants.minimum_loan_period, engine.constants.maximum_loan_period],
        }

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(decision.router, prefix="/v1", tags=["decisions"])
    app.include_router(clients.router, prefix="/v1", tags=["clients"])

    return app


app = create_app()

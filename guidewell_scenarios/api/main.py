"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from guidewell_scenarios.api.middleware import RequestIDMiddleware, MetricsMiddleware
from guidewell_scenarios.api.v1 import baseline, debts, savings, scenarios
from guidewell_scenarios.infrastructure.observability.logging import setup_logging
from guidewell_scenarios.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Guidewell Scenarios",
        description="Debt payoff, savings growth and net worth projection calculations",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
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
    app.include_router(debts.router, prefix="/v1", tags=["debts"])
    app.include_router(savings.router, prefix="/v1", tags=["savings"])
    app.include_router(baseline.router, prefix="/v1", tags=["baseline"])
    app.include_router(scenarios.router, prefix="/v1", tags=["scenarios"])

    return app


app = create_app()

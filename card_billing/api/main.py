"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from card_billing.api.middleware import RequestIDMiddleware, MetricsMiddleware
from card_billing.api.v1 import cycle, plan, invoices, status
from card_billing.infrastructure.observability.logging import setup_logging
from card_billing.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Card Billing Engine",
        description="Credit card billing cycle, installment plan and invoice service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(cycle.router, prefix="/v1", tags=["billing-cycle"])
    app.include_router(plan.router, prefix="/v1", tags=["plans"])
    app.include_router(invoices.router, prefix="/v1", tags=["invoices"])
    app.include_router(status.router, prefix="/v1", tags=["status"])

    return app


app = create_app()

"""FastAPI application factory"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from fee_gateway.api.dependencies import get_request_id
from fee_gateway.api.middleware import REQUEST_ID_HEADER, RequestIDMiddleware, MetricsMiddleware
from fee_gateway.api.v1 import fines, receipts, totals
from fee_gateway.infrastructure.observability.logging import setup_logging
from fee_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="School Fee Gateway",
        description="Late fine, payable total and receipt computation service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        # Runs outside RequestIDMiddleware, so the header is set here
        request_id = request.headers.get(REQUEST_ID_HEADER) or get_request_id(request)
        logging.error(f"Unexpected error: {exc}", extra={"request_id": request_id})
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
            headers={REQUEST_ID_HEADER: request_id},
        )

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(fines.router, prefix="/v1", tags=["fines"])
    app.include_router(totals.router, prefix="/v1", tags=["totals"])
    app.include_router(receipts.router, prefix="/v1", tags=["receipts"])

    return app


app = create_app()

"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from goal_optimizer.api.middleware import RequestIDMiddleware, MetricsMiddleware
from goal_optimizer.api.v1 import optimize, history, runs
from goal_optimizer.infrastructure.observability.logging import setup_logging
from goal_optimizer.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Goal Allocation Optimizer",
        description="Distributes disposable income across concurrent savings goals",
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

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(optimize.router, prefix="/v1", tags=["optimize"])
    app.include_router(history.router, prefix="/v1", tags=["history"])
    app.include_router(runs.router, prefix="/v1", tags=["runs"])

    return app


app = create_app()

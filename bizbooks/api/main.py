"""FastAPI application factory"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from bizbooks.api.middleware import RequestIDMiddleware, MetricsMiddleware
from bizbooks.api.v1 import categories, dashboard, export, reports, transactions
from bizbooks.api.v1 import settings as settings_api
from bizbooks.infrastructure.database.session import init_db
from bizbooks.infrastructure.observability.logging import setup_logging
from bizbooks.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="BizBooks API",
        description="Small-business bookkeeping: transactions, dashboard, reports and settings",
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
    app.include_router(transactions.router, prefix="/api", tags=["transactions"])
    app.include_router(dashboard.router, prefix="/api", tags=["dashboard"])
    app.include_router(reports.router, prefix="/api", tags=["reports"])
    app.include_router(export.router, prefix="/api", tags=["export"])
    app.include_router(categories.router, prefix="/api", tags=["categories"])
    app.include_router(settings_api.router, prefix="/api", tags=["settings"])

    # Uploaded receipt photos
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
    app.mount(settings.upload_url_prefix, StaticFiles(directory=settings.upload_dir), name="uploads")

    return app


app = create_app()

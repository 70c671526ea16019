"""Client Distributor — FastAPI application factory."""

from fastapi import FastAPI

from distributor.infrastructure.api.routes_distribution import router as distribution_router
from distributor.infrastructure.api.routes_health import router as health_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Client Distributor",
        description="Balanced assignment of clients to service managers",
        version="0.1.0",
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(distribution_router, prefix="/api")

    return app


app = create_app()

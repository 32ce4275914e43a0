"""
FastAPI Application Entry Point.

This is the main application file for the Fleet Management API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from starlette.exceptions import HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fleet_backend.app.core.config import settings
from fleet_backend.app.core.observability import ObservabilityMiddleware, configure_logging
from fleet_backend.app.api.router import router as api_router
from fleet_backend.app.db.session import engine, Base
from fleet_backend.app.core.exceptions import (
    AppException,
    app_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler
)

# Import models to ensure they are registered with Base
from fleet_backend.app.models.vehicle import Vehicle
from fleet_backend.app.models.driver import Driver
from fleet_backend.app.models.assignment import VehicleAssignment
from fleet_backend.app.models.trip import Trip
from fleet_backend.app.models.fuel_record import FuelRecord

configure_logging(settings.log_level)
logger = logging.getLogger("fleet.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup/shutdown.

    1. Creates missing tables on startup (when enabled).
    2. Disposes of the connection pool on shutdown.
    """
    if settings.create_tables:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    logger.info("%s v%s ready on port %s", settings.app_name, settings.api_version, settings.port)
    yield
    await engine.dispose()


# Initialize FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.api_version,
    debug=settings.debug,
    description="REST API for vehicles, drivers, assignments, trips and fuel records",
    lifespan=lifespan,
)

app.add_middleware(ObservabilityMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register global exception handlers
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns:
        dict: Status and application information
    """
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.api_version,
    }


@app.get("/", tags=["Root"])
async def root():
    """Service banner."""
    return {
        "message": f"{settings.app_name} v{settings.api_version}",
        "version": settings.api_version,
        "docs": "/docs",
        "health": "/health",
    }


# Include resource routes
app.include_router(api_router, prefix="/api")


def serve():
    """Run the API with uvicorn (``fleet-api`` console script)."""
    import uvicorn

    uvicorn.run(
        "fleet_backend.app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    serve()

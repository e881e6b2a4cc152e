"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from empdir.api.middleware import RequestLoggingMiddleware
from empdir.api.routes import employees, health
from empdir.core.config import AppSettings
from empdir.core.exceptions import StoreError
from empdir.core.log import configure_logging
from empdir.core.protocols import IEmployeeStore
from empdir.persistence import create_store
from empdir.services.query_service import EmployeeQueryService
from empdir.services.reconciler import ImportReconciler
from empdir.services.seeding import seed_store

logger = logging.getLogger(__name__)


def create_app(settings: AppSettings | None = None, store: IEmployeeStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``store`` overrides the configured backend, mainly for tests.
    """
    settings = settings or AppSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        configure_logging(settings.log_level, settings.log_format)
        app.state.settings = settings
        app.state.store = store if store is not None else create_store(settings)
        app.state.reconciler = ImportReconciler(app.state.store)
        app.state.queries = EmployeeQueryService(app.state.store, settings.api.default_page_size)
        if settings.seed_dir is not None:
            seed_store(app.state.reconciler, settings.seed_dir)
        logger.info("Employee directory API started (%s)", settings.environment)
        yield
        logger.info("Shutting down employee directory API")

    app = FastAPI(
        title="Employee Directory API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware, slow_request_ms=settings.api.slow_request_ms)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"message": "Employee store is unavailable."})

    app.include_router(health.router)
    app.include_router(employees.router, prefix="/employees")
    return app

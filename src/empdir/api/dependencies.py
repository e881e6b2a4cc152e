"""FastAPI dependencies resolving the services wired up in the app lifespan."""

from __future__ import annotations

from fastapi import Request

from empdir.core.config import AppSettings
from empdir.core.protocols import IEmployeeStore
from empdir.services.query_service import EmployeeQueryService
from empdir.services.reconciler import ImportReconciler


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_store(request: Request) -> IEmployeeStore:
    return request.app.state.store


def get_reconciler(request: Request) -> ImportReconciler:
    return request.app.state.reconciler


def get_query_service(request: Request) -> EmployeeQueryService:
    return request.app.state.queries

"""Health check endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from empdir.api.dependencies import get_settings, get_store
from empdir.core.config import AppSettings
from empdir.core.exceptions import StoreError
from empdir.core.protocols import IEmployeeStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
def ready(
    store: IEmployeeStore = Depends(get_store),
    settings: AppSettings = Depends(get_settings),
):
    """Probe the store with a one-row page read."""
    try:
        store.get_paged(1, 1)
    except StoreError as exc:
        logger.error("Readiness probe failed: %s", exc)
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return {"status": "ready", "backend": settings.store.backend}

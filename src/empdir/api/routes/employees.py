"""Employee list, lookup and upload endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from empdir.api.dependencies import get_query_service, get_reconciler
from empdir.core.exceptions import ParseError
from empdir.models.employee import Employee
from empdir.models.results import EmployeePage
from empdir.parsers import format_from_filename, parse_payload
from empdir.services.query_service import EmployeeQueryService
from empdir.services.reconciler import ImportReconciler

logger = logging.getLogger(__name__)

router = APIRouter(tags=["employees"])


def _bad_request(message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message, **extra})


@router.get("", response_model=EmployeePage)
def list_employees(
    page: int = Query(default=1),
    page_size: Optional[int] = Query(default=None, alias="pageSize"),
    queries: EmployeeQueryService = Depends(get_query_service),
):
    """Return one page of employees ordered by name."""
    if page < 1 or (page_size is not None and page_size < 1):
        return _bad_request("Page and pageSize must be positive integers.")
    return queries.list_page(page, page_size)


@router.get("/{name}", response_model=Employee)
def get_employee(name: str, queries: EmployeeQueryService = Depends(get_query_service)):
    if not name.strip():
        return _bad_request("Employee name is required.")
    employee = queries.get_by_name(name)
    if employee is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": f"Employee '{name}' not found."},
        )
    return employee


@router.post("", status_code=status.HTTP_201_CREATED)
async def upload_employees(
    file: Optional[UploadFile] = File(default=None),
    text_content: Optional[str] = Form(default=None, alias="textContent"),
    fmt: Optional[str] = Form(default=None, alias="format"),
    reconciler: ImportReconciler = Depends(get_reconciler),
):
    """Import employees from an uploaded CSV/JSON file and/or pasted text."""
    logger.info(
        "Upload: file=%s, textContent length=%d, format=%s",
        file.filename if file else "none", len(text_content or ""), fmt or "none",
    )
    employees: list[Employee] = []

    if file is not None and file.filename:
        raw = await file.read()
        if raw:
            try:
                file_format = format_from_filename(file.filename)
                employees.extend(parse_payload(raw.decode("utf-8-sig"), file_format))
            except UnicodeDecodeError:
                return _bad_request("Failed to parse file: content is not valid UTF-8.")
            except ParseError as exc:
                logger.warning("Failed to parse uploaded file %s: %s", file.filename, exc)
                return _bad_request(str(exc))

    if text_content and text_content.strip():
        try:
            employees.extend(parse_payload(text_content, fmt or "csv"))
        except ParseError as exc:
            logger.warning("Failed to parse text content: %s", exc)
            return _bad_request(str(exc))

    if not employees:
        return _bad_request(
            "No employees found in the provided data. Please upload a file or enter text content."
        )

    result = await run_in_threadpool(reconciler.handle, employees)
    if not result.succeeded:
        return _bad_request("Validation failed for one or more employees.", errors=result.errors)

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={
            "message": f"{result.added_count} employee(s) added successfully.",
            "count": result.added_count,
        },
        headers={"Location": "/employees?page=1&pageSize=10"},
    )

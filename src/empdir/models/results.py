"""Result models returned by the directory services."""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

from empdir.models.employee import Employee


class FieldError(BaseModel):
    """One field-level validation failure."""

    field: str
    message: str


class ImportResult(BaseModel):
    """Outcome of one import batch."""

    added_count: int = 0
    errors: list[str] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.errors


class EmployeePage(BaseModel):
    """One page of the name-ordered employee listing."""

    items: list[Employee] = Field(default_factory=list)
    total_count: int = Field(default=0, alias="totalCount")
    page: int = 1
    page_size: int = Field(default=10, alias="pageSize")
    total_pages: int = Field(default=0, alias="totalPages")

    model_config = {"populate_by_name": True}

    @classmethod
    def build(cls, items: list[Employee], total_count: int, page: int, page_size: int) -> EmployeePage:
        return cls(
            items=items,
            total_count=total_count,
            page=page,
            page_size=page_size,
            total_pages=math.ceil(total_count / page_size) if page_size else 0,
        )

"""Shared test doubles — memory backend, a failing store and a record builder."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from empdir.core.exceptions import StoreError
from empdir.models.employee import Employee
from empdir.persistence.memory_backend import MemoryEmployeeStore


def make_employee(name: str, email: str | None = None, tel: str = "010-0000",
                  joined: date | None = date(2022, 1, 1), birth: date | None = None) -> Employee:
    """Valid employee unless told otherwise; email derived from the name."""
    return Employee(
        name=name,
        email=email if email is not None else f"{name.lower().replace(' ', '.')}@test.com",
        telephone=tel,
        joined_date=joined,
        birth_date=birth,
    )


class FailingEmployeeStore:
    """IEmployeeStore whose every call raises StoreError."""

    def get_all(self) -> list[Employee]:
        raise StoreError("store offline")

    def get_paged(self, page: int, page_size: int) -> tuple[list[Employee], int]:
        raise StoreError("store offline")

    def get_by_name(self, name: str) -> Employee | None:
        raise StoreError("store offline")

    def exists(self, name: str) -> bool:
        raise StoreError("store offline")

    def add_range(self, employees: Iterable[Employee]) -> None:
        raise StoreError("store offline")


__all__ = ["FailingEmployeeStore", "MemoryEmployeeStore", "make_employee"]

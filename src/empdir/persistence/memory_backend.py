"""In-memory employee store — dict-backed, lost on restart."""

from __future__ import annotations

import threading
from typing import Iterable

from empdir.models.employee import Employee, name_key
from empdir.persistence.ordering import ordered, page_slice


class MemoryEmployeeStore:
    """Dict-backed IEmployeeStore.

    ``add_range`` skips incoming records whose name is already stored.
    """

    def __init__(self, employees: Iterable[Employee] = ()) -> None:
        self._lock = threading.Lock()
        self._employees: dict[str, Employee] = {}
        self.add_range(employees)

    def get_all(self) -> list[Employee]:
        with self._lock:
            return ordered(self._employees.values())

    def get_paged(self, page: int, page_size: int) -> tuple[list[Employee], int]:
        with self._lock:
            items = ordered(self._employees.values())
        return page_slice(items, page, page_size), len(items)

    def get_by_name(self, name: str) -> Employee | None:
        with self._lock:
            return self._employees.get(name_key(name))

    def exists(self, name: str) -> bool:
        with self._lock:
            return name_key(name) in self._employees

    def add_range(self, employees: Iterable[Employee]) -> None:
        with self._lock:
            for employee in employees:
                self._employees.setdefault(employee.key, employee)

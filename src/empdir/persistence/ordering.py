"""Name ordering and page slicing shared by the non-SQL backends."""

from __future__ import annotations

from typing import Iterable

from empdir.models.employee import Employee


def sort_key(employee: Employee) -> tuple[str, str]:
    """Case-insensitive name order, ties broken by the stored spelling."""
    return (employee.key, employee.name)


def ordered(employees: Iterable[Employee]) -> list[Employee]:
    return sorted(employees, key=sort_key)


def page_slice(items: list[Employee], page: int, page_size: int) -> list[Employee]:
    skip = (page - 1) * page_size
    return items[skip:skip + page_size]

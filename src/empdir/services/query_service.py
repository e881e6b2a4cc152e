"""Read-side queries: paged listing and lookup by name."""

from __future__ import annotations

from empdir.core.protocols import IEmployeeStore
from empdir.models.employee import Employee
from empdir.models.results import EmployeePage

DEFAULT_PAGE_SIZE = 10


class EmployeeQueryService:
    """Thin read facade over an IEmployeeStore."""

    def __init__(self, store: IEmployeeStore, default_page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self._store = store
        self._default_page_size = default_page_size

    def list_page(self, page: int = 1, page_size: int | None = None) -> EmployeePage:
        """Return one page; a page below 1 becomes 1, a size below 1 the default."""
        page = max(page, 1)
        if page_size is None or page_size < 1:
            page_size = self._default_page_size
        items, total = self._store.get_paged(page, page_size)
        return EmployeePage.build(items, total, page, page_size)

    def get_by_name(self, name: str) -> Employee | None:
        return self._store.get_by_name(name)

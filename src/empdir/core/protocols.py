"""Protocol interfaces for the employee directory abstractions.

Storage backends and parsers are matched structurally: no inheritance
required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from empdir.models.employee import Employee


# ---------------------------------------------------------------------------
# Persistence: Employee Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IEmployeeStore(Protocol):
    """Employee records keyed by case-insensitive name.

    Every backend orders by name (case-insensitive) and matches names
    case-insensitively; given the same contents all backends answer
    identically.
    """

    def get_all(self) -> list[Employee]: ...

    def get_paged(self, page: int, page_size: int) -> tuple[list[Employee], int]: ...

    def get_by_name(self, name: str) -> Employee | None: ...

    def exists(self, name: str) -> bool: ...

    def add_range(self, employees: Iterable[Employee]) -> None: ...


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

@runtime_checkable
class IRecordParser(Protocol):
    """Turns raw upload text into candidate employee records."""

    def __call__(self, content: str) -> list[Employee]: ...

"""ImportReconciler — validates, de-duplicates and commits an import batch.

A batch moves through four phases, each gated on the previous one:

1. field validation (no store access),
2. exact-duplicate detection within the batch and against the store,
3. renaming of name-only collisions to "<name> 2", "<name> 3", ...,
4. one bulk insert.

A failure in phase 1 or 2 rejects the whole batch; nothing is written.
Phases 2 to 4 run under one lock per reconciler, so concurrent imports
through the same reconciler see each other's commits.
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Sequence

from empdir.core.exceptions import (
    BatchRejectedError,
    DuplicateRecordError,
    RecordValidationError,
)
from empdir.core.protocols import IEmployeeStore
from empdir.models.employee import Employee, name_key
from empdir.models.results import ImportResult
from empdir.validation.validator import validate_batch


class ImportReconciler:
    """Applies an import batch to an employee store all-or-nothing."""

    def __init__(self, store: IEmployeeStore, logger: logging.Logger | None = None) -> None:
        self._store = store
        self._log = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()

    def handle(self, employees: Sequence[Employee]) -> ImportResult:
        """Import ``employees`` and report how many were added.

        Rejected batches come back with ``added_count == 0`` and one message
        per problem. StoreError from the backend propagates.
        """
        try:
            self._check_fields(employees)
        except BatchRejectedError as exc:
            return ImportResult(added_count=0, errors=exc.errors)

        with self._lock:
            try:
                self._check_duplicates(employees)
            except BatchRejectedError as exc:
                return ImportResult(added_count=0, errors=exc.errors)

            renamed = self._deduplicate_names(employees)
            self._log.info("Adding %d employee(s)", len(renamed))
            self._store.add_range(renamed)
        self._log.info("Successfully added %d employee(s)", len(renamed))
        return ImportResult(added_count=len(renamed))

    def _check_fields(self, employees: Sequence[Employee]) -> None:
        failures = validate_batch(employees)
        if not failures:
            return
        messages = [
            f"Row {index + 1}: [{error.field}] {error.message}"
            for index, errors in failures.items()
            for error in errors
        ]
        self._log.warning(
            "Validation failed for %d employee(s): %s", len(failures), "; ".join(messages)
        )
        raise RecordValidationError(messages)

    def _check_duplicates(self, employees: Sequence[Employee]) -> None:
        messages: list[str] = []
        seen: set[str] = set()

        for row, emp in enumerate(employees, start=1):
            key = emp.identity_key
            if key in seen:
                messages.append(
                    f"Row {row}: Duplicate employee data: '{emp.name}' with email "
                    f"'{emp.email}' and tel '{emp.telephone}' appears multiple times in the upload."
                )
                continue
            seen.add(key)

            existing = self._store.get_by_name(emp.name)
            if existing is not None and existing.identity_key == key:
                messages.append(
                    f"Row {row}: Employee '{emp.name}' with email '{emp.email}' "
                    f"and tel '{emp.telephone}' already exists."
                )

        if messages:
            self._log.warning("Duplicate employee(s) detected: %s", "; ".join(messages))
            raise DuplicateRecordError(messages)

    def _deduplicate_names(self, employees: Sequence[Employee]) -> list[Employee]:
        claimed: set[str] = set()
        result: list[Employee] = []

        def taken(name: str) -> bool:
            return name_key(name) in claimed or self._store.exists(name)

        for emp in employees:
            final_name = emp.name
            if taken(final_name):
                for counter in itertools.count(2):
                    final_name = f"{emp.name} {counter}"
                    if not taken(final_name):
                        break
                self._log.debug("Duplicate name %r renamed to %r", emp.name, final_name)
            claimed.add(name_key(final_name))
            result.append(emp if final_name == emp.name else emp.renamed(final_name))

        return result

"""File-backed employee store — one JSON array on disk."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from empdir.core.exceptions import StoreError
from empdir.models.employee import Employee, name_key
from empdir.persistence.ordering import ordered, page_slice

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path("data/employees.db.json")


class FileEmployeeStore:
    """IEmployeeStore persisted as a JSON array of camelCase records.

    The file is read once on construction and rewritten wholesale on every
    ``add_range``. An incoming record replaces a stored one with the same
    case-insensitive name.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path else DEFAULT_PATH
        self._lock = threading.Lock()
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreError(f"Cannot create directory for {self._path}: {exc}") from exc
        self._employees: dict[str, Employee] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, Employee]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8") or "[]")
        except (OSError, json.JSONDecodeError) as exc:
            raise StoreError(f"Failed to read employee file {self._path}: {exc}") from exc
        if not isinstance(raw, list):
            raise StoreError(f"Employee file {self._path} must contain a JSON array")

        employees: dict[str, Employee] = {}
        try:
            for item in raw:
                employee = Employee.model_validate(item)
                employees[employee.key] = employee
        except ValidationError as exc:
            raise StoreError(f"Invalid record in {self._path}: {exc}") from exc
        logger.info("Loaded %d employee(s) from %s", len(employees), self._path)
        return employees

    def _save(self) -> None:
        payload = [e.to_json_dict() for e in ordered(self._employees.values())]
        try:
            fd, tmp = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        except OSError as exc:
            raise StoreError(f"Failed to write employee file {self._path}: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, indent=2)
            os.replace(tmp, self._path)
        except OSError as exc:
            Path(tmp).unlink(missing_ok=True)
            raise StoreError(f"Failed to write employee file {self._path}: {exc}") from exc

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
            previous = dict(self._employees)
            for employee in employees:
                self._employees[employee.key] = employee
            try:
                self._save()
            except StoreError:
                self._employees = previous
                raise

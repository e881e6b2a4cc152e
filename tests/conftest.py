"""Shared fixtures: sample employees and a seeded memory store."""

from __future__ import annotations

from datetime import date

import pytest

from empdir.models.employee import Employee
from empdir.persistence.memory_backend import MemoryEmployeeStore
from tests.fakes import make_employee


@pytest.fixture
def alice() -> Employee:
    return make_employee("Alice", "alice@test.com", "010-0001", date(2022, 1, 1))


@pytest.fixture
def seed_employees(alice) -> list[Employee]:
    return [
        alice,
        make_employee("Bob", "bob@test.com", "010-0002", date(2022, 2, 1)),
        make_employee("Charlie", "charlie@test.com", "010-0003", date(2022, 3, 1)),
    ]


@pytest.fixture
def store(seed_employees) -> MemoryEmployeeStore:
    return MemoryEmployeeStore(seed_employees)

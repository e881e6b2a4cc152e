"""Unit tests for SqlEmployeeStore on in-memory SQLite."""

from __future__ import annotations

import pytest
from sqlalchemy import create_engine, inspect, select
from sqlalchemy.pool import StaticPool

from empdir.core.exceptions import StoreError
from empdir.persistence.sql_backend import SqlEmployeeStore, employees_table
from tests.fakes import make_employee


@pytest.fixture
def engine():
    eng = create_engine("sqlite://", poolclass=StaticPool, connect_args={"check_same_thread": False})
    yield eng
    eng.dispose()


@pytest.fixture
def sql_store(engine):
    return SqlEmployeeStore(engine)


def test_creates_employees_table(engine, sql_store):
    columns = {c["name"] for c in inspect(engine).get_columns("employees")}
    assert columns == {"name_key", "name", "email", "tel_number", "joined_date", "birth_date"}


def test_schema_creation_is_idempotent(engine, sql_store):
    sql_store.add_range([make_employee("Alice")])
    SqlEmployeeStore(engine)
    assert SqlEmployeeStore(engine).exists("Alice")


def test_stores_case_folded_key(engine, sql_store):
    sql_store.add_range([make_employee("Alice Smith")])
    with engine.connect() as conn:
        row = conn.execute(select(employees_table)).mappings().one()
    assert row["name_key"] == "alice smith"
    assert row["name"] == "Alice Smith"


def test_colliding_insert_raises_and_rolls_back(sql_store):
    sql_store.add_range([make_employee("Alice")])
    with pytest.raises(StoreError, match="add_range"):
        sql_store.add_range([make_employee("Bob"), make_employee("ALICE", "other@x.com")])
    assert not sql_store.exists("Bob")
    assert sql_store.get_by_name("alice").email == "alice@test.com"


def test_errors_are_wrapped_without_schema(engine):
    store = SqlEmployeeStore(engine, create_schema=False)
    with pytest.raises(StoreError, match="get_all"):
        store.get_all()
    with pytest.raises(StoreError, match="exists"):
        store.exists("Alice")


def test_get_paged_counts_whole_table(sql_store):
    sql_store.add_range([make_employee(f"Person {i:02d}") for i in range(25)])
    items, total = sql_store.get_paged(3, 10)
    assert total == 25
    assert [e.name for e in items] == [f"Person {i:02d}" for i in range(20, 25)]

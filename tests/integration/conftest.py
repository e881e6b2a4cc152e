"""Integration test fixtures — live SQL Server and MySQL databases.

Each backend is exercised only when its connection string is exported:

    EMPDIR_TEST_MSSQL_CONNECTION="Server=localhost,1433;Database=EmployeeDb;User Id=sa;Password=...;TrustServerCertificate=True"
    EMPDIR_TEST_MYSQL_CONNECTION="Server=localhost;Port=3306;Database=employee_db;User=root;Password=..."
"""

from __future__ import annotations

import os

import pytest

MSSQL_CONNECTION = os.environ.get("EMPDIR_TEST_MSSQL_CONNECTION", "")
MYSQL_CONNECTION = os.environ.get("EMPDIR_TEST_MYSQL_CONNECTION", "")

skip_no_mssql = pytest.mark.skipif(
    not MSSQL_CONNECTION,
    reason="EMPDIR_TEST_MSSQL_CONNECTION not set",
)

skip_no_mysql = pytest.mark.skipif(
    not MYSQL_CONNECTION,
    reason="EMPDIR_TEST_MYSQL_CONNECTION not set",
)


def _reset(store):
    """Empty the employees table so each test starts clean."""
    from empdir.persistence.sql_backend import employees_table

    with store.engine.begin() as conn:
        conn.execute(employees_table.delete())
    return store


@pytest.fixture
def mssql_store():
    pytest.importorskip("pyodbc")
    from empdir.persistence.mssql_backend import create_mssql_store

    store = _reset(create_mssql_store(MSSQL_CONNECTION))
    yield store
    _reset(store)
    store.engine.dispose()


@pytest.fixture
def mysql_store():
    pytest.importorskip("pymysql")
    from empdir.persistence.mysql_backend import create_mysql_store

    store = _reset(create_mysql_store(MYSQL_CONNECTION))
    yield store
    _reset(store)
    store.engine.dispose()

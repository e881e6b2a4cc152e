"""Integration tests for the SQL Server and MySQL employee stores.

Skipped unless the matching EMPDIR_TEST_*_CONNECTION variable is set.
"""

from __future__ import annotations

from datetime import date

import pytest

from empdir.core.exceptions import StoreError
from empdir.services.reconciler import ImportReconciler
from tests.fakes import make_employee
from tests.integration.conftest import skip_no_mssql, skip_no_mysql

BACKENDS = [
    pytest.param("mssql_store", marks=skip_no_mssql, id="mssql"),
    pytest.param("mysql_store", marks=skip_no_mysql, id="mysql"),
]


@pytest.fixture(params=BACKENDS)
def sql_store(request):
    return request.getfixturevalue(request.param)


class TestLiveSqlStore:
    def test_roundtrip_preserves_fields(self, sql_store):
        emp = make_employee("Zoë Ångström", "zoe@x.com", "010-1234", date(2020, 5, 1), date(1990, 2, 3))
        sql_store.add_range([emp])
        assert sql_store.get_by_name("ZOË ÅNGSTRÖM") == emp

    def test_ordering_matches_in_process_backends(self, sql_store):
        names = ["charlie", "Alice", "bob", "Dave", "eve"]
        sql_store.add_range([make_employee(n) for n in names])
        assert [e.name for e in sql_store.get_all()] == ["Alice", "bob", "charlie", "Dave", "eve"]

    def test_paging(self, sql_store):
        sql_store.add_range([make_employee(f"Person {i:02d}") for i in range(7)])
        items, total = sql_store.get_paged(3, 3)
        assert total == 7
        assert [e.name for e in items] == ["Person 06"]

    def test_null_dates(self, sql_store):
        sql_store.add_range([make_employee("Nodate", joined=None)])
        assert sql_store.get_by_name("nodate").joined_date is None

    def test_colliding_insert_is_rolled_back(self, sql_store):
        sql_store.add_range([make_employee("Alice")])
        with pytest.raises(StoreError):
            sql_store.add_range([make_employee("Bob"), make_employee("ALICE")])
        assert not sql_store.exists("Bob")

    def test_reconciler_renames_against_database(self, sql_store):
        sql_store.add_range([make_employee("Alice")])
        result = ImportReconciler(sql_store).handle([make_employee("Alice", "other@x.com")])
        assert result.added_count == 1
        assert sql_store.get_by_name("Alice 2").email == "other@x.com"

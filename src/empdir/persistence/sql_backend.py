"""Relational employee store on SQLAlchemy Core.

Shared by the MSSQL and MySQL backends; each builds its own Engine and hands
it to SqlEmployeeStore. All statements are parameterized.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterable, Iterator

from sqlalchemy import (
    Column,
    Date,
    MetaData,
    String,
    Table,
    Unicode,
    func,
    insert,
    select,
)
from sqlalchemy.dialects import mssql
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import SQLAlchemyError

from empdir.core.exceptions import StoreError
from empdir.models.employee import Employee, name_key

logger = logging.getLogger(__name__)

# Binary collation keeps ORDER BY on name_key in code-point order, matching
# the in-process backends regardless of the server default.
_NAME_KEY_TYPE = (
    String(200)
    .with_variant(String(200, collation="utf8mb4_bin"), "mysql", "mariadb")
    .with_variant(mssql.NVARCHAR(200, collation="Latin1_General_BIN2"), "mssql")
)

metadata = MetaData()

employees_table = Table(
    "employees",
    metadata,
    Column("name_key", _NAME_KEY_TYPE, primary_key=True),
    Column("name", Unicode(200), nullable=False),
    Column("email", Unicode(200), nullable=False),
    Column("tel_number", Unicode(50), nullable=False),
    Column("joined_date", Date, nullable=True),
    Column("birth_date", Date, nullable=True),
)


def parse_ado_connection_string(connection_string: str) -> dict[str, str]:
    """Split ``Key=Value;Key=Value`` into a dict with lower-cased keys."""
    pairs: dict[str, str] = {}
    for part in connection_string.split(";"):
        if not part.strip() or "=" not in part:
            continue
        key, _, value = part.partition("=")
        pairs[key.strip().lower()] = value.strip()
    return pairs


def _to_row(employee: Employee) -> dict[str, Any]:
    return {
        "name_key": employee.key,
        "name": employee.name,
        "email": employee.email,
        "tel_number": employee.telephone,
        "joined_date": employee.joined_date,
        "birth_date": employee.birth_date,
    }


def _to_employee(row: RowMapping) -> Employee:
    return Employee(
        name=row["name"],
        email=row["email"],
        telephone=row["tel_number"],
        joined_date=row["joined_date"],
        birth_date=row["birth_date"],
    )


class SqlEmployeeStore:
    """IEmployeeStore backed by a relational database.

    Name uniqueness is enforced by the ``name_key`` primary key, so a
    colliding ``add_range`` raises StoreError and inserts nothing.
    """

    def __init__(self, engine: Engine, create_schema: bool = True) -> None:
        self._engine = engine
        self._table = employees_table
        if create_schema:
            with self._errors("create schema"):
                metadata.create_all(engine)

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def _errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            raise StoreError(f"SQL {operation} failed: {exc}") from exc

    def get_all(self) -> list[Employee]:
        stmt = select(self._table).order_by(self._table.c.name_key)
        with self._errors("get_all"), self._engine.connect() as conn:
            return [_to_employee(row) for row in conn.execute(stmt).mappings()]

    def get_paged(self, page: int, page_size: int) -> tuple[list[Employee], int]:
        count_stmt = select(func.count()).select_from(self._table)
        page_stmt = (
            select(self._table)
            .order_by(self._table.c.name_key)
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        with self._errors("get_paged"), self._engine.connect() as conn:
            total = conn.execute(count_stmt).scalar_one()
            items = [_to_employee(row) for row in conn.execute(page_stmt).mappings()]
        return items, total

    def get_by_name(self, name: str) -> Employee | None:
        stmt = select(self._table).where(self._table.c.name_key == name_key(name))
        with self._errors("get_by_name"), self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return _to_employee(row) if row is not None else None

    def exists(self, name: str) -> bool:
        stmt = (
            select(func.count())
            .select_from(self._table)
            .where(self._table.c.name_key == name_key(name))
        )
        with self._errors("exists"), self._engine.connect() as conn:
            return conn.execute(stmt).scalar_one() > 0

    def add_range(self, employees: Iterable[Employee]) -> None:
        rows = [_to_row(e) for e in employees]
        if not rows:
            return
        # engine.begin() commits on success and rolls back the whole insert on error
        with self._errors("add_range"), self._engine.begin() as conn:
            conn.execute(insert(self._table), rows)
        logger.debug("Inserted %d employee row(s)", len(rows))

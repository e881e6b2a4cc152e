"""MySQL employee store (PyMySQL driver)."""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import URL

from empdir.core.exceptions import ConfigurationError
from empdir.persistence.sql_backend import SqlEmployeeStore, parse_ado_connection_string


def _first(pairs: dict[str, str], *keys: str) -> str | None:
    for key in keys:
        if pairs.get(key):
            return pairs[key]
    return None


def build_mysql_url(connection_string: str) -> str | URL:
    """Accept a SQLAlchemy URL or ``Server=..;Port=..;Database=..;User=..;Password=..``."""
    if "://" in connection_string:
        return connection_string

    pairs = parse_ado_connection_string(connection_string)
    host = _first(pairs, "server", "host", "data source")
    if host is None:
        raise ConfigurationError("MySQL connection string must name a Server")
    port = _first(pairs, "port")
    try:
        port_number = int(port) if port else None
    except ValueError as exc:
        raise ConfigurationError(f"Invalid MySQL port: {port!r}") from exc

    return URL.create(
        "mysql+pymysql",
        username=_first(pairs, "user", "user id", "uid", "username"),
        password=_first(pairs, "password", "pwd"),
        host=host,
        port=port_number,
        database=_first(pairs, "database", "initial catalog"),
        query={"charset": "utf8mb4"},
    )


def create_mysql_store(connection_string: str, pool_size: int = 5, timeout: int = 30) -> SqlEmployeeStore:
    engine = create_engine(
        build_mysql_url(connection_string),
        pool_size=pool_size,
        pool_pre_ping=True,
        pool_recycle=3600,
        connect_args={"connect_timeout": timeout},
    )
    return SqlEmployeeStore(engine)

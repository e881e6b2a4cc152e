"""Microsoft SQL Server employee store (pyodbc driver)."""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import URL

from empdir.persistence.sql_backend import SqlEmployeeStore, parse_ado_connection_string

DEFAULT_ODBC_DRIVER = "ODBC Driver 18 for SQL Server"

# SqlClient-style keys -> ODBC keywords
_ODBC_KEYS = {
    "server": "Server",
    "data source": "Server",
    "address": "Server",
    "database": "Database",
    "initial catalog": "Database",
    "user id": "UID",
    "user": "UID",
    "uid": "UID",
    "password": "PWD",
    "pwd": "PWD",
    "driver": "Driver",
    "encrypt": "Encrypt",
    "trustservercertificate": "TrustServerCertificate",
    "integrated security": "Trusted_Connection",
    "trusted_connection": "Trusted_Connection",
}

_BOOLEAN_KEYS = {"Encrypt", "TrustServerCertificate", "Trusted_Connection"}


def to_odbc_connection_string(connection_string: str, driver: str = DEFAULT_ODBC_DRIVER) -> str:
    """Rewrite a SqlClient or ODBC connection string into ODBC keywords."""
    parts: dict[str, str] = {}
    for key, value in parse_ado_connection_string(connection_string).items():
        odbc_key = _ODBC_KEYS.get(key, key)
        if odbc_key in _BOOLEAN_KEYS and value.lower() in ("true", "false", "sspi"):
            value = "no" if value.lower() == "false" else "yes"
        parts[odbc_key] = value
    parts.setdefault("Driver", "{%s}" % driver)
    ordered = {"Driver": parts.pop("Driver"), **parts}
    return ";".join(f"{k}={v}" for k, v in ordered.items())


def build_mssql_url(connection_string: str) -> str | URL:
    """SQLAlchemy URLs pass through; anything else is treated as key=value pairs."""
    if "://" in connection_string:
        return connection_string
    return URL.create(
        "mssql+pyodbc",
        query={"odbc_connect": to_odbc_connection_string(connection_string)},
    )


def create_mssql_store(connection_string: str, pool_size: int = 5, timeout: int = 30) -> SqlEmployeeStore:
    engine = create_engine(
        build_mssql_url(connection_string),
        pool_size=pool_size,
        pool_pre_ping=True,
        connect_args={"timeout": timeout},
    )
    return SqlEmployeeStore(engine)

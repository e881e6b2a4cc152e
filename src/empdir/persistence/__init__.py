"""Pluggable employee stores behind the IEmployeeStore Protocol."""

from __future__ import annotations

import logging

from empdir.core.config import AppSettings
from empdir.core.exceptions import ConfigurationError
from empdir.core.protocols import IEmployeeStore
from empdir.persistence.file_backend import FileEmployeeStore
from empdir.persistence.memory_backend import MemoryEmployeeStore

logger = logging.getLogger(__name__)

_SQL_BACKENDS = ("mssql", "mysql")


def create_store(settings: AppSettings | None = None) -> IEmployeeStore:
    """Create the employee store selected by ``settings.store.backend``."""
    if settings is None:
        settings = AppSettings()
    config = settings.store
    backend = config.backend.lower()

    if backend in _SQL_BACKENDS and not config.connection_string.strip():
        raise ConfigurationError(
            f"Store backend {backend!r} requires EMPDIR_STORE_CONNECTION_STRING to be set"
        )

    if backend == "memory":
        store: IEmployeeStore = MemoryEmployeeStore()
    elif backend == "file":
        store = FileEmployeeStore(config.file_path)
    elif backend == "mssql":
        from empdir.persistence.mssql_backend import create_mssql_store

        store = create_mssql_store(config.connection_string, config.pool_size, config.timeout)
    elif backend == "mysql":
        from empdir.persistence.mysql_backend import create_mysql_store

        store = create_mysql_store(config.connection_string, config.pool_size, config.timeout)
    else:
        raise ConfigurationError(
            f"Unsupported store backend: {config.backend!r}. Supported: memory, file, mssql, mysql"
        )

    logger.info("Employee store backend: %s", backend)
    return store

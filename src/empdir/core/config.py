"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

StoreBackend = Literal["memory", "file", "mssql", "mysql"]


class StoreConfig(BaseSettings):
    """Employee record store configuration."""

    model_config = {"env_prefix": "EMPDIR_STORE_"}

    backend: StoreBackend = "memory"
    file_path: Path = Path("data/employees.db.json")
    connection_string: str = ""  # SQLAlchemy URL, ODBC or ADO-style string
    pool_size: int = 5
    timeout: int = 30


class ApiConfig(BaseSettings):
    """HTTP API configuration."""

    model_config = {"env_prefix": "EMPDIR_API_"}

    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    default_page_size: int = 10
    slow_request_ms: int = 500


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "EMPDIR_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    seed_dir: Path | None = None

    store: StoreConfig = Field(default_factory=StoreConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

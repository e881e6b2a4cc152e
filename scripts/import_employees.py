"""Import a CSV or JSON employee file into the configured store.

Usage:
    python scripts/import_employees.py data/employees.csv
    python scripts/import_employees.py staff.json --backend file --file-path data/employees.db.json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from empdir.core.config import AppSettings, StoreConfig
from empdir.core.exceptions import EmpDirError, ParseError
from empdir.core.log import configure_logging
from empdir.core.protocols import IEmployeeStore
from empdir.models.results import ImportResult
from empdir.parsers import format_from_filename, parse_payload
from empdir.persistence import create_store
from empdir.services.reconciler import ImportReconciler


def build_settings(args: argparse.Namespace) -> AppSettings:
    """Settings from the environment, with command-line store options on top."""
    overrides: dict[str, Any] = {}
    if args.backend:
        overrides["backend"] = args.backend
    if args.file_path:
        overrides["file_path"] = args.file_path
    if args.connection_string:
        overrides["connection_string"] = args.connection_string
    return AppSettings(store=StoreConfig(**overrides))


def run_import(path: Path, fmt: str | None, store: IEmployeeStore) -> ImportResult:
    """Parse ``path`` and run it through the reconciler against ``store``."""
    fmt = fmt or format_from_filename(path.name)
    employees = parse_payload(path.read_text(encoding="utf-8-sig"), fmt)
    if not employees:
        raise ParseError(f"No employees found in {path}")
    return ImportReconciler(store).handle(employees)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Import employees from a CSV or JSON file")
    parser.add_argument("path", type=Path, help="CSV or JSON file to import")
    parser.add_argument("--format", dest="fmt", choices=["csv", "json"], default=None,
                        help="Payload format (default: from file extension)")
    parser.add_argument("--backend", choices=["memory", "file", "mssql", "mysql"], default=None,
                        help="Store backend (default: EMPDIR_STORE_BACKEND)")
    parser.add_argument("--file-path", default=None, help="JSON file for the file backend")
    parser.add_argument("--connection-string", default=None, help="Connection string for SQL backends")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = build_settings(args)
    configure_logging(settings.log_level, settings.log_format)

    try:
        store = create_store(settings)
        result = run_import(args.path, args.fmt, store)
    except (EmpDirError, OSError) as exc:
        print(f"Import failed: {exc}", file=sys.stderr)
        return 1

    if not result.succeeded:
        print("Import rejected:", file=sys.stderr)
        for error in result.errors:
            print(f"  {error}", file=sys.stderr)
        return 1

    print(f"Imported {result.added_count} employee(s) into the {settings.store.backend} store")
    return 0


if __name__ == "__main__":
    sys.exit(main())

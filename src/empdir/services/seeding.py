"""Startup seed loading from ``employees.csv`` / ``employees.json``."""

from __future__ import annotations

import logging
from pathlib import Path

from empdir.core.exceptions import ParseError
from empdir.parsers import parse_payload
from empdir.services.reconciler import ImportReconciler

logger = logging.getLogger(__name__)

SEED_FILES: tuple[tuple[str, str], ...] = (
    ("employees.csv", "csv"),
    ("employees.json", "json"),
)


def seed_store(reconciler: ImportReconciler, seed_dir: str | Path | None) -> int:
    """Import every seed file present in ``seed_dir``. Returns the number added.

    Seed files go through the reconciler like any upload, so re-seeding an
    already-populated persistent store is rejected as duplicates and logged.
    """
    if seed_dir is None:
        return 0
    seed_dir = Path(seed_dir)
    if not seed_dir.is_dir():
        logger.warning("Seed directory %s does not exist, skipping seed data", seed_dir)
        return 0

    total = 0
    for filename, fmt in SEED_FILES:
        path = seed_dir / filename
        if not path.is_file():
            continue
        try:
            employees = parse_payload(path.read_text(encoding="utf-8"), fmt)
        except ParseError as exc:
            logger.error("Failed to parse seed file %s: %s", path, exc)
            continue

        result = reconciler.handle(employees)
        if result.succeeded:
            logger.info("Loaded %d employee(s) from %s", result.added_count, path)
            total += result.added_count
        else:
            logger.warning("Seed file %s rejected: %s", path, "; ".join(result.errors))
    return total

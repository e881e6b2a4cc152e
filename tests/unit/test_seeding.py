"""Tests for startup seed loading."""

from __future__ import annotations

import logging

import pytest

from empdir.persistence.memory_backend import MemoryEmployeeStore
from empdir.services.reconciler import ImportReconciler
from empdir.services.seeding import seed_store

CSV_SEED = "name,email,tel,joined\nAlice,alice@x.com,1,2022.01.01\nBob,bob@x.com,2,2022.02.01\n"
JSON_SEED = '[{"name": "Carol", "email": "carol@x.com", "tel": "3", "joined": "2022-03-01"}]'


@pytest.fixture
def empty_store():
    return MemoryEmployeeStore()


def test_loads_csv_and_json(tmp_path, empty_store):
    (tmp_path / "employees.csv").write_text(CSV_SEED)
    (tmp_path / "employees.json").write_text(JSON_SEED)
    added = seed_store(ImportReconciler(empty_store), tmp_path)
    assert added == 3
    assert [e.name for e in empty_store.get_all()] == ["Alice", "Bob", "Carol"]


def test_missing_files_are_ignored(tmp_path, empty_store):
    (tmp_path / "employees.json").write_text(JSON_SEED)
    assert seed_store(ImportReconciler(empty_store), tmp_path) == 1


def test_missing_directory(tmp_path, empty_store):
    assert seed_store(ImportReconciler(empty_store), tmp_path / "nope") == 0


def test_none_directory(empty_store):
    assert seed_store(ImportReconciler(empty_store), None) == 0


def test_reseeding_is_rejected_and_logged(tmp_path, empty_store, caplog):
    (tmp_path / "employees.csv").write_text(CSV_SEED)
    reconciler = ImportReconciler(empty_store)
    seed_store(reconciler, tmp_path)
    with caplog.at_level(logging.WARNING):
        assert seed_store(reconciler, tmp_path) == 0
    assert "already exists" in caplog.text
    assert len(empty_store.get_all()) == 2


def test_malformed_json_seed_is_skipped(tmp_path, empty_store, caplog):
    (tmp_path / "employees.csv").write_text(CSV_SEED)
    (tmp_path / "employees.json").write_text("[{")
    with caplog.at_level(logging.ERROR):
        assert seed_store(ImportReconciler(empty_store), tmp_path) == 2
    assert "Failed to parse seed file" in caplog.text

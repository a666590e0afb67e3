"""Shared fixtures for the Personnel API test suite."""

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Keep test log files out of the project tree; must run before config is imported.
os.environ.setdefault("PERSONNEL_LOGS", tempfile.mkdtemp(prefix="personnel_logs_"))

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import api.database as _db_module  # noqa: E402
from api.models import Employee  # noqa: E402


# ── Store on a throwaway SQLite file ─────────────────────────────────

@pytest.fixture
def db_path(tmp_path) -> Path:
    path = tmp_path / "personnel_test.db"
    _db_module.init_db(path)
    return path


@pytest.fixture
def store(db_path) -> _db_module.SqliteEmployeeStore:
    return _db_module.SqliteEmployeeStore(db_path)


# ── In-process API client ────────────────────────────────────────────

@pytest.fixture
def client(db_path, monkeypatch):
    """TestClient whose requests hit the temporary database."""
    from fastapi.testclient import TestClient

    from api.main import app

    monkeypatch.setattr(_db_module, "_DB_PATH", db_path)
    return TestClient(app)


# ── Sample records ───────────────────────────────────────────────────

@pytest.fixture
def alice() -> Employee:
    return Employee(id=1, name="Alice", position="Developer", salary=4200.0, email="alice@example.com")

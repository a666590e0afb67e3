"""Tests for seed_employees.py."""

from api.database import SqliteEmployeeStore
from api.validation import validate_employee
from seed_employees import DEMO_EMPLOYEES, seed


def test_seed_count_matches_demo_data(tmp_path):
    assert seed(tmp_path / "seed.db") == len(DEMO_EMPLOYEES)


def test_seed_is_idempotent(tmp_path):
    db = tmp_path / "seed.db"
    first = seed(db)
    second = seed(db)
    assert first > 0
    assert second == 0
    assert len(SqliteEmployeeStore(db).find_all()) == first


def test_seeded_employees_pass_validation(tmp_path):
    db = tmp_path / "seed.db"
    seed(db)
    for employee in SqliteEmployeeStore(db).find_all():
        assert validate_employee(employee).ok

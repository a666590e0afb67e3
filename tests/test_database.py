"""Tests for the SQLite employee store in api/database.py."""

import sqlite3

import pytest

from api.database import get_db
from api.models import Employee


class TestSqliteEmployeeStore:
    def test_save_assigns_increasing_ids(self, store):
        first = store.save(Employee(name="Alice"))
        second = store.save(Employee(name="Bob"))
        assert first.id is not None
        assert second.id > first.id

    def test_find_by_id_missing_returns_none(self, store):
        assert store.find_by_id(1) is None

    def test_find_all_ordered_by_id(self, store):
        for name in ("C", "A", "B"):
            store.save(Employee(name=name))
        assert [e.name for e in store.find_all()] == ["C", "A", "B"]

    def test_save_with_id_updates_in_place(self, store):
        saved = store.save(Employee(name="Alice", position="Dev", salary=10))
        updated = store.save(saved.model_copy(update={"position": "Lead", "salary": 12.5}))
        assert updated == Employee(id=saved.id, name="Alice", position="Lead", salary=12.5, email=None)
        assert len(store.find_all()) == 1

    def test_delete_by_id(self, store):
        keep = store.save(Employee(name="Keep"))
        gone = store.save(Employee(name="Gone"))
        store.delete_by_id(gone.id)
        assert store.find_by_id(gone.id) is None
        assert store.find_all() == [keep]

    def test_deleted_ids_are_not_reused(self, store):
        gone = store.save(Employee(name="Gone"))
        store.delete_by_id(gone.id)
        assert store.save(Employee(name="Next")).id > gone.id

    def test_name_is_required_at_the_storage_level(self, store):
        with pytest.raises(sqlite3.IntegrityError):
            store.save(Employee(name=None))


def test_get_db_rolls_back_on_error(db_path):
    with pytest.raises(RuntimeError):
        with get_db(db_path) as con:
            con.execute("INSERT INTO employees (name) VALUES ('Half written')")
            raise RuntimeError("boom")

    with get_db(db_path) as con:
        assert con.execute("SELECT COUNT(*) FROM employees").fetchone()[0] == 0

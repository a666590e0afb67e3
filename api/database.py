"""SQLite record store for employees."""
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Protocol

from api.models import Employee
from config import DB_PATH

_DB_PATH = DB_PATH

_SCHEMA = """
CREATE TABLE IF NOT EXISTS employees (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    position TEXT,
    salary REAL NOT NULL DEFAULT 0,
    email TEXT
);
"""


def init_db(db_path: Path | None = None) -> None:
    path = db_path or _DB_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    con = sqlite3.connect(str(path))
    try:
        con.executescript(_SCHEMA)
        con.commit()
    finally:
        con.close()


@contextmanager
def get_db(db_path: Path | None = None) -> Generator[sqlite3.Connection, None, None]:
    path = db_path or _DB_PATH
    con = sqlite3.connect(str(path))
    con.row_factory = sqlite3.Row
    con.execute("PRAGMA journal_mode=WAL")  # safe for multiple uvicorn workers
    try:
        yield con
        con.commit()
    except Exception:
        con.rollback()
        raise
    finally:
        con.close()


class EmployeeStore(Protocol):
    """find-all / find-by-id / save / delete-by-id over employee records."""

    def find_all(self) -> list[Employee]: ...

    def find_by_id(self, employee_id: int) -> Employee | None: ...

    def save(self, employee: Employee) -> Employee: ...

    def delete_by_id(self, employee_id: int) -> None: ...


def _row_to_employee(row) -> Employee:
    return Employee(
        id=row["id"],
        name=row["name"],
        position=row["position"],
        salary=row["salary"],
        email=row["email"],
    )


class SqliteEmployeeStore:
    """EmployeeStore backed by one SQLite file; every call is its own transaction."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path

    def find_all(self) -> list[Employee]:
        with get_db(self.db_path) as con:
            rows = con.execute("SELECT * FROM employees ORDER BY id").fetchall()
        return [_row_to_employee(r) for r in rows]

    def find_by_id(self, employee_id: int) -> Employee | None:
        with get_db(self.db_path) as con:
            row = con.execute("SELECT * FROM employees WHERE id = ?", (employee_id,)).fetchone()
        return _row_to_employee(row) if row is not None else None

    def save(self, employee: Employee) -> Employee:
        """Insert when ``employee.id`` is None, otherwise upsert under that id.

        Returns the stored record, including the id assigned on insert.
        """
        values = (employee.name, employee.position, employee.salary, employee.email)
        with get_db(self.db_path) as con:
            if employee.id is None:
                cur = con.execute(
                    "INSERT INTO employees (name, position, salary, email) VALUES (?, ?, ?, ?)",
                    values,
                )
                employee_id = cur.lastrowid
            else:
                con.execute(
                    """INSERT INTO employees (id, name, position, salary, email)
                       VALUES (?, ?, ?, ?, ?)
                       ON CONFLICT(id) DO UPDATE SET
                           name = excluded.name,
                           position = excluded.position,
                           salary = excluded.salary,
                           email = excluded.email""",
                    (employee.id, *values),
                )
                employee_id = employee.id
            row = con.execute("SELECT * FROM employees WHERE id = ?", (employee_id,)).fetchone()
        return _row_to_employee(row)

    def delete_by_id(self, employee_id: int) -> None:
        with get_db(self.db_path) as con:
            con.execute("DELETE FROM employees WHERE id = ?", (employee_id,))


def get_store() -> EmployeeStore:
    """FastAPI dependency: the store for the configured database file."""
    return SqliteEmployeeStore(_DB_PATH)

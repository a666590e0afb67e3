"""Seed a fresh operational database with demo employees.

Usage:
    python seed_employees.py            # seeds the configured PERSONNEL_DB
"""

from pathlib import Path

from api.database import SqliteEmployeeStore, get_db, init_db
from api.models import Employee
from logger_config import setup_logger

logger = setup_logger("seed_employees")

DEMO_EMPLOYEES = [
    Employee(name="Alice Martin", position="Engineering Manager", salary=6200.0, email="alice.martin@example.com"),
    Employee(name="Bruno Lefevre", position="Backend Developer", salary=4800.0, email="bruno.lefevre@example.com"),
    Employee(name="Chloe Bernard", position="Frontend Developer", salary=4600.0, email="chloe.bernard@example.com"),
    Employee(name="David Moreau", position="QA Engineer", salary=4100.0, email="david.moreau@example.com"),
    Employee(name="Emma Laurent", position="Product Owner", salary=5300.0, email="emma.laurent@example.com"),
    Employee(name="Farid Benali", position="DevOps Engineer", salary=5000.0, email=None),
]


def seed(db_path: Path | None = None) -> int:
    """Insert the demo employees if the table is empty.

    Returns the number of rows inserted (0 when the table already had data).
    """
    init_db(db_path)
    with get_db(db_path) as con:
        (count,) = con.execute("SELECT COUNT(*) FROM employees").fetchone()
    if count:
        logger.info("employees table already has %d rows, skipping seed", count)
        return 0

    store = SqliteEmployeeStore(db_path)
    for employee in DEMO_EMPLOYEES:
        store.save(employee)
    return len(DEMO_EMPLOYEES)


if __name__ == "__main__":
    logger.info("Inserted %d demo employees", seed())

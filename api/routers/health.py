"""Health check for probes and connectivity tests."""
import sqlite3

from fastapi import APIRouter

from api.database import get_db
from config import API_VERSION

router = APIRouter()


@router.get("/health")
def health_check():
    db_status = "connected"
    try:
        with get_db() as con:
            con.execute("SELECT 1 FROM employees LIMIT 1")
    except sqlite3.Error:
        db_status = "error"
    return {"status": "ok", "db": db_status, "version": API_VERSION}

"""Centralized path and constant configuration with env-var overrides.

All hardcoded paths and magic values live here.  Override any of them
via the corresponding PERSONNEL_* environment variable.
"""

import os
from pathlib import Path

# =====================================================================
# DIRECTORY ROOTS (derived from this file's location)
# =====================================================================

_PROJECT_DIR = Path(__file__).resolve().parent

# =====================================================================
# ENVIRONMENT
# =====================================================================

PERSONNEL_ENV = os.environ.get("PERSONNEL_ENV", "production")  # production | development

# =====================================================================
# LOGGING CONFIGURATION
# =====================================================================

LOGS_PATH = Path(os.environ.get("PERSONNEL_LOGS", str(_PROJECT_DIR / "logs")))
LOG_LEVEL = os.environ.get(
    "PERSONNEL_LOG_LEVEL",
    "DEBUG" if PERSONNEL_ENV == "development" else "INFO",
)

# =====================================================================
# FASTAPI
# =====================================================================

API_VERSION = "0.1.0"
API_PREFIX = "/api/employees"
API_HOST = os.environ.get("PERSONNEL_API_HOST", "127.0.0.1")
API_PORT = int(os.environ.get("PERSONNEL_API_PORT", "8000"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("PERSONNEL_CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

# Seed demo employees into an empty table on startup
SEED_DEMO_DATA = os.environ.get("PERSONNEL_SEED_DEMO", "").lower() in ("1", "true", "yes")

# SQLite record store
DB_PATH = Path(os.environ.get("PERSONNEL_DB", str(_PROJECT_DIR / "personnel.db")))

# =====================================================================
# VALIDATION
# =====================================================================

EMAIL_PATTERN = r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+$"
EMPTY_NAME_MESSAGE = "Name must not be empty"
INVALID_EMAIL_MESSAGE = "Email must be valid"

"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# ── Database ──────────────────────────────────────────────
NORTHWIND_DB_PATH: str = os.getenv("NORTHWIND_DB_PATH", "Northwind.db")

DATABASE_URL: str = os.getenv("DATABASE_URL") or f"sqlite:///{NORTHWIND_DB_PATH}"

DB_ECHO: bool = _as_bool(os.getenv("DB_ECHO", "false"))
DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "5"))

# ── Sample data ───────────────────────────────────────────
SEED_SAMPLE_DATA: bool = _as_bool(os.getenv("SEED_SAMPLE_DATA", "true"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()

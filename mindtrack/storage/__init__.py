"""PostgreSQL persistence (psycopg2, raw SQL)."""

from .db import SCHEMA_SQL, ensure_tables, get_db
from . import repository

__all__ = ["SCHEMA_SQL", "ensure_tables", "get_db", "repository"]

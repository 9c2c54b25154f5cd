"""
Database Utilities

- SQLAlchemy Engine mit Connection Pooling (SQL Server oder SQLite)
- Context Manager für Transaktionen
- BaseRepository + Spend/Upload/Log Repositories
"""

from .connection import (
    get_engine,
    db_connect,
    close_all_engines,
    ensure_schema,
)
from .repositories.base import BaseRepository

__all__ = [
    "get_engine",
    "db_connect",
    "close_all_engines",
    "ensure_schema",
    "BaseRepository",
]

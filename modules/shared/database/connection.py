"""
modules/shared/database/connection.py
Database Connection Manager - SQLAlchemy Engine (echtes Pooling).

SQL Server wenn SQL_SERVER gesetzt ist, sonst DATABASE_URL (default SQLite).
"""

import platform
from contextlib import contextmanager
from typing import Dict, Optional
from urllib.parse import quote_plus

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, Connection

from ..config import DATABASE_URL, SQL_SERVER, SQL_USERNAME, SQL_PASSWORD, SQL_DATABASE
from .schema import metadata

# Engine Cache pro URL
_engines: Dict[str, Engine] = {}


def _parse_server():
    """Split host/port from SQL_SERVER setting."""
    parts = SQL_SERVER.replace(':', ',').split(',')
    host = parts[0]
    port = parts[1] if len(parts) > 1 else '1433'
    return host, port


def _build_connection_url(database: str = SQL_DATABASE) -> str:
    """Build SQLAlchemy URL: pyodbc for SQL Server (driver differs Linux vs Windows), else DATABASE_URL."""
    if not SQL_SERVER:
        return DATABASE_URL

    host, port = _parse_server()
    driver = 'ODBC Driver 18 for SQL Server' if platform.system() == 'Linux' else 'SQL Server'

    driver_enc = quote_plus(driver)
    trust_param = 'TrustServerCertificate=yes'
    base = f"mssql+pyodbc://{quote_plus(SQL_USERNAME or '')}:{quote_plus(SQL_PASSWORD or '')}@{host}:{port}/{database}"
    return f"{base}?driver={driver_enc}&{trust_param}"


def _create_engine(url: str) -> Engine:
    if url.startswith('sqlite'):
        # SQLite: kein QueuePool-Sizing, Zugriff aus Worker-Threads erlauben
        return create_engine(url, connect_args={"check_same_thread": False}, future=True)
    return create_engine(
        url,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
        future=True,
    )


def get_engine(url: Optional[str] = None) -> Engine:
    """Get or create a pooled SQLAlchemy Engine for the given URL."""
    url = url or _build_connection_url()
    if url not in _engines:
        _engines[url] = _create_engine(url)
    return _engines[url]


def ensure_schema(engine: Optional[Engine] = None) -> None:
    """Lege fehlende Tabellen an (idempotent)."""
    metadata.create_all(engine or get_engine())


@contextmanager
def db_connect(url: Optional[str] = None, engine: Optional[Engine] = None):
    """Context manager: Connection mit Transaktion (commit bei Erfolg, sonst rollback)."""
    conn: Connection = (engine or get_engine(url)).connect()
    trans = conn.begin()
    try:
        yield conn
        trans.commit()
    except Exception:
        trans.rollback()
        raise
    finally:
        conn.close()


def close_all_engines():
    """Dispose all engines and close pooled connections (e.g., on shutdown)."""
    global _engines
    for engine in _engines.values():
        engine.dispose()
    _engines = {}

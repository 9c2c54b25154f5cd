"""
modules/shared/database/repositories/base.py
Basis-Klasse für alle Repositories (DRY Prinzip)
"""

from typing import Optional, Union
from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.sql.elements import TextClause
from ..connection import get_engine


class BaseRepository:
    """
    Abstrakte Basisklasse für Repositories.
    Stellt Helper-Methoden für Transaktionen und Queries bereit.

    Mit injizierter Connection laufen alle Statements in deren Transaktion,
    ohne Connection holt sich jeder Aufruf eine eigene aus dem Pool.
    """

    def __init__(self, connection: Optional[Connection] = None, engine: Optional[Engine] = None):
        self._conn = connection
        self._engine = engine

    def _get_engine(self) -> Engine:
        return self._engine or get_engine()

    @property
    def engine(self) -> Engine:
        return self._get_engine()

    def bound_to(self, connection: Connection):
        """Kopie dieses Repositories, die in der Transaktion von connection arbeitet"""
        return type(self)(connection=connection, engine=self._engine)

    def _prepare_statement(self, sql: Union[str, TextClause]):
        """Helper: Wandelt Strings in TextClause um, lässt Objekte unverändert."""
        if isinstance(sql, str):
            return text(sql)
        return sql

    def _execute_stmt(self, sql, params: dict = None):
        """Helper für UPDATE/DELETE/INSERT (ohne Return Value)"""
        params = params or {}
        stmt = self._prepare_statement(sql)

        if self._conn:
            return self._conn.execute(stmt, params)
        else:
            with self._get_engine().connect() as conn:
                result = conn.execute(stmt, params)
                conn.commit()
                return result

    def _fetch_one(self, sql, params: dict = None):
        """Helper für SELECT Single Row"""
        params = params or {}
        stmt = self._prepare_statement(sql)

        if self._conn:
            return self._conn.execute(stmt, params).first()
        else:
            with self._get_engine().connect() as conn:
                return conn.execute(stmt, params).first()

    def _fetch_all(self, sql, params: dict = None):
        """Helper für SELECT Multi Row"""
        params = params or {}
        stmt = self._prepare_statement(sql)

        if self._conn:
            return self._conn.execute(stmt, params).all()
        else:
            with self._get_engine().connect() as conn:
                return conn.execute(stmt, params).all()

    def _insert_returning_id(self, stmt, params: dict) -> int:
        """INSERT und Primary Key zurückgeben (Fetch BEVOR Connection zugeht)"""
        if self._conn:
            result = self._conn.execute(stmt, params)
            return int(result.inserted_primary_key[0])
        with self._get_engine().connect() as conn:
            result = conn.execute(stmt, params)
            new_id = int(result.inserted_primary_key[0])
            conn.commit()
            return new_id

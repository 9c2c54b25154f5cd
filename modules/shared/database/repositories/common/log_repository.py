"""
Log Repository - SQLAlchemy Core
Data Access Layer - Strukturiertes Logging in der Datenbank
"""

from datetime import datetime, timedelta
from typing import Dict, List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from ..base import BaseRepository
from ...schema import logs_table


class LogRepository(BaseRepository):
    """
    Data Access Layer - Strukturiertes Logging.
    Fehler beim Loggen dürfen nie den eigentlichen Request abbrechen.
    """

    def insert_log(self, job_id: str, job_type: str, level: str, message: str,
                   status: str = None, duration_seconds: float = None,
                   error_text: str = None) -> bool:
        """Speichere Log-Entry"""
        try:
            self._execute_stmt(logs_table.insert(), {
                "job_id": job_id,
                "job_type": job_type,
                "level": level,
                "message": message,
                "status": status,
                "duration_seconds": duration_seconds,
                "error_text": error_text,
                "timestamp": datetime.now(),
            })
            return True
        except SQLAlchemyError as e:
            print(f"LOG INSERT FAILED: {e}")
            return False

    def get_logs(self, job_id: str = None, level: str = None,
                 limit: int = 100, offset: int = 0) -> List[Dict]:
        """Hole Logs mit optionalen Filtern (Read-Only)"""
        stmt = select(logs_table)
        if job_id:
            # Präfix-Matching, außer das Frontend schickt schon ein LIKE-Pattern
            pattern = job_id if '%' in job_id else f"{job_id}%"
            stmt = stmt.where(logs_table.c.job_id.like(pattern))
        if level:
            stmt = stmt.where(logs_table.c.level == level)
        stmt = stmt.order_by(logs_table.c.timestamp.desc(), logs_table.c.log_id.desc()).limit(limit).offset(offset)

        rows = self._fetch_all(stmt)
        return [dict(row._mapping) for row in rows]

    def clean_old_logs(self, days: int = 30) -> int:
        """Lösche alte Logs"""
        cutoff = datetime.now() - timedelta(days=days)
        result = self._execute_stmt(delete(logs_table).where(logs_table.c.timestamp < cutoff))
        return result.rowcount

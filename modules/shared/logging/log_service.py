"""Log Service - Zentrale Log-Verwaltung für Requests und Jobs"""

import logging
from typing import Optional, List, Dict

from ..config import LOG_TO_DB
from .logger import app_logger, create_module_logger

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Alle strukturierten Einträge landen zusätzlich in logs/jobs/jobs.log
_job_logger = create_module_logger('JOBS', 'jobs',
                                   console_level=logging.ERROR,
                                   file_level=logging.INFO)


class LogService:
    """Verwaltet strukturiertes Logging"""

    def __init__(self, persist: bool = LOG_TO_DB, repo=None):
        self.persist = persist
        self._repo = repo
        self.log_buffer: List[str] = []

    @property
    def repo(self):
        """LogRepository erst bei Bedarf erzeugen (DB muss beim Import nicht erreichbar sein)"""
        if self._repo is None:
            from ..database.repositories.common.log_repository import LogRepository
            self._repo = LogRepository()
        return self._repo

    def log(self, job_id: str, job_type: str, level: str, message: str,
            status: str = None, duration: float = None, error_text: str = None):
        """Speichere Log-Eintrag in Datei und optional in der DB"""

        # In Memory Buffer (letzte 500 Einträge)
        self.log_buffer.append(message)
        del self.log_buffer[:-500]

        _job_logger.log(_LEVELS.get(level, logging.INFO), f"[{job_id}] {job_type}: {message}")

        if self.persist:
            self.repo.insert_log(
                job_id=job_id,
                job_type=job_type,
                level=level,
                message=message,
                status=status,
                duration_seconds=duration,
                error_text=error_text
            )

        # ERROR-Level immer in zentrale app.log schreiben
        if level == "ERROR":
            app_logger.error(message)

    def get_logs(self, job_id: str = None, level: str = None,
                 limit: int = 100, offset: int = 0) -> List[Dict]:
        """Hole Logs mit Filtern (nur mit DB-Logging verfügbar)"""
        if not self.persist:
            return []
        return self.repo.get_logs(job_id, level, limit, offset)

    def cleanup_old_logs(self, days: int = 30) -> int:
        """Lösche alte Logs"""
        if not self.persist:
            return 0
        return self.repo.clean_old_logs(days)


# Globale LogService Instanz
log_service = LogService()

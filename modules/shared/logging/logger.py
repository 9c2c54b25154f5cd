"""
Logger Factory für Dashboard, Spend Reader und GA4 Connector

Jeder Modul-Logger schreibt in logs/<subdir>/<subdir>.log (rotierend)
und meldet auf stderr nur, was LOG_CONSOLE_LEVEL durchlässt.
Benötigt keine DB-Verbindung.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config import LOG_DIR, LOG_CONSOLE_LEVEL, LOG_MAX_BYTES, LOG_BACKUP_COUNT

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
LOG_DATEFMT = '%d.%m.%Y %H:%M:%S'


def _console_level(default: int) -> int:
    """LOG_CONSOLE_LEVEL (z.B. 'INFO') überschreibt den Modul-Default"""
    if not LOG_CONSOLE_LEVEL:
        return default
    level = logging.getLevelName(LOG_CONSOLE_LEVEL.upper())
    return level if isinstance(level, int) else default


def create_module_logger(
    module_name: str,
    log_subdir: str,
    console_level: int = logging.ERROR,
    file_level: int = logging.INFO,
    file_name: Optional[str] = None,
    log_root: Path = LOG_DIR
) -> logging.Logger:
    """
    Logger für ein Modul (idempotent, Handler werden nur einmal angehängt)

    Args:
        module_name: Logger-Name, z.B. 'DASHBOARD', 'SPEND_READER', 'GA4'
        log_subdir: Unterordner unter log_root, z.B. 'dashboard'
        console_level: Mindest-Level auf stderr
        file_level: Mindest-Level in der Datei
        file_name: Dateiname (default: <log_subdir>.log)
        log_root: Basisverzeichnis (default: LOG_DIR)
    """
    logger = logging.getLogger(module_name)
    logger.setLevel(logging.DEBUG)

    # Nur eigene Handler zählen, Root-Handler (uvicorn, pytest) sind egal
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(_console_level(console_level))
    stderr_handler.setFormatter(formatter)
    logger.addHandler(stderr_handler)

    target_dir = Path(log_root) / log_subdir
    target_dir.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        target_dir / (file_name or f"{log_subdir}.log"),
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding='utf-8',
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger


# Zentraler Fehler-Logger (logs/app/app.log)
app_logger = create_module_logger('APP', 'app',
                                  console_level=logging.ERROR,
                                  file_level=logging.ERROR)

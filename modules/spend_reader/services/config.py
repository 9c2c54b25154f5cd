"""Centralized settings and paths for the spend_reader module."""
from modules.shared.config import (
    UPLOAD_MAX_BYTES,
    UPLOAD_ALLOWED_MIME,
    DEFAULT_CURRENCY,
)
from config.settings import DATA_DIR

DATA_ROOT = DATA_DIR / "spend_reader"
ORDNER_AUSGANG = DATA_ROOT / "ausgang"


def ensure_directories() -> None:
    for p in [DATA_ROOT, ORDNER_AUSGANG]:
        p.mkdir(parents=True, exist_ok=True)


__all__ = [
    "UPLOAD_MAX_BYTES",
    "UPLOAD_ALLOWED_MIME",
    "DEFAULT_CURRENCY",
    "DATA_ROOT",
    "ORDNER_AUSGANG",
    "ensure_directories",
]

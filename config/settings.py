"""Zentrale Konfigurationsverwaltung"""

import os
from dotenv import load_dotenv
from pathlib import Path

config_dir = Path(__file__).parent
env_file = config_dir / '.env'
load_dotenv(env_file)

PROJECT_ROOT = config_dir.parent

APP_ENV = os.getenv('APP_ENV', 'production')

# --- Datenbank ---
# Entweder SQL Server (SQL_SERVER gesetzt) oder DATABASE_URL (default: SQLite)
SQL_SERVER = os.getenv('SQL_SERVER')
SQL_USERNAME = os.getenv('SQL_USERNAME')
SQL_PASSWORD = os.getenv('SQL_PASSWORD')
SQL_DATABASE = os.getenv('SQL_DATABASE', 'spend_dashboard')

# --- Dateipfade (data/ Verzeichnis) ---
DATA_DIR = PROJECT_ROOT / 'data'
DATA_DIR.mkdir(exist_ok=True)

DATABASE_URL = os.getenv('DATABASE_URL', f"sqlite:///{DATA_DIR / 'spend_dashboard.db'}")

TABLE_SPEND = os.getenv('TABLE_SPEND', 'campaigns_spend')
TABLE_UPLOADS = os.getenv('TABLE_UPLOADS', 'pdf_uploads')
TABLE_LOGS = os.getenv('TABLE_LOGS', 'app_logs')

# --- Google Analytics 4 ---
GA_PROPERTY_ID = os.getenv('GA_PROPERTY_ID')
GOOGLE_APPLICATION_CREDENTIALS = os.getenv('GOOGLE_APPLICATION_CREDENTIALS')
GA4_TIMEOUT_SECONDS = float(os.getenv('GA4_TIMEOUT_SECONDS', '10'))
GA4_ROW_LIMIT = int(os.getenv('GA4_ROW_LIMIT', '1000'))
PAID_CHANNEL_GROUPS = [
    c.strip()
    for c in os.getenv('PAID_CHANNEL_GROUPS', 'Paid Search,Display,Paid Video').split(',')
    if c.strip()
]

# --- Upload ---
UPLOAD_MAX_BYTES = int(os.getenv('UPLOAD_MAX_BYTES', str(10 * 1024 * 1024)))
UPLOAD_ALLOWED_MIME = os.getenv('UPLOAD_ALLOWED_MIME', 'application/pdf')
DEFAULT_CURRENCY = os.getenv('DEFAULT_CURRENCY', 'USD')

# --- Dashboard ---
DEFAULT_START_DATE = os.getenv('DEFAULT_START_DATE', '2025-08-01')
DEFAULT_END_DATE = os.getenv('DEFAULT_END_DATE', '2025-08-07')
MAX_RANGE_DAYS = int(os.getenv('MAX_RANGE_DAYS', '365'))

# --- Logging ---
LOG_DIR = PROJECT_ROOT / 'logs'
LOG_TO_DB = os.getenv('LOG_TO_DB', 'false').lower() in ('1', 'true', 'yes')
LOG_CONSOLE_LEVEL = os.getenv('LOG_CONSOLE_LEVEL')
LOG_MAX_BYTES = int(os.getenv('LOG_MAX_BYTES', str(5 * 1024 * 1024)))
LOG_BACKUP_COUNT = int(os.getenv('LOG_BACKUP_COUNT', '5'))


def is_development() -> bool:
    """True wenn Fehlerdetails an den Client gehen dürfen"""
    return APP_ENV.lower() == 'development'

"""
Configuration - Re-Export Layer

Stellt die zentrale Konfiguration aus config/settings.py bereit.
Alle Werte werden aus der .env Datei geladen.
"""

from config.settings import (
    APP_ENV,
    is_development,

    # Database
    DATABASE_URL,
    SQL_SERVER,
    SQL_USERNAME,
    SQL_PASSWORD,
    SQL_DATABASE,

    # Table Names
    TABLE_SPEND,
    TABLE_UPLOADS,
    TABLE_LOGS,

    # Google Analytics 4
    GA_PROPERTY_ID,
    GOOGLE_APPLICATION_CREDENTIALS,
    GA4_TIMEOUT_SECONDS,
    GA4_ROW_LIMIT,
    PAID_CHANNEL_GROUPS,

    # Upload
    UPLOAD_MAX_BYTES,
    UPLOAD_ALLOWED_MIME,
    DEFAULT_CURRENCY,

    # Dashboard
    DEFAULT_START_DATE,
    DEFAULT_END_DATE,
    MAX_RANGE_DAYS,

    # Logging
    LOG_DIR,
    LOG_TO_DB,
    LOG_CONSOLE_LEVEL,
    LOG_MAX_BYTES,
    LOG_BACKUP_COUNT,
)

__all__ = [
    "APP_ENV",
    "is_development",

    # Database
    "DATABASE_URL",
    "SQL_SERVER",
    "SQL_USERNAME",
    "SQL_PASSWORD",
    "SQL_DATABASE",

    # Tables
    "TABLE_SPEND",
    "TABLE_UPLOADS",
    "TABLE_LOGS",

    # GA4
    "GA_PROPERTY_ID",
    "GOOGLE_APPLICATION_CREDENTIALS",
    "GA4_TIMEOUT_SECONDS",
    "GA4_ROW_LIMIT",
    "PAID_CHANNEL_GROUPS",

    # Upload
    "UPLOAD_MAX_BYTES",
    "UPLOAD_ALLOWED_MIME",
    "DEFAULT_CURRENCY",

    # Dashboard
    "DEFAULT_START_DATE",
    "DEFAULT_END_DATE",
    "MAX_RANGE_DAYS",

    # Logging
    "LOG_DIR",
    "LOG_TO_DB",
    "LOG_CONSOLE_LEVEL",
    "LOG_MAX_BYTES",
    "LOG_BACKUP_COUNT",
]

"""
Shared Module - Zentrale Infrastruktur für alle Module

Dieses Modul bietet gemeinsame Funktionen für Database, Logging, Config und Connectors.
Alle Module importieren von hier, nicht direkt von den Untermodulen.

Verwendung in neuen Modulen:
    from modules.shared import db_connect, BaseRepository, log_service
    from modules.shared.config import GA_PROPERTY_ID
"""

# Database
from .database import get_engine, db_connect, close_all_engines, ensure_schema, BaseRepository

# Logging
from .logging import create_module_logger, log_service, app_logger

# Errors
from .errors import (
    DashboardError,
    ValidationError,
    SourceUnavailable,
    ParseSkip,
    InternalError,
)

# Public API
__all__ = [
    # Database
    "get_engine",
    "db_connect",
    "close_all_engines",
    "ensure_schema",
    "BaseRepository",

    # Logging
    "create_module_logger",
    "log_service",
    "app_logger",

    # Errors
    "DashboardError",
    "ValidationError",
    "SourceUnavailable",
    "ParseSkip",
    "InternalError",
]

# Version
__version__ = "1.0.0"

"""Logging Package - Zentrale Logger- und Service-Verwaltung"""

from .logger import create_module_logger, app_logger
from .log_service import log_service, LogService

__all__ = ['create_module_logger', 'app_logger', 'log_service', 'LogService']

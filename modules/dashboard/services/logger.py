"""
Dashboard Module Logger
Logs für Metrik-Abgleich (GA4 + Spend)
"""
import logging
from modules.shared.logging import create_module_logger

dashboard_logger = create_module_logger(
    module_name='DASHBOARD',
    log_subdir='dashboard',
    console_level=logging.ERROR,
    file_level=logging.INFO,
    file_name='dashboard.log'
)

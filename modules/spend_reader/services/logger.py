"""
Spend Reader Module Logger
Logs für Upload, Textextraktion und Parsing
"""
import logging
from modules.shared.logging import create_module_logger

spend_reader_logger = create_module_logger(
    module_name='SPEND_READER',
    log_subdir='spend_reader',
    console_level=logging.ERROR,
    file_level=logging.INFO,
    file_name='spend_reader.log'
)

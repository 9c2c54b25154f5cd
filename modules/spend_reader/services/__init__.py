"""Spend Reader Services: Textextraktion, Parser, Upload, Export"""

from .spend_parser import parse_spend_text, ParseResult, SpendParserMachine, ParserState
from .upload_service import UploadService, validate_upload

__all__ = [
    "parse_spend_text",
    "ParseResult",
    "SpendParserMachine",
    "ParserState",
    "UploadService",
    "validate_upload",
]

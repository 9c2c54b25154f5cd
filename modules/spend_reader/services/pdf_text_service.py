"""PDF → Text (pdfplumber)"""
import io

import pdfplumber

from modules.shared.errors import ValidationError
from .logger import spend_reader_logger


def extract_text_from_pdf(content: bytes) -> str:
    """
    Extrahiert den Text aller Seiten eines PDFs.

    Raises:
        ValidationError: Datei ist kein lesbares PDF
    """
    try:
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            text = "\n".join([(page.extract_text() or "") for page in pdf.pages])
    except Exception as e:
        spend_reader_logger.warning(f"PDF nicht lesbar: {e}")
        raise ValidationError("The uploaded file could not be read as PDF", error="Invalid PDF") from e

    spend_reader_logger.info(f"PDF-Text extrahiert: {len(text)} Zeichen")
    return text

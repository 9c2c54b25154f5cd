"""Upload Service - Validierung, Parsing und Speicherung hochgeladener Spend-Reports"""

import time
from typing import Callable, Dict, List, Optional

from modules.shared import log_service, db_connect
from modules.shared.database.repositories.spend import SpendRepository, UploadRepository
from modules.shared.errors import PayloadTooLarge, UnsupportedMediaType, ValidationError
from .config import UPLOAD_ALLOWED_MIME, UPLOAD_MAX_BYTES, DEFAULT_CURRENCY
from .logger import spend_reader_logger
from .pdf_text_service import extract_text_from_pdf
from .spend_parser import parse_spend_text


def validate_upload(filename: Optional[str], content_type: Optional[str], size: int,
                    max_bytes: int = UPLOAD_MAX_BYTES, allowed_mime: str = UPLOAD_ALLOWED_MIME) -> None:
    """
    Prüft Datei vor dem Parsen.

    Raises:
        ValidationError: keine Datei
        UnsupportedMediaType: falscher MIME-Typ
        PayloadTooLarge: Datei zu groß
    """
    if not filename:
        raise ValidationError("No file uploaded", error="No file uploaded")
    if content_type != allowed_mime:
        raise UnsupportedMediaType("Only PDF files allowed")
    if size > max_bytes:
        raise PayloadTooLarge(f"File exceeds the maximum size of {max_bytes // (1024 * 1024)} MB")


class UploadService:
    """Business Logic - PDF Upload → Spend-Ledger"""

    def __init__(self, upload_repo: UploadRepository = None, spend_repo: SpendRepository = None,
                 text_extractor: Callable[[bytes], str] = extract_text_from_pdf,
                 currency: str = DEFAULT_CURRENCY):
        self.upload_repo = upload_repo or UploadRepository()
        self.spend_repo = spend_repo or SpendRepository()
        self.text_extractor = text_extractor
        self.currency = currency

    def process_upload(self, user_id: str, filename: str, content_type: str, content: bytes) -> Dict:
        """
        Kompletter Upload-Ablauf: validieren → Text → parsen → speichern.

        Fehler beim Speichern einzelner Spend-Einträge sind nicht fatal,
        sie werden in insert_errors zurückgegeben.
        """
        job_id = f"spend_upload_{int(time.time())}"
        validate_upload(filename, content_type, len(content))

        text = self.text_extractor(content)
        result = parse_spend_text(text, currency=self.currency)
        spend_reader_logger.info(
            f"{filename}: {result.total_campaigns} Kampagnen, Summe {result.total_amount}"
        )

        # Upload-Datensatz und Spend-Einträge in einer Transaktion,
        # jeder Spend-Eintrag in einem eigenen SAVEPOINT
        insert_errors: List[str] = []
        with db_connect(engine=self.upload_repo.engine) as conn:
            upload_repo = self.upload_repo.bound_to(conn)
            spend_repo = self.spend_repo.bound_to(conn)

            upload_id = upload_repo.create_upload(
                user_id=user_id,
                filename=filename,
                file_size=len(content),
                parsed_data=result.to_dict(),
                processing_status="completed",
            )
            if result.records:
                owned = [r.with_owner(user_id, upload_id) for r in result.records]
                insert_errors = spend_repo.insert_spend(owned).errors

        if insert_errors:
            log_service.log(job_id, "spend_upload", "WARNING",
                            f"{len(insert_errors)} Spend-Einträge nicht gespeichert (Upload {upload_id})")

        log_service.log(job_id, "spend_upload", "INFO",
                        f"✓ Upload {upload_id} gespeichert: {result.total_campaigns} Kampagnen")

        return {
            "success": True,
            "upload_id": upload_id,
            "campaigns_found": result.total_campaigns,
            "total_amount": float(result.total_amount),
            "insert_errors": insert_errors,
        }

    def get_history(self, user_id: str, limit: int = 50, offset: int = 0) -> Dict:
        uploads = self.upload_repo.list_uploads(user_id, limit=limit, offset=offset)
        return {"success": True, "uploads": uploads, "count": len(uploads)}

    def get_details(self, upload_id: int, user_id: str) -> Optional[Dict]:
        """Upload inkl. Spend-Einträge, None wenn nicht vorhanden / fremder User"""
        upload = self.upload_repo.get_upload(upload_id, user_id)
        if upload is None:
            return None
        campaigns = self.spend_repo.list_by_upload(upload_id, user_id)
        return {"success": True, "upload": upload, "campaigns": campaigns}

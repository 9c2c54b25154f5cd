"""
Spend Reader API Router

REST API Endpoints für Spend-Reports:
- Upload (PDF → Spend-Einträge)
- Upload-Historie
- Upload-Details inkl. Kampagnen
"""

import asyncio
import time
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile

from modules.shared import log_service, app_logger
from modules.shared.dependencies import get_current_user_id
from modules.shared.errors import InternalError, ValidationError

from .services.config import UPLOAD_MAX_BYTES
from .services.upload_service import UploadService

# Router erstellen
router = APIRouter()


def get_upload_service() -> UploadService:
    """Dependency - in Tests überschreibbar"""
    return UploadService()

# ═══════════════════════════════════════════════════════════════
# HEALTH & STATUS
# ═══════════════════════════════════════════════════════════════

@router.get("/health")
async def health_check():
    """Health Check für Spend-Reader Modul"""
    return {
        "status": "healthy",
        "module": "spend-reader",
        "version": "1.0.0",
        "limits": {"max_bytes": UPLOAD_MAX_BYTES, "mime_type": "application/pdf"}
    }

# ═══════════════════════════════════════════════════════════════
# UPLOAD ENDPOINTS
# ═══════════════════════════════════════════════════════════════

@router.post("/pdf")
async def upload_pdf(
    file: Optional[UploadFile] = File(default=None),
    user_id: str = Depends(get_current_user_id),
    service: UploadService = Depends(get_upload_service),
):
    """Upload eines Spend-Reports (PDF) mit sofortigem Parsen"""
    job_id = f"spend_upload_{int(time.time())}"
    if file is None:
        raise ValidationError("No file uploaded", error="No file uploaded")

    # Ein Byte mehr lesen als erlaubt, damit Überschreitungen erkannt werden
    content = await file.read(UPLOAD_MAX_BYTES + 1)
    try:
        return await asyncio.to_thread(
            service.process_upload, user_id, file.filename, file.content_type, content
        )
    except ValidationError:
        raise
    except Exception as e:
        app_logger.error(f"PDF Upload Fehler: {e}", exc_info=True)
        await asyncio.to_thread(log_service.log, job_id, "spend_upload", "ERROR", f"PDF Upload Fehler: {e}")
        raise InternalError(str(e)) from e


@router.get("/history")
def upload_history(
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    user_id: str = Depends(get_current_user_id),
    service: UploadService = Depends(get_upload_service),
):
    """Upload-Historie des Users"""
    return service.get_history(user_id, limit=limit, offset=offset)


@router.get("/{upload_id}")
def upload_details(
    upload_id: int,
    user_id: str = Depends(get_current_user_id),
    service: UploadService = Depends(get_upload_service),
):
    """Upload-Details inkl. zugehöriger Spend-Einträge"""
    details = service.get_details(upload_id, user_id)
    if details is None:
        raise HTTPException(status_code=404, detail="Upload not found")
    return details

# ═══════════════════════════════════════════════════════════════
# EXPORT FUNCTION (für Gateway Integration)
# ═══════════════════════════════════════════════════════════════

def get_router() -> APIRouter:
    """Wird vom Gateway aufgerufen"""
    return router

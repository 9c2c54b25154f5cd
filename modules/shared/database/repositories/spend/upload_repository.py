"""Upload Repository - Metadaten hochgeladener PDF-Reports (pdf_uploads)"""

import json
from typing import Dict, List, Optional

from sqlalchemy import func, select

from ..base import BaseRepository
from ...schema import uploads_table

_UPLOAD_COLUMNS = (
    uploads_table.c.id,
    uploads_table.c.filename,
    uploads_table.c.file_size,
    uploads_table.c.processing_status,
    uploads_table.c.parsed_data,
    uploads_table.c.created_at,
)


class UploadRepository(BaseRepository):
    """Data Access Layer - ONLY DB Operations"""

    def create_upload(self, user_id: str, filename: str, file_size: int,
                      parsed_data: Dict, processing_status: str = "completed") -> int:
        """INSERT Upload-Datensatz, gibt die neue ID zurück"""
        params = {
            "user_id": user_id,
            "filename": filename,
            # Datei selbst wird nicht gespeichert
            "file_url": f"placeholder://pdf/{filename}",
            "file_size": file_size,
            "parsed_data": json.dumps(parsed_data, default=str),
            "processing_status": processing_status,
        }
        return self._insert_returning_id(uploads_table.insert(), params)

    def list_uploads(self, user_id: str, limit: int = 50, offset: int = 0) -> List[Dict]:
        """Upload-Historie eines Users (neueste zuerst)"""
        stmt = (
            select(*_UPLOAD_COLUMNS)
            .where(uploads_table.c.user_id == user_id)
            .order_by(uploads_table.c.created_at.desc(), uploads_table.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return [self._map_row(row) for row in self._fetch_all(stmt)]

    def get_upload(self, upload_id: int, user_id: str) -> Optional[Dict]:
        """Einzelner Upload, nur wenn er dem User gehört"""
        stmt = (
            select(*_UPLOAD_COLUMNS)
            .where(uploads_table.c.id == upload_id)
            .where(uploads_table.c.user_id == user_id)
        )
        row = self._fetch_one(stmt)
        return self._map_row(row) if row else None

    def count_uploads(self, user_id: str) -> int:
        stmt = select(func.count()).select_from(uploads_table).where(uploads_table.c.user_id == user_id)
        row = self._fetch_one(stmt)
        return int(row[0]) if row else 0

    @staticmethod
    def _map_row(row) -> Dict:
        data = dict(row._mapping)
        if data.get("parsed_data"):
            data["parsed_data"] = json.loads(data["parsed_data"])
        return data

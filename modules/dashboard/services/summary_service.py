"""Kurzübersicht pro User (Uploads + Gesamtausgaben)"""

from datetime import datetime, timezone
from typing import Dict

from modules.shared.database.repositories.spend import SpendRepository, UploadRepository


class SummaryService:

    def __init__(self, spend_repo: SpendRepository = None, upload_repo: UploadRepository = None):
        self.spend_repo = spend_repo or SpendRepository()
        self.upload_repo = upload_repo or UploadRepository()

    def get_summary(self, user_id: str) -> Dict:
        total_uploads = self.upload_repo.count_uploads(user_id)
        total_spend = self.spend_repo.total_spend(user_id)
        return {
            "totalUploads": total_uploads,
            "totalSpend": float(total_spend),
            "summary": {
                "hasUploads": total_uploads > 0,
                "hasSpendData": total_spend > 0,
            },
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

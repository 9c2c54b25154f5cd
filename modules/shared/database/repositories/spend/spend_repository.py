"""Spend Repository - Spend-Ledger (campaigns_spend) über SQLAlchemy"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import List

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from modules.shared.errors import SourceUnavailable
from modules.shared.models import DateRange, SpendRecord
from modules.shared.logging import app_logger
from ..base import BaseRepository
from ...schema import spend_table


@dataclass
class InsertResult:
    """Ergebnis eines Batch-Inserts (Teilfehler sind erlaubt)"""
    inserted_count: int = 0
    errors: List[str] = field(default_factory=list)


class SpendRepository(BaseRepository):
    """Data Access Layer - ONLY DB Operations"""

    def list_spend(self, user_id: str, date_range: DateRange) -> List[SpendRecord]:
        """
        Hole alle Spend-Einträge eines Users im Datumsintervall (inklusive).

        Raises:
            SourceUnavailable: DB nicht erreichbar oder gespeicherte Zeile
                nicht als SpendRecord lesbar (der Aufrufer entscheidet über den Fallback)
        """
        stmt = (
            select(spend_table)
            .where(spend_table.c.user_id == user_id)
            .where(spend_table.c.date >= date_range.start_date)
            .where(spend_table.c.date <= date_range.end_date)
            .order_by(spend_table.c.date)
        )
        try:
            rows = self._fetch_all(stmt)
        except SQLAlchemyError as e:
            raise SourceUnavailable("spend", f"Spend query failed: {e}") from e

        records = []
        for row in rows:
            try:
                records.append(self._map_to_record(row))
            except (ValueError, TypeError, InvalidOperation) as e:
                raise SourceUnavailable("spend", f"Invalid spend row id={row._mapping['id']}: {e}") from e
        return records

    def list_by_upload(self, upload_id: int, user_id: str) -> List[dict]:
        """Spend-Einträge eines Uploads (neueste zuerst)"""
        stmt = (
            select(
                spend_table.c.id,
                spend_table.c.campaign_name,
                spend_table.c.spend_amount,
                spend_table.c.currency,
                spend_table.c.date,
                spend_table.c.is_verified,
                spend_table.c.created_at,
            )
            .where(spend_table.c.upload_id == upload_id)
            .where(spend_table.c.user_id == user_id)
            .order_by(spend_table.c.date.desc())
        )
        return [dict(row._mapping) for row in self._fetch_all(stmt)]

    def total_spend(self, user_id: str) -> Decimal:
        """Summe aller Ausgaben eines Users (all time)"""
        stmt = select(func.coalesce(func.sum(spend_table.c.spend_amount), 0)).where(
            spend_table.c.user_id == user_id
        )
        row = self._fetch_one(stmt)
        return Decimal(str(row[0])) if row else Decimal("0")

    def insert_spend(self, records: List[SpendRecord]) -> InsertResult:
        """
        Speichere Spend-Einträge einzeln.

        Ein fehlerhafter Datensatz bricht den Rest nicht ab, der Fehler
        landet in InsertResult.errors.
        """
        result = InsertResult()
        for record in records:
            params = {
                "user_id": record.user_id,
                "upload_id": record.upload_id,
                "campaign_name": record.campaign_name,
                "spend_amount": record.amount,
                "currency": record.currency,
                "date": record.date,
                "is_verified": False,
            }
            try:
                if self._conn:
                    with self._conn.begin_nested():
                        self._conn.execute(spend_table.insert(), params)
                else:
                    self._execute_stmt(spend_table.insert(), params)
                result.inserted_count += 1
            except SQLAlchemyError as e:
                app_logger.error(f"SpendRepository insert_spend ({record.campaign_name}): {e}")
                result.errors.append(f"{record.campaign_name} {record.date.isoformat()}: {e}")
        return result

    @staticmethod
    def _map_to_record(row) -> SpendRecord:
        m = row._mapping
        return SpendRecord(
            campaign_name=m["campaign_name"],
            amount=Decimal(str(m["spend_amount"])),
            date=m["date"],
            currency=m["currency"],
            user_id=m["user_id"],
            upload_id=m["upload_id"],
        )

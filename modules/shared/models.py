"""
Domain Models - gemeinsame Datentypen

SpendRecord, AnalyticsReport und DashboardMetrics werden zwischen
spend_reader, dashboard und den Repositories ausgetauscht.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class DateRange:
    """Geschlossenes Datumsintervall [start_date, end_date]"""
    start_date: date
    end_date: date

    @property
    def start(self) -> str:
        return self.start_date.isoformat()

    @property
    def end(self) -> str:
        return self.end_date.isoformat()

    def to_dict(self) -> Dict[str, str]:
        return {"startDate": self.start, "endDate": self.end}


@dataclass(frozen=True)
class SpendRecord:
    """Eine Kampagnen-Ausgabe aus einem hochgeladenen Report (unveränderlich)"""
    campaign_name: str
    amount: Decimal
    date: date
    currency: str = "USD"
    user_id: Optional[str] = None
    upload_id: Optional[int] = None

    def __post_init__(self):
        if not self.campaign_name or not self.campaign_name.strip():
            raise ValueError("campaign_name darf nicht leer sein")
        if self.amount < 0:
            raise ValueError("amount darf nicht negativ sein")

    def with_owner(self, user_id: str, upload_id: Optional[int]) -> "SpendRecord":
        """Kopie mit Besitzer-Informationen (für das Speichern)"""
        return replace(self, user_id=user_id, upload_id=upload_id)

    def to_dict(self) -> Dict:
        return {
            "name": self.campaign_name,
            "amount": float(self.amount),
            "date": self.date.isoformat(),
            "currency": self.currency,
        }


@dataclass(frozen=True)
class InListFilter:
    """Dimension-Filter: Feldwert muss in values enthalten sein"""
    field_name: str
    values: List[str]


@dataclass(frozen=True)
class AnalyticsQuery:
    dimensions: List[str]
    metrics: List[str]
    date_range: DateRange
    dimension_filter: Optional[InListFilter] = None
    limit: int = 1000


@dataclass
class AnalyticsRow:
    dimension_values: List[str]
    metric_values: List[str]


@dataclass
class AnalyticsReport:
    """
    Tabellarische Antwort der Analytics-Quelle.

    Spalten werden ausschließlich über Header-Namen aufgelöst,
    die Reihenfolge ist nicht garantiert.
    """
    dimension_headers: List[str] = field(default_factory=list)
    metric_headers: List[str] = field(default_factory=list)
    rows: List[AnalyticsRow] = field(default_factory=list)

    def metric_index(self) -> Dict[str, int]:
        return {name: i for i, name in enumerate(self.metric_headers)}

    def dimension_index(self) -> Dict[str, int]:
        return {name: i for i, name in enumerate(self.dimension_headers)}


@dataclass(frozen=True)
class SourceResult(Generic[T]):
    """Ergebnis einer Datenquelle: entweder value (ok) oder error"""
    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "SourceResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "SourceResult[T]":
        return cls(ok=False, error=error)


@dataclass
class DashboardMetrics:
    """Kanonisches Metrik-Objekt, pro Request neu berechnet"""
    date_range: DateRange
    total_sessions: int = 0
    total_users: int = 0
    avg_bounce_rate: float = 0.0
    conversions: int = 0
    total_spend: Decimal = Decimal("0")
    total_campaigns: int = 0
    total_impressions: int = 0
    click_rate: float = 0.0
    mock_data_fields: List[str] = field(default_factory=list)
    analytics_status: str = "success"   # "success" | "fallback"
    spend_status: str = "success"       # "success" | "error"
    analytics_error: Optional[str] = None
    warnings: List[str] = field(default_factory=list)

"""Dashboard Schemas - API Output (Feldnamen exakt wie im Frontend erwartet)"""

from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel

from modules.shared.models import DashboardMetrics


class DateRangeOut(BaseModel):
    startDate: str
    endDate: str


class DataSourceOut(BaseModel):
    ga4: Literal["success", "fallback"]
    spend: Literal["success", "error"]
    ga4Error: Optional[str] = None


class MetadataOut(BaseModel):
    dateRange: DateRangeOut
    dataSource: DataSourceOut
    timestamp: str


class DashboardMetricsResponse(BaseModel):
    """Output Schema: GET /api/dashboard/metrics"""
    totalCampaigns: int
    totalImpressions: int
    clickRate: float
    totalSessions: int
    totalUsers: int
    avgBounceRate: float
    conversions: int
    totalSpend: float
    mockDataFields: List[str]
    metadata: MetadataOut
    warnings: Optional[List[str]] = None

    @classmethod
    def from_metrics(cls, metrics: DashboardMetrics) -> "DashboardMetricsResponse":
        return cls(
            totalCampaigns=metrics.total_campaigns,
            totalImpressions=metrics.total_impressions,
            clickRate=metrics.click_rate,
            totalSessions=metrics.total_sessions,
            totalUsers=metrics.total_users,
            avgBounceRate=round(metrics.avg_bounce_rate, 4),
            conversions=metrics.conversions,
            totalSpend=float(metrics.total_spend),
            mockDataFields=list(metrics.mock_data_fields),
            metadata=MetadataOut(
                dateRange=DateRangeOut(**metrics.date_range.to_dict()),
                dataSource=DataSourceOut(
                    ga4=metrics.analytics_status,
                    spend=metrics.spend_status,
                    ga4Error=metrics.analytics_error,
                ),
                timestamp=datetime.now(timezone.utc).isoformat(),
            ),
            warnings=list(metrics.warnings) or None,
        )

    def to_response(self) -> dict:
        """JSON-Body; 'warnings' nur wenn vorhanden, ga4Error immer (auch null)"""
        data = self.model_dump()
        if not data.get("warnings"):
            data.pop("warnings", None)
        return data

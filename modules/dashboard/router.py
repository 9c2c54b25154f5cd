"""
Dashboard API Router

REST API Endpoints für das Marketing-Dashboard:
- Metriken (GA4 + Spend, mit Fallback)
- Kurzübersicht
- Endpoint-Info
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from modules.shared.dependencies import get_current_user_id
from .schemas import DashboardMetricsResponse
from .services.date_range import parse_date_range
from .services.placeholders import ALWAYS_MOCK_FIELDS
from .services.reconciliation_service import MetricsReconciliationService
from .services.summary_service import SummaryService

# Router erstellen
router = APIRouter()


def get_reconciliation_service() -> MetricsReconciliationService:
    """Dependency - in Tests überschreibbar"""
    return MetricsReconciliationService()


def get_summary_service() -> SummaryService:
    return SummaryService()

# ═══════════════════════════════════════════════════════════════
# INFO
# ═══════════════════════════════════════════════════════════════

@router.get("/")
async def dashboard_info():
    """Übersicht der Dashboard-Endpoints"""
    return {
        "message": "Dashboard API endpoints",
        "version": "1.0.0",
        "endpoints": {
            "GET /metrics": "Aggregated dashboard metrics (requires X-User-Id)",
            "GET /summary": "Quick dashboard summary (requires X-User-Id)"
        },
        "parameters": {
            "metrics": {
                "startDate": "Start date (YYYY-MM-DD)",
                "endDate": "End date (YYYY-MM-DD)"
            }
        },
        "dataTypes": {
            "realData": [
                "totalSessions (paid channel groups only)",
                "totalUsers (paid channel groups only)",
                "avgBounceRate (session-weighted)",
                "totalSpend"
            ],
            "mockData": list(ALWAYS_MOCK_FIELDS),
            "calculated": ["conversions", "totalCampaigns"]
        },
        "note": "Mock data fields are listed in mockDataFields of every response"
    }

# ═══════════════════════════════════════════════════════════════
# METRICS
# ═══════════════════════════════════════════════════════════════

@router.get("/metrics")
async def get_metrics(
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
    user_id: str = Depends(get_current_user_id),
    service: MetricsReconciliationService = Depends(get_reconciliation_service),
):
    """
    Aggregierte Dashboard-Metriken

    Query Params:
    - startDate / endDate: YYYY-MM-DD (default aus Konfiguration)

    Fällt GA4 oder der Spend-Ledger aus, wird trotzdem geantwortet
    (siehe metadata.dataSource und warnings).
    """
    date_range = parse_date_range(start_date, end_date)
    metrics = await service.reconcile(user_id, date_range)
    return DashboardMetricsResponse.from_metrics(metrics).to_response()


@router.get("/summary")
def get_summary(
    user_id: str = Depends(get_current_user_id),
    service: SummaryService = Depends(get_summary_service),
):
    """Kurzübersicht: Anzahl Uploads und Gesamtausgaben"""
    return service.get_summary(user_id)

# ═══════════════════════════════════════════════════════════════
# EXPORT FUNCTION (für Gateway Integration)
# ═══════════════════════════════════════════════════════════════

def get_router() -> APIRouter:
    """Wird vom Gateway aufgerufen"""
    return router

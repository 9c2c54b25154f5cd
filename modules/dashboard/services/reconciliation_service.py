"""
Metrics Reconciliation Service - GA4 + Spend-Ledger → DashboardMetrics

Beide Quellen werden parallel abgefragt und unabhängig voneinander
ausgewertet. Fällt eine Quelle aus, wird nur ihr Beitrag ersetzt:

    Spend-Fehler  → totalSpend = 0, dataSource.spend = "error"
    GA4-Fehler    → Platzhalterwerte, dataSource.analytics = "fallback" + Warnung

Es gibt keine Retries, ein GA4-Fehler oder Timeout geht direkt in den Fallback.
"""

import asyncio
import time
from decimal import Decimal
from random import Random
from typing import List, Optional

from modules.shared import log_service
from modules.shared.config import PAID_CHANNEL_GROUPS, GA4_TIMEOUT_SECONDS, GA4_ROW_LIMIT
from modules.shared.connectors.base_connector import BaseAnalyticsConnector
from modules.shared.connectors.ga4 import Ga4Connector
from modules.shared.database.repositories.spend import SpendRepository
from modules.shared.errors import SourceUnavailable
from modules.shared.models import (
    AnalyticsQuery,
    AnalyticsReport,
    DashboardMetrics,
    DateRange,
    InListFilter,
    SourceResult,
    SpendRecord,
)
from .analytics_aggregator import (
    DIMENSION_CHANNEL_GROUP,
    QUERY_DIMENSIONS,
    QUERY_METRICS,
    aggregate_analytics,
    derive_campaign_count,
    derive_conversions,
)
from .logger import dashboard_logger
from .placeholders import (
    ALWAYS_MOCK_FIELDS,
    ANALYTICS_FALLBACK_WARNING,
    FALLBACK_MOCK_FIELDS,
    SPEND_ERROR_WARNING,
    PlaceholderGenerator,
)


class MetricsReconciliationService:
    """Business Logic - führt Analytics- und Spend-Daten zusammen"""

    def __init__(self, spend_store: SpendRepository = None,
                 analytics: BaseAnalyticsConnector = None,
                 timeout_seconds: float = GA4_TIMEOUT_SECONDS,
                 row_limit: int = GA4_ROW_LIMIT,
                 rng: Optional[Random] = None):
        self.spend_store = spend_store or SpendRepository()
        self.analytics = analytics or Ga4Connector()
        self.timeout_seconds = timeout_seconds
        self.row_limit = row_limit
        self.rng = rng or Random()

    def build_analytics_query(self, date_range: DateRange, allowed_channels: List[str]) -> AnalyticsQuery:
        """GA4-Query: Sessions/Users/Bounce Rate nur für bezahlte Channel Groups"""
        return AnalyticsQuery(
            dimensions=list(QUERY_DIMENSIONS),
            metrics=list(QUERY_METRICS),
            date_range=date_range,
            dimension_filter=InListFilter(field_name=DIMENSION_CHANNEL_GROUP, values=list(allowed_channels)),
            limit=self.row_limit,
        )

    async def fetch_spend(self, user_id: str, date_range: DateRange) -> SourceResult[List[SpendRecord]]:
        """
        Spend-Ledger abfragen (blockierender DB-Call im Worker-Thread).

        Jeder Fehler des Stores zählt als Ausfall der Quelle, die Antwort
        wird dann mit totalSpend = 0 ausgeliefert.
        """
        try:
            records = await asyncio.to_thread(self.spend_store.list_spend, user_id, date_range)
        except SourceUnavailable as e:
            dashboard_logger.warning(f"✗ Spend-Abfrage fehlgeschlagen (user={user_id}): {e.message}")
            return SourceResult.failure(e.message)
        except Exception as e:
            dashboard_logger.error(f"✗ Spend-Abfrage fehlgeschlagen (user={user_id}): {e}", exc_info=True)
            return SourceResult.failure(str(e))
        return SourceResult.success(records)

    async def fetch_analytics(self, date_range: DateRange,
                              allowed_channels: List[str]) -> SourceResult[AnalyticsReport]:
        """GA4 abfragen, Timeout zählt als Ausfall"""
        query = self.build_analytics_query(date_range, allowed_channels)
        try:
            report = await asyncio.wait_for(self.analytics.query(query), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            message = f"Analytics query timed out after {self.timeout_seconds:g}s"
            dashboard_logger.warning(f"✗ {message}")
            return SourceResult.failure(message)
        except SourceUnavailable as e:
            dashboard_logger.warning(f"✗ Analytics nicht verfügbar: {e.message}")
            return SourceResult.failure(e.message)
        return SourceResult.success(report)

    async def reconcile(self, user_id: str, date_range: DateRange,
                        allowed_channels: Optional[List[str]] = None) -> DashboardMetrics:
        """
        Berechnet die Dashboard-Metriken für einen User und Zeitraum.

        Args:
            user_id: Besitzer der Spend-Einträge
            date_range: Zeitraum (inklusive)
            allowed_channels: Channel Groups für den GA4-Filter (default: bezahlte Kanäle)

        Returns:
            DashboardMetrics - auch bei Ausfall einer oder beider Quellen
        """
        job_id = f"dashboard_metrics_{int(time.time())}"
        started = time.monotonic()
        channels = allowed_channels if allowed_channels is not None else PAID_CHANNEL_GROUPS

        # Beide Quellen parallel, es wird auf beide gewartet
        spend_result, analytics_result = await asyncio.gather(
            self.fetch_spend(user_id, date_range),
            self.fetch_analytics(date_range, channels),
        )

        metrics = self.assemble(date_range, spend_result, analytics_result)

        # DB-Logging (LOG_TO_DB) darf den Event Loop nicht blockieren
        await asyncio.to_thread(
            log_service.log,
            job_id, "dashboard_metrics", "INFO",
            f"Metriken {date_range.start}..{date_range.end}: "
            f"analytics={metrics.analytics_status}, spend={metrics.spend_status}",
            status="SUCCESS", duration=round(time.monotonic() - started, 3),
            error_text=metrics.analytics_error,
        )
        return metrics

    def assemble(self, date_range: DateRange,
                 spend_result: SourceResult[List[SpendRecord]],
                 analytics_result: SourceResult[AnalyticsReport]) -> DashboardMetrics:
        """Setzt das Metrik-Objekt aus den beiden (unabhängigen) Quell-Ergebnissen zusammen"""
        placeholders = PlaceholderGenerator(self.rng)
        metrics = DashboardMetrics(date_range=date_range)
        metrics.mock_data_fields = list(ALWAYS_MOCK_FIELDS)
        metrics.total_impressions = placeholders.impressions()
        metrics.click_rate = placeholders.click_rate()

        # Spend
        if spend_result.ok:
            metrics.total_spend = sum((r.amount for r in spend_result.value), Decimal("0"))
            metrics.spend_status = "success"
        else:
            metrics.total_spend = Decimal("0")
            metrics.spend_status = "error"
            metrics.warnings.append(SPEND_ERROR_WARNING)

        # Analytics
        if analytics_result.ok:
            totals = aggregate_analytics(analytics_result.value)
            metrics.total_sessions = totals.total_sessions
            metrics.total_users = totals.total_users
            metrics.avg_bounce_rate = totals.avg_bounce_rate
            metrics.conversions = derive_conversions(totals.total_sessions, self.rng)
            metrics.total_campaigns = derive_campaign_count(totals.total_sessions)
            metrics.analytics_status = "success"
        else:
            fallback = placeholders.fallback_analytics()
            metrics.total_sessions = fallback.total_sessions
            metrics.total_users = fallback.total_users
            metrics.avg_bounce_rate = fallback.avg_bounce_rate
            metrics.conversions = fallback.conversions
            metrics.total_campaigns = fallback.total_campaigns
            metrics.analytics_status = "fallback"
            metrics.analytics_error = analytics_result.error
            metrics.mock_data_fields.extend(FALLBACK_MOCK_FIELDS)
            metrics.warnings.append(ANALYTICS_FALLBACK_WARNING)

        return metrics

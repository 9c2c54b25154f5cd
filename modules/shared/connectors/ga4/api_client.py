"""GA4 Data API Connector - Analytics Query Adapter"""

import asyncio
from typing import Optional

from google.analytics.data_v1beta import BetaAnalyticsDataClient
from google.analytics.data_v1beta.types import (
    DateRange as Ga4DateRange,
    Dimension,
    Filter,
    FilterExpression,
    Metric,
    RunReportRequest,
)

from ...config import GA_PROPERTY_ID, GOOGLE_APPLICATION_CREDENTIALS
from ...errors import SourceUnavailable
from ...models import AnalyticsQuery, AnalyticsReport, AnalyticsRow
from ..base_connector import BaseAnalyticsConnector
from .client_provider import AnalyticsClientProvider, ga4_logger


def create_ga4_client(credentials_path: Optional[str] = GOOGLE_APPLICATION_CREDENTIALS) -> BetaAnalyticsDataClient:
    """Erzeuge den (teuren) gRPC-Client. Ohne Pfad greifen die Application Default Credentials."""
    if credentials_path:
        return BetaAnalyticsDataClient.from_service_account_file(credentials_path)
    return BetaAnalyticsDataClient()


# Prozessweiter Client, wird beim ersten Request initialisiert
ga4_client_provider = AnalyticsClientProvider(create_ga4_client)


def build_run_report_request(property_id: str, query: AnalyticsQuery) -> RunReportRequest:
    """AnalyticsQuery → RunReportRequest"""
    request = RunReportRequest(
        property=f"properties/{property_id}",
        date_ranges=[Ga4DateRange(start_date=query.date_range.start, end_date=query.date_range.end)],
        dimensions=[Dimension(name=name) for name in query.dimensions],
        metrics=[Metric(name=name) for name in query.metrics],
        limit=query.limit,
    )
    if query.dimension_filter:
        request.dimension_filter = FilterExpression(
            filter=Filter(
                field_name=query.dimension_filter.field_name,
                in_list_filter=Filter.InListFilter(values=list(query.dimension_filter.values)),
            )
        )
    return request


def to_analytics_report(response) -> AnalyticsReport:
    """RunReportResponse → AnalyticsReport (nur Header-Namen und String-Werte)"""
    return AnalyticsReport(
        dimension_headers=[h.name for h in response.dimension_headers],
        metric_headers=[h.name for h in response.metric_headers],
        rows=[
            AnalyticsRow(
                dimension_values=[v.value for v in row.dimension_values],
                metric_values=[v.value for v in row.metric_values],
            )
            for row in response.rows
        ],
    )


class Ga4Connector(BaseAnalyticsConnector):
    """
    Google Analytics 4 Connector

    Implementiert BaseAnalyticsConnector für die GA4 Data API (runReport).
    Jeder Fehler wird als SourceUnavailable weitergereicht, Retries gibt es nicht.
    """

    def __init__(self, property_id: Optional[str] = GA_PROPERTY_ID,
                 provider: AnalyticsClientProvider = ga4_client_provider):
        self.property_id = property_id
        self.provider = provider

    def validate_credentials(self) -> bool:
        """Validiere GA4 Konfiguration"""
        return bool(self.property_id)

    async def query(self, query: AnalyticsQuery) -> AnalyticsReport:
        if not self.validate_credentials():
            raise SourceUnavailable("analytics", "GA Property ID is required. Set GA_PROPERTY_ID")

        try:
            client = await self.provider.get()
            request = build_run_report_request(self.property_id, query)
            response = await asyncio.to_thread(client.run_report, request)
        except Exception as e:
            ga4_logger.warning(f"✗ Analytics query failed: {e}")
            raise SourceUnavailable("analytics", f"Analytics query failed: {e}") from e

        report = to_analytics_report(response)
        ga4_logger.info(f"✓ Analytics query: {len(report.rows)} Zeilen")
        return report

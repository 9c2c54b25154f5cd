"""Tests: GA4 Connector (Request-Aufbau, Response-Mapping, Fehler)"""

import asyncio
from datetime import date

import pytest

from conftest import FakeClient, fake_response
from modules.shared.connectors.ga4 import AnalyticsClientProvider, Ga4Connector
from modules.shared.connectors.ga4.api_client import build_run_report_request, to_analytics_report
from modules.shared.errors import SourceUnavailable
from modules.shared.models import AnalyticsQuery, DateRange, InListFilter


@pytest.fixture
def query():
    return AnalyticsQuery(
        dimensions=["date", "defaultChannelGroup"],
        metrics=["sessions", "totalUsers", "bounceRate"],
        date_range=DateRange(start_date=date(2025, 8, 1), end_date=date(2025, 8, 7)),
        dimension_filter=InListFilter(field_name="defaultChannelGroup", values=["Paid Search"]),
        limit=1000,
    )


def test_build_run_report_request(query):
    request = build_run_report_request("123456", query)

    assert request.property == "properties/123456"
    assert request.date_ranges[0].start_date == "2025-08-01"
    assert request.date_ranges[0].end_date == "2025-08-07"
    assert [d.name for d in request.dimensions] == ["date", "defaultChannelGroup"]
    assert [m.name for m in request.metrics] == ["sessions", "totalUsers", "bounceRate"]
    assert request.limit == 1000
    assert request.dimension_filter.filter.field_name == "defaultChannelGroup"
    assert list(request.dimension_filter.filter.in_list_filter.values) == ["Paid Search"]


def test_to_analytics_report():
    report = to_analytics_report(fake_response())

    assert report.metric_headers == ["sessions", "totalUsers", "bounceRate"]
    assert report.rows[0].metric_values == ["120", "100", "0.25"]
    assert report.rows[0].dimension_values == ["20250801", "Paid Search"]


def test_query_success(query):
    client = FakeClient()
    connector = Ga4Connector(property_id="123456", provider=AnalyticsClientProvider(lambda: client))

    report = asyncio.run(connector.query(query))

    assert len(report.rows) == 1
    assert client.requests[0].property == "properties/123456"


def test_missing_property_id_is_unavailable(query):
    connector = Ga4Connector(property_id=None, provider=AnalyticsClientProvider(FakeClient))

    assert not connector.validate_credentials()
    with pytest.raises(SourceUnavailable) as exc_info:
        asyncio.run(connector.query(query))
    assert "GA_PROPERTY_ID" in exc_info.value.message


def test_api_error_is_wrapped(query):
    client = FakeClient(error=RuntimeError("quota exceeded"))
    connector = Ga4Connector(property_id="1", provider=AnalyticsClientProvider(lambda: client))

    with pytest.raises(SourceUnavailable) as exc_info:
        asyncio.run(connector.query(query))

    assert exc_info.value.source == "analytics"
    assert "quota exceeded" in exc_info.value.message


def test_client_init_error_is_wrapped(query):
    def broken_factory():
        raise OSError("credentials file missing")

    connector = Ga4Connector(property_id="1", provider=AnalyticsClientProvider(broken_factory))

    with pytest.raises(SourceUnavailable):
        asyncio.run(connector.query(query))

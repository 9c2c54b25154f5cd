"""Gemeinsame Fixtures: In-Memory-DB, Fake-Quellen für Analytics und Spend"""

import os
import sys
import tempfile
from datetime import date
from decimal import Decimal
from pathlib import Path
from types import SimpleNamespace

# Füge root zum Path hinzu, eigene Test-DB statt data/spend_dashboard.db
root = Path(__file__).parent.parent
sys.path.insert(0, str(root))
_tmp_dir = tempfile.mkdtemp(prefix="spend_dashboard_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_tmp_dir) / 'test.db'}"
os.environ["LOG_TO_DB"] = "false"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from modules.shared.connectors.base_connector import BaseAnalyticsConnector
from modules.shared.database.schema import metadata
from modules.shared.database.repositories.spend import SpendRepository, UploadRepository
from modules.shared.errors import SourceUnavailable
from modules.shared.models import AnalyticsReport, AnalyticsRow, DateRange, SpendRecord


@pytest.fixture
def engine():
    """Frische SQLite-DB im Speicher, von allen Threads geteilt"""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def spend_repo(engine):
    return SpendRepository(engine=engine)


@pytest.fixture
def upload_repo(engine):
    return UploadRepository(engine=engine)


@pytest.fixture
def august():
    return DateRange(start_date=date(2025, 8, 1), end_date=date(2025, 8, 7))


def make_report(rows, metric_headers=("sessions", "totalUsers", "bounceRate"),
                dimension_headers=("date", "defaultChannelGroup")):
    """rows: Liste von Metrik-Wert-Tupeln in Reihenfolge der metric_headers"""
    return AnalyticsReport(
        dimension_headers=list(dimension_headers),
        metric_headers=list(metric_headers),
        rows=[
            AnalyticsRow(
                dimension_values=["20250801", "Paid Search"][:len(dimension_headers)],
                metric_values=[str(v) for v in values],
            )
            for values in rows
        ],
    )


def make_record(name="Summer Sale", amount="100.00", day=date(2025, 8, 2), user_id="user-1"):
    return SpendRecord(campaign_name=name, amount=Decimal(amount), date=day, currency="USD", user_id=user_id)


class FakeAnalyticsConnector(BaseAnalyticsConnector):
    """Liefert einen festen Report, wirft einen Fehler oder hängt (delay)"""

    def __init__(self, report=None, error=None, delay: float = 0.0):
        self.report = report if report is not None else AnalyticsReport()
        self.error = error
        self.delay = delay
        self.queries = []

    def validate_credentials(self) -> bool:
        return True

    async def query(self, query):
        import asyncio
        self.queries.append(query)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.report


class FakeSpendStore:
    """Spend Store mit festen Datensätzen oder Fehler"""

    def __init__(self, records=None, error=None):
        self.records = records or []
        self.error = error
        self.calls = []

    def list_spend(self, user_id, date_range):
        self.calls.append((user_id, date_range))
        if self.error is not None:
            raise self.error
        return [
            r for r in self.records
            if r.user_id == user_id and date_range.start_date <= r.date <= date_range.end_date
        ]


@pytest.fixture
def unavailable():
    return SourceUnavailable("analytics", "Analytics query failed: quota exceeded")


# GA4 RunReportResponse / BetaAnalyticsDataClient Attrappen


def _value(v):
    return SimpleNamespace(value=v)


def fake_response():
    return SimpleNamespace(
        dimension_headers=[SimpleNamespace(name="date"), SimpleNamespace(name="defaultChannelGroup")],
        metric_headers=[SimpleNamespace(name="sessions"), SimpleNamespace(name="totalUsers"),
                        SimpleNamespace(name="bounceRate")],
        rows=[
            SimpleNamespace(
                dimension_values=[_value("20250801"), _value("Paid Search")],
                metric_values=[_value("120"), _value("100"), _value("0.25")],
            )
        ],
    )


class FakeClient:
    """run_report() liefert fake_response() oder wirft error"""

    def __init__(self, error=None):
        self.error = error
        self.requests = []

    def run_report(self, request):
        self.requests.append(request)
        if self.error:
            raise self.error
        return fake_response()

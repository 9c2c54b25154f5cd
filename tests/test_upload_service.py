"""Tests: Upload Service (Validierung → Parser → Spend-Ledger)"""

from decimal import Decimal

import pytest

from modules.shared.database.repositories.spend import SpendRepository
from modules.shared.errors import PayloadTooLarge, UnsupportedMediaType, ValidationError
from modules.spend_reader.services import UploadService, validate_upload

REPORT_TEXT = (
    "Ad Spend Report August\n"
    "Campaign: Summer Sale\n"
    "Date: 2025-08-01\n"
    "Spend: $123.45\n"
    "Campaign: Winter Sale\n"
    "Date: 2025-08-02\n"
    "Spend: $67.00\n"
)


@pytest.fixture
def service(upload_repo, spend_repo):
    return UploadService(
        upload_repo=upload_repo,
        spend_repo=spend_repo,
        text_extractor=lambda content: content.decode("utf-8"),
    )


def test_validate_upload_accepts_pdf():
    validate_upload("report.pdf", "application/pdf", 1024)


def test_validate_upload_missing_file():
    with pytest.raises(ValidationError) as exc_info:
        validate_upload(None, "application/pdf", 0)
    assert exc_info.value.status_code == 400


def test_validate_upload_wrong_type():
    with pytest.raises(UnsupportedMediaType) as exc_info:
        validate_upload("report.txt", "text/plain", 10)
    assert exc_info.value.status_code == 415


def test_validate_upload_too_large():
    with pytest.raises(PayloadTooLarge) as exc_info:
        validate_upload("report.pdf", "application/pdf", 11, max_bytes=10)
    assert exc_info.value.status_code == 413


def test_validate_upload_at_limit_is_allowed():
    validate_upload("report.pdf", "application/pdf", 10, max_bytes=10)


def test_process_upload_stores_records(service, spend_repo, august):
    result = service.process_upload("user-1", "report.pdf", "application/pdf", REPORT_TEXT.encode())

    assert result["success"] is True
    assert result["campaigns_found"] == 2
    assert result["total_amount"] == pytest.approx(190.45)
    assert result["insert_errors"] == []

    stored = spend_repo.list_spend("user-1", august)
    assert sum(r.amount for r in stored) == Decimal("190.45")
    assert {r.upload_id for r in stored} == {result["upload_id"]}


def test_process_upload_without_campaigns(service, spend_repo, august):
    result = service.process_upload("user-1", "empty.pdf", "application/pdf", b"nothing here")

    assert result["campaigns_found"] == 0
    assert result["total_amount"] == 0
    assert spend_repo.list_spend("user-1", august) == []


def test_process_upload_rejects_before_parsing(upload_repo, spend_repo):
    def extractor(content):
        raise AssertionError("must not be called")

    service = UploadService(upload_repo=upload_repo, spend_repo=spend_repo, text_extractor=extractor)

    with pytest.raises(UnsupportedMediaType):
        service.process_upload("user-1", "report.png", "image/png", b"x")
    assert upload_repo.count_uploads("user-1") == 0


def test_history_and_details(service):
    first = service.process_upload("user-1", "a.pdf", "application/pdf", REPORT_TEXT.encode())
    service.process_upload("user-1", "b.pdf", "application/pdf", b"")

    history = service.get_history("user-1")
    assert history["count"] == 2
    assert [u["filename"] for u in history["uploads"]] == ["b.pdf", "a.pdf"]

    details = service.get_details(first["upload_id"], "user-1")
    assert details["upload"]["parsed_data"]["totalCampaigns"] == 2
    assert [c["campaign_name"] for c in details["campaigns"]] == ["Winter Sale", "Summer Sale"]


def test_details_of_other_user_are_hidden(service):
    result = service.process_upload("user-1", "a.pdf", "application/pdf", REPORT_TEXT.encode())

    assert service.get_details(result["upload_id"], "user-2") is None
    assert service.get_history("user-2")["count"] == 0


def test_failed_spend_insert_rolls_back_upload(engine, upload_repo, august):
    """Bricht das Speichern der Spend-Einträge ab, bleibt auch kein Upload-Datensatz zurück"""
    class BrokenSpendRepository(SpendRepository):
        def insert_spend(self, records):
            raise RuntimeError("disk full")

    service = UploadService(
        upload_repo=upload_repo,
        spend_repo=BrokenSpendRepository(engine=engine),
        text_extractor=lambda content: content.decode("utf-8"),
    )

    with pytest.raises(RuntimeError):
        service.process_upload("user-1", "report.pdf", "application/pdf", REPORT_TEXT.encode())

    assert upload_repo.count_uploads("user-1") == 0
    assert SpendRepository(engine=engine).list_spend("user-1", august) == []

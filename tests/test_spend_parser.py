"""Tests: Spend Record Parser (Zustandsautomat)"""

from datetime import date
from decimal import Decimal

import pytest

from modules.shared.errors import ParseSkip
from modules.spend_reader.services.spend_parser import (
    LineKind,
    ParserState,
    SpendParserMachine,
    classify_line,
    parse_amount,
    parse_spend_text,
)

TWO_BLOCKS = (
    "Campaign: Summer Sale\n"
    "Date: 2025-06-01\n"
    "Spend: $123.45\n"
    "Campaign: Winter Sale\n"
    "Date: 2025-06-02\n"
    "Spend: $67.00"
)


def test_two_complete_blocks():
    result = parse_spend_text(TWO_BLOCKS)

    assert result.total_campaigns == 2
    assert [r.amount for r in result.records] == [Decimal("123.45"), Decimal("67.00")]
    assert result.total_amount == Decimal("190.45")
    assert result.records[0].campaign_name == "Summer Sale"
    assert result.records[0].date == date(2025, 6, 1)
    assert result.records[1].campaign_name == "Winter Sale"


def test_empty_input_yields_no_records():
    assert parse_spend_text("").records == []
    assert parse_spend_text("\n\n   \n").total_amount == Decimal("0")


def test_incomplete_triple_is_discarded_by_next_campaign():
    text = (
        "Campaign: Abandoned\n"
        "Date: 2025-06-01\n"
        "Campaign: Kept\n"
        "Date: 2025-06-03\n"
        "Spend: $10.00\n"
    )
    result = parse_spend_text(text)

    assert [r.campaign_name for r in result.records] == ["Kept"]
    assert result.records[0].date == date(2025, 6, 3)


def test_spend_without_campaign_and_date_is_dropped():
    text = "Spend: $50.00\nCampaign: Only Name\nSpend: $20.00\n"
    assert parse_spend_text(text).records == []


def test_date_before_campaign_is_ignored():
    text = "Date: 2025-06-01\nCampaign: Late\nSpend: $5.00\n"
    assert parse_spend_text(text).records == []


def test_thousands_separators_are_stripped():
    text = "Campaign: Big\nDate: 2025-06-01\nSpend: $1,234,567.89\n"
    result = parse_spend_text(text)

    assert result.records[0].amount == Decimal("1234567.89")


def test_whitespace_only_campaign_name_is_not_a_match():
    machine = SpendParserMachine()
    machine.feed("Campaign:    ")

    assert machine.state == ParserState.SEEKING_CAMPAIGN
    assert machine.pending.campaign_name is None


def test_unmatched_lines_do_not_change_state():
    machine = SpendParserMachine()
    machine.feed("Campaign: Summer Sale")
    machine.feed("Date: 2025-06-01")
    state_before = machine.state
    pending_before = (machine.pending.campaign_name, machine.pending.date)

    for line in ["Invoice #123", "Total due: 99 EUR", "", "Spend 12.00", "Date: 01.06.2025"]:
        assert machine.feed(line) is None
        assert machine.state == state_before
        assert (machine.pending.campaign_name, machine.pending.date) == pending_before


def test_invalid_calendar_date_is_skipped_without_state_change():
    machine = SpendParserMachine()
    machine.feed("Campaign: Summer Sale")
    machine.feed("Date: 2025-13-45")

    assert machine.state == ParserState.HAVE_CAMPAIGN
    assert machine.pending.date is None


def test_combined_line_emits_directly_without_touching_pending():
    machine = SpendParserMachine()
    machine.feed("Campaign: Pending One")
    machine.feed("Date: 2025-06-01")

    record = machine.feed("Campaign Brand Search: $1,050.25 2025-06-05")

    assert record is not None
    assert record.campaign_name == "Brand Search"
    assert record.amount == Decimal("1050.25")
    assert record.date == date(2025, 6, 5)
    assert machine.state == ParserState.HAVE_CAMPAIGN_AND_DATE
    assert machine.pending.campaign_name == "Pending One"


def test_combined_and_block_records_in_order():
    text = (
        "Campaign: Block\n"
        "campaign Retargeting: $15.00 2025-06-02\n"
        "Date: 2025-06-01\n"
        "Spend: $30.00\n"
    )
    result = parse_spend_text(text)

    assert [r.campaign_name for r in result.records] == ["Retargeting", "Block"]
    assert result.total_amount == Decimal("45.00")


def test_currency_is_applied_to_records():
    result = parse_spend_text(TWO_BLOCKS, currency="EUR")
    assert {r.currency for r in result.records} == {"EUR"}


@pytest.mark.parametrize("line,kind", [
    ("Campaign: Summer Sale", LineKind.CAMPAIGN),
    ("  date : 2025-06-01 ", LineKind.DATE),
    ("Spend: $ 12.00", LineKind.SPEND),
    ("Campaign Summer: $12.00 2025-06-01", LineKind.COMBINED),
    ("Campaign: Summer $12.00 2025-06-01", LineKind.COMBINED),
    ("Page 1 of 3", LineKind.OTHER),
    ("Campaign: $5 Deals", LineKind.CAMPAIGN),
    ("Spend: $12.00 USD", LineKind.SPEND),
    ("Campaign: $5 Deals: $12.00 2025-06-01", LineKind.COMBINED),
])
def test_classify_line(line, kind):
    assert classify_line(line)[0] == kind


def test_dollar_in_campaign_name_and_currency_after_amount():
    result = parse_spend_text("Campaign: $5 Deals\nDate: 2025-06-01\nSpend: $12.00 USD")

    assert result.total_campaigns == 1
    assert result.records[0].campaign_name == "$5 Deals"
    assert result.records[0].amount == Decimal("12.00")
    assert result.records[0].date == date(2025, 6, 1)


def test_parse_amount_rejects_garbage():
    with pytest.raises(ParseSkip):
        parse_amount("12.3.4")


def test_to_dict_summary():
    summary = parse_spend_text(TWO_BLOCKS).to_dict()

    assert summary["totalCampaigns"] == 2
    assert summary["totalAmount"] == pytest.approx(190.45)
    assert summary["campaigns"][0] == {
        "name": "Summer Sale", "amount": 123.45, "date": "2025-06-01", "currency": "USD",
    }


def test_n_blocks_sum_to_textual_total():
    amounts = ["1.10", "2,000.20", "0.05", "999.99", "10"]
    text = "\n".join(
        f"Campaign: C{i}\nDate: 2025-07-{i + 1:02d}\nSpend: ${a}" for i, a in enumerate(amounts)
    )
    result = parse_spend_text(text)

    assert result.total_campaigns == len(amounts)
    assert result.total_amount == sum(Decimal(a.replace(",", "")) for a in amounts)

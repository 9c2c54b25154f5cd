"""
Spend Record Parser - Text aus PDF-Reports → SpendRecords

Endlicher Automat über Zeilen mit genau einem Puffer für den
angefangenen Datensatz:

    SEEKING_CAMPAIGN → HAVE_CAMPAIGN → HAVE_CAMPAIGN_AND_DATE → (emit) → SEEKING_CAMPAIGN

Kombinierte Einzeiler ("Campaign X: $12.00 2025-06-01") werden unabhängig
vom Zustand direkt ausgegeben. Nicht passende Zeilen werden ohne
Zustandsänderung übersprungen, parse() wirft nie.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from modules.shared.config import DEFAULT_CURRENCY
from modules.shared.errors import ParseSkip
from modules.shared.models import SpendRecord
from . import patterns


class ParserState(str, Enum):
    SEEKING_CAMPAIGN = "seeking_campaign"
    HAVE_CAMPAIGN = "have_campaign"
    HAVE_CAMPAIGN_AND_DATE = "have_campaign_and_date"


class LineKind(str, Enum):
    CAMPAIGN = "campaign"
    DATE = "date"
    SPEND = "spend"
    COMBINED = "combined"
    OTHER = "other"


# Reihenfolge = Priorität
_CLASSIFIERS = (
    (LineKind.CAMPAIGN, patterns.CAMPAIGN_LINE.match),
    (LineKind.DATE, patterns.DATE_LINE.match),
    (LineKind.SPEND, patterns.SPEND_LINE.match),
    (LineKind.COMBINED, patterns.COMBINED_LINE.search),
)


def classify_line(line: str):
    """Liefert (LineKind, Match) für die erste passende Regel"""
    for kind, matcher in _CLASSIFIERS:
        match = matcher(line)
        if match:
            return kind, match
    return LineKind.OTHER, None


def parse_amount(amount_str: str) -> Decimal:
    """
    Parst einen Dollar-Betrag (Tausendertrennzeichen ',' werden entfernt).

    Raises:
        ParseSkip: Betrag nicht lesbar oder negativ
    """
    try:
        amount = Decimal(amount_str.replace(",", ""))
    except InvalidOperation:
        raise ParseSkip(f"Ungültiger Betrag: {amount_str!r}")
    if not amount.is_finite() or amount < 0:
        raise ParseSkip(f"Ungültiger Betrag: {amount_str!r}")
    return amount


def parse_iso_date(date_str: str) -> date:
    try:
        return date.fromisoformat(date_str)
    except ValueError:
        raise ParseSkip(f"Ungültiges Datum: {date_str!r}")


@dataclass
class PendingRecord:
    """Puffer für den gerade gelesenen, noch unvollständigen Datensatz"""
    campaign_name: Optional[str] = None
    date: Optional[date] = None


@dataclass
class ParseResult:
    records: List[SpendRecord] = field(default_factory=list)
    extracted_at: datetime = field(default_factory=datetime.now)

    @property
    def total_amount(self) -> Decimal:
        return sum((r.amount for r in self.records), Decimal("0"))

    @property
    def total_campaigns(self) -> int:
        return len(self.records)

    def to_dict(self) -> Dict:
        """Zusammenfassung wie sie in pdf_uploads.parsed_data gespeichert wird"""
        return {
            "campaigns": [r.to_dict() for r in self.records],
            "extractedAt": self.extracted_at.isoformat(),
            "totalCampaigns": self.total_campaigns,
            "totalAmount": float(self.total_amount),
        }


class SpendParserMachine:
    """
    Zustandsautomat für genau einen Parse-Durchlauf.

    feed() verarbeitet eine Zeile und liefert ggf. den fertigen Datensatz.
    """

    def __init__(self, currency: str = DEFAULT_CURRENCY):
        self.currency = currency
        self.state = ParserState.SEEKING_CAMPAIGN
        self.pending = PendingRecord()

        # (Zustand, Zeilentyp) → Handler; fehlende Einträge = Zeile ignorieren
        self._transitions: Dict[Tuple[ParserState, LineKind], Callable] = {}
        for state in ParserState:
            self._transitions[(state, LineKind.CAMPAIGN)] = self._on_campaign
            self._transitions[(state, LineKind.COMBINED)] = self._on_combined
        self._transitions[(ParserState.HAVE_CAMPAIGN, LineKind.DATE)] = self._on_date
        self._transitions[(ParserState.HAVE_CAMPAIGN_AND_DATE, LineKind.DATE)] = self._on_date
        self._transitions[(ParserState.HAVE_CAMPAIGN_AND_DATE, LineKind.SPEND)] = self._on_spend

    def feed(self, line: str) -> Optional[SpendRecord]:
        kind, match = classify_line(line)
        handler = self._transitions.get((self.state, kind))
        if handler is None:
            return None
        try:
            return handler(match)
        except ParseSkip:
            return None

    def _on_campaign(self, match) -> None:
        # Ein neuer Kampagnenkopf verwirft einen unvollständigen Datensatz
        self.pending = PendingRecord(campaign_name=match.group("name").strip())
        self.state = ParserState.HAVE_CAMPAIGN
        return None

    def _on_date(self, match) -> None:
        self.pending.date = parse_iso_date(match.group("date"))
        self.state = ParserState.HAVE_CAMPAIGN_AND_DATE
        return None

    def _on_spend(self, match) -> SpendRecord:
        amount = parse_amount(match.group("amount"))
        record = SpendRecord(
            campaign_name=self.pending.campaign_name,
            amount=amount,
            date=self.pending.date,
            currency=self.currency,
        )
        self.pending = PendingRecord()
        self.state = ParserState.SEEKING_CAMPAIGN
        return record

    def _on_combined(self, match) -> Optional[SpendRecord]:
        name = match.group("name").strip()
        if not name:
            raise ParseSkip("Leerer Kampagnenname")
        return SpendRecord(
            campaign_name=name,
            amount=parse_amount(match.group("amount")),
            date=parse_iso_date(match.group("date")),
            currency=self.currency,
        )


def parse_spend_text(text: str, currency: str = DEFAULT_CURRENCY) -> ParseResult:
    """
    Extrahiert SpendRecords aus dem Rohtext eines Reports.

    Args:
        text: Extrahierter PDF-Text (Zeilen getrennt durch Newlines)
        currency: Währung für alle Datensätze

    Returns:
        ParseResult mit records, total_amount und total_campaigns
    """
    result = ParseResult()
    if not text:
        return result

    machine = SpendParserMachine(currency=currency)
    for line in text.splitlines():
        record = machine.feed(line)
        if record is not None:
            result.records.append(record)
    return result

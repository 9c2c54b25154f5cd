"""
Zeilen-Muster für Spend-Reports

Jedes Muster wird gegen genau eine Textzeile geprüft. Eine "Campaign:"-Zeile,
die auf "$<Betrag> <Datum>" endet, ist eine kombinierte Zeile und keine
Kampagnenüberschrift.
"""
import re

AMOUNT = r"(?P<amount>\d[\d,]*(?:\.\d+)?)"
ISO_DATE = r"(?P<date>\d{4}-\d{2}-\d{2})"

# Optionales Währungskürzel hinter dem Betrag ("USD", "eur")
CURRENCY_SUFFIX = r"(?:\s*[A-Z]{3})?"

# "$12.00 2025-06-01" irgendwo in der Zeile
_AMOUNT_THEN_DATE = r".*\$\s*\d[\d,]*(?:\.\d+)?[:\s]+\d{4}-\d{2}-\d{2}"

# "Campaign: Summer Sale", "Campaign: $5 Deals"
CAMPAIGN_LINE = re.compile(
    rf"^\s*Campaign\s*:\s*(?!{_AMOUNT_THEN_DATE})(?P<name>\S.*?)\s*$",
    re.IGNORECASE,
)

# "Date: 2025-06-01"
DATE_LINE = re.compile(rf"^\s*Date\s*:\s*{ISO_DATE}\s*$", re.IGNORECASE)

# "Spend: $1,234.56", "Spend: $12.00 USD"
SPEND_LINE = re.compile(rf"^\s*Spend\s*:\s*\$\s*{AMOUNT}{CURRENCY_SUFFIX}\s*$", re.IGNORECASE)

# "Campaign Summer Sale: $123.45 2025-06-01"
COMBINED_LINE = re.compile(
    rf"Campaign[:\s]+(?P<name>.+?)[:\s]+\${AMOUNT}[:\s]+{ISO_DATE}",
    re.IGNORECASE,
)

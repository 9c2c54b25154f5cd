"""CLI for Spend Reader services.

Usage examples:
- Parse a report:        python -m modules.spend_reader.cli parse report.pdf
- Export to Excel:       python -m modules.spend_reader.cli export report.pdf -o spend.xlsx
"""

import sys
from pathlib import Path
import argparse

from modules.shared.errors import ValidationError

from .services.config import DEFAULT_CURRENCY
from .services.export_service import export_spend_records
from .services.pdf_text_service import extract_text_from_pdf
from .services.spend_parser import parse_spend_text, ParseResult


def _read_report(path: Path, currency: str) -> ParseResult:
    """PDF über pdfplumber, alles andere als UTF-8 Text"""
    if path.suffix.lower() == ".pdf":
        text = extract_text_from_pdf(path.read_bytes())
    else:
        text = path.read_text(encoding="utf-8")
    return parse_spend_text(text, currency=currency)


def cmd_parse(path: Path, currency: str) -> None:
    result = _read_report(path, currency)
    for record in result.records:
        print(f"{record.date.isoformat()}  {record.campaign_name:<40} {record.amount:>12,.2f} {record.currency}")
    print(f"Kampagnen: {result.total_campaigns}  Summe: {result.total_amount:,.2f}")


def cmd_export(path: Path, output: Path, currency: str) -> None:
    result = _read_report(path, currency)
    export_spend_records(result.records, output_excel=output)
    print(f"Spend Excel written: {output}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Spend Reader CLI")
    parser.add_argument("--currency", default=DEFAULT_CURRENCY, help="Währung der Beträge")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_parse = sub.add_parser("parse", help="Parse a spend report (PDF or text) and print records")
    p_parse.add_argument("file", type=Path)

    p_export = sub.add_parser("export", help="Parse a spend report and export records to Excel")
    p_export.add_argument("file", type=Path)
    p_export.add_argument("-o", "--output", type=Path, default=Path("spend.xlsx"))

    args = parser.parse_args(argv)

    if not args.file.exists():
        print(f"Datei nicht gefunden: {args.file}")
        return 1

    try:
        if args.cmd == "parse":
            cmd_parse(args.file, args.currency)
        elif args.cmd == "export":
            cmd_export(args.file, args.output, args.currency)
        else:
            parser.print_help()
            return 2
    except ValidationError as e:
        print(f"✗ {e.error}: {e.message}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""
Spend Dashboard - CLI Entry Point
Berechnet die Dashboard-Metriken einmalig und gibt sie als JSON aus.
"""

import sys
import json
import asyncio
import argparse
from pathlib import Path

# Importpfade
sys.path.insert(0, str(Path(__file__).parent))

from modules.shared import app_logger, ensure_schema
from modules.shared.errors import ValidationError
from modules.dashboard.schemas import DashboardMetricsResponse
from modules.dashboard.services import MetricsReconciliationService, parse_date_range


def parse_arguments(argv=None):
    """Parse Command Line Arguments"""
    parser = argparse.ArgumentParser(
        description='Spend Dashboard - Metrics Reconciliation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Beispiele:
  python main.py --user 42
  python main.py --user 42 --start 2025-08-01 --end 2025-08-31
  python main.py -u 42 -s 2025-08-01 -e 2025-08-07 --channels "Paid Search"

Fällt GA4 aus, enthält die Ausgabe Platzhalterwerte und eine Warnung.
        """
    )

    parser.add_argument('--user', '-u', required=True, help='User ID (Besitzer der Spend-Einträge)')
    parser.add_argument('--start', '-s', default=None, help='Startdatum YYYY-MM-DD')
    parser.add_argument('--end', '-e', default=None, help='Enddatum YYYY-MM-DD')
    parser.add_argument(
        '--channels', '-c',
        default=None,
        help='Komma-getrennte Channel Groups [default: PAID_CHANNEL_GROUPS]'
    )

    return parser.parse_args(argv)


def run(args) -> dict:
    """Hauptfunktion - führt den Metrik-Abgleich aus"""
    date_range = parse_date_range(args.start, args.end)
    channels = [c.strip() for c in args.channels.split(',')] if args.channels else None

    ensure_schema()
    service = MetricsReconciliationService()
    metrics = asyncio.run(service.reconcile(args.user, date_range, channels))
    return DashboardMetricsResponse.from_metrics(metrics).to_response()


if __name__ == "__main__":
    try:
        args = parse_arguments()
        print(json.dumps(run(args), indent=2, ensure_ascii=False))
        sys.exit(0)

    except ValidationError as e:
        print(f"✗ {e.error}: {e.message}", file=sys.stderr)
        sys.exit(2)

    except Exception as e:
        app_logger.error(f"FATAL ERROR: {e}", exc_info=True)
        sys.exit(1)

"""Dashboard Services: Metrik-Abgleich, Aggregation, Platzhalter"""

from .reconciliation_service import MetricsReconciliationService
from .summary_service import SummaryService
from .date_range import parse_date_range

__all__ = ["MetricsReconciliationService", "SummaryService", "parse_date_range"]

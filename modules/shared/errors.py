"""
Fehler-Taxonomie für alle Module

- ValidationError: fehlerhafte Request-Parameter oder Datei → 4xx
- SourceUnavailable: Datenquelle (GA4, Spend Store) nicht erreichbar → lokal abgefangen
- ParseSkip: einzelne Zeile nicht verwertbar → still übersprungen
- InternalError: unerwarteter Fehler → 5xx
"""

from typing import Optional


class DashboardError(Exception):
    """Basisklasse aller Fehler dieses Projekts"""


class ValidationError(DashboardError):
    """Ungültige Eingabe, wird als 4xx an den Client gemeldet"""

    status_code = 400
    error = "Validation failed"

    def __init__(self, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if error:
            self.error = error


class PayloadTooLarge(ValidationError):
    status_code = 413
    error = "File too large"


class UnsupportedMediaType(ValidationError):
    status_code = 415
    error = "Unsupported file type"


class SourceUnavailable(DashboardError):
    """Eine externe Datenquelle hat nicht (rechtzeitig) geantwortet"""

    def __init__(self, source: str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source
        self.message = message


class ParseSkip(DashboardError):
    """Zeile passt zu keinem Muster oder Betrag ist nicht lesbar"""


class InternalError(DashboardError):
    """Unerwarteter Fehler (Programmierfehler o.ä.)"""

"""Base Connector - Abstract Base Class für alle Analytics Connectors"""

from abc import ABC, abstractmethod

from ..models import AnalyticsQuery, AnalyticsReport


class BaseAnalyticsConnector(ABC):
    """
    Abstract Base Class für Analytics Connectors

    Jede Analytics-Quelle (GA4, später evtl. weitere) muss diese Schnittstelle
    implementieren. Fehler werden als SourceUnavailable gemeldet.
    """

    @abstractmethod
    def validate_credentials(self) -> bool:
        """Validiere API Credentials"""
        pass

    @abstractmethod
    async def query(self, query: AnalyticsQuery) -> AnalyticsReport:
        """Führe Dimension/Metric-Query aus und liefere tabellarische Zeilen mit Headern"""
        pass

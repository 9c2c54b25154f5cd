from .api_client import Ga4Connector, ga4_client_provider, create_ga4_client
from .client_provider import AnalyticsClientProvider

__all__ = ["Ga4Connector", "ga4_client_provider", "create_ga4_client", "AnalyticsClientProvider"]

"""Platzhalter-Werte für Felder ohne echte Datenquelle bzw. bei GA4-Ausfall"""

import math
from dataclasses import dataclass
from random import Random

# Immer Platzhalter (noch keine Datenquelle)
ALWAYS_MOCK_FIELDS = ["totalImpressions", "clickRate"]

# Platzhalter nur im Fallback
FALLBACK_MOCK_FIELDS = ["totalSessions", "totalUsers", "avgBounceRate", "conversions", "totalCampaigns"]

ANALYTICS_FALLBACK_WARNING = (
    "GA4 data unavailable, using fallback values for sessions, users, bounce rate, and conversions"
)
SPEND_ERROR_WARNING = "Spend data unavailable, totalSpend is reported as 0"


@dataclass
class FallbackAnalytics:
    total_sessions: int
    total_users: int
    avg_bounce_rate: float
    conversions: int
    total_campaigns: int


class PlaceholderGenerator:
    """Begrenzte Zufallswerte, Random-Instanz injizierbar (Tests)"""

    def __init__(self, rng: Random):
        self.rng = rng

    def impressions(self) -> int:
        return self.rng.randrange(10_000, 50_000)

    def click_rate(self) -> float:
        return math.floor((2 + self.rng.random() * 3) * 100) / 100

    def fallback_analytics(self) -> FallbackAnalytics:
        return FallbackAnalytics(
            total_sessions=self.rng.randrange(500, 2_500),
            total_users=self.rng.randrange(300, 1_800),
            avg_bounce_rate=math.floor((0.30 + self.rng.random() * 0.30) * 10_000) / 10_000,
            conversions=self.rng.randrange(20, 70),
            total_campaigns=self.rng.randrange(1, 6),
        )

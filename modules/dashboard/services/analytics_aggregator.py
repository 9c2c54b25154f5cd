"""
Aggregation der GA4-Zeilen

Alle Zugriffe auf Zeilenwerte laufen über Header-Name → Index Maps,
die pro Report einmal gebaut werden. Fehlende Header zählen als 0.
"""

import math
from dataclasses import dataclass
from random import Random
from typing import Dict, List

from modules.shared.models import AnalyticsReport

METRIC_SESSIONS = "sessions"
METRIC_USERS = "totalUsers"
METRIC_BOUNCE_RATE = "bounceRate"

DIMENSION_CHANNEL_GROUP = "defaultChannelGroup"

QUERY_DIMENSIONS = ["date", DIMENSION_CHANNEL_GROUP]
QUERY_METRICS = [METRIC_SESSIONS, METRIC_USERS, METRIC_BOUNCE_RATE]


@dataclass
class AnalyticsTotals:
    total_sessions: int = 0
    total_users: int = 0
    avg_bounce_rate: float = 0.0


def _to_float(value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def metric_value(values: List[str], index: Dict[str, int], name: str) -> float:
    """Wert einer Metrik über den Header-Namen, 0 wenn Header oder Wert fehlt"""
    position = index.get(name)
    if position is None or position >= len(values):
        return 0.0
    return _to_float(values[position])


def clamp_rate(rate: float) -> float:
    return min(1.0, max(0.0, rate))


def aggregate_analytics(report: AnalyticsReport) -> AnalyticsTotals:
    """
    Summiert Sessions und Users über alle Zeilen und berechnet die
    session-gewichtete Bounce Rate: Σ(sessions_i × bounceRate_i) / Σ(sessions_i).
    """
    index = report.metric_index()

    total_sessions = 0.0
    total_users = 0.0
    weighted_bounce = 0.0
    for row in report.rows:
        sessions = metric_value(row.metric_values, index, METRIC_SESSIONS)
        total_sessions += sessions
        total_users += metric_value(row.metric_values, index, METRIC_USERS)
        weighted_bounce += sessions * clamp_rate(metric_value(row.metric_values, index, METRIC_BOUNCE_RATE))

    avg_bounce_rate = weighted_bounce / total_sessions if total_sessions > 0 else 0.0
    return AnalyticsTotals(
        total_sessions=int(total_sessions),
        total_users=int(total_users),
        avg_bounce_rate=clamp_rate(avg_bounce_rate),
    )


def derive_conversions(total_sessions: int, rng: Random) -> int:
    # Platzhalter bis echte Conversion-Daten angebunden sind: 2-4% der Sessions
    rate = 0.02 + rng.random() * 0.02
    return math.floor(total_sessions * rate)


def derive_campaign_count(total_sessions: int) -> int:
    # Platzhalter: ~1 Kampagne pro 100 Sessions
    if total_sessions <= 0:
        return 0
    return max(1, total_sessions // 100)

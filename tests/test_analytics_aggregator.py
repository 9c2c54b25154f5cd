"""Tests: GA4-Aggregation und Platzhalter"""

from random import Random

import pytest

from conftest import make_report
from modules.dashboard.services.analytics_aggregator import (
    aggregate_analytics,
    derive_campaign_count,
    derive_conversions,
)
from modules.dashboard.services.placeholders import PlaceholderGenerator


def test_session_weighted_bounce_rate():
    report = make_report([(100, 80, 0.2), (100, 90, 0.4)])

    totals = aggregate_analytics(report)

    assert totals.total_sessions == 200
    assert totals.total_users == 170
    assert totals.avg_bounce_rate == pytest.approx(0.3)


def test_weighting_uses_sessions_not_rows():
    report = make_report([(300, 10, 0.1), (100, 10, 0.5)])
    assert aggregate_analytics(report).avg_bounce_rate == pytest.approx(0.2)


def test_zero_sessions_gives_zero_bounce_rate():
    report = make_report([(0, 5, 0.9), (0, 3, 0.7)])

    totals = aggregate_analytics(report)

    assert totals.total_sessions == 0
    assert totals.avg_bounce_rate == 0.0


def test_empty_report():
    totals = aggregate_analytics(make_report([]))
    assert (totals.total_sessions, totals.total_users, totals.avg_bounce_rate) == (0, 0, 0.0)


def test_columns_are_resolved_by_header_name():
    report = make_report(
        [(0.2, 100, 80), (0.4, 100, 90)],
        metric_headers=("bounceRate", "sessions", "totalUsers"),
    )

    totals = aggregate_analytics(report)

    assert totals.total_sessions == 200
    assert totals.total_users == 170
    assert totals.avg_bounce_rate == pytest.approx(0.3)


def test_missing_header_counts_as_zero():
    report = make_report([(100, 0.5), (50, 0.5)], metric_headers=("sessions", "bounceRate"))

    totals = aggregate_analytics(report)

    assert totals.total_sessions == 150
    assert totals.total_users == 0
    assert totals.avg_bounce_rate == pytest.approx(0.5)


def test_unparseable_values_count_as_zero():
    report = make_report([("abc", 10, 0.3), (100, "", "nan")])

    totals = aggregate_analytics(report)

    assert totals.total_sessions == 100
    assert totals.total_users == 10
    assert totals.avg_bounce_rate == 0.0


def test_bounce_rate_stays_in_unit_interval():
    report = make_report([(100, 10, 1.7), (100, 10, -0.2)])
    assert 0.0 <= aggregate_analytics(report).avg_bounce_rate <= 1.0


def test_conversions_between_two_and_four_percent():
    rng = Random(7)
    for _ in range(200):
        conversions = derive_conversions(10_000, rng)
        assert 200 <= conversions <= 400


def test_campaign_count():
    assert derive_campaign_count(0) == 0
    assert derive_campaign_count(50) == 1
    assert derive_campaign_count(1_250) == 12


def test_placeholder_ranges():
    generator = PlaceholderGenerator(Random(42))
    for _ in range(200):
        assert 10_000 <= generator.impressions() < 50_000
        assert 2.0 <= generator.click_rate() < 5.0
        fallback = generator.fallback_analytics()
        assert 500 <= fallback.total_sessions < 2_500
        assert 300 <= fallback.total_users < 1_800
        assert 0.30 <= fallback.avg_bounce_rate < 0.60
        assert 20 <= fallback.conversions < 70
        assert 1 <= fallback.total_campaigns < 6


def test_placeholders_are_reproducible_with_seed():
    first = PlaceholderGenerator(Random(3))
    second = PlaceholderGenerator(Random(3))
    assert [first.impressions(), first.click_rate()] == [second.impressions(), second.click_rate()]

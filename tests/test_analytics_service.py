"""Tests for the analytics aggregations."""

import os
import time
from datetime import datetime, timedelta, timezone

import pytest

from conftest import NOW, make_entry
from wellness_journal.core import config
from wellness_journal.analytics.service import (
    get_comparison,
    get_mood_analysis,
    get_overview,
    get_patterns,
    get_trends,
    get_wellness_distribution,
    week_bounds,
)


# ---------------------------------------------------------------------------
# Overview
# ---------------------------------------------------------------------------


class TestOverview:

    def test_empty_collection(self):
        overview = get_overview([], now=NOW)

        assert overview.total_entries == 0
        assert overview.avg_wellness_score == 0
        assert overview.mood_distribution == []
        assert overview.weekly_trend == []
        assert overview.recent_entries == 0

    def test_counts_and_averages(self):
        entries = [
            make_entry(0, mood="happy", wellness_score=40, mood_score=6),
            make_entry(1, mood="sad", wellness_score=60, mood_score=2),
            make_entry(1, mood="happy", wellness_score=80, mood_score=8),
            make_entry(10, mood="calm", wellness_score=60),
        ]
        overview = get_overview(entries, now=NOW)

        assert overview.total_entries == 4
        assert overview.avg_wellness_score == 60
        assert [(m.mood, m.count) for m in overview.mood_distribution] == [
            ("happy", 2),
            ("sad", 1),
            ("calm", 1),
        ]
        assert overview.recent_entries == 3

    def test_weekly_trend_is_daily_and_ascending(self):
        entries = [
            make_entry(0, wellness_score=40, mood_score=4),
            make_entry(1, wellness_score=60, mood_score=6),
            make_entry(1, wellness_score=80, mood_score=8),
            make_entry(8, wellness_score=10),
        ]
        trend = get_overview(entries, now=NOW).weekly_trend

        assert [(d.date, d.avg_wellness, d.avg_mood, d.count) for d in trend] == [
            ("2026-10-13", 70, 7, 2),
            ("2026-10-14", 40, 4, 1),
        ]


# ---------------------------------------------------------------------------
# Trends
# ---------------------------------------------------------------------------


class TestTrends:

    def test_restricted_to_period(self):
        entries = [make_entry(2), make_entry(20), make_entry(40)]
        trends = get_trends(entries, period_days=30, now=NOW)
        assert [t.date for t in trends] == ["2026-09-24", "2026-10-12"]

    def test_same_day_entries_are_averaged(self):
        entries = [
            make_entry(created_at=datetime(2026, 10, 14, 8, tzinfo=timezone.utc), wellness_score=40, mood_score=4),
            make_entry(created_at=datetime(2026, 10, 14, 9, tzinfo=timezone.utc), wellness_score=60, mood_score=7),
        ]
        [point] = get_trends(entries, period_days=7, now=NOW)

        assert point.date == "2026-10-14"
        assert point.avg_wellness == 50
        assert point.avg_mood == 5.5
        assert point.entry_count == 2

    def test_no_entries_no_buckets(self):
        assert get_trends([make_entry(60)], period_days=30, now=NOW) == []

    def test_days_follow_the_zone_of_now(self):
        eastern = timezone(timedelta(hours=-4))
        late_evening = make_entry(created_at=datetime(2026, 10, 14, 2, 0, tzinfo=timezone.utc))
        [point] = get_trends([late_evening], period_days=7, now=NOW.astimezone(eastern))
        assert point.date == "2026-10-13"


# ---------------------------------------------------------------------------
# Mood analysis
# ---------------------------------------------------------------------------


class TestMoodAnalysis:

    def test_mood_stats_sorted_by_count(self):
        entries = [
            make_entry(0, mood="calm", wellness_score=70, mood_score=7),
            make_entry(1, mood="anxious", wellness_score=30, mood_score=3),
            make_entry(2, mood="anxious", wellness_score=50, mood_score=4),
        ]
        stats = get_mood_analysis(entries, now=NOW).mood_stats

        assert [(s.mood, s.count, s.avg_wellness, s.avg_score) for s in stats] == [
            ("anxious", 2, 40, 3.5),
            ("calm", 1, 70, 7),
        ]

    def test_mood_trends_bucket_by_year_and_iso_week(self):
        entries = [
            make_entry(created_at=datetime(2026, 10, 14, tzinfo=timezone.utc), mood="calm"),
            make_entry(created_at=datetime(2026, 10, 12, tzinfo=timezone.utc), mood="calm"),
            make_entry(created_at=datetime(2026, 10, 5, tzinfo=timezone.utc), mood="calm"),
            make_entry(created_at=datetime(2025, 6, 2, tzinfo=timezone.utc), mood="sad"),
        ]
        trends = get_mood_analysis(entries, now=NOW).mood_trends

        assert [(t.mood, t.year, t.week, t.count) for t in trends] == [
            ("sad", "2025", "23", 1),
            ("calm", "2026", "41", 1),
            ("calm", "2026", "42", 2),
        ]

    def test_empty(self):
        analysis = get_mood_analysis([], now=NOW)
        assert analysis.mood_stats == []
        assert analysis.mood_trends == []


# ---------------------------------------------------------------------------
# Wellness distribution
# ---------------------------------------------------------------------------


class TestWellnessDistribution:

    def test_one_entry_per_bucket(self):
        entries = [make_entry(wellness_score=s) for s in (10, 30, 50, 70, 95)]
        buckets = get_wellness_distribution(entries)

        assert [b.range for b in buckets] == ["0-20", "21-40", "41-60", "61-80", "81-100"]
        assert [b.count for b in buckets] == [1, 1, 1, 1, 1]
        assert [b.percentage for b in buckets] == [20.0] * 5
        assert sum(b.percentage for b in buckets) == pytest.approx(100.0)

    def test_top_bucket_includes_100(self):
        buckets = get_wellness_distribution([make_entry(wellness_score=95), make_entry(wellness_score=100)])
        assert buckets[-1].count == 2
        assert buckets[-1].percentage == 100.0

    @pytest.mark.parametrize("score,index", [(0, 0), (19, 0), (20, 1), (40, 2), (60, 3), (80, 4)])
    def test_lower_bounds_are_inclusive(self, score, index):
        counts = [b.count for b in get_wellness_distribution([make_entry(wellness_score=score)])]
        assert counts[index] == 1
        assert sum(counts) == 1

    def test_labels_and_colors(self):
        buckets = get_wellness_distribution([])
        assert buckets[0].label == "Needs Support"
        assert buckets[0].color == "#ff6b6b"
        assert buckets[-1].label == "Excellent Wellness"
        assert buckets[-1].color == "#4caf50"

    def test_empty_collection_has_zero_percentages(self):
        buckets = get_wellness_distribution([])
        assert [b.count for b in buckets] == [0] * 5
        assert [b.percentage for b in buckets] == [0.0] * 5

    def test_percentage_rounded_to_one_decimal(self):
        entries = [make_entry(wellness_score=s) for s in (10, 30, 30)]
        buckets = get_wellness_distribution(entries)
        assert buckets[0].percentage == 33.3
        assert buckets[1].percentage == 66.7


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------


class TestPatterns:

    def test_window_excludes_older_entries(self):
        entries = [make_entry(1), make_entry(10)]
        patterns = get_patterns(entries, days=7, now=NOW)

        assert patterns.total_entries == 1
        assert patterns.period == "7 days"

    def test_empty_window(self):
        patterns = get_patterns([make_entry(30)], days=7, now=NOW)

        assert patterns.avg_entry_length == 0
        assert patterns.common_tags == []
        assert len(patterns.hourly_distribution) == 24
        assert sum(h.count for h in patterns.hourly_distribution) == 0
        assert [d.count for d in patterns.day_of_week_distribution] == [0] * 7

    def test_average_length_rounds_half_up(self):
        entries = [make_entry(0, content="abc"), make_entry(1, content="abcdef")]
        assert get_patterns(entries, days=7, now=NOW).avg_entry_length == 5

    def test_common_tags_ordered_by_count_then_first_seen(self):
        entries = [
            make_entry(0, tags=["sleep", "work"]),
            make_entry(1, tags=["work", "family"]),
            make_entry(2, tags=["family", "work"]),
        ]
        tags = get_patterns(entries, days=7, now=NOW).common_tags
        assert [(t.tag, t.count) for t in tags] == [("work", 3), ("family", 2), ("sleep", 1)]

    def test_common_tags_limited_to_ten(self):
        entries = [make_entry(0, tags=[f"tag{i}" for i in range(12)])]
        assert len(get_patterns(entries, days=7, now=NOW).common_tags) == 10

    def test_hourly_and_weekday_buckets(self):
        entries = [
            make_entry(created_at=datetime(2026, 10, 14, 12, 0, tzinfo=timezone.utc)),  # Wednesday
            make_entry(created_at=datetime(2026, 10, 11, 7, 30, tzinfo=timezone.utc)),  # Sunday
            make_entry(created_at=datetime(2026, 10, 12, 7, 0, tzinfo=timezone.utc)),  # Monday
        ]
        patterns = get_patterns(entries, days=7, now=NOW)

        hourly = {h.hour: h.count for h in patterns.hourly_distribution}
        assert hourly[12] == 1
        assert hourly[7] == 2
        assert [d.day for d in patterns.day_of_week_distribution] == [1, 2, 3, 4, 5, 6, 7]
        weekdays = {d.day: d.count for d in patterns.day_of_week_distribution}
        assert weekdays == {1: 1, 2: 0, 3: 1, 4: 0, 5: 0, 6: 0, 7: 1}


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------


class TestComparison:

    def test_week_starts_on_sunday(self):
        start, end = week_bounds(NOW, timezone.utc)
        assert start == datetime(2026, 10, 11, tzinfo=timezone.utc)
        assert end == datetime(2026, 10, 17, 23, 59, 59, 999999, tzinfo=timezone.utc)

    def test_sunday_is_its_own_week_start(self):
        sunday = datetime(2026, 10, 18, 9, 0, tzinfo=timezone.utc)
        assert week_bounds(sunday, timezone.utc)[0] == datetime(2026, 10, 18, tzinfo=timezone.utc)

    def test_no_previous_week_means_zero_change(self):
        entries = [make_entry(0, wellness_score=70, mood_score=6), make_entry(1, wellness_score=50)]
        comparison = get_comparison(entries, now=NOW)

        assert comparison.wellness.this_week == 60
        assert comparison.entries.this_week == 2
        assert comparison.wellness.last_week == 0
        assert comparison.wellness.change == 0
        assert comparison.mood.change == 0
        assert comparison.entries.change == 0

    def test_percent_change(self):
        entries = [
            make_entry(created_at=datetime(2026, 10, 11, 0, 0, tzinfo=timezone.utc), wellness_score=60, mood_score=6),
            make_entry(created_at=datetime(2026, 10, 10, 23, 59, tzinfo=timezone.utc), wellness_score=50, mood_score=4),
            make_entry(created_at=datetime(2026, 10, 4, 0, 0, tzinfo=timezone.utc), wellness_score=50, mood_score=4),
            make_entry(created_at=datetime(2026, 10, 3, 23, 0, tzinfo=timezone.utc), wellness_score=0, mood_score=0),
        ]
        comparison = get_comparison(entries, now=NOW)

        assert (comparison.wellness.this_week, comparison.wellness.last_week) == (60, 50)
        assert comparison.wellness.change == 20.0
        assert comparison.mood.change == 50.0
        assert (comparison.entries.this_week, comparison.entries.last_week) == (1, 2)
        assert comparison.entries.change == -50.0

    def test_change_rounded_to_one_decimal(self):
        entries = [
            make_entry(created_at=datetime(2026, 10, 12, tzinfo=timezone.utc), wellness_score=70),
            make_entry(created_at=datetime(2026, 10, 5, tzinfo=timezone.utc), wellness_score=60),
        ]
        assert get_comparison(entries, now=NOW).wellness.change == 16.7


# ---------------------------------------------------------------------------
# Host local time
# ---------------------------------------------------------------------------


@pytest.fixture()
def new_york_host(monkeypatch):
    """Host clock in a DST zone with no TIMEZONE configured."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setattr(config, "TIMEZONE", None)
    previous = os.environ.get("TZ")
    os.environ["TZ"] = "America/New_York"
    time.tzset()
    yield
    if previous is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = previous
    time.tzset()


class TestHostLocalTime:

    def test_hours_follow_dst_of_each_entry(self, new_york_host):
        entries = [
            make_entry(created_at=datetime(2026, 1, 15, 17, 0, tzinfo=timezone.utc)),  # 12:00 EST
            make_entry(created_at=datetime(2026, 7, 15, 16, 0, tzinfo=timezone.utc)),  # 12:00 EDT
        ]
        patterns = get_patterns(entries, days=100000)
        hourly = {h.hour: h.count for h in patterns.hourly_distribution if h.count}
        assert hourly == {12: 2}

    def test_days_follow_dst_of_each_entry(self, new_york_host):
        winter_evening = make_entry(created_at=datetime(2026, 1, 16, 3, 30, tzinfo=timezone.utc))
        assert [t.date for t in get_trends([winter_evening], period_days=100000)] == ["2026-01-15"]

    def test_week_spanning_dst_start(self, new_york_host):
        # DST begins 2026-03-08 at 02:00 local
        now = datetime(2026, 3, 10, 16, 0, tzinfo=timezone.utc).astimezone()
        start, end = week_bounds(now, None)

        assert start == datetime(2026, 3, 8, 5, 0, tzinfo=timezone.utc)
        assert end == datetime(2026, 3, 15, 3, 59, 59, 999999, tzinfo=timezone.utc)

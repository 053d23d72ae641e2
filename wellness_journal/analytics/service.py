"""
Aggregate statistics over the journal entry collection.

Every function is a pure function of the entry list it is handed plus the
moment treated as "now". Day, hour and week boundaries are evaluated in the
time zone carried by an explicit ``now``. Without one they follow the configured
``TIMEZONE``, else the host zone rules in force at each entry's own instant.
"""
import math
from collections import Counter, defaultdict
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from zoneinfo import ZoneInfo

from wellness_journal.analytics.schemas import (
    DailyTrend,
    DayCount,
    HourCount,
    MetricComparison,
    MoodAnalysis,
    MoodCount,
    MoodStat,
    MoodWeek,
    Overview,
    Patterns,
    TagCount,
    TrendPoint,
    WeekComparison,
    WellnessBucket,
)
from wellness_journal.core import config
from wellness_journal.entries.schemas import JournalEntryBase

Entries = Sequence[JournalEntryBase]

OVERVIEW_WINDOW_DAYS = 7
TOP_TAG_LIMIT = 10

# datetime.weekday() numbering, Monday=0
WEEK_STARTS_ON = 6  # Sunday
# Day-of-week buckets use isoweekday(): Monday=1 ... Sunday=7
SUNDAY_ISO_WEEKDAY = 7

# (low, high, range, label, color); high is exclusive except on the last bucket
WELLNESS_BUCKETS: Tuple[Tuple[int, int, str, str, str], ...] = (
    (0, 20, "0-20", "Needs Support", "#ff6b6b"),
    (20, 40, "21-40", "Room for Improvement", "#ffa726"),
    (40, 60, "41-60", "Moderate Wellness", "#ffd54f"),
    (60, 80, "61-80", "Good Wellness", "#81c784"),
    (80, 100, "81-100", "Excellent Wellness", "#4caf50"),
)


# Helpers
def local_timezone() -> Optional[tzinfo]:
    """Configured zone, or None to apply the host's own rules to each instant."""
    if config.TIMEZONE:
        return ZoneInfo(config.TIMEZONE)
    return None

def _resolve_now(now: Optional[datetime]) -> Tuple[datetime, Optional[tzinfo]]:
    if now is None:
        tz = local_timezone()
        return datetime.now(timezone.utc).astimezone(tz), tz
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now, now.tzinfo

def _local(entry: JournalEntryBase, tz: Optional[tzinfo]) -> datetime:
    # astimezone(None) converts with the host rules in force at that instant
    return entry.created_at.astimezone(tz)

def _start_of_day(day: date, tz: Optional[tzinfo]) -> datetime:
    midnight = datetime.combine(day, time.min)
    return midnight.replace(tzinfo=tz) if tz is not None else midnight.astimezone()

def _mean(values: Iterable[float]) -> float:
    values = list(values)
    return sum(values) / len(values) if values else 0

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

def _percent_change(current: float, previous: float) -> float:
    # No baseline means no meaningful change
    if not previous:
        return 0.0
    return round((current - previous) / previous * 100, 1)

def _since(entries: Entries, start: datetime) -> List[JournalEntryBase]:
    return [e for e in entries if e.created_at >= start]

def _group_by_day(entries: Entries, tz: Optional[tzinfo]) -> List[Tuple[str, List[JournalEntryBase]]]:
    groups: Dict[str, List[JournalEntryBase]] = defaultdict(list)
    for entry in entries:
        groups[_local(entry, tz).date().isoformat()].append(entry)
    return sorted(groups.items())

def _bucket_for(score: int) -> Optional[int]:
    last = len(WELLNESS_BUCKETS) - 1
    for i, (low, high, *_rest) in enumerate(WELLNESS_BUCKETS):
        if low <= score < high or (i == last and score == high):
            return i
    return None

def week_bounds(now: datetime, tz: Optional[tzinfo]) -> Tuple[datetime, datetime]:
    """
    First and last instant of the calendar week containing ``now``.

    Midnights are resolved in ``tz`` (host rules when None), so a week that
    spans a DST change is an hour shorter or longer than seven days.
    """
    first_day = now.date() - timedelta(days=(now.weekday() - WEEK_STARTS_ON) % 7)
    start = _start_of_day(first_day, tz)
    return start, _start_of_day(first_day + timedelta(days=7), tz) - timedelta(microseconds=1)


# Aggregations
def get_overview(entries: Entries, now: Optional[datetime] = None) -> Overview:
    now, tz = _resolve_now(now)
    mood_counts = Counter(e.mood for e in entries)
    recent = _since(entries, now - timedelta(days=OVERVIEW_WINDOW_DAYS))

    weekly_trend = [
        DailyTrend(
            date=day,
            avg_wellness=_mean(e.wellness_score for e in group),
            avg_mood=_mean(e.mood_score for e in group),
            count=len(group),
        )
        for day, group in _group_by_day(recent, tz)
    ]

    return Overview(
        total_entries=len(entries),
        avg_wellness_score=_mean(e.wellness_score for e in entries),
        mood_distribution=[MoodCount(mood=m, count=c) for m, c in mood_counts.most_common()],
        weekly_trend=weekly_trend,
        recent_entries=len(recent),
    )

def get_trends(entries: Entries, period_days: int = 30, now: Optional[datetime] = None) -> List[TrendPoint]:
    now, tz = _resolve_now(now)
    window = _since(entries, now - timedelta(days=period_days))
    return [
        TrendPoint(
            date=day,
            avg_wellness=_mean(e.wellness_score for e in group),
            avg_mood=_mean(e.mood_score for e in group),
            entry_count=len(group),
        )
        for day, group in _group_by_day(window, tz)
    ]

def get_mood_analysis(entries: Entries, now: Optional[datetime] = None) -> MoodAnalysis:
    _now, tz = _resolve_now(now)

    by_mood: Dict[str, List[JournalEntryBase]] = defaultdict(list)
    for entry in entries:
        by_mood[entry.mood].append(entry)
    mood_stats = sorted(
        (
            MoodStat(
                mood=mood,
                count=len(group),
                avg_wellness=_mean(e.wellness_score for e in group),
                avg_score=_mean(e.mood_score for e in group),
            )
            for mood, group in by_mood.items()
        ),
        key=lambda s: s.count,
        reverse=True,
    )

    # Calendar year paired with the ISO week number
    weekly: Counter = Counter()
    for entry in entries:
        created = _local(entry, tz)
        weekly[(entry.mood, f"{created.year:04d}", f"{created.isocalendar()[1]:02d}")] += 1
    mood_trends = sorted(
        (MoodWeek(mood=mood, year=year, week=week, count=count) for (mood, year, week), count in weekly.items()),
        key=lambda t: (t.year, t.week),
    )

    return MoodAnalysis(mood_stats=mood_stats, mood_trends=mood_trends)

def get_wellness_distribution(entries: Entries) -> List[WellnessBucket]:
    counts = [0] * len(WELLNESS_BUCKETS)
    for entry in entries:
        idx = _bucket_for(entry.wellness_score)
        if idx is not None:
            counts[idx] += 1

    total = len(entries)
    return [
        WellnessBucket(
            range=label_range,
            label=label,
            color=color,
            count=count,
            percentage=round(count / total * 100, 1) if total else 0.0,
        )
        for (_low, _high, label_range, label, color), count in zip(WELLNESS_BUCKETS, counts)
    ]

def get_patterns(entries: Entries, days: int = 30, now: Optional[datetime] = None) -> Patterns:
    now, tz = _resolve_now(now)
    window = sorted(
        _since(entries, now - timedelta(days=days)),
        key=lambda e: e.created_at,
        reverse=True,
    )

    avg_length = _round_half_up(_mean(len(e.content) for e in window)) if window else 0

    tag_counts: Counter = Counter()
    for entry in window:
        tag_counts.update(entry.tags)

    hourly = [0] * 24
    weekdays = Counter()
    for entry in window:
        created = _local(entry, tz)
        hourly[created.hour] += 1
        weekdays[created.isoweekday()] += 1

    return Patterns(
        avg_entry_length=avg_length,
        common_tags=[TagCount(tag=t, count=c) for t, c in tag_counts.most_common(TOP_TAG_LIMIT)],
        hourly_distribution=[HourCount(hour=h, count=c) for h, c in enumerate(hourly)],
        day_of_week_distribution=[
            DayCount(day=d, count=weekdays[d]) for d in range(1, SUNDAY_ISO_WEEKDAY + 1)
        ],
        total_entries=len(window),
        period=f"{days} days",
    )

def get_comparison(entries: Entries, now: Optional[datetime] = None) -> WeekComparison:
    now, tz = _resolve_now(now)
    this_start, this_end = week_bounds(now, tz)
    last_start, _ = week_bounds(this_start - timedelta(days=1), tz)
    last_end = this_start - timedelta(microseconds=1)

    def _aggregate(start: datetime, end: datetime) -> Tuple[float, float, int]:
        in_range = [e for e in entries if start <= e.created_at <= end]
        return (
            _mean(e.wellness_score for e in in_range),
            _mean(e.mood_score for e in in_range),
            len(in_range),
        )

    this_week = _aggregate(this_start, this_end)
    last_week = _aggregate(last_start, last_end)

    def _compare(i: int) -> MetricComparison:
        return MetricComparison(
            this_week=this_week[i],
            last_week=last_week[i],
            change=_percent_change(this_week[i], last_week[i]),
        )

    return WeekComparison(wellness=_compare(0), mood=_compare(1), entries=_compare(2))

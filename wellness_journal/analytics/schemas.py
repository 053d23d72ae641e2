from typing import List
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class MoodCount(BaseSchema):
    mood: str
    count: int


class DailyTrend(BaseSchema):
    date: str
    avg_wellness: float
    avg_mood: float
    count: int


class TrendPoint(BaseSchema):
    date: str
    avg_wellness: float
    avg_mood: float
    entry_count: int


class Overview(BaseSchema):
    total_entries: int
    avg_wellness_score: float
    mood_distribution: List[MoodCount]
    weekly_trend: List[DailyTrend]
    recent_entries: int


class MoodStat(BaseSchema):
    mood: str
    count: int
    avg_wellness: float
    avg_score: float


class MoodWeek(BaseSchema):
    mood: str
    year: str
    week: str
    count: int


class MoodAnalysis(BaseSchema):
    mood_stats: List[MoodStat]
    mood_trends: List[MoodWeek]


class WellnessBucket(BaseSchema):
    range: str
    label: str
    color: str
    count: int
    percentage: float


class TagCount(BaseSchema):
    tag: str
    count: int


class HourCount(BaseSchema):
    hour: int
    count: int


class DayCount(BaseSchema):
    day: int
    count: int


class Patterns(BaseSchema):
    avg_entry_length: int
    common_tags: List[TagCount]
    hourly_distribution: List[HourCount]
    day_of_week_distribution: List[DayCount]
    total_entries: int
    period: str


class MetricComparison(BaseSchema):
    this_week: float
    last_week: float
    change: float


class WeekComparison(BaseSchema):
    wellness: MetricComparison
    mood: MetricComparison
    entries: MetricComparison

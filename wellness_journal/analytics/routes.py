from typing import List
import logging

from fastapi import APIRouter, Depends, Query

from wellness_journal.analytics.schemas import (
    MoodAnalysis,
    Overview,
    Patterns,
    TrendPoint,
    WeekComparison,
    WellnessBucket,
)
from wellness_journal.analytics.service import (
    get_comparison,
    get_mood_analysis,
    get_overview,
    get_patterns,
    get_trends,
    get_wellness_distribution,
)
from wellness_journal.core.database import JsonDatabase
from wellness_journal.core.dependency import get_db
from wellness_journal.core.errors import InternalError, JournalError
from wellness_journal.entries.db import list_entries

router = APIRouter(prefix="/api/analytics", tags=["Analytics"])
logger = logging.getLogger(__name__)


@router.get(
    "/overview",
    response_model=Overview,
    summary="Overall wellness statistics",
    description="Totals, average wellness, mood distribution and the trailing week's daily trend.",
)
def overview_route(db: JsonDatabase = Depends(get_db)) -> Overview:
    try:
        return get_overview(list_entries(db))
    except JournalError:
        raise
    except Exception as e:
        logger.error(f"Error computing overview: {e}")
        raise InternalError("Error fetching analytics overview") from e


@router.get(
    "/trends",
    response_model=List[TrendPoint],
    summary="Wellness trends over time",
    description="Daily average wellness and mood for the trailing period.",
)
def trends_route(
    period: int = Query(30, ge=0, description="Trailing window in days"),
    db: JsonDatabase = Depends(get_db),
) -> List[TrendPoint]:
    try:
        return get_trends(list_entries(db), period)
    except JournalError:
        raise
    except Exception as e:
        logger.error(f"Error computing trends for {period} days: {e}")
        raise InternalError("Error fetching trends") from e


@router.get(
    "/mood-analysis",
    response_model=MoodAnalysis,
    summary="Mood analysis",
    description="Per-mood statistics and weekly mood occurrence counts.",
)
def mood_analysis_route(db: JsonDatabase = Depends(get_db)) -> MoodAnalysis:
    try:
        return get_mood_analysis(list_entries(db))
    except JournalError:
        raise
    except Exception as e:
        logger.error(f"Error computing mood analysis: {e}")
        raise InternalError("Error fetching mood analysis") from e


@router.get(
    "/wellness-distribution",
    response_model=List[WellnessBucket],
    summary="Wellness score distribution",
)
def wellness_distribution_route(db: JsonDatabase = Depends(get_db)) -> List[WellnessBucket]:
    try:
        return get_wellness_distribution(list_entries(db))
    except JournalError:
        raise
    except Exception as e:
        logger.error(f"Error computing wellness distribution: {e}")
        raise InternalError("Error fetching wellness distribution") from e


@router.get(
    "/patterns",
    response_model=Patterns,
    summary="Entry patterns",
    description="Entry length, common tags, and time-of-day / day-of-week usage for the trailing period.",
)
def patterns_route(
    days: int = Query(30, ge=0, description="Trailing window in days"),
    db: JsonDatabase = Depends(get_db),
) -> Patterns:
    try:
        return get_patterns(list_entries(db), days)
    except JournalError:
        raise
    except Exception as e:
        logger.error(f"Error computing patterns for {days} days: {e}")
        raise InternalError("Error fetching patterns") from e


@router.get(
    "/comparison",
    response_model=WeekComparison,
    summary="This week vs last week",
)
def comparison_route(db: JsonDatabase = Depends(get_db)) -> WeekComparison:
    try:
        return get_comparison(list_entries(db))
    except JournalError:
        raise
    except Exception as e:
        logger.error(f"Error computing comparison: {e}")
        raise InternalError("Error fetching comparison data") from e

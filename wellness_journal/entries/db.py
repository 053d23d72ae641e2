import logging
import math
from datetime import date, datetime, time, timezone
from typing import Any, Dict, List, Optional, Tuple
from uuid import uuid4

from wellness_journal.core.database import JsonDatabase
from wellness_journal.core.errors import NotFoundError, ValidationError
from wellness_journal.entries.schemas import (
    JournalEntryBase,
    JournalEntryCreate,
    JournalEntryUpdate,
)

logger = logging.getLogger(__name__)

DEFAULT_MOOD = "neutral"
DEFAULT_MOOD_SCORE = 5
DEFAULT_WELLNESS_SCORE = 50
MOOD_SCORE_RANGE = (0, 10)
WELLNESS_SCORE_RANGE = (0, 100)


# Helpers
def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

def _to_record(entry: JournalEntryBase) -> Dict[str, Any]:
    return entry.model_dump(mode="json", by_alias=True)

def _from_record(record: Dict[str, Any]) -> JournalEntryBase:
    return JournalEntryBase.model_validate(record)

def _newest_first(entries: List[JournalEntryBase]) -> List[JournalEntryBase]:
    return sorted(entries, key=lambda e: e.created_at, reverse=True)

def _check_range(name: str, value: int, bounds: Tuple[int, int]) -> int:
    low, high = bounds
    if not low <= value <= high:
        raise ValidationError(f"{name} must be between {low} and {high}")
    return value

def _check_content(content: Optional[str]) -> str:
    if not content:
        raise ValidationError("Content is required")
    return content

def _truncate_mood_score(value: float) -> int:
    if not math.isfinite(value):
        raise ValidationError("moodScore must be a finite number")
    return _check_range("moodScore", int(value), MOOD_SCORE_RANGE)

def coerce_mood_score(value: Any) -> int:
    """Numeric scores are kept (truncated to int); anything else becomes the default."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_MOOD_SCORE
    if isinstance(value, float) and not math.isfinite(value):
        return DEFAULT_MOOD_SCORE
    return _truncate_mood_score(value)

def parse_range_boundary(raw: str, *, end: bool) -> datetime:
    """
    Turns a caller-supplied date string into an aware UTC instant.

    A bare YYYY-MM-DD covers the whole UTC day: the start of it for the lower
    bound and its last instant for the upper bound. Naive datetimes are UTC.
    """
    text = (raw or "").strip()
    try:
        if len(text) == 10:
            day = date.fromisoformat(text)
            return datetime.combine(day, time.max if end else time.min, tzinfo=timezone.utc)
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise ValidationError(f"Invalid date: {raw!r}") from e
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


# Entry CRUD
def list_entries(db: JsonDatabase) -> List[JournalEntryBase]:
    return _newest_first([_from_record(r) for r in db.read()["entries"]])

def get_entry(db: JsonDatabase, entry_id: str) -> JournalEntryBase:
    for record in db.read()["entries"]:
        if record.get("id") == entry_id:
            return _from_record(record)
    raise NotFoundError("Entry not found")

def create_entry(
    db: JsonDatabase, entry: JournalEntryCreate, now: Optional[datetime] = None
) -> JournalEntryBase:
    content = _check_content(entry.content)
    created = now or _utcnow()
    new_entry = JournalEntryBase(
        id=str(uuid4()),
        content=content,
        mood=entry.mood or DEFAULT_MOOD,
        mood_score=coerce_mood_score(entry.mood_score),
        tags=list(entry.tags or []),
        wellness_score=DEFAULT_WELLNESS_SCORE,
        ai_insights="",
        recommendations=[],
        created_at=created,
        updated_at=created,
    )
    with db.transaction() as data:
        data["entries"].append(_to_record(new_entry))
    logger.info(f"Created journal entry {new_entry.id}")
    return new_entry

def update_entry(
    db: JsonDatabase,
    entry_id: str,
    updated_entry: JournalEntryUpdate,
    now: Optional[datetime] = None,
) -> JournalEntryBase:
    update_data = updated_entry.model_dump(exclude_unset=True, exclude_none=True)
    if "content" in update_data:
        _check_content(update_data["content"])
    if "mood_score" in update_data:
        update_data["mood_score"] = _truncate_mood_score(update_data["mood_score"])
    if "wellness_score" in update_data:
        _check_range("wellnessScore", update_data["wellness_score"], WELLNESS_SCORE_RANGE)

    with db.transaction() as data:
        entries = data["entries"]
        idx = next((i for i, r in enumerate(entries) if r.get("id") == entry_id), None)
        if idx is None:
            raise NotFoundError("Entry not found")
        existing = _from_record(entries[idx])
        updated = existing.model_copy(update={**update_data, "updated_at": now or _utcnow()})
        entries[idx] = _to_record(updated)
    logger.info(f"Updated journal entry {entry_id} fields={sorted(update_data)}")
    return updated

def delete_entry(db: JsonDatabase, entry_id: str) -> None:
    with db.transaction() as data:
        before = len(data["entries"])
        data["entries"] = [r for r in data["entries"] if r.get("id") != entry_id]
        if len(data["entries"]) == before:
            raise NotFoundError("Entry not found")
    logger.info(f"Deleted journal entry {entry_id}")

def get_entries_by_date_range(db: JsonDatabase, start: str, end: str) -> List[JournalEntryBase]:
    start_at = parse_range_boundary(start, end=False)
    end_at = parse_range_boundary(end, end=True)
    return [e for e in list_entries(db) if start_at <= e.created_at <= end_at]

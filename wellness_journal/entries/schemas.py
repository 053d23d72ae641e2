from typing import Any, Optional, List
from datetime import datetime, timezone
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class JournalEntryBase(BaseSchema):
    id: str
    content: str
    mood: str = "neutral"
    mood_score: int = 5
    tags: List[str] = Field(default_factory=list)
    wellness_score: int = 50
    ai_insights: str = ""
    recommendations: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class JournalEntryCreate(BaseSchema):
    content: Optional[str] = None
    mood: Optional[str] = None
    # Anything non-numeric falls back to the default score
    mood_score: Optional[Any] = None
    tags: Optional[List[str]] = None


class JournalEntryUpdate(BaseSchema):
    content: Optional[str] = None
    mood: Optional[str] = None
    mood_score: Optional[float] = None
    tags: Optional[List[str]] = None
    wellness_score: Optional[int] = None
    ai_insights: Optional[str] = None
    recommendations: Optional[List[str]] = None

"""Shared fixtures for the journal API tests.

Provides:
- A JsonDatabase backed by a temp file
- A scripted insight gateway standing in for the language model
- FastAPI TestClient with both dependencies overridden
- Entry factories for the pure analytics functions
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from main import app
from wellness_journal.core.database import JsonDatabase
from wellness_journal.core.dependency import get_db, get_insight_gateway
from wellness_journal.core.errors import UpstreamNotConfigured
from wellness_journal.entries.schemas import JournalEntryBase
from wellness_journal.insights.ai_service import InsightGateway

# Wednesday; its Sunday-based week runs 2026-10-11 .. 2026-10-17
NOW = datetime(2026, 10, 14, 12, 0, tzinfo=timezone.utc)


class FakeInsightGateway(InsightGateway):
    """Returns a canned reply and records every prompt it was sent."""

    model_tag = "fake"

    def __init__(self, reply: str = "You might try a short walk.", configured: bool = True):
        self.reply = reply
        self.configured = configured
        self.error: Optional[Exception] = None
        self.calls: List[Tuple[str, str, int]] = []

    def ensure_configured(self) -> None:
        if not self.configured:
            raise UpstreamNotConfigured("Gemini API key not configured.")

    def complete(self, system_prompt: str, user_prompt: str, *, max_tokens: int) -> str:
        self.calls.append((system_prompt, user_prompt, max_tokens))
        if self.error is not None:
            raise self.error
        return self.reply


def make_entry(
    days_ago: float = 0,
    *,
    created_at: Optional[datetime] = None,
    content: str = "Today was fine.",
    mood: str = "neutral",
    mood_score: int = 5,
    wellness_score: int = 50,
    tags: Optional[List[str]] = None,
) -> JournalEntryBase:
    created = created_at or NOW - timedelta(days=days_ago)
    return JournalEntryBase(
        id=str(uuid4()),
        content=content,
        mood=mood,
        mood_score=mood_score,
        tags=tags or [],
        wellness_score=wellness_score,
        created_at=created,
        updated_at=created,
    )


@pytest.fixture()
def db(tmp_path) -> JsonDatabase:
    return JsonDatabase(tmp_path / "data.json")


@pytest.fixture()
def gateway() -> FakeInsightGateway:
    return FakeInsightGateway()


@pytest.fixture()
def client(db, gateway):
    """TestClient wired to the temp store and the fake gateway."""
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_insight_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()

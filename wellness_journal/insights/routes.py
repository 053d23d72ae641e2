import logging
from typing import Optional

from fastapi import APIRouter, Depends

from wellness_journal.core.database import JsonDatabase
from wellness_journal.core.dependency import get_db, get_insight_gateway
from wellness_journal.core.errors import InternalError, JournalError
from wellness_journal.entries.db import get_entry
from wellness_journal.insights.ai_service import InsightGateway
from wellness_journal.insights.schemas import (
    AnalyzedEntry,
    AnalyzeEntryRequest,
    AnalyzeEntryResponse,
    ChatRequest,
    ChatResponse,
)

router = APIRouter(prefix="/api/chatbot", tags=["Chatbot"])
logger = logging.getLogger(__name__)


@router.post(
    "/analyze-entry/{entry_id}",
    response_model=AnalyzeEntryResponse,
    summary="Analyze a journal entry",
    description=(
        "Ask the language model for insights and recommendations on an entry. "
        "Content from the request body is analyzed; without it the stored entry is used. "
        "The result is returned, not saved: persist it with PUT /api/entries/{id}."
    ),
    responses={
        200: {"description": "Analysis generated."},
        400: {"description": "Missing content or API key not configured."},
        404: {"description": "Entry not found."},
        502: {"description": "Insight service unavailable."},
        504: {"description": "Insight service timed out."},
    },
)
def analyze_entry_route(
    entry_id: str,
    request: Optional[AnalyzeEntryRequest] = None,
    db: JsonDatabase = Depends(get_db),
    gateway: InsightGateway = Depends(get_insight_gateway),
) -> AnalyzeEntryResponse:
    try:
        gateway.ensure_configured()
        request = request or AnalyzeEntryRequest()
        content, mood = request.content, request.mood
        if not content:
            stored = get_entry(db, entry_id)
            content, mood = stored.content, mood or stored.mood

        insight = gateway.analyze_entry(content, mood, request.activities)
        return AnalyzeEntryResponse(
            entry=AnalyzedEntry(
                id=entry_id,
                ai_insights=insight.insight_text,
                recommendations=insight.recommendations,
            )
        )
    except JournalError:
        raise
    except Exception as e:
        logger.error(f"Error analyzing entry {entry_id}: {e}")
        raise InternalError("Failed to analyze entry. Please try again later.") from e


@router.post(
    "/chat",
    response_model=ChatResponse,
    summary="Chat with the wellness assistant",
    description="Single-turn chat: each call sends the system prompt, optional context and the message.",
    responses={
        200: {"description": "Reply generated."},
        400: {"description": "Missing message or API key not configured."},
        502: {"description": "Insight service unavailable."},
        504: {"description": "Insight service timed out."},
    },
)
def chat_route(
    request: ChatRequest,
    gateway: InsightGateway = Depends(get_insight_gateway),
) -> ChatResponse:
    try:
        return ChatResponse(response=gateway.chat(request.message, request.context))
    except JournalError:
        raise
    except Exception as e:
        logger.error(f"Error getting chatbot response: {e}")
        raise InternalError("Failed to get chatbot response. Please try again later.") from e

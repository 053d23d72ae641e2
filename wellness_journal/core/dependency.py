# wellness_journal/core/dependency.py
from functools import lru_cache

from wellness_journal.core import config
from wellness_journal.core.database import JsonDatabase
from wellness_journal.insights.ai_service import InsightGateway
from wellness_journal.insights.open_ai_service import OpenAIInsightGateway


@lru_cache(maxsize=None)
def _database() -> JsonDatabase:
    return JsonDatabase(config.DATA_FILE)


@lru_cache(maxsize=None)
def _openai_gateway() -> InsightGateway:
    return OpenAIInsightGateway(
        api_key=config.GEMINI_API_KEY,
        base_url=config.LLM_BASE_URL,
        model=config.LLM_CHAT_MODEL,
        timeout=config.LLM_TIMEOUT_SECONDS,
        max_retries=config.LLM_MAX_RETRIES,
    )


def get_db() -> JsonDatabase:
    return _database()


def get_insight_gateway() -> InsightGateway:
    return _openai_gateway()

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Union

from wellness_journal.core.errors import InvalidRequest
from wellness_journal.insights import prompts
from wellness_journal.insights.schemas import EntryInsight

Activities = Union[str, Sequence[str], None]


def extract_recommendations(insight_text: str) -> List[str]:
    """
    Pick recommendation lines out of free-form analysis text.

    Any line containing one of the (case-sensitive) recommendation keywords is
    kept, stripped, in source order. Falls back to the default pair when no
    line qualifies.
    """
    recommendations = [
        line.strip()
        for line in (insight_text or "").split("\n")
        if any(keyword in line for keyword in prompts.RECOMMENDATION_KEYWORDS)
    ]
    return recommendations or list(prompts.DEFAULT_RECOMMENDATIONS)


def format_activities(activities: Activities) -> str:
    if not activities:
        return prompts.NOT_SPECIFIED
    if isinstance(activities, str):
        return activities
    return ", ".join(str(a) for a in activities)


class InsightGateway(ABC):
    """Boundary to the external text-generation capability."""

    model_tag: str

    @abstractmethod
    def complete(self, system_prompt: str, user_prompt: str, *, max_tokens: int) -> str:
        """Send one system + user exchange upstream and return the reply text."""

    def analyze_entry(
        self,
        content: Optional[str],
        mood: Optional[str] = None,
        activities: Activities = None,
    ) -> EntryInsight:
        self.ensure_configured()
        if not content:
            raise InvalidRequest("Entry content is required for analysis")

        user_prompt = prompts.ENTRY_PROMPT.format(
            content=content,
            mood=mood or prompts.NOT_SPECIFIED,
            activities=format_activities(activities),
        )
        insight_text = self.complete(
            prompts.ENTRY_SYSTEM_PROMPT, user_prompt, max_tokens=prompts.ENTRY_MAX_TOKENS
        )
        return EntryInsight(
            insight_text=insight_text,
            recommendations=extract_recommendations(insight_text),
        )

    def chat(self, message: Optional[str], context: Optional[str] = None) -> str:
        self.ensure_configured()
        if not message:
            raise InvalidRequest("Message is required")

        system_prompt = prompts.CHAT_SYSTEM_PROMPT.format(
            context=context or prompts.DEFAULT_CHAT_CONTEXT
        )
        return self.complete(system_prompt, message, max_tokens=prompts.CHAT_MAX_TOKENS)

    def ensure_configured(self) -> None:
        """Raise UpstreamNotConfigured when the gateway cannot reach its backend."""

from __future__ import annotations

import logging
from typing import Any, Optional

import openai
from openai import OpenAI

from wellness_journal.core.errors import (
    UpstreamNotConfigured,
    UpstreamTimeout,
    UpstreamUnavailable,
)
from wellness_journal.insights import prompts
from wellness_journal.insights.ai_service import InsightGateway

logger = logging.getLogger(__name__)


class OpenAIInsightGateway(InsightGateway):
    """
    Chat-completions gateway for any OpenAI-compatible endpoint (Gemini by default).

    The SDK retries connection failures, timeouts, 408/409/429 and 5xx responses
    up to ``max_retries`` times before the error reaches us.
    """

    model_tag = "openai-compatible"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: Optional[str] = None,
        model: str = "gemini-1.5-flash",
        timeout: float = 30.0,
        max_retries: int = 2,
        client: Optional[Any] = None,
    ):
        self.model = model
        self.client = client
        if self.client is None and api_key:
            self.client = OpenAI(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout,
                max_retries=max_retries,
            )

    def ensure_configured(self) -> None:
        if self.client is None:
            raise UpstreamNotConfigured(
                "Gemini API key not configured. Please set GEMINI_API_KEY in your environment variables."
            )

    def complete(self, system_prompt: str, user_prompt: str, *, max_tokens: int) -> str:
        self.ensure_configured()
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                max_tokens=max_tokens,
                temperature=prompts.TEMPERATURE,
            )
        except openai.APITimeoutError as e:
            logger.warning(f"Upstream model {self.model} timed out: {e}")
            raise UpstreamTimeout("The insight service timed out. Please try again later.", details=str(e)) from e
        except openai.APIError as e:
            logger.error(f"Upstream model {self.model} request failed: {e}")
            raise UpstreamUnavailable("The insight service is unavailable. Please try again later.", details=str(e)) from e

        if not resp.choices:
            return ""
        return resp.choices[0].message.content or ""

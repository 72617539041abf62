"""OpenRouter (OpenAI-compatible) chat completion wrapper."""

from __future__ import annotations

import logging

from openai import OpenAI

from skillgap.config import Settings


logger = logging.getLogger(__name__)

APP_TITLE = "SkillGap Analyzer"


class LLMUnavailableError(RuntimeError):
    pass


class LLMClient:
    def __init__(
        self,
        *,
        api_key: str,
        base_url: str,
        model: str,
        timeout: float = 30.0,
        app_url: str = "http://localhost:3000",
    ) -> None:
        self.model = model
        self._client: OpenAI | None = None
        if api_key:
            self._client = OpenAI(
                base_url=base_url,
                api_key=api_key,
                timeout=timeout,
                max_retries=1,
                default_headers={"HTTP-Referer": app_url, "X-Title": APP_TITLE},
            )
        else:
            logger.warning("No OPENROUTER_API_KEY set - AI enrichment disabled, fallback text will be used")

    @property
    def available(self) -> bool:
        return self._client is not None

    def complete(self, prompt: str, *, max_tokens: int, temperature: float = 0.7) -> str:
        if self._client is None:
            raise LLMUnavailableError("OPENROUTER_API_KEY is not configured")
        response = self._client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


def build_llm_client(settings: Settings) -> LLMClient:
    return LLMClient(
        api_key=settings.openrouter_api_key,
        base_url=settings.openrouter_base_url,
        model=settings.ai_primary_model,
        timeout=settings.ai_timeout_seconds,
        app_url=settings.app_url,
    )

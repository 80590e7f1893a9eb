from __future__ import annotations

import logging

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI, OpenAIError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "너는 20년 경력의 병원 마케팅 총괄 AI 에이전트다. "
    "한국의 의료법 제56조 2항을 철저히 준수하여 안과 의료 마케팅 콘텐츠를 생성한다. "
    "응답은 반드시 JSON 형식으로 구조화하여 제공해야 한다."
)

DEFAULT_MODEL = "gpt-4-turbo-preview"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 4000


class ContentGenerationError(RuntimeError):
    """Raised when content generation fails or returns no text."""


class ContentGeneratorService:
    """Generate ophthalmology marketing copy with the OpenAI chat completions API."""

    def __init__(
        self,
        api_key: str | None,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        # One attempt per request; the SDK retries twice by default.
        self._client = (
            AsyncOpenAI(api_key=api_key, max_retries=0, http_client=http_client)
            if api_key
            else None
        )
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()

    async def generate(self, prompt: str) -> str:
        if self._client is None:
            raise ContentGenerationError("OpenAI API key is not configured.")

        try:
            completion = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except APIStatusError as exc:
            raise ContentGenerationError(f"OpenAI API error: {exc.status_code}") from exc
        except APIConnectionError as exc:
            raise ContentGenerationError("OpenAI request failed.") from exc
        except OpenAIError as exc:
            raise ContentGenerationError(f"OpenAI request failed: {exc}") from exc

        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            raise ContentGenerationError("No content generated")

        logger.debug("Generated %s chars with %s", len(content), self._model)
        return content

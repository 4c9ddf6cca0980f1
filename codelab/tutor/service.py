"""
AI tutor proxy.

Sends the student's context to an OpenAI-compatible chat API and returns a
single hint. Failures are returned as ``TutorError`` values instead of being
raised; the HTTP layer turns them into a hint the student can read.
"""

from __future__ import annotations

from typing import Any

from openai import AsyncOpenAI
from structlog import get_logger

from codelab.config import TutorConfig
from codelab.tutor.models import (
    TutorError,
    TutorErrorKind,
    TutorOutcome,
    TutorRequest,
    TutorResult,
)
from codelab.tutor.prompts import build_tutor_messages

logger = get_logger()

FALLBACK_HINT = "I could not generate a hint this time."


def extract_hint(completion: Any) -> str:
    """First choice's content, trimmed; the fallback hint if there is none."""
    choices = getattr(completion, "choices", None) or []
    if not choices:
        return FALLBACK_HINT
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    hint = content.strip() if isinstance(content, str) else ""
    return hint or FALLBACK_HINT


class TutorProxy:
    """
    Hint generator backed by a hosted language model.

    The configuration is resolved once at startup and injected here, so a
    missing API key is reported per request instead of failing the server.
    """

    def __init__(self, config: TutorConfig, client: AsyncOpenAI | None = None) -> None:
        self._config = config
        if client is None and config.has_credential:
            client = AsyncOpenAI(
                api_key=config.api_key,
                base_url=config.base_url,
                max_retries=0,
            )
        self._client = client

    async def shutdown(self) -> None:
        if self._client is not None:
            await self._client.close()
        logger.info("TutorProxy shut down")

    async def request_hint(self, request: TutorRequest) -> TutorOutcome:
        """Ask the model for a hint. Never raises."""
        if not self._config.has_credential or self._client is None:
            logger.warning("Tutor requested without a configured API key")
            return TutorError(
                kind=TutorErrorKind.MISSING_CREDENTIAL,
                message="GROQ_API_KEY is not configured",
            )

        try:
            messages = build_tutor_messages(request, self._config.response_language)
        except Exception as e:
            logger.error("Tutor prompt construction failed", error=str(e))
            return TutorError(kind=TutorErrorKind.PROMPT_FAILED, message=str(e))

        try:
            completion = await self._client.chat.completions.create(
                model=self._config.model,
                messages=messages,
                temperature=self._config.temperature,
                max_tokens=self._config.max_tokens,
            )
            hint = extract_hint(completion)
        except Exception as e:
            logger.error(
                "Tutor completion failed",
                model=self._config.model,
                error=str(e),
            )
            return TutorError(kind=TutorErrorKind.UPSTREAM_FAILED, message=str(e))

        logger.info(
            "Tutor hint generated",
            language=request.language,
            exercise=request.is_exercise,
            fallback=hint == FALLBACK_HINT,
        )
        return TutorResult(hint=hint)

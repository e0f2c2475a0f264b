"""Tax advisor client over an OpenAI-compatible chat completions API.

Defaults to Gemini through Google's OpenAI-compatible endpoint. Both
operations are best-effort: one request, no retries, and failures come back
as AiResult errors.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import openai

from biztax.ai.base import AiErrorKind, AiResult, DocumentAnalysis
from biztax.ai.prompts import advisor_instruction, document_analysis_prompt
from biztax.config import Settings

logger = logging.getLogger(__name__)

ASSISTANT_FALLBACK_MESSAGE = (
    "I'm having trouble connecting to the tax database right now. Please try again later."
)


def strip_code_fences(text: str) -> str:
    """Remove a markdown code block around a JSON payload, if present."""
    if "```json" in text:
        text = text.split("```json")[1].split("```")[0]
    elif "```" in text:
        text = text.split("```")[1].split("```")[0]
    return text.strip()


class TaxAdvisorClient:
    """Free-text Q&A and structured document analysis."""

    def __init__(
        self,
        api_key: str | None,
        model: str,
        base_url: str | None = None,
        client: Any | None = None,
    ):
        self.model = model
        self._client = client
        if self._client is None and api_key:
            self._client = openai.AsyncOpenAI(api_key=api_key, base_url=base_url)

    @classmethod
    def from_settings(cls, settings: Settings) -> TaxAdvisorClient:
        return cls(api_key=settings.ai_api_key, model=settings.ai_model, base_url=settings.ai_base_url)

    @property
    def configured(self) -> bool:
        return self._client is not None

    async def ask(self, question: str, context: str | None = None) -> AiResult[str]:
        """Answer a tax question in prose."""
        if self._client is None:
            return AiResult.failure(AiErrorKind.NOT_CONFIGURED, "API key is missing")

        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": advisor_instruction(context)},
                    {"role": "user", "content": question},
                ],
            )
        except openai.OpenAIError as e:
            logger.warning("Tax assistant request failed", exc_info=True)
            return AiResult.failure(AiErrorKind.REQUEST_FAILED, str(e))

        answer = _message_text(response)
        if not answer:
            return AiResult.failure(AiErrorKind.INVALID_RESPONSE, "empty answer")
        return AiResult.success(answer)

    async def analyze_document(self, document_text: str) -> AiResult[DocumentAnalysis]:
        """Extract date, amount, vendor, type and summary from raw text."""
        if self._client is None:
            return AiResult.failure(AiErrorKind.NOT_CONFIGURED, "API key is missing")

        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": document_analysis_prompt(document_text)}],
                response_format={"type": "json_object"},
            )
        except openai.OpenAIError as e:
            logger.warning("Document analysis request failed", exc_info=True)
            return AiResult.failure(AiErrorKind.REQUEST_FAILED, str(e))

        raw = strip_code_fences(_message_text(response) or "{}")
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Document analysis returned invalid JSON: %s", e)
            return AiResult.failure(AiErrorKind.INVALID_RESPONSE, f"invalid JSON: {e}")

        if not isinstance(payload, dict):
            return AiResult.failure(AiErrorKind.INVALID_RESPONSE, "expected a JSON object")
        return AiResult.success(DocumentAnalysis.from_payload(payload))


def _message_text(response: Any) -> str | None:
    if not response.choices:
        return None
    content = response.choices[0].message.content
    return content.strip() if content else None

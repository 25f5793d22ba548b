"""LLM classifier: extracted text -> ClassificationResult.

Builds the classification prompt, sends it through a CompletionClient, and
validates the JSON reply with Pydantic. No retries: a failed completion or an
unusable reply surfaces as ClassificationError.
"""

import logging

from pydantic import ValidationError

from link_summarizer.llm.client import CompletionClient
from link_summarizer.llm.prompts import build_classification_prompt
from link_summarizer.models.classification import ClassificationResult, ContentCategory

logger = logging.getLogger(__name__)

_VALID_CATEGORIES = frozenset(category.value for category in ContentCategory)


class ClassificationError(Exception):
    """Completion failed, or its reply was not a valid classification."""


def strip_code_fences(text: str) -> str:
    """Remove a markdown code fence (```json ... ```) wrapped around a reply."""
    text = text.strip()
    if text.startswith("```"):
        newline = text.find("\n")
        if newline >= 0:
            text = text[newline + 1 :]
        closing = text.rfind("```")
        if closing >= 0:
            text = text[:closing]
        text = text.strip()
    return text


class LLMClassifier:
    """Content classifier backed by any CompletionClient."""

    def __init__(self, client: CompletionClient) -> None:
        self._client = client

    async def classify(self, content: str) -> ClassificationResult:
        """Classify ``content`` into one of the six ContentCategory values.

        Raises:
            ClassificationError: Completion failed, reply was not JSON, or the
                primary category is not one of the known categories. A missing
                confidence is not an error; it reads as 0.0.
        """
        prompt = build_classification_prompt(content)

        try:
            response = await self._client.complete(prompt)
        except Exception as exc:
            raise ClassificationError(f"LLM classification failed: {exc}") from exc

        cleaned = strip_code_fences(response)

        try:
            result = ClassificationResult.model_validate_json(cleaned)
        except ValidationError as exc:
            primary = _primary_of(exc)
            if primary is not None:
                raise ClassificationError(f"invalid primary category: {primary}") from exc
            raise ClassificationError(f"parsing classification response: {exc}") from exc

        logger.info(
            "Classified content as %s (%.2f)",
            result.primary.value,
            result.confidence,
        )
        return result


def _primary_of(exc: ValidationError) -> str | None:
    """Return the rejected primary value when that is the only thing wrong."""
    errors = exc.errors()
    if len(errors) != 1 or errors[0]["loc"] != ("primary",):
        return None
    value = errors[0].get("input")
    if isinstance(value, str) and value not in _VALID_CATEGORIES:
        return value
    return None

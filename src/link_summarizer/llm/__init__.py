"""LLM classification of extracted content.

Public API:
    LLMClassifier(client).classify(content) -> ClassificationResult
        Sends the classification prompt through any CompletionClient and
        validates the JSON reply.
"""

from link_summarizer.llm.classifier import ClassificationError, LLMClassifier
from link_summarizer.llm.client import CompletionClient
from link_summarizer.llm.prompts import build_classification_prompt

__all__ = [
    "LLMClassifier",
    "ClassificationError",
    "CompletionClient",
    "build_classification_prompt",
]

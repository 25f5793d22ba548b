"""Data models and enums for link detection, extraction, and classification."""

from link_summarizer.models.classification import ClassificationResult, ContentCategory
from link_summarizer.models.content import ExtractedContent, LinkInfo, LinkType

__all__ = [
    "ClassificationResult",
    "ContentCategory",
    "ExtractedContent",
    "LinkInfo",
    "LinkType",
]

"""Content extraction: link type detection and per-type extractors.

Public API:
    detect_link_type(url) -> LinkType
        Pure URL classification, no network access.
    build_extractors(client) -> dict[LinkType, Extractor]
        Extractor table sharing one httpx.AsyncClient.
    extract_content(url, extractors, timeout_seconds=None) -> ExtractedContent
        Single entry point: detect, dispatch, enforce the deadline.
"""

from link_summarizer.extraction.base import Extractor
from link_summarizer.extraction.errors import ExtractionError, InvalidURLError
from link_summarizer.extraction.pipeline import build_extractors, extract_content
from link_summarizer.extraction.router import detect_link_type

__all__ = [
    "detect_link_type",
    "build_extractors",
    "extract_content",
    "Extractor",
    "ExtractionError",
    "InvalidURLError",
]

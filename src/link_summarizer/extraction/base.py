"""Extractor capability shared by all format-specific extractors."""

from typing import Protocol, runtime_checkable

from link_summarizer.models.content import ExtractedContent


@runtime_checkable
class Extractor(Protocol):
    """Fetches a URL and returns its link metadata plus plain-text content.

    Implementations hold an injected HTTP client and no other state, so one
    instance can serve concurrent calls.
    """

    async def extract(self, url: str) -> ExtractedContent:
        """Extract content from ``url``.

        Raises:
            ExtractionError: Any fetch, status, size or parse failure.
        """
        ...

"""Extraction pipeline: detect link type, dispatch, enforce a deadline."""

import asyncio
import logging

import httpx

from link_summarizer.extraction.article import ArticleExtractor
from link_summarizer.extraction.base import Extractor
from link_summarizer.extraction.errors import ExtractionTimeoutError
from link_summarizer.extraction.newsletter import NewsletterExtractor
from link_summarizer.extraction.pdf import PDFExtractor
from link_summarizer.extraction.router import detect_link_type
from link_summarizer.extraction.twitter import TwitterExtractor
from link_summarizer.extraction.youtube import YouTubeExtractor
from link_summarizer.models.content import ExtractedContent, LinkType

logger = logging.getLogger(__name__)


def build_extractors(client: httpx.AsyncClient) -> dict[LinkType, Extractor]:
    """Build the link type -> extractor table over one shared client."""
    return {
        LinkType.ARTICLE: ArticleExtractor(client),
        LinkType.NEWSLETTER: NewsletterExtractor(client),
        LinkType.PDF: PDFExtractor(client),
        LinkType.TWITTER: TwitterExtractor(client),
        LinkType.YOUTUBE: YouTubeExtractor(client),
    }


def select_extractor(
    link_type: LinkType, extractors: dict[LinkType, Extractor]
) -> Extractor:
    """Return the extractor for ``link_type``; unmapped types use the article one."""
    extractor = extractors.get(link_type)
    if extractor is not None:
        return extractor

    logger.warning(
        "No extractor for link type, falling back to article",
        extra={"link_type": link_type.value},
    )
    return extractors[LinkType.ARTICLE]


async def extract_content(
    url: str,
    extractors: dict[LinkType, Extractor],
    timeout_seconds: float | None = None,
    link_type: LinkType | None = None,
) -> ExtractedContent:
    """Detect the link type of ``url`` and run the matching extractor.

    Pass ``link_type`` when the caller already detected it; detection is
    then skipped. ``timeout_seconds=None`` means no pipeline deadline (the
    client's own per-request timeout still applies). There are no retries.

    Raises:
        InvalidURLError: URL cannot be parsed.
        ExtractionTimeoutError: The deadline expired before extraction finished.
        ExtractionError: Whatever the selected extractor raised.
    """
    if link_type is None:
        link_type = detect_link_type(url)
    extractor = select_extractor(link_type, extractors)

    try:
        async with asyncio.timeout(timeout_seconds):
            result = await extractor.extract(url)
    except TimeoutError as exc:
        logger.warning(
            "Extraction timed out after %.1fs: %s",
            timeout_seconds,
            url,
            extra={"link_type": link_type.value},
        )
        raise ExtractionTimeoutError(
            f"extraction timed out after {timeout_seconds}s for {url}"
        ) from exc

    logger.debug(
        "Extracted %d characters from %s",
        len(result.content),
        url,
        extra={"link_type": link_type.value},
    )
    return result

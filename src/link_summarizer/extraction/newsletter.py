"""Newsletter extraction for Substack, Medium and similar platforms."""

import httpx

from link_summarizer.extraction.errors import NoContentError, UnexpectedStatusError
from link_summarizer.extraction.fetch import open_response, read_text
from link_summarizer.extraction.html import (
    extract_block,
    extract_main_content,
    extract_og_meta,
    extract_title,
    normalize_whitespace,
    strip_tags,
)
from link_summarizer.extraction.paywall import PAYWALL_NOTICE, is_paywalled
from link_summarizer.models.content import ExtractedContent, LinkInfo, LinkType

# (opening pattern, closing tag), tried in order; first usable container wins
NEWSLETTER_CONTAINERS = (
    # Substack
    ('<div class="body markup"', "</div>"),
    ('<div class="post-content"', "</div>"),
    # Medium
    ("<article", "</article>"),
    ('<div class="section-content"', "</div>"),
)

# Containers yielding this many characters or fewer are treated as empty matches
MIN_CONTAINER_TEXT_LENGTH = 100

AUTHOR_META_PROPERTIES = ("author", "article:author", "og:site_name")


def extract_newsletter_content(html: str) -> str:
    """Return text from the first platform container longer than the threshold, or ""."""
    for open_pattern, close_tag in NEWSLETTER_CONTAINERS:
        block = extract_block(html, open_pattern, close_tag)
        if not block:
            continue
        text = normalize_whitespace(strip_tags(block))
        if len(text) > MIN_CONTAINER_TEXT_LENGTH:
            return text.strip()
    return ""


def extract_newsletter_author(html: str) -> str:
    """Return the first non-empty author-like meta value, or ""."""
    for prop in AUTHOR_META_PROPERTIES:
        author = extract_og_meta(html, prop)
        if author:
            return author
    return ""


class NewsletterExtractor:
    """Extracts newsletter posts, flagging paywalled pages in the content."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def extract(self, url: str) -> ExtractedContent:
        """Fetch a newsletter post and extract its body.

        Platform containers are tried before the generic article algorithm.
        Paywalled pages still succeed, with PAYWALL_NOTICE appended.

        Raises:
            UnexpectedStatusError: Any status other than 200.
            NoContentError: Neither containers nor the generic body produced text.
        """
        async with open_response(self._client, url) as response:
            if response.status_code != httpx.codes.OK:
                raise UnexpectedStatusError(response.status_code, url, subject="newsletter")
            html = await read_text(response)

        content = extract_newsletter_content(html) or extract_main_content(html)
        if not content:
            raise NoContentError(f"could not extract newsletter content from {url}")

        if is_paywalled(html):
            content += PAYWALL_NOTICE

        return ExtractedContent(
            link_info=LinkInfo(
                url=url,
                link_type=LinkType.NEWSLETTER,
                title=extract_title(html) or None,
                author=extract_newsletter_author(html) or None,
            ),
            content=content,
        )

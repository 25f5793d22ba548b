"""Twitter/X post extraction from Open Graph meta tags."""

import httpx

from link_summarizer.extraction.errors import (
    NoContentError,
    PrivateOrProtectedError,
    UnexpectedStatusError,
)
from link_summarizer.extraction.fetch import open_response, read_text
from link_summarizer.extraction.html import extract_main_content, extract_og_meta
from link_summarizer.models.content import ExtractedContent, LinkInfo, LinkType

PROTECTED_STATUSES = (httpx.codes.UNAUTHORIZED, httpx.codes.FORBIDDEN)


def extract_tweet_author(html: str) -> str:
    """Prefer twitter:creator, else og:site_name."""
    return extract_og_meta(html, "twitter:creator") or extract_og_meta(html, "og:site_name")


class TwitterExtractor:
    """Extracts tweet text and author from a tweet page."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def extract(self, url: str) -> ExtractedContent:
        """Fetch a tweet page; og:description is the tweet text.

        Raises:
            PrivateOrProtectedError: Page answered 401 or 403.
            UnexpectedStatusError: Any other status besides 200.
            NoContentError: No description and no body text.
        """
        async with open_response(self._client, url) as response:
            if response.status_code in PROTECTED_STATUSES:
                raise PrivateOrProtectedError(response.status_code)
            if response.status_code != httpx.codes.OK:
                raise UnexpectedStatusError(response.status_code, url, subject="tweet")
            html = await read_text(response)

        content = extract_og_meta(html, "og:description") or extract_main_content(html)
        if not content:
            # Logged-out views of protected tweets often come back 200 with an empty shell
            raise NoContentError(
                "could not extract tweet content (tweet may be private or protected)"
            )

        return ExtractedContent(
            link_info=LinkInfo(
                url=url,
                link_type=LinkType.TWITTER,
                title=extract_og_meta(html, "og:title") or None,
                author=extract_tweet_author(html) or None,
            ),
            content=content,
        )

"""Generic web article extraction."""

import httpx

from link_summarizer.extraction.errors import NoContentError, UnexpectedStatusError
from link_summarizer.extraction.fetch import open_response, read_text
from link_summarizer.extraction.html import extract_main_content, extract_title
from link_summarizer.models.content import ExtractedContent, LinkInfo, LinkType


class ArticleExtractor:
    """Extracts readable text from an HTML page. Also the catch-all fallback."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def extract(self, url: str) -> ExtractedContent:
        """Fetch ``url`` and return its <title> and boilerplate-free body text.

        The body is read in full; there is no size cap for HTML pages.

        Raises:
            RequestConstructionError, NetworkError, ResponseReadError: Fetch failures.
            UnexpectedStatusError: Any status other than 200.
            NoContentError: Page has no text left after stripping.
        """
        async with open_response(self._client, url) as response:
            if response.status_code != httpx.codes.OK:
                raise UnexpectedStatusError(response.status_code, url)
            html = await read_text(response)

        content = extract_main_content(html)
        if not content:
            raise NoContentError(f"could not extract article content from {url}")

        return ExtractedContent(
            link_info=LinkInfo(
                url=url,
                link_type=LinkType.ARTICLE,
                title=extract_title(html) or None,
            ),
            content=content,
        )

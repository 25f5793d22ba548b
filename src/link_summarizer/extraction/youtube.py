"""YouTube transcript extraction with a metadata-only fallback."""

from urllib.parse import parse_qs, urlsplit

import httpx

from link_summarizer.extraction.errors import (
    ExtractionError,
    InvalidURLError,
    NotYouTubeURLError,
)
from link_summarizer.extraction.fetch import open_response, read_body, read_text
from link_summarizer.extraction.youtube_page import (
    TranscriptParseError,
    build_metadata_content,
    parse_json3_transcript,
    parse_watch_page,
    parse_xml_transcript,
)
from link_summarizer.models.content import ExtractedContent, LinkInfo, LinkType

WATCH_URL = "https://www.youtube.com/watch?v="

# Controls which localized title/description the watch page returns
ACCEPT_LANGUAGE = "en-US,en;q=0.9,ko;q=0.8"


def extract_video_id(url: str) -> str:
    """Resolve the video ID from watch, youtu.be, /embed/ and /v/ URLs.

    Handles extra query params (e.g., &t=120, &list=PLxxx).

    Raises:
        InvalidURLError: URL is unparseable or has no video ID.
        NotYouTubeURLError: Host is not a YouTube host.
    """
    try:
        parsed = urlsplit(url)
        host = (parsed.hostname or "").lower()
    except ValueError as exc:
        raise InvalidURLError(f"parsing URL: {exc}") from exc

    if "youtu.be" in host:
        video_id = parsed.path.removeprefix("/")
        if not video_id:
            raise InvalidURLError("no video ID in short URL")
        return video_id

    if "youtube.com" in host:
        v = parse_qs(parsed.query).get("v")
        if v:
            return v[0]
        parts = parsed.path.removeprefix("/").split("/")
        if len(parts) >= 2 and parts[0] in ("embed", "v") and parts[1]:
            return parts[1]
        raise InvalidURLError("no video ID found in YouTube URL")

    raise NotYouTubeURLError(f"not a YouTube URL: {host}")


def with_json3_format(captions_url: str) -> str:
    """Request the JSON3 caption format unless a format is already set."""
    if "fmt=" in captions_url:
        return captions_url
    separator = "&" if "?" in captions_url else "?"
    return f"{captions_url}{separator}fmt=json3"


class YouTubeExtractor:
    """Extracts a video's transcript, falling back to its title/channel/description."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def extract(self, url: str) -> ExtractedContent:
        """Fetch the watch page and return the transcript, or metadata text.

        Once the watch page is fetched this always succeeds: a missing,
        unreachable, unparseable or empty transcript falls back to
        build_metadata_content(). The page status is not checked.

        Raises:
            InvalidURLError: No video ID in ``url``.
            RequestConstructionError, NetworkError, ResponseReadError: Page fetch failures.
        """
        try:
            video_id = extract_video_id(url)
        except InvalidURLError as exc:
            raise type(exc)(f"extracting video ID: {exc}") from exc

        async with open_response(
            self._client, WATCH_URL + video_id, headers={"Accept-Language": ACCEPT_LANGUAGE}
        ) as response:
            page_html = await read_text(response)

        page = parse_watch_page(page_html)
        link_info = LinkInfo(
            url=url,
            link_type=LinkType.YOUTUBE,
            title=page.metadata.title or None,
            author=page.metadata.channel or None,
        )

        if page.captions_url:
            try:
                transcript = await self.fetch_transcript(page.captions_url)
            except ExtractionError:
                transcript = ""
            if transcript:
                return ExtractedContent(link_info=link_info, content=transcript)

        return ExtractedContent(link_info=link_info, content=build_metadata_content(page.metadata))

    async def fetch_transcript(self, captions_url: str) -> str:
        """Download a caption track; JSON3 first, XML scan if that fails to parse."""
        async with open_response(self._client, with_json3_format(captions_url)) as response:
            body = await read_body(response)

        try:
            return parse_json3_transcript(body)
        except TranscriptParseError:
            return parse_xml_transcript(body.decode("utf-8", errors="replace"))
